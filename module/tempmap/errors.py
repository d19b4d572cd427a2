"""Exceptions raised inside tempmap."""

from __future__ import annotations


class TempmapError(Exception):
    """Base class for tempmap errors."""


class DataFormatError(TempmapError, ValueError):
    """The temperature payload does not match the expected JSON schema."""
