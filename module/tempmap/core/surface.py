"""Render surface: a small mutable element tree.

Artists append elements, set attributes and styles, and bind event
callbacks much like a DOM selection would. The tree is serialized to
HTML/SVG text by :meth:`Element.to_html`. Event dispatch is explicit:
``dispatch(name, event)`` calls every callback bound under *name* with
``(event, datum, element)``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

from .utils import esc

EventCallback = Callable[[Any, Any, "Element"], None]

_MISSING = object()


class Element:
    """One node of the render surface."""

    def __init__(self, tag: str, parent: Optional["Element"] = None) -> None:
        self.tag = tag
        self.parent = parent
        self.children: List[Element] = []
        self.datum: Any = None
        self._attrs: Dict[str, Any] = {}
        self._style: Dict[str, Any] = {}
        self._text: str = ""
        self._handlers: Dict[str, List[EventCallback]] = {}

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        return f"<Element {self.tag}{ident} children={len(self.children)}>"

    # Tree building ----------------------------------------------------
    def append(self, tag: str) -> "Element":
        """Create a child element and return it."""
        child = Element(tag, parent=self)
        self.children.append(child)
        return child

    def clear(self) -> "Element":
        """Remove all children and text."""
        for child in self.children:
            child.parent = None
        self.children = []
        self._text = ""
        return self

    def attr(self, name: str, value: Any = _MISSING) -> Any:
        """Get an attribute, or set it and return ``self`` for chaining.

        Setting ``None`` removes the attribute.
        """
        if value is _MISSING:
            return self._attrs.get(name)
        if value is None:
            self._attrs.pop(name, None)
        else:
            self._attrs[name] = value
        return self

    def style(self, name: str, value: Any = _MISSING) -> Any:
        """Get an inline style property, or set it and return ``self``."""
        if value is _MISSING:
            return self._style.get(name)
        if value is None:
            self._style.pop(name, None)
        else:
            self._style[name] = value
        return self

    def text(self, value: Any = _MISSING) -> Any:
        """Get the element's own text, or set it and return ``self``."""
        if value is _MISSING:
            return self._text
        self._text = "" if value is None else str(value)
        return self

    @property
    def id(self) -> Optional[str]:
        return self._attrs.get("id")

    @property
    def classes(self) -> List[str]:
        return str(self._attrs.get("class", "")).split()

    @property
    def attrs(self) -> Dict[str, Any]:
        """Return a shallow copy of the attribute mapping."""
        return dict(self._attrs)

    # Selection --------------------------------------------------------
    def iter(self) -> Iterator["Element"]:
        """Yield this element and all descendants, document order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def _matches(self, selector: str) -> bool:
        if selector.startswith("#"):
            return self.id == selector[1:]
        if selector.startswith("."):
            return selector[1:] in self.classes
        return self.tag == selector

    def select_all(self, selector: str) -> List["Element"]:
        """Return descendants matching a ``#id``, ``.class`` or tag selector."""
        return [el for el in self.iter() if el is not self and el._matches(selector)]

    def select(self, selector: str) -> Optional["Element"]:
        """Return the first descendant matching *selector*, or None."""
        for el in self.iter():
            if el is not self and el._matches(selector):
                return el
        return None

    # Events -----------------------------------------------------------
    def on(self, event_name: str, callback: EventCallback) -> "Element":
        """Bind *callback* to *event_name* on this element."""
        self._handlers.setdefault(event_name, []).append(callback)
        return self

    def handlers(self, event_name: str) -> List[EventCallback]:
        return list(self._handlers.get(event_name, []))

    def dispatch(self, event_name: str, event: Any) -> None:
        """Run the callbacks bound to *event_name* with this element as target."""
        for callback in self._handlers.get(event_name, []):
            callback(event, self.datum, self)

    # Serialization ----------------------------------------------------
    def to_html(self, indent: int = 0) -> str:
        pad = "  " * indent
        parts = [f"{k}: {esc(v)}" for k, v in self._style.items()]
        attrs = "".join(f' {k}="{esc(v)}"' for k, v in self._attrs.items())
        if parts:
            attrs += f' style="{"; ".join(parts)}"'
        if not self.children:
            return f"{pad}<{self.tag}{attrs}>{esc(self._text)}</{self.tag}>"
        lines = [f"{pad}<{self.tag}{attrs}>{esc(self._text)}"]
        lines.extend(child.to_html(indent + 1) for child in self.children)
        lines.append(f"{pad}</{self.tag}>")
        return "\n".join(lines)
