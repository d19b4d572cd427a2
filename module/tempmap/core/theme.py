"""Minimalist light theme + the purple-to-orange variance ramp.

Used by the page shell (soft gray background, white surface, dark text)
and by the heat map cells and legend. All styling is inline CSS.
"""

# Light-mode defaults: subtle gray background, white cards, neutral borders.
THEME = {
    "background": "#f5f5f8",   # page background
    "surface": "#ffffff",      # chart card
    "foreground": "#111827",   # primary text
    "border": "#e5e7eb",       # low-contrast borders
    "muted": "#6b7280",        # axis labels, description
    "tooltip_bg": "#111827",   # tooltip box
    "tooltip_fg": "#ffffff",
}

# Two-hue sequential ramp: coldest months purple, warmest orange.
RAMP = ("#800080", "#ffa500")
