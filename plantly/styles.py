"""Light and dark stylesheets for the application."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Theme(Enum):
    """Colour theme of the interface."""

    LIGHT = "light"
    DARK = "dark"


_FONT = '"Segoe UI", "Noto Sans", sans-serif'
_RADIUS = "10px"

# Each rule is a selector and its declarations; values in braces are looked
# up in the palette of the theme being rendered.
_RULES: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    ("QWidget", (
        ("background-color", "{bg}"),
        ("color", "{fg}"),
        ("font-family", _FONT),
        ("font-size", "14px"),
    )),
    ("QPushButton", (
        ("background-color", "{button_bg}"),
        ("color", "{button_fg}"),
        ("border", "1px solid {border}"),
        ("padding", "6px 12px"),
        ("border-radius", _RADIUS),
    )),
    ("QPushButton:hover", (("background-color", "{hover}"),)),
    ("QPushButton:pressed", (("background-color", "{pressed}"),)),
    ("QLineEdit, QTextEdit", (
        ("background-color", "{input_bg}"),
        ("color", "{input_fg}"),
        ("border", "1px solid {border}"),
        ("border-radius", _RADIUS),
        ("padding", "4px"),
    )),
    ("QLabel", (
        ("color", "{fg}"),
        ("border", "1px solid {border}"),
        ("padding", "2px 6px"),
        ("border-radius", _RADIUS),
    )),
    ("QScrollBar:vertical, QScrollBar:horizontal", (
        ("background", "transparent"),
        ("width", "12px"),
        ("margin", "0px"),
    )),
    ("QScrollBar::handle", (
        ("background", "{handle}"),
        ("border-radius", _RADIUS),
    )),
    ("QScrollBar::handle:hover", (("background", "{handle_hover}"),)),
    ("QScrollBar::add-line, QScrollBar::sub-line", (("background", "none"),)),
    ("QComboBox", (
        ("background-color", "{input_bg}"),
        ("color", "{input_fg}"),
        ("border", "1px solid {border}"),
        ("padding", "4px"),
        ("border-radius", _RADIUS),
    )),
    ("QComboBox QAbstractItemView", (
        ("background-color", "{input_bg}"),
        ("color", "{input_fg}"),
        ("border", "1px solid {popup_border}"),
        ("border-radius", _RADIUS),
    )),
    ("QMenuBar", (
        ("background-color", "{menubar_bg}"),
        ("color", "{button_fg_strong}"),
        ("border-bottom", "1px solid {menubar_border}"),
    )),
    ("QMenuBar::item", (
        ("background", "transparent"),
        ("padding", "6px 12px"),
    )),
    ("QMenuBar::item:selected", (
        ("background", "{menubar_selected}"),
        ("border-radius", _RADIUS),
    )),
    ("QMenuBar::item:pressed", (("background", "{pressed}"),)),
    ("QMenu", (
        ("background-color", "{input_bg}"),
        ("color", "{input_fg}"),
        ("border", "1px solid {menu_border}"),
        ("padding", "4px"),
        ("border-radius", _RADIUS),
    )),
    ("QMenu::item", (
        ("padding", "6px 12px"),
        ("border-radius", _RADIUS),
    )),
    ("QMenu::item:selected", (("background-color", "{menu_selected}"),)),
    ("QMenu::item:disabled", (("color", "{disabled}"),)),
)

_PALETTES: Mapping[Theme, Mapping[str, str]] = MappingProxyType({
    Theme.DARK: MappingProxyType({
        "bg": "#121212",
        "fg": "#E0E0E0",
        "button_bg": "#1E1E1E",
        "button_fg": "#FFFFFF",
        "button_fg_strong": "#FFFFFF",
        "border": "#555555",
        "hover": "#2A2A2A",
        "pressed": "#3A3A3A",
        "input_bg": "#1E1E1E",
        "input_fg": "#FFFFFF",
        "handle": "#444",
        "handle_hover": "#666",
        "popup_border": "#3A3A3A",
        "menubar_bg": "#1E1E1E",
        "menubar_border": "#333",
        "menubar_selected": "#2A2A2A",
        "menu_border": "#444",
        "menu_selected": "#2A2A2A",
        "disabled": "#666666",
    }),
    Theme.LIGHT: MappingProxyType({
        "bg": "#F5F5F5",
        "fg": "#2E2E2E",
        "button_bg": "#E0E0E0",
        "button_fg": "#2E2E2E",
        "button_fg_strong": "#2E2E2E",
        "border": "#888888",
        "hover": "#D5D5D5",
        "pressed": "#C0C0C0",
        "input_bg": "#FFFFFF",
        "input_fg": "#2E2E2E",
        "handle": "#AAAAAA",
        "handle_hover": "#888888",
        "popup_border": "#CCCCCC",
        "menubar_bg": "#E0E0E0",
        "menubar_border": "#B0B0B0",
        "menubar_selected": "#D0D0D0",
        "menu_border": "#CCCCCC",
        "menu_selected": "#EEEEEE",
        "disabled": "#AAAAAA",
    }),
})


def _render(palette: Mapping[str, str]) -> str:
    blocks = []
    for selector, declarations in _RULES:
        body = "\n".join(
            f"    {prop}: {value.format_map(palette)};" for prop, value in declarations
        )
        blocks.append(f"{selector} {{\n{body}\n}}")
    return "\n".join(blocks) + "\n"


_STYLESHEETS = {theme: _render(palette) for theme, palette in _PALETTES.items()}


def stylesheet(theme: Theme | str) -> str:
    """Return the stylesheet text for ``theme`` (a Theme or its name)."""
    return _STYLESHEETS[Theme(theme)]