"""Terminal cell styles and the user-facing style descriptions applied to them."""

from __future__ import annotations

from dataclasses import dataclass, replace

_ATTRIBUTES = ("blink", "bold", "dim", "italic", "reverse", "underline", "strike_through")

_COLOR_ALIASES = {"grey": "gray"}


@dataclass(frozen=True)
class Style:
    """The resolved style of one terminal cell.

    Colours are ``None`` for the terminal default, a lower-case palette
    name such as ``"maroon"``, or an ``"#rrggbb"`` string.
    """

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    strike_through: bool = False


DEFAULT_STYLE = Style()


@dataclass(frozen=True)
class OVStyle:
    """A style description: empty colours and false flags leave a style unchanged."""

    foreground: str = ""
    background: str = ""
    blink: bool = False
    bold: bool = False
    dim: bool = False
    italic: bool = False
    reverse: bool = False
    underline: bool = False
    strike_through: bool = False
    un_blink: bool = False
    un_bold: bool = False
    un_dim: bool = False
    un_italic: bool = False
    un_reverse: bool = False
    un_underline: bool = False
    un_strike_through: bool = False


def _resolve_color(name: str) -> str | None:
    name = name.strip().lower()
    if name == "default":
        return None
    return _COLOR_ALIASES.get(name, name)


def apply_style(style: Style, ovstyle: OVStyle) -> Style:
    """Return ``style`` with the settings of ``ovstyle`` laid over it."""
    changes: dict[str, object] = {}
    if ovstyle.foreground:
        changes["foreground"] = _resolve_color(ovstyle.foreground)
    if ovstyle.background:
        changes["background"] = _resolve_color(ovstyle.background)
    for attr in _ATTRIBUTES:
        if getattr(ovstyle, attr):
            changes[attr] = True
    for attr in _ATTRIBUTES:
        if getattr(ovstyle, "un_" + attr):
            changes[attr] = False
    return replace(style, **changes) if changes else style


def to_style(ovstyle: OVStyle) -> Style:
    """Convert a style description into a style based on the default style."""
    return apply_style(DEFAULT_STYLE, ovstyle)