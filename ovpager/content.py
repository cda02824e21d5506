"""Conversion of text with escape sequences into screen cells."""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from enum import Enum, auto

import regex
from wcwidth import wcwidth

from .style import DEFAULT_STYLE, OVStyle, Style, apply_style, to_style

OVERSTRIKE_STYLE = to_style(OVStyle(bold=True))
OVERLINE_STYLE = to_style(OVStyle(underline=True))

_GRAPHEME = regex.compile(r"\X")

_PALETTE = (
    "black", "maroon", "green", "olive", "navy", "purple", "teal", "silver",
    "gray", "red", "lime", "yellow", "blue", "fuchsia", "aqua", "white",
)


@dataclass(frozen=True)
class Content:
    """One terminal cell: a base character, its combining characters and style.

    A wide character takes two cells; the second is an empty ``Content``.
    """

    mainc: str = ""
    width: int = 0
    style: Style = DEFAULT_STYLE
    combc: tuple[str, ...] = ()


DEFAULT_CONTENT = Content()
EOF_CONTENT = Content(mainc="~", width=1, style=Style(foreground="gray"))


class _State(Enum):
    TEXT = auto()
    ESCAPE = auto()
    SUBSTRING = auto()
    CONTROL_SEQUENCE = auto()


def _char_width(ch: str) -> int:
    width = wcwidth(ch)
    return width if width > 0 else 0


def _atoi(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def parse_string(text: str, tab_width: int) -> list[Content]:
    """Parse one line with escape sequences, tabs and backspaces into cells."""
    lc: list[Content] = []
    state = _State.TEXT
    csi: list[str] = []
    style = DEFAULT_STYLE
    tab_x = 0
    struck: Content | None = None

    for cluster in _GRAPHEME.findall(text):
        r = cluster[0]
        if state is _State.ESCAPE:
            if r == "[":
                csi.clear()
                state = _State.CONTROL_SEQUENCE
                continue
            if r == "c":
                style = DEFAULT_STYLE
                state = _State.TEXT
                continue
            if r in "P]X^_":
                state = _State.SUBSTRING
                continue
            state = _State.TEXT
        elif state is _State.SUBSTRING:
            if r == "\x1b":
                state = _State.CONTROL_SEQUENCE
            continue
        elif state is _State.CONTROL_SEQUENCE:
            if r == "m":
                style = cs_to_style(style, "".join(csi))
            elif "A" <= r <= "T":
                pass
            elif "\x30" <= r <= "\x3f":
                csi.append(r)
                continue
            state = _State.TEXT
            continue

        if r == "\x1b":
            state = _State.ESCAPE
            continue
        if r == "\n":
            continue

        width = _char_width(r)
        if width == 0:
            if r == "\t":
                if tab_width > 0:
                    stop = tab_width - tab_x % tab_width
                    lc.append(Content("\t", 1, style))
                    lc.extend(Content("", 1, style) for _ in range(stop - 1))
                    tab_x += stop
                elif tab_width < 0:
                    reversed_style = replace(style, reverse=True)
                    lc.append(Content("\\", 1, reversed_style))
                    lc.append(Content("t", 1, reversed_style))
                    tab_x += 2
                continue
            if r == "\b":
                if not lc:
                    continue
                struck = last_content(lc)
                del lc[-2 if struck.width > 1 else -1:]
                continue
            if r < "\x20":
                lc.append(Content(r, 0))
                continue
            last = last_content(lc)
            n = len(lc) - last.width
            if 0 <= n < len(lc):
                lc[n] = replace(last, combc=last.combc + (r,))
            continue

        cell_style = style
        if struck is not None:
            cell_style = overstrike(struck.mainc, r, style)
            struck = None
        lc.append(Content(r, width, cell_style, tuple(cluster[1:])))
        if width == 2:
            lc.append(DEFAULT_CONTENT)
        tab_x += width
    return lc


def str_to_contents(text: str, tab_width: int) -> list[Content]:
    """Convert a single-line string into one line of cells."""
    return parse_string(text, tab_width)


def contents_to_str(contents: list[Content]) -> tuple[str, dict[int, int]]:
    """Return the text of the cells and a map from text offsets to cell positions.

    Offsets count characters; the map also holds the end of the text.
    """
    parts: list[str] = []
    positions: dict[int, int] = {}
    offset = 0
    for n, cell in enumerate(contents):
        if not cell.mainc:
            continue
        positions[offset] = n
        chunk = cell.mainc + "".join(cell.combc)
        parts.append(chunk)
        offset += len(chunk)
    positions[offset] = len(contents)
    return "".join(parts), positions


def last_content(contents: list[Content]) -> Content:
    """Return the last character cell, skipping the filler of a wide character."""
    if not contents:
        return Content()
    if len(contents) > 1 and contents[-2].width > 1:
        return contents[-2]
    return contents[-1]


def overstrike(prev: str, cur: str, style: Style) -> Style:
    """Return the style produced by overstriking ``prev`` with ``cur``."""
    if prev == cur:
        return OVERSTRIKE_STYLE
    if prev == "_":
        return OVERLINE_STYLE
    return style


@functools.lru_cache(maxsize=None)
def _cached_csi(params: str) -> OVStyle:
    return parse_csi(params)


def cs_to_style(style: Style, params: str) -> Style:
    """Return the style after applying an SGR parameter string."""
    if params in ("0", "", ";"):
        return DEFAULT_STYLE
    return apply_style(style, _cached_csi(params))


def parse_csi(params: str) -> OVStyle:
    """Parse SGR parameters into a style description."""
    s = OVStyle()
    fields = params.split(";")
    index = 0
    while index < len(fields):
        field = fields[index]
        if field in ("1", "01"):
            s = replace(s, bold=True)
        elif field in ("2", "02"):
            s = replace(s, dim=True)
        elif field in ("3", "03"):
            s = replace(s, italic=True)
        elif field in ("4", "04"):
            s = replace(s, underline=True)
        elif field in ("5", "05", "6", "06"):
            s = replace(s, blink=True)
        elif field in ("7", "07", "8", "08"):
            s = replace(s, reverse=True)
        elif field in ("9", "09"):
            s = replace(s, strike_through=True)
        elif field in ("22", "24", "25", "27"):
            s = OVStyle()
        elif field in ("30", "31", "32", "33", "34", "35", "36", "37"):
            s = replace(s, foreground=color_name(int(field) - 30))
        elif field == "39":
            s = replace(s, foreground="default")
        elif field in ("40", "41", "42", "43", "44", "45", "46", "47"):
            s = replace(s, background=color_name(int(field) - 40))
        elif field == "49":
            s = replace(s, background="default")
        elif field in ("90", "91", "92", "93", "94", "95", "96", "97"):
            s = replace(s, foreground=color_name(int(field) - 82))
        elif field in ("100", "101", "102", "103", "104", "105", "106", "107"):
            s = replace(s, background=color_name(int(field) - 92))
        elif field in ("38", "48"):
            consumed, s = cs_color(s, fields[index:])
            index += consumed
        index += 1
    return s


def cs_color(ovstyle: OVStyle, fields: list[str]) -> tuple[int, OVStyle]:
    """Parse an 8-bit or 24-bit colour; return the fields consumed and the style."""
    if len(fields) < 2:
        return 1, ovstyle
    target = fields[0]
    index = 1
    color = ""
    if fields[1] == "5" and len(fields) > 2:
        index = 2
        color = color_name(_atoi(fields[2]))
    elif fields[1] == "2" and len(fields) > 4:
        red, green, blue = (_atoi(f) for f in fields[2:5])
        index = 4
        color = f"#{red:02x}{green:02x}{blue:02x}"
    if color:
        if target == "38":
            ovstyle = replace(ovstyle, foreground=color)
        else:
            ovstyle = replace(ovstyle, background=color)
    return index, ovstyle


def color_name(number: int) -> str:
    """Return the colour name or ``#rrggbb`` string for a 256-colour index."""
    if number <= 15:
        return lookup_color(number)
    if number <= 231:
        red = (number - 16) // 36
        green = ((number - 16) // 6) % 6
        blue = (number - 16) % 6
        return f"#{255 * red // 5:02x}{255 * green // 5:02x}{255 * blue // 5:02x}"
    if number <= 255:
        grey = 255 * (number - 232) // 23
        return f"#{grey:02x}{grey:02x}{grey:02x}"
    return ""


def lookup_color(number: int) -> str:
    """Return the name of one of the sixteen basic colours."""
    if number < 0 or number > 15:
        return "black"
    return _PALETTE[number]