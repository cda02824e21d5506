"""Parsing of the numbers and positions typed into the viewer's prompts."""

from __future__ import annotations

import math
import re

_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)


def _parse_float(text: str) -> float:
    """Parse a float strictly: no surrounding blanks or digit separators."""
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)


def _atoi(text: str) -> int:
    """Parse a decimal integer that fits in 64 bits."""
    if not _INT.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return int(-rounded if value < 0 else rounded)


def position(height: int, text: str) -> float:
    """Return the position that ``text`` denotes within ``height`` lines.

    A plain number is a count of lines from the top, a leading dot gives
    tenths of the height (``.5`` is half) and a trailing ``%`` gives a
    percentage of the height. Anything unparsable is 0.
    """
    text = text.strip()
    if not text:
        return 0.0

    fraction = 0.0
    if text.startswith("."):
        text = text.lstrip(".")
        try:
            fraction = _parse_float(text) / 10
        except ValueError:
            return 0.0
    if text.endswith("%"):
        text = text.rstrip("%")
        try:
            fraction = _parse_float(text) / 100
        except ValueError:
            return 0.0

    if fraction != 0:
        return height * fraction

    try:
        return _parse_float(text)
    except ValueError:
        return 0.0


def jump_position(height: int, text: str) -> int:
    """Return the screen row for a jump target; negative values count from the bottom."""
    num = _round_half_away(position(height, text))
    if num < 0:
        return (height - 1) + num
    return num


def parse_go_line(end_num: int, text: str) -> tuple[int, int | None] | None:
    """Parse a "go to line" input against a document of ``end_num`` lines.

    Returns ``None`` for empty input, otherwise the one-based line number
    and, when the input has a non-zero first decimal, the number of the
    wrapped line within it. Raises ``ValueError`` for an unusable number.
    """
    if not text:
        return None
    num = position(end_num, text)
    if math.isnan(num) or math.isinf(num):
        raise ValueError(f"invalid number: {text!r}")
    formatted = f"{num:.1f}"
    if formatted.endswith(".0"):
        return _atoi(formatted[:-2]), None
    line, nth = formatted.split(".")
    return _atoi(line), _atoi(nth)


def parse_write_ba(text: str) -> tuple[int, int | None]:
    """Parse ``before[:after]``: the lines to write before and after the screen on exit.

    Empty parts count as 0; ``after`` is ``None`` when no colon is given.
    Raises ``ValueError`` for a part that is not a number.
    """
    parts = text.split(":")
    before = _atoi(parts[0] or "0")
    after = None
    if len(parts) > 1:
        after = _atoi(parts[1] or "0")
    return before, after


def split_multi_color(text: str) -> list[str]:
    """Split words on spaces, keeping double-quoted runs (quotes included) together."""
    words: list[str] = []
    current: list[str] = []
    quoted = False
    for ch in text:
        if ch == '"':
            quoted = not quoted
        if not quoted and ch == " ":
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words