"""Line input for the viewer's prompts: modes, history candidates and editing."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from enum import IntEnum

from wcwidth import wcwidth

_INT = re.compile(r"[+-]?[0-9]+")


class InputMode(IntEnum):
    """The state of the input line."""

    NORMAL = 0
    VIEW_MODE = 1
    SEARCH = 2
    BACKSEARCH = 3
    GOLINE = 4
    HEADER = 5
    DELIMITER = 6
    TAB_WIDTH = 7
    WATCH = 8
    SKIP_LINES = 9
    WRITE_BA = 10
    SECTION_DELIMITER = 11
    SECTION_START = 12
    MULTI_COLOR = 13
    JUMP_TARGET = 14


def _char_width(ch: str) -> int:
    width = wcwidth(ch)
    return width if width > 0 else 0


@dataclass
class Candidate:
    """A history of inputs that the up and down keys cycle through."""

    items: list[str] = field(default_factory=list)
    p: int = 0

    def up(self) -> str:
        """Move to the previous entry, wrapping to the last one."""
        if not self.items:
            return ""
        if self.p > 0:
            self.p -= 1
        else:
            self.p = len(self.items) - 1
        return self.items[self.p]

    def down(self) -> str:
        """Move to the next entry, wrapping to the first one."""
        if not self.items:
            return ""
        if self.p + 1 < len(self.items):
            self.p += 1
        else:
            self.p = 0
        return self.items[self.p]

    def confirm(self, value: str) -> None:
        """Record ``value`` as the most recent entry and rewind the cursor."""
        if value:
            self.items = [item for item in self.items if item != value]
            self.items.append(value)
        self.p = 0


class InputEvent:
    """An input mode with a prompt; confirming it yields the event itself."""

    mode: InputMode = InputMode.NORMAL
    prompt: str = ""

    def __init__(self, candidate: Candidate | None = None) -> None:
        self.candidate = candidate
        self.value = ""
        self.time: float | None = None

    def confirm(self, value: str) -> InputEvent:
        """Store the confirmed value, update the history and return this event."""
        self.value = value
        if self.candidate is not None:
            self.candidate.confirm(value)
        self.time = time.time()
        return self

    def up(self, value: str) -> str:
        """Return the text for the up key."""
        return self.candidate.up() if self.candidate is not None else ""

    def down(self, value: str) -> str:
        """Return the text for the down key."""
        return self.candidate.down() if self.candidate is not None else ""


class DelimiterEvent(InputEvent):
    """Input of the column delimiter."""

    mode = InputMode.DELIMITER
    prompt = "Delimiter:"


class GotoEvent(InputEvent):
    """Input of the line to move to."""

    mode = InputMode.GOLINE
    prompt = "Goto line:"


class HeaderEvent(InputEvent):
    """Input of the number of header lines; up and down step the number."""

    mode = InputMode.HEADER
    prompt = "Header length:"

    def __init__(self) -> None:
        super().__init__(None)

    def up(self, value: str) -> str:
        if not _INT.fullmatch(value):
            return "0"
        return str(int(value) + 1)

    def down(self, value: str) -> str:
        if not _INT.fullmatch(value):
            return "0"
        n = int(value)
        if n <= 0:
            return "0"
        return str(n - 1)


class JumpTargetEvent(InputEvent):
    """Input of the row where search results are shown."""

    mode = InputMode.JUMP_TARGET
    prompt = "Jump Target line:"


def delimiter_candidate() -> Candidate:
    """Return the default delimiter history."""
    return Candidate(["│", "\t", "|", ","])


def goto_candidate() -> Candidate:
    """Return an empty history for line numbers."""
    return Candidate()


def jump_target_candidate() -> Candidate:
    """Return an empty history for jump targets."""
    return Candidate()


def string_width(text: str, cursor: int) -> int:
    """Return the index of the character at display column ``cursor``."""
    width = 0
    index = 0
    for ch in text:
        width += _char_width(ch)
        if ch == "\t":
            width += 2
        if width >= cursor:
            return index
        index += 1
    return index


def rune_width(text: str) -> int:
    """Return the display width of the input text; a tab counts as two columns."""
    return sum(_char_width(ch) + (2 if ch == "\t" else 0) for ch in text)


def _skip_zero_width(chars: str, start: int) -> int:
    while start < len(chars) and _char_width(chars[start]) == 0:
        start += 1
    return start


@dataclass
class LineInput:
    """The text being typed, its cursor column and the current input mode."""

    value: str = ""
    cursor_x: int = 0
    event: InputEvent | None = None

    @property
    def mode(self) -> InputMode:
        return self.event.mode if self.event is not None else InputMode.NORMAL

    @property
    def prompt(self) -> str:
        return self.event.prompt if self.event is not None else ""

    def reset(self, event: InputEvent | None) -> None:
        """Clear the text and switch to ``event``'s mode (``None`` is normal mode)."""
        self.value = ""
        self.cursor_x = 0
        self.event = event

    def backspace(self) -> None:
        """Delete the character before the cursor with its combining marks."""
        if self.cursor_x <= 0:
            return
        chars = self.value
        pos = string_width(chars, self.cursor_x)
        head = chars[:pos]
        self.cursor_x = rune_width(head)
        nxt = _skip_zero_width(chars, pos + 1)
        self.value = head + chars[nxt:]

    def delete(self) -> None:
        """Delete the character under the cursor with its combining marks."""
        chars = self.value
        pos = string_width(chars, self.cursor_x)
        dp = 0 if self.cursor_x == 0 else 1
        value = chars[: pos + dp]
        nxt = _skip_zero_width(chars, pos + 1)
        if len(chars) > nxt:
            value += chars[dp + nxt:]
        self.value = value

    def left(self) -> None:
        """Move the cursor one character to the left."""
        if self.cursor_x <= 0:
            return
        chars = self.value
        pos = string_width(chars, self.cursor_x)
        self.cursor_x = rune_width(chars[:pos])
        if pos > 0 and chars[pos - 1] == "\t":
            self.cursor_x -= 1

    def right(self) -> None:
        """Move the cursor one character to the right."""
        chars = self.value
        pos = string_width(chars, self.cursor_x + 1)
        self.cursor_x = rune_width(chars[: pos + 1])

    def up(self) -> None:
        """Replace the text with the mode's value for the up key."""
        if self.event is None:
            return
        self.value = self.event.up(self.value)
        self.cursor_x = rune_width(self.value)

    def down(self) -> None:
        """Replace the text with the mode's value for the down key."""
        if self.event is None:
            return
        self.value = self.event.down(self.value)
        self.cursor_x = rune_width(self.value)

    def tab(self) -> None:
        """Insert a tab at the cursor."""
        chars = self.value
        pos = string_width(chars, self.cursor_x + 1)
        self.value = chars[:pos] + "\t" + chars[pos:]
        self.cursor_x += 2

    def insert(self, char: str) -> None:
        """Insert ``char`` at the cursor."""
        chars = self.value
        pos = string_width(chars, self.cursor_x + 1)
        self.value = chars[:pos] + char + chars[pos:]
        self.cursor_x += _char_width(char)

    def enter(self) -> InputEvent | None:
        """Confirm the text; return the confirmed event and go back to normal mode."""
        if self.event is None:
            return None
        confirmed = self.event.confirm(self.value)
        self.event = None
        return confirmed