"""A document: the lines of one input and its display state."""

from __future__ import annotations

import json
import os
import re
import stat
import threading
from collections import OrderedDict
from typing import IO, Iterable, Protocol

from .config import General
from .content import EOF_CONTENT, Content, contents_to_str, parse_string

FORM_FEED = "\f"
_CACHE_SIZE = 1000


class OutOfRangeError(IndexError):
    """A line number outside the document was requested."""


class NotFoundError(LookupError):
    """A search found no matching line."""


class SearchCancelled(Exception):
    """A search was cancelled before it finished."""


class Searcher(Protocol):
    def match(self, line: str) -> bool: ...


class Cancel(Protocol):
    def is_set(self) -> bool: ...


def _compile(pattern: str) -> re.Pattern[str] | None:
    """Compile ``pattern`` as a regular expression, or literally if it is invalid."""
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error:
        return re.compile(re.escape(pattern))


def _unquote(word: str) -> str:
    """Remove surrounding quotes from ``word``; leave it as is if it is not quoted."""
    if len(word) >= 2 and word[0] == word[-1]:
        if word[0] == "`":
            return word[1:-1]
        if word[0] == '"':
            try:
                value = json.loads(word)
            except ValueError:
                return word
            if isinstance(value, str):
                return value
    return word


class Document:
    """The lines read from one input together with how they are displayed."""

    def __init__(self) -> None:
        self.file_name = ""
        self.caption = ""
        self.prevent_reload = False
        self.seekable = True
        self.general = General(
            column_delimiter="",
            tab_width=8,
            mark_style_width=1,
            plain_mode=True,
        )
        self.section_delimiter_reg: re.Pattern[str] | None = None
        self.multi_color_regexps: list[re.Pattern[str] | None] = []
        self.watch = False
        self.changed = False
        self.closed = False

        self.latest_num = 0
        self.top_ln = 0
        self.top_lx = 0
        self.bottom_ln = 0
        self.bottom_lx = 0
        self.x = 0
        self.column_num = 0
        self.marked: list[int] = []
        self.marked_point = 0
        self.last_section_pos_num = 0

        self._lines: list[str] = []
        self._eof = False
        self._lock = threading.Lock()
        self._cache: OrderedDict[int, list[Content]] = OrderedDict()
        self._last_contents_num = -1
        self._last_contents_str = ""
        self._last_contents_map: dict[int, int] = {}

    def append(self, *args: str) -> None:
        """Add lines to the end of the document."""
        with self._lock:
            self._lines.extend(args)
        self.changed = True

    def read_all(self, stream: IO[bytes] | IO[str] | Iterable[bytes | str]) -> None:
        """Read every line of ``stream`` into the document, then mark EOF."""
        try:
            for raw in stream:
                line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
                if line.endswith("\n"):
                    line = line[:-1]
                with self._lock:
                    self._lines.append(line)
                self.changed = True
        finally:
            with self._lock:
                self._eof = True
            self.changed = True

    def get_line(self, n: int) -> str:
        """Return line ``n``, or an empty string outside the document."""
        with self._lock:
            if n < 0 or n >= len(self._lines):
                return ""
            return self._lines[n]

    def current_ln(self) -> int:
        """Return the line number shown at the top of the screen."""
        return self.top_ln

    def export(self, out: IO[str], start: int, end: int) -> None:
        """Write lines ``start`` to ``end`` inclusive, each followed by a newline."""
        for n in range(start, end + 1):
            if n >= self.buf_end_num():
                break
            out.write(self.get_line(n) + "\n")

    def buf_end_num(self) -> int:
        """Return the number of lines read so far."""
        with self._lock:
            return len(self._lines)

    def buf_eof(self) -> bool:
        """Return whether the whole input has been read."""
        with self._lock:
            return self._eof

    def clear_cache(self) -> None:
        """Forget every parsed line."""
        self._cache.clear()

    def contents_ln(self, n: int, tab_width: int) -> list[Content]:
        """Return the parsed cells of line ``n``; raise OutOfRangeError outside the document."""
        if n < 0 or n >= self.buf_end_num():
            raise OutOfRangeError(f"line {n} out of range")
        cached = self._cache.get(n)
        if cached is not None:
            self._cache.move_to_end(n)
            return cached
        lc = parse_string(self.get_line(n), tab_width)
        self._cache[n] = lc
        if len(self._cache) > _CACHE_SIZE:
            self._cache.popitem(last=False)
        return lc

    def get_contents(self, n: int, tab_width: int) -> list[Content]:
        """Return a copy of the cells of line ``n``, or the EOF marker past the end."""
        try:
            return list(self.contents_ln(n, tab_width))
        except OutOfRangeError:
            return [EOF_CONTENT]

    def get_contents_str(self, n: int, contents: list[Content]) -> tuple[str, dict[int, int]]:
        """Return the text and position map of ``contents``, reusing the last result for line ``n``."""
        if self._last_contents_num != n:
            self._last_contents_str, self._last_contents_map = contents_to_str(contents)
            self._last_contents_num = n
        return self._last_contents_str, self._last_contents_map

    def first_line(self) -> int:
        """Return the first line after the skipped and header lines."""
        return self.general.skip_lines + self.general.header

    def search_line(self, searcher: Searcher, n: int, cancel: Cancel | None = None) -> int:
        """Return the first line from ``n`` onwards that ``searcher`` matches."""
        end = self.buf_end_num()
        for ln in range(max(n, 0), end):
            if searcher.match(self.get_line(ln)):
                return ln
            if cancel is not None and cancel.is_set():
                raise SearchCancelled("search cancelled")
        raise NotFoundError("not found")

    def back_search_line(self, searcher: Searcher, n: int, cancel: Cancel | None = None) -> int:
        """Return the last line at or before ``n`` that ``searcher`` matches."""
        start = min(n, self.buf_end_num() - 1)
        for ln in range(start, -1, -1):
            if searcher.match(self.get_line(ln)):
                return ln
            if cancel is not None and cancel.is_set():
                raise SearchCancelled("search cancelled")
        raise NotFoundError("not found")

    def watch_mode(self) -> None:
        """Turn on watch mode; sections are delimited by form feeds unless set."""
        self.watch = True
        if not self.general.section_delimiter:
            self.set_section_delimiter("^" + FORM_FEED)
        self.general.section_start_position = 1
        self.general.follow_section = True

    def unwatch_mode(self) -> None:
        """Turn off watch mode."""
        self.watch = False
        self.general.follow_section = False

    def set_section_delimiter(self, delimiter: str) -> None:
        """Set the regular expression that starts a section."""
        self.general.section_delimiter = delimiter
        self.section_delimiter_reg = _compile(delimiter)

    def set_multi_color_words(self, words: list[str]) -> None:
        """Set the words, optionally quoted, to highlight in several colours."""
        self.multi_color_regexps = [_compile(_unquote(word)) for word in words]


def open_document(file_name: str) -> Document:
    """Open and read a file into a new document."""
    info = os.stat(file_name)
    if stat.S_ISDIR(info.st_mode):
        raise IsADirectoryError(f"{file_name} is a directory")
    doc = Document()
    doc.file_name = file_name
    if stat.S_ISFIFO(info.st_mode):
        doc.seekable = False
    with open(file_name, "rb") as stream:
        doc.read_all(stream)
    return doc