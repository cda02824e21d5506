"""Running a command and collecting its output into documents."""

from __future__ import annotations

import subprocess
import sys
import threading
from typing import IO

from .document import Document


def _new_out_err_documents() -> tuple[Document, Document]:
    out = Document()
    out.file_name = "STDOUT"
    out.prevent_reload = True
    err = Document()
    err.file_name = "STDERR"
    err.prevent_reload = True
    return out, err


def _stdin():
    """Return stdin for the command when it is not a terminal."""
    try:
        sys.stdin.fileno()
        if sys.stdin.isatty():
            return None
    except (AttributeError, OSError, ValueError):
        return None
    return sys.stdin


def _reader(doc: Document, stream: IO[bytes]) -> threading.Thread:
    def run() -> None:
        with stream:
            doc.read_all(stream)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


def exec_command(args: list[str]) -> tuple[Document, Document, subprocess.Popen]:
    """Start a command and read its standard output and error into two documents.

    Returns the two documents and the running process. Both documents are
    marked closed once the command's output has been read completely.
    """
    if not args:
        raise ValueError("no arguments to execute")
    out, err = _new_out_err_documents()
    process = subprocess.Popen(
        args,
        stdin=_stdin(),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    out.caption = f"({args[0]}){out.file_name}"
    err.caption = f"({args[0]}){err.file_name}"
    readers = [_reader(out, process.stdout), _reader(err, process.stderr)]

    def finish() -> None:
        for thread in readers:
            thread.join()
        for doc in (out, err):
            doc.changed = True
            doc.closed = True

    threading.Thread(target=finish, daemon=True).start()
    return out, err, process