"""Terminal pager parts: ANSI-aware line parsing, styles, documents, search and input editing."""

__version__ = "0.1.0"