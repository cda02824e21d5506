"""Viewer settings and their defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

from .style import OVStyle


@dataclass
class General:
    """Display settings shared by every document."""

    column_delimiter: str = ""
    section_delimiter: str = ""
    jump_target_string: str = ""
    multi_color_words: list[str] = field(default_factory=list)
    tab_width: int = 8
    header: int = 0
    skip_lines: int = 0
    section_start_position: int = 0
    watch_interval: int = 0
    mark_style_width: int = 1
    jump_target: int = 0
    alternate_rows: bool = False
    column_mode: bool = False
    column_rainbow: bool = False
    line_num_mode: bool = False
    wrap_mode: bool = False
    plain_mode: bool = False
    follow_mode: bool = False
    follow_all: bool = False
    follow_section: bool = False


def _multi_color_highlight() -> list[OVStyle]:
    return [
        OVStyle(foreground=name)
        for name in ("red", "aqua", "yellow", "fuchsia", "lime", "blue", "grey")
    ]


def _column_rainbow() -> list[OVStyle]:
    return [
        OVStyle(foreground=name)
        for name in ("white", "crimson", "aqua", "lightsalmon", "lime", "blue", "yellowgreen")
    ]


@dataclass
class Config:
    """All viewer settings; the field defaults are the shipped defaults."""

    style_body: OVStyle = OVStyle()
    style_header: OVStyle = OVStyle(bold=True)
    style_alternate: OVStyle = OVStyle(background="gray")
    style_over_strike: OVStyle = OVStyle(bold=True)
    style_over_line: OVStyle = OVStyle(underline=True)
    style_line_number: OVStyle = OVStyle(bold=True)
    style_search_highlight: OVStyle = OVStyle(reverse=True)
    style_column_highlight: OVStyle = OVStyle(reverse=True)
    style_mark_line: OVStyle = OVStyle(background="darkgoldenrod")
    style_section_line: OVStyle = OVStyle(background="slateblue")
    style_jump_target_line: OVStyle = OVStyle(underline=True)
    style_multi_color_highlight: list[OVStyle] = field(default_factory=_multi_color_highlight)
    style_column_rainbow: list[OVStyle] = field(default_factory=_column_rainbow)
    general: General = field(default_factory=General)
    mode: dict[str, General] = field(default_factory=dict)
    view_mode: str = ""
    before_write_original: int = 0
    after_write_original: int = 0
    disable_mouse: bool = False
    is_write_original: bool = False
    quit_small: bool = False
    case_sensitive: bool = False
    regexp_search: bool = False
    incsearch: bool = False
    debug: bool = False


def new_config() -> Config:
    """Return a configuration holding the default values."""
    return Config()