# ovpager

Building blocks for a terminal pager in the style of `more`/`less`.

`ovpager` turns raw terminal output into screen cells. It keeps documents in
memory and searches them, reads the numbers and positions typed at the
pager's prompts, and edits the pager's input line.

## Modules

- **`ovpager.content`**: line parsing.
  - `parse_string(text, tab_width)` (also available as `str_to_contents`)
    handles several kinds of input and returns a list of `Content` cells:
    - ANSI escape sequences, including SGR attributes and colours (the 16
      basic colours, bright colours, 256-colour indexes and 24-bit `38;2;r;g;b`
      / `48;2;r;g;b`).
    - Tabs. A positive `tab_width` expands a tab to the next tab stop. A
      negative width shows the tab as a reversed `\t`. A width of 0 drops it.
    - Backspace overstrike. `a\ba` is bold and `_\ba` is underlined.
    - Wide characters. The second cell of a wide character is an empty
      `Content`.
    - Grapheme clusters.
  - `contents_to_str(cells)` returns the plain text of the cells and a map
    from character offsets in that text to cell positions. The map includes
    the end of the text.
  - Lower-level helpers: `last_content`, `overstrike`, `cs_to_style`,
    `parse_csi`, `cs_color`, `color_name`, `lookup_color`.
- **`ovpager.style`**: styles.
  - `Style` is the resolved style of a cell. Its colours are `None` for the
    default, a palette name, or `#rrggbb`.
  - `OVStyle` is a style description. It has set flags, `un_*` flags that
    clear an attribute, and optional colours.
  - `apply_style(style, ovstyle)` lays a description over a style.
    `to_style(ovstyle)` applies one to the default style.
- **`ovpager.config`**: settings.
  - `General` holds the per-document display settings: tab width, header and
    skip lines, delimiters, and modes.
  - `Config` holds the style defaults and the viewer settings.
  - `new_config()` returns the defaults.
- **`ovpager.position`**: prompt input parsing.
  - `position(height, text)` reads `10` as a line count, `.5` as tenths of the
    height, and `30%` as a percentage of the height. Anything it cannot parse
    gives 0.
  - `jump_position(height, text)` rounds that result to a screen row. A
    negative value counts from the bottom.
  - `parse_go_line(end_num, text)` parses a "go to line" input.
  - `parse_write_ba(text)` parses `before:after`.
  - `split_multi_color(text)` splits words on spaces and keeps double-quoted
    runs together.
- **`ovpager.input`**: the input line.
  - `LineInput` is the editing buffer. Its methods are `reset`, `backspace`,
    `delete`, `left`, `right`, `up`, `down`, `tab`, `insert` and `enter`. It
    measures the cursor in display columns.
  - `InputMode` lists the input modes.
  - The prompt events are `InputEvent`, `DelimiterEvent`, `GotoEvent`,
    `HeaderEvent` and `JumpTargetEvent`. On `HeaderEvent`, up and down step
    the number.
  - `Candidate` is an input history. `delimiter_candidate`, `goto_candidate`
    and `jump_target_candidate` return the default histories.
  - `string_width` and `rune_width` convert between cursor columns and
    character indexes.
- **`ovpager.document`**: documents.
  - `Document` holds the lines of one input and its display state.
  - Reading: `read_all`, `append`, and `open_document(file_name)`, which
    raises `IsADirectoryError` for a directory.
  - Line access: `get_line`, `buf_end_num`, `buf_eof`, and
    `export(out, start, end)`.
  - Parsing: `contents_ln` caches parsed lines and raises `OutOfRangeError`.
    `get_contents` returns the EOF marker `~` past the end.
  - Search: `search_line` and `back_search_line` take any object with a
    `match(line)` method and an optional cancel object with `is_set()`. They
    raise `NotFoundError` or `SearchCancelled`.
  - Settings: `watch_mode`, `unwatch_mode`, `set_section_delimiter` and
    `set_multi_color_words`.
- **`ovpager.execute`**: running commands.
  - `exec_command(args)` starts a command. It returns two documents, one
    reading its standard output and one its standard error, together with the
    `subprocess.Popen` object. Both documents are marked closed once all of
    the output has been read.

## Installation

```
pip install ovpager
```

## Examples

```python
from ovpager.content import parse_string, contents_to_str

cells = parse_string("\x1b[31mred\x1b[m\tdone", 8)
text, positions = contents_to_str(cells)
print(text)                        # "red\tdone"
print(cells[0].style.foreground)   # "maroon"
```

```python
import io
from ovpager.document import Document

doc = Document()
doc.read_all(io.StringIO("alpha\nbeta\ngamma\n"))
out = io.StringIO()
doc.export(out, 0, 1)
print(out.getvalue())   # "alpha\nbeta\n"
```

## What this package does not do

`ovpager` is a library of parts. It has none of the following:

- an interactive screen
- a terminal drawing loop
- key bindings or a help screen
- a command-line program
- a searcher class to pass to the search methods
- loading of configuration files
- reading of compressed files
- timers for follow or watch modes

## Running the tests

```
pip install -e .[test]
pytest
```