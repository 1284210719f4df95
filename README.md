# aoeui

The core of a small, modeless text editor, usable as a library.

- `aoeui.utf8`: UTF-8 encoding and decoding that tolerates malformed
  input, plus the extended code values used for function keys, input
  errors and folded sections (`encode`, `decode`, `utf8_length`,
  `utf8_length_backwards`, `is_unicode`, `is_codepoint`, `function_key`,
  `function_f`, `is_function_key`, `error_code`, `is_error_code`,
  `is_folded`, `folded_bytes`, `control`).
- `aoeui.rgba`: the colour constants of the editor and `pale`, which
  halves each colour channel and drops alpha.
- `aoeui.text`: `Text` buffers with unlimited undo and redo, `View`s that
  look at all or part of a text and keep their own cursor, mark and other
  loci in step with edits, `TextFlag`, and a `Workspace` that holds the
  texts and gives views unique names.
- `aoeui.chars`: character access through a view (`view_unicode`,
  `view_unicode_prior`, `view_char`, `view_char_prior`, each returning the
  character and the neighbouring offset), selections (`get_selection`,
  which returns a `Selection`, `extract`, `extract_selection`,
  `delete_selection`), `append`, and character classes (`is_open_bracket`,
  `is_close_bracket`, `is_wordch`, `is_idch`, `char_columns`).
- `aoeui.search`: `IncrementalSearch`, a search that grows as characters
  are added (`extend`), shrinks (`retract`), moves on to the next or
  previous hit (`repeat`) and wraps around the view. Literal searches
  ignore the case of ASCII letters; regular-expression searches are
  case-insensitive, and the text captured by groups 1 to 9 is kept in
  `registers`. `finish` ends the search and returns the target to reuse
  next time. `match_char` is the character comparison it uses.
- `aoeui.complete`: `path_complete`, which extends a partly typed path
  by what all matching directory entries share; a leading `~/` stands
  for the home directory.

## Installing

    pip install .

No third-party libraries are needed.

## A short tour

```python
from aoeui.utf8 import encode, decode, utf8_length

data = encode(0x203B)
assert decode(data) == 0x203B
assert utf8_length(data) == len(data)
```

```python
from aoeui.text import Workspace

workspace = Workspace()
view = workspace.create_text("notes.txt", 0)
view.insert(0, b"hello, world\n")
view.delete(0, 7)
view.text.undo()      # the deleted bytes come back; returns offset 0
```

Consecutive insertions that continue at the end of the last insertion,
and consecutive deletions at the same offset, are merged into one
undoable edit.

```python
from aoeui.search import IncrementalSearch

search = IncrementalSearch(view)
for ch in "world":
    search.extend(ch)   # cursor and mark now span the hit
search.finish()
```

## Character chart

The `aoeui-chart` command prints a table of code points with their
characters, eight to a line:

    aoeui-chart            # the single character U+203B
    aoeui-chart 2500 64    # 64 characters starting at U+2500

The first argument is a hexadecimal code point, the second a count.
The same table is available as bytes from `aoeui.chart.format_chart`.

## What it does not do

This package holds the editing core only. There is no command that
starts an interactive editor: no terminal display, windows, key
bindings or command modes. Texts are built in memory; nothing here
reads a file into a `Text` or saves one back. Completion covers file
paths only, and there is no automatic indentation or alignment.

## Tests

    pip install .[test]
    pytest