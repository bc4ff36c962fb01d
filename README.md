# coreext

Small, dependency-free helpers for working with sequences and strings.

## Installation

```
pip install coreext
```

## What is inside

- `coreext.strings`: string functions that work with the UTF-8 byte offsets
  of a text: `byte_len`, `is_char_boundary`, `byte_slice`,
  `previous_char_boundary`, `next_char_boundary`, `left_char_boundary`,
  `right_char_boundary`, `char_indices`, `get_nth_char_index`,
  `nth_char_index`, `nth_char`, `first_chars`, `last_chars`,
  `from_nth_char`, `calc_len_utf16`, `get_char_at`, `char_indices_to` and
  `char_indices_from` (which returns a `CharIndicesFrom` iterator with
  `next_back` and `as_str`).
- `coreext.str_split`: `split_while` and `rsplit_while` split a string into
  runs of characters that a function maps to the same key, giving `KeyStr`
  items (`str`, `key`, `into_pair()`). The iterators, `SplitWhile` and
  `RSplitWhile`, also take runs from the other end with `next_back()`.
- `coreext.split_while`: the same operation for any sequence, giving
  `KeySlice` items (`slice`, `key`, `into_pair()`) from `SplitSliceWhile` and
  `RSplitSliceWhile`, which also offer `next_back()` and `size_hint()`.
- `coreext.slices`: `SliceView`, a window onto a base sequence that can tell
  whether another view of the same base lies inside it (`contains_slice`,
  `is_slice`) and at what offset (`offset_of_slice`, `get_offset_of_slice`).
  `ref(index)` gives an `ElementRef` to a position, which `index_of` and
  `get_index_of` locate. Views of different base objects never contain each
  other, even when their contents are equal.
- `coreext.text_layout`: `left_pad`, `left_padder` / `LeftPadder` for padding
  every non-blank line, and `line_indentation`, `min_indentation`,
  `max_indentation`.
- `coreext.self_ops`: `piped`, `mutated`, `observe`, `eq_id`, `drop_` and a
  chainable `Chain` wrapper.

## Examples

```python
from coreext.strings import byte_slice, right_char_boundary, get_char_at
from coreext.str_split import split_while
from coreext.slices import SliceView
from coreext.text_layout import left_pad
from coreext.self_ops import Chain

byte_slice("niño", 0, 4)                       # 'niñ'
right_char_boundary("niño", 3)                 # 4
get_char_at("foo 効 门", 5)                     # '効'

[ks.into_pair() for ks in split_while("Hello, world!", str.isalnum)]
# [(True, 'Hello'), (False, ', '), (True, 'world'), (False, '!')]

view = SliceView([0, 1, 2, 3, 4, 5])
view.contains_slice(view[3:])                  # True
view.offset_of_slice(view[3:])                 # 3
view.contains_slice(SliceView([0, 1, 2, 3, 4, 5]))  # False: another list
view.index_of(view.ref(3))                     # 3

left_pad("what\n  the", 4)                     # '    what\n      the'

Chain([1]).mutated(lambda items: items.append(2)).piped(len).value  # 2
```

## What it does not do

There is no slicing that repairs bad bounds: `byte_slice` raises
`IndexError` or `ValueError` when a bound is past the end or falls inside a
character. Use `left_char_boundary` or `right_char_boundary` first to move a
bound onto a character boundary. The package has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```