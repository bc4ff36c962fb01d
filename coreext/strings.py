"""Character-aware helpers for text addressed by UTF-8 byte offsets.

Python strings are indexed by code point. These helpers also work with the
byte offsets a UTF-8 encoding of the text would have. That lets callers find
character boundaries and slice by byte position.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogatepass")


def _utf8_len(char: str) -> int:
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def _check_index(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _boundary(data: bytes, index: int) -> bool:
    if index == 0:
        return True
    if index < len(data):
        return (data[index] & 0xC0) != 0x80
    return index == len(data)


def byte_len(text: str) -> int:
    """The length of ``text`` in UTF-8 bytes."""
    return sum(_utf8_len(c) for c in text)


def is_char_boundary(text: str, index: int) -> bool:
    """Whether the byte offset ``index`` starts a character or ends the text."""
    _check_index("index", index)
    return _boundary(_encode(text), index)


def byte_slice(text: str, start: int = 0, end: Optional[int] = None) -> str:
    """Return the text between the byte offsets ``start`` and ``end``.

    Raises ``IndexError`` if a bound lies past the end, and ``ValueError`` if
    a bound falls inside a character or ``end`` is before ``start``.
    """
    data = _encode(text)
    if end is None:
        end = len(data)
    _check_index("start", start)
    _check_index("end", end)
    if end > len(data) or start > len(data):
        raise IndexError(f"byte range {start}..{end} out of bounds for length {len(data)}")
    if start > end:
        raise ValueError(f"byte range starts at {start} but ends at {end}")
    for bound in (start, end):
        if not _boundary(data, bound):
            raise ValueError(f"byte index {bound} is not a char boundary")
    return _decode(data[start:end])


def previous_char_boundary(text: str, index: int) -> int:
    """The previous character boundary before ``index``, stopping at 0.

    If ``index`` is past the end, returns the byte length.
    """
    _check_index("index", index)
    data = _encode(text)
    if index > len(data):
        return len(data)
    index = max(index - 1, 0)
    while not _boundary(data, index):
        index -= 1
    return index


def next_char_boundary(text: str, index: int) -> int:
    """The next character boundary after ``index``.

    If ``index`` is at or past the end, returns the byte length.
    """
    _check_index("index", index)
    data = _encode(text)
    if index >= len(data):
        return len(data)
    index += 1
    while not _boundary(data, index):
        index += 1
    return index


def left_char_boundary(text: str, index: int) -> int:
    """The closest character boundary at or left of ``index``.

    If ``index`` is past the end, returns the byte length.
    """
    _check_index("index", index)
    data = _encode(text)
    if index > len(data):
        return len(data)
    while not _boundary(data, index):
        index -= 1
    return index


def right_char_boundary(text: str, index: int) -> int:
    """The closest character boundary at or right of ``index``.

    If ``index`` is at or past the end, returns the byte length.
    """
    _check_index("index", index)
    data = _encode(text)
    if index >= len(data):
        return len(data)
    while not _boundary(data, index):
        index += 1
    return index


def char_indices(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(byte_offset, char)`` for every character of ``text``."""
    offset = 0
    for char in text:
        yield offset, char
        offset += _utf8_len(char)


def get_nth_char_index(text: str, nth: int) -> Optional[int]:
    """The byte offset of the ``nth`` character, or ``None`` if there is none."""
    _check_index("nth", nth)
    if nth >= len(text):
        return None
    return byte_len(text[:nth])


def nth_char_index(text: str, nth: int) -> int:
    """The byte offset of the ``nth`` character, or the byte length if there is none."""
    _check_index("nth", nth)
    return byte_len(text[:nth])


def nth_char(text: str, nth: int) -> Optional[str]:
    """The ``nth`` character, or ``None`` if there is none."""
    _check_index("nth", nth)
    return text[nth] if nth < len(text) else None


def first_chars(text: str, n: int) -> str:
    """The first ``n`` characters; the whole text if it has fewer."""
    _check_index("n", n)
    return text[:n]


def last_chars(text: str, n: int) -> str:
    """The last ``n`` characters; the whole text if it has fewer."""
    _check_index("n", n)
    if n == 0:
        return ""
    return text[-n:]


def from_nth_char(text: str, n: int) -> str:
    """The text from the ``n``th character on; empty if there are fewer."""
    _check_index("n", n)
    return text[n:]


def calc_len_utf16(text: str) -> int:
    """The length of ``text`` in UTF-16 code units."""
    return sum(2 if ord(c) > 0xFFFF else 1 for c in text)


def get_char_at(text: str, at_byte: int) -> Optional[str]:
    """The character that contains the byte offset ``at_byte``.

    Returns ``None`` if the offset is at or past the end.
    """
    _check_index("at_byte", at_byte)
    data = _encode(text)
    if at_byte >= len(data):
        return None
    start = left_char_boundary(text, at_byte)
    for offset, char in char_indices(text):
        if offset == start:
            return char
    return None


def char_indices_to(text: str, to: int) -> Iterator[Tuple[int, str]]:
    """Yield ``(byte_offset, char)`` pairs for the characters before byte ``to``.

    A character that ``to`` falls inside is left out. If ``to`` is past the
    end, the whole text is covered.
    """
    limit = left_char_boundary(text, to)
    return char_indices(byte_slice(text, 0, limit))


def char_indices_from(text: str, start: int) -> CharIndicesFrom:
    """Iterate ``(byte_offset, char)`` pairs starting at byte ``start``.

    See :class:`CharIndicesFrom`.
    """
    return CharIndicesFrom(text, start)


class CharIndicesFrom:
    """Iterates ``(byte_offset, char)`` pairs of a text from a byte offset on.

    The offsets are those within the whole text. If ``start`` falls inside a
    character, iteration starts at that character; if it is past the end,
    nothing is produced. ``next_back`` takes pairs from the other end.
    """

    def __init__(self, text: str, start: int) -> None:
        begin = left_char_boundary(text, start)
        self._items: List[Tuple[int, str]] = [
            (offset, char) for offset, char in char_indices(text) if offset >= begin
        ]
        self._lo = 0
        self._hi = len(self._items)

    def __iter__(self) -> CharIndicesFrom:
        return self

    def __next__(self) -> Tuple[int, str]:
        if self._lo >= self._hi:
            raise StopIteration
        item = self._items[self._lo]
        self._lo += 1
        return item

    def next_back(self) -> Optional[Tuple[int, str]]:
        """Take the last remaining pair, or return ``None`` if there is none."""
        if self._lo >= self._hi:
            return None
        self._hi -= 1
        return self._items[self._hi]

    def as_str(self) -> str:
        """The part of the text not yet iterated over."""
        return "".join(char for _, char in self._items[self._lo:self._hi])

    def __repr__(self) -> str:
        return f"CharIndicesFrom({self.as_str()!r})"