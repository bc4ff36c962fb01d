"""Indentation helpers: padding every line and measuring indentation.

Lines are split on ``"\\n"``; a trailing ``"\\r"`` on a line is dropped, and a
final newline does not start an extra empty line. Indentation is measured in
UTF-8 bytes of leading whitespace.
"""

from __future__ import annotations

from typing import Iterator

from .strings import byte_len


def _check_count(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _lines(text: str) -> Iterator[str]:
    if not text:
        return
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def _has_content(line: str) -> bool:
    return any(not c.isspace() for c in line)


class LeftPadder:
    """Pads every line of a string with spaces when converted with ``str``.

    Lines made only of whitespace are left unpadded.
    """

    __slots__ = ("string", "padding")

    def __init__(self, string: str, padding: int) -> None:
        _check_count("padding", padding)
        self.string = string
        self.padding = padding

    def __str__(self) -> str:
        pad = " " * self.padding
        return "\n".join(
            pad + line if _has_content(line) else line for line in _lines(self.string)
        )

    def __repr__(self) -> str:
        return f"LeftPadder({self.string!r}, {self.padding})"


def left_pad(text: str, how_much: int) -> str:
    """Pad each line of ``text`` on the left with ``how_much`` spaces."""
    return str(LeftPadder(text, how_much))


def left_padder(text: str, how_much: int) -> LeftPadder:
    """Return a :class:`LeftPadder` that pads ``text`` lazily."""
    return LeftPadder(text, how_much)


def line_indentation(text: str) -> int:
    """The indentation of the first line.

    A line made only of whitespace counts as indented by its whole length.
    """
    first = next(_lines(text), "")
    return byte_len(first) - byte_len(first.lstrip())


def _indentations(text: str) -> Iterator[int]:
    for line in _lines(text):
        if line.lstrip():
            yield line_indentation(line)


def min_indentation(text: str) -> int:
    """The smallest indentation, ignoring lines made only of whitespace."""
    return min(_indentations(text), default=0)


def max_indentation(text: str) -> int:
    """The largest indentation, ignoring lines made only of whitespace."""
    return max(_indentations(text), default=0)