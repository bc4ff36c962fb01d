"""Splitting text into runs of characters that map to the same key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(order=True)
class KeyStr(Generic[T]):
    """A run of text together with the key all of its characters were mapped to."""

    str: str
    key: T

    def into_pair(self) -> Tuple[T, str]:
        """Return ``(key, str)``."""
        return (self.key, self.str)


class _TextSplitter(Generic[T]):
    """Shared state for splitting text from either end."""

    def __init__(self, text: str, mapper: Callable[[str], T]) -> None:
        self._text = text
        self._mapper = mapper
        self._lo = 0
        self._hi = len(text)
        # The first and last characters are drawn from one shared cursor, so a
        # single-character text leaves the right-hand key at the default ' '.
        first = text[0] if text else " "
        last = text[-1] if len(text) >= 2 else " "
        self._last_left: T = mapper(first)
        self._last_right: T = mapper(last)

    def _take_front(self) -> Optional[KeyStr[T]]:
        if self._lo >= self._hi:
            return None
        last = self._last_left
        following = last
        end = self._hi
        for index in range(self._lo, self._hi):
            following = self._mapper(self._text[index])
            if following != last:
                end = index
                break
        run = self._text[self._lo:end]
        self._lo = end
        self._last_left = following
        return KeyStr(str=run, key=last)

    def _take_back(self) -> Optional[KeyStr[T]]:
        if self._lo >= self._hi:
            return None
        last = self._last_right
        following = last
        left = self._lo
        for index in range(self._hi - 1, self._lo - 1, -1):
            following = self._mapper(self._text[index])
            if following != last:
                left = index + 1
                break
        run = self._text[left:self._hi]
        self._hi = left
        self._last_right = following
        return KeyStr(str=run, key=last)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text[self._lo:self._hi]!r})"


class SplitWhile(_TextSplitter[T]):
    """Iterates over runs of characters mapped to the same key, from the front.

    ``next_back`` takes runs from the other end, returning ``None`` once the
    text is used up.
    """

    def __init__(self, text: str, mapper: Callable[[str], T]) -> None:
        super().__init__(text, mapper)

    def __iter__(self) -> SplitWhile[T]:
        return self

    def __next__(self) -> KeyStr[T]:
        run = self._take_front()
        if run is None:
            raise StopIteration
        return run

    def next_back(self) -> Optional[KeyStr[T]]:
        """Take the last remaining run, or return ``None`` if there is none."""
        return self._take_back()


class RSplitWhile(_TextSplitter[T]):
    """Iterates over runs of characters mapped to the same key, from the back.

    ``next_back`` takes runs from the front, returning ``None`` once the
    text is used up.
    """

    def __init__(self, text: str, mapper: Callable[[str], T]) -> None:
        super().__init__(text, mapper)

    def __iter__(self) -> RSplitWhile[T]:
        return self

    def __next__(self) -> KeyStr[T]:
        run = self._take_back()
        if run is None:
            raise StopIteration
        return run

    def next_back(self) -> Optional[KeyStr[T]]:
        """Take the first remaining run, or return ``None`` if there is none."""
        return self._take_front()


def split_while(text: str, mapper: Callable[[str], T]) -> SplitWhile[T]:
    """Split ``text`` into runs whose characters ``mapper`` maps to equal keys."""
    return SplitWhile(text, mapper)


def rsplit_while(text: str, mapper: Callable[[str], T]) -> RSplitWhile[T]:
    """Like :func:`split_while`, yielding the runs from last to first."""
    return RSplitWhile(text, mapper)