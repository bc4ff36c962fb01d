"""Splitting a sequence into runs of elements that map to the same key."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Callable, Generic, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_MISSING = object()


@dataclass(order=True)
class KeySlice(Generic[T, U]):
    """A run of elements together with the key all of them were mapped to."""

    slice: Sequence[T]
    key: U

    def into_pair(self) -> Tuple[U, Sequence[T]]:
        """Return ``(key, slice)``."""
        return (self.key, self.slice)


class _KeyedSplitter(Generic[T, U]):
    """Shared state for splitting a sequence from either end."""

    def __init__(self, seq: Sequence[T], mapper: Callable[[T], U]) -> None:
        self._seq = seq
        self._mapper = mapper
        self._lo = 0
        self._hi = len(seq)
        if seq:
            self._last_left: object = mapper(seq[0])
            self._last_right: object = mapper(seq[-1])
        else:
            self._last_left = _MISSING
            self._last_right = _MISSING

    def _take_front(self) -> Optional[KeySlice[T, U]]:
        last = self._last_left
        if last is _MISSING or self._lo >= self._hi:
            return None
        following = last
        end = self._hi
        for index, item in enumerate(islice(self._seq, self._lo, self._hi), self._lo):
            following = self._mapper(item)
            if following != last:
                end = index
                break
        run = self._seq[self._lo:end]
        self._lo = end
        self._last_left = following
        return KeySlice(slice=run, key=last)

    def _take_back(self) -> Optional[KeySlice[T, U]]:
        last = self._last_right
        if last is _MISSING or self._lo >= self._hi:
            return None
        following = last
        left = self._lo
        remaining = self._seq[self._lo:self._hi]
        for distance, item in enumerate(reversed(remaining)):
            following = self._mapper(item)
            if following != last:
                left = self._hi - distance
                break
        run = self._seq[left:self._hi]
        self._hi = left
        self._last_right = following
        return KeySlice(slice=run, key=last)

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Return the lower and upper bounds on the number of runs left."""
        remaining = self._hi - self._lo
        return (1 if remaining else 0, remaining)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._seq[self._lo:self._hi]!r})"


class SplitSliceWhile(_KeyedSplitter[T, U]):
    """Iterates over runs of elements mapped to the same key, from the front.

    ``next_back`` takes runs from the other end, returning ``None`` once the
    sequence is used up.
    """

    def __init__(self, seq: Sequence[T], mapper: Callable[[T], U]) -> None:
        super().__init__(seq, mapper)

    def __iter__(self) -> SplitSliceWhile[T, U]:
        return self

    def __next__(self) -> KeySlice[T, U]:
        run = self._take_front()
        if run is None:
            raise StopIteration
        return run

    def next_back(self) -> Optional[KeySlice[T, U]]:
        """Take the last remaining run, or return ``None`` if there is none."""
        return self._take_back()

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Return the lower and upper bounds on the number of runs left."""
        return super().size_hint()


class RSplitSliceWhile(_KeyedSplitter[T, U]):
    """Iterates over runs of elements mapped to the same key, from the back.

    ``next_back`` takes runs from the front, returning ``None`` once the
    sequence is used up.
    """

    def __init__(self, seq: Sequence[T], mapper: Callable[[T], U]) -> None:
        super().__init__(seq, mapper)

    def __iter__(self) -> RSplitSliceWhile[T, U]:
        return self

    def __next__(self) -> KeySlice[T, U]:
        run = self._take_back()
        if run is None:
            raise StopIteration
        return run

    def next_back(self) -> Optional[KeySlice[T, U]]:
        """Take the first remaining run, or return ``None`` if there is none."""
        return self._take_front()

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Return the lower and upper bounds on the number of runs left."""
        return super().size_hint()


def split_while(seq: Sequence[T], mapper: Callable[[T], U]) -> SplitSliceWhile[T, U]:
    """Split ``seq`` into runs whose elements ``mapper`` maps to equal keys."""
    return SplitSliceWhile(seq, mapper)


def rsplit_while(seq: Sequence[T], mapper: Callable[[T], U]) -> RSplitSliceWhile[T, U]:
    """Like :func:`split_while`, yielding the runs from last to first."""
    return RSplitSliceWhile(seq, mapper)