"""Position-aware views over sequences.

A :class:`SliceView` is a window onto a base sequence. Two views are in the
same memory only if they look at the same base object. This makes it possible
to ask whether one view lies inside another and at what offset, even when
their contents are equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Generic, Iterator, List, Optional, Sequence, TypeVar, Union, overload

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class ElementRef(Generic[T]):
    """A position inside a base sequence, like a pointer to an element.

    The index is not bounds checked; it may point past the end of the base.
    Two references are equal when they share the same base object and index.
    """

    base: Sequence[T]
    index: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementRef):
            return NotImplemented
        return self.base is other.base and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.base), self.index))

    def __repr__(self) -> str:
        return f"ElementRef(<{type(self.base).__name__} at {id(self.base):#x}>, {self.index})"


class SliceView(Generic[T]):
    """A view of ``base[start:stop]`` that remembers where it came from."""

    __slots__ = ("base", "start", "stop")

    def __init__(self, base: Sequence[T], start: int = 0, stop: Optional[int] = None) -> None:
        if isinstance(base, SliceView):
            outer = base
            base = outer.base
            start += outer.start
            stop = outer.stop if stop is None else stop + outer.start
            limit = outer.stop
        else:
            limit = len(base)
        if stop is None:
            stop = limit
        if not 0 <= start <= stop <= limit:
            raise IndexError(f"range {start}..{stop} out of bounds for length {limit}")
        self.base: Sequence[T] = base
        self.start: int = start
        self.stop: int = stop

    def __len__(self) -> int:
        return self.stop - self.start

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> SliceView[T]: ...

    def __getitem__(self, key: Union[int, slice]) -> Union[T, SliceView[T]]:
        length = len(self)
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("slice views only support a step of 1")
            lo = 0 if key.start is None else key.start
            hi = length if key.stop is None else key.stop
            if lo < 0:
                lo += length
            if hi < 0:
                hi += length
            if not 0 <= lo <= hi <= length:
                raise IndexError(f"range {key.start}..{key.stop} out of bounds for length {length}")
            return SliceView(self.base, self.start + lo, self.start + hi)
        index = key + length if key < 0 else key
        if not 0 <= index < length:
            raise IndexError(f"index {key} out of range for length {length}")
        return self.base[self.start + index]

    def __iter__(self) -> Iterator[T]:
        return islice(self.base, self.start, self.stop)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SliceView):
            return self.to_list() == other.to_list()
        if isinstance(other, Sequence):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SliceView({self.to_list()!r}, start={self.start}, stop={self.stop})"

    def ref(self, index: int) -> ElementRef[T]:
        """Return a reference to the position ``index`` elements after the start.

        No bounds check is done, so positions past the end can be named.
        """
        return ElementRef(self.base, self.start + index)

    def to_list(self) -> List[T]:
        """Copy the viewed elements into a list."""
        return list(self)

    def _same_base(self, other: Any) -> bool:
        return self.base is other.base

    def contains_slice(self, other: SliceView[T]) -> bool:
        """Whether ``other`` lies fully inside this view.

        An empty view is never contained in any other view.
        """
        if len(other) == 0:
            return False
        return (
            self._same_base(other)
            and self.start <= other.start
            and other.stop <= self.stop
        )

    def is_slice(self, other: SliceView[T]) -> bool:
        """Whether ``other`` is exactly this view: same base, start and length."""
        return (
            self._same_base(other)
            and self.start == other.start
            and len(self) == len(other)
        )

    def _offset_to(self, position: int, base: Sequence[T]) -> int:
        if base is not self.base:
            return len(self)
        offset = position - self.start
        if offset < 0:
            return len(self)
        return min(len(self), offset)

    def offset_of_slice(self, other: SliceView[T]) -> int:
        """The index at which ``other`` starts, or ``len(self)`` if it is outside."""
        return self._offset_to(other.start, other.base)

    def get_offset_of_slice(self, other: SliceView[T]) -> Optional[int]:
        """The index at which ``other`` starts.

        Returns ``None`` if ``other`` is empty or not inside this view.
        """
        if self.contains_slice(other):
            return other.start - self.start
        return None

    def index_of(self, other: ElementRef[T]) -> int:
        """The index of the referenced element, or ``len(self)`` if it is outside."""
        if not isinstance(other, ElementRef):
            raise TypeError(f"expected an ElementRef, got {other!r}")
        return self._offset_to(other.index, other.base)

    def get_index_of(self, other: ElementRef[T]) -> Optional[int]:
        """The index of the referenced element, or ``None`` if it is outside."""
        if not isinstance(other, ElementRef):
            raise TypeError(f"expected an ElementRef, got {other!r}")
        if other.base is not self.base:
            return None
        offset = other.index - self.start
        if 0 <= offset < len(self):
            return offset
        return None