"""Small helpers for chaining operations on any value."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def eq_id(value: object, other: object) -> bool:
    """Whether ``value`` and ``other`` are the very same object."""
    return value is other


def piped(value: T, func: Callable[[T], U]) -> U:
    """Apply ``func`` to ``value`` and return the result."""
    return func(value)


def mutated(value: T, func: Callable[[T], Any]) -> T:
    """Let ``func`` mutate ``value`` in place, then return ``value``."""
    func(value)
    return value


def observe(value: T, func: Callable[[T], Any]) -> T:
    """Call ``func`` with ``value`` and return ``value`` unchanged."""
    func(value)
    return value


def drop_(value: object) -> None:
    """Discard ``value``."""
    return None


class Chain(Generic[T]):
    """Wraps a value so that functions can be applied in a method chain."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def piped(self, func: Callable[[T], U]) -> Chain[U]:
        """Apply ``func`` to the value and wrap the result."""
        return Chain(func(self.value))

    def mutated(self, func: Callable[[T], Any]) -> Chain[T]:
        """Let ``func`` mutate the value in place, keeping the chain."""
        func(self.value)
        return self

    def observe(self, func: Callable[[T], Any]) -> Chain[T]:
        """Call ``func`` with the value, keeping the chain unchanged."""
        func(self.value)
        return self

    def eq_id(self, other: object) -> bool:
        """Whether the wrapped value is the very same object as ``other``."""
        if isinstance(other, Chain):
            other = other.value
        return self.value is other

    def __repr__(self) -> str:
        return f"Chain({self.value!r})"