"""Borrowed/owned storage for tree paths, contents, and entry sequences.

Every string, byte sequence, and child tuple in a tree sits behind a ``Cow``.
``Borrowed`` wraps constant data the caller keeps alive (for example slices of
one embedded blob) without copying; ``Owned`` holds a private copy produced by
a runtime read. Both compare, hash, and order by value.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

_IMMUTABLE_TYPES = (str, bytes, tuple)


def _comparable(value: object) -> object:
    """Return ``value`` in a form that supports ordering."""
    if isinstance(value, memoryview):
        return value.tobytes()
    return value


@total_ordering
class Cow(ABC, Generic[T]):
    """Read-only view over either borrowed or owned data."""

    __slots__ = ("_value",)

    _value: Any

    @property
    def value(self) -> T:
        """Underlying data, regardless of storage mode."""
        return self._value

    @property
    def is_borrowed(self) -> bool:
        return isinstance(self, Borrowed)

    @property
    def is_owned(self) -> bool:
        return isinstance(self, Owned)

    @abstractmethod
    def clone(self) -> Cow[T]:
        """Copy the container, keeping its storage mode."""

    def to_owned(self) -> Owned[T]:
        """Return an ``Owned`` copy of this data."""
        return Owned(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cow):
            other = other._value
        return self._value == other

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Cow):
            other = other._value
        return _comparable(self._value) < _comparable(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({_comparable(self._value)!r})"


class Borrowed(Cow[T]):
    """Reference to immutable data owned elsewhere.

    Cloning copies the reference only. Mutable referents are rejected, since
    the tree relies on nothing changing underneath it after construction.
    """

    __slots__ = ()

    def __init__(self, value: T) -> None:
        if isinstance(value, memoryview):
            if not value.readonly:
                raise TypeError("borrowed memoryview must be read-only")
        elif not isinstance(value, _IMMUTABLE_TYPES):
            raise TypeError(f"cannot borrow mutable {type(value).__name__}")
        self._value = value

    def clone(self) -> Borrowed[T]:
        return Borrowed(self._value)

    def __deepcopy__(self, memo: dict[int, Any]) -> Borrowed[T]:
        return self.clone()


class Owned(Cow[T]):
    """Private copy of the data; cloning makes a deep copy."""

    __slots__ = ()

    def __init__(self, value: Any) -> None:
        if isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        elif isinstance(value, list):
            value = tuple(value)
        elif not isinstance(value, _IMMUTABLE_TYPES):
            raise TypeError(f"cannot own {type(value).__name__}")
        self._value = value

    def clone(self) -> Owned[T]:
        return Owned(copy.deepcopy(self._value))

    def __deepcopy__(self, memo: dict[int, Any]) -> Owned[T]:
        return Owned(copy.deepcopy(self._value, memo))


def borrow(value: Any) -> Cow[Any]:
    """Wrap plain values as ``Borrowed``; pass existing containers through."""
    if isinstance(value, Cow):
        return value
    return Borrowed(value)


__all__ = [
    "Cow",
    "Borrowed",
    "Owned",
    "borrow",
]
