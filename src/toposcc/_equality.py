"""Injectable equality for graph elements.

The engine never compares elements directly. Instead it maps every element to
a hashable key and uses that key for all of its bookkeeping, so callers can
decide what "the same element" means without subclassing their types.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Equality[T](Protocol):
    """Equality capability over elements of type T.

    Implementations must be consistent: equal elements must have equal hashes.
    """

    def equals(self, left: T, right: T) -> bool:
        """Return True if the two elements are the same element."""
        ...

    def hash(self, value: T) -> int:
        """Return a hash consistent with `equals`."""
        ...


class NaturalEquality:
    """Compare elements with `==` and `hash()`."""

    __slots__ = ()

    def equals(self, left: object, right: object) -> bool:
        return left == right

    def hash(self, value: object) -> int:
        return hash(value)

    def __repr__(self) -> str:
        return "NaturalEquality()"


@dataclass(frozen=True, slots=True)
class KeyEquality[T]:
    """Compare elements by a derived key.

    Example:
        >>> eq = KeyEquality(str.lower)
        >>> eq.equals("Build", "build")
        True

    """

    key: Callable[[T], Hashable]

    def equals(self, left: T, right: T) -> bool:
        return self.key(left) == self.key(right)

    def hash(self, value: T) -> int:
        return hash(self.key(value))


@dataclass(frozen=True, slots=True, eq=False)
class _EqualityKey[T]:
    """Dictionary key delegating equality and hashing to an Equality."""

    value: T
    equality: Equality[T]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _EqualityKey):
            return NotImplemented
        return self.equality.equals(self.value, other.value)

    def __hash__(self) -> int:
        return self.equality.hash(self.value)


def _natural_key(value: Hashable) -> Hashable:
    return value


def vertex_key[T](equality: Equality[T] | None = None) -> Callable[[T], Hashable]:
    """Return the function mapping an element to its internal dictionary key.

    Args:
        equality: Equality capability. None means natural equality.

    Returns:
        A function such that two elements get equal keys exactly when the
        capability considers them equal.

    """
    if equality is None or isinstance(equality, NaturalEquality):
        return _natural_key
    if isinstance(equality, KeyEquality):
        return equality.key

    def wrap(value: T) -> Hashable:
        return _EqualityKey(value, equality)

    return wrap
