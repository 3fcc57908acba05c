"""Predecessor lookups built from pair lists or precedence predicates."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from toposcc._errors import InvalidArgumentError

logger = logging.getLogger(__name__)

type ComesBefore[T] = Callable[[T, T], bool]


class EdgeIndex[T](Protocol):
    """Lookup answering "which elements must come before this one?"."""

    def predecessors(self, vertex: T) -> Sequence[T]:
        """Return every u with an edge u -> vertex."""
        ...

    def has_self_loop(self, vertex: T) -> bool:
        """Return True if there is an edge vertex -> vertex."""
        ...


@dataclass(frozen=True, slots=True)
class PairEdgeIndex[T]:
    """Edge index over an explicit list of (before, after) pairs.

    Attributes:
        _predecessors: Mapping from target key to its predecessors, in the order
            the pairs were supplied.
        _self_loops: Keys of elements with a (v, v) pair.
        _key: Function mapping an element to its dictionary key.

    """

    _predecessors: dict[Hashable, list[T]]
    _self_loops: frozenset[Hashable]
    _key: Callable[[T], Hashable]

    @classmethod
    def from_pairs(
        cls,
        edges: Iterable[tuple[T, T]],
        key: Callable[[T], Hashable],
        *,
        reverse: bool = False,
    ) -> PairEdgeIndex[T]:
        """Group pairs by their target in a single pass.

        An edge (a, b) means "a must come before b". With `reverse`, the two
        components of every pair swap roles, which yields the descending index.

        Args:
            edges: Iterable of (before, after) pairs.
            key: Function mapping an element to its dictionary key.
            reverse: Index (b, a) instead of (a, b).

        Returns:
            A new PairEdgeIndex.

        Raises:
            InvalidArgumentError: If an item is not a two-item pair.

        Example:
            >>> index = PairEdgeIndex.from_pairs([("a", "b"), ("c", "b")], key=str)
            >>> index.predecessors("b")
            ['a', 'c']

        """
        predecessors: defaultdict[Hashable, list[T]] = defaultdict(list)
        self_loops: set[Hashable] = set()
        count = 0

        for item in edges:
            try:
                before, after = item
            except (TypeError, ValueError) as e:
                msg = f"Edge {item!r} is not a (before, after) pair"
                raise InvalidArgumentError(msg) from e
            if reverse:
                before, after = after, before

            after_key = key(after)
            predecessors[after_key].append(before)
            if key(before) == after_key:
                self_loops.add(after_key)
            count += 1

        logger.debug(f"Indexed {count} edges over {len(predecessors)} targets")
        return cls(_predecessors=dict(predecessors), _self_loops=frozenset(self_loops), _key=key)

    def predecessors(self, vertex: T) -> Sequence[T]:
        return self._predecessors.get(self._key(vertex), [])

    def has_self_loop(self, vertex: T) -> bool:
        return self._key(vertex) in self._self_loops


@dataclass(frozen=True, slots=True)
class PredicateEdgeIndex[T]:
    """Edge index over a pairwise precedence predicate.

    No index can be precomputed from an opaque predicate, so every lookup scans
    the whole vertex sequence. Lookups are not cached.
    """

    vertices: Sequence[T]
    comes_before: ComesBefore[T]

    def predecessors(self, vertex: T) -> Sequence[T]:
        return [candidate for candidate in self.vertices if self.comes_before(candidate, vertex)]

    def has_self_loop(self, vertex: T) -> bool:
        return bool(self.comes_before(vertex, vertex))


def flip[T](comes_before: ComesBefore[T]) -> ComesBefore[T]:
    """Swap the argument order of a precedence predicate."""

    def flipped(left: T, right: T) -> bool:
        return comes_before(right, left)

    return flipped
