"""Strongly connected component algorithms.

Both algorithms walk the graph depth-first along predecessor edges, visiting
vertices in the order they are supplied and predecessors in the order the edge
index returns them. A component is emitted as soon as its root finishes, so
every component comes after the components of its predecessors.

The traversal keeps an explicit stack of frames instead of recursing, so the
depth of the graph is limited by memory rather than by the interpreter's
recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from enum import StrEnum
from typing import Self

from toposcc._errors import DecompositionCancelledError, InvalidArgumentError

from ._edge_index import EdgeIndex

logger = logging.getLogger(__name__)

type CancelCheck = Callable[[], bool]
type _Frame[T] = tuple[Hashable, Iterator[T]]


class SccAlgorithm(StrEnum):
    """Available strongly connected component algorithms."""

    def __new__(cls, value: str, doc: str = "") -> Self:
        member = str.__new__(cls, value)
        member._value_ = value
        member.__doc__ = doc
        return member

    PATH_BASED = "path-based", "Gabow's path-based algorithm with a stack of potential roots"
    TARJAN = "tarjan", "Tarjan's algorithm with per-vertex low-link values"

    @classmethod
    def parse(cls, value: str | SccAlgorithm) -> SccAlgorithm:
        """Look up an algorithm by name.

        Raises:
            InvalidArgumentError: If no algorithm has that name.

        """
        try:
            return cls(value)
        except ValueError as e:
            names = ", ".join(member.value for member in cls)
            msg = f"Unknown algorithm {value!r}. Expected one of: {names}"
            raise InvalidArgumentError(msg) from e


def _check_cancel(cancel: CancelCheck | None) -> None:
    if cancel is not None and cancel():
        msg = "Strongly connected component search was cancelled"
        raise DecompositionCancelledError(msg)


def path_based_components[T](
    vertices: Iterable[T],
    index: EdgeIndex[T],
    key: Callable[[T], Hashable],
    cancel: CancelCheck | None = None,
) -> list[list[T]]:
    """Compute strongly connected components with the path-based algorithm.

    Args:
        vertices: Vertices in visiting order.
        index: Predecessor lookup.
        key: Function mapping an element to its dictionary key.
        cancel: Optional hook checked at every vertex visit.

    Returns:
        Components in finishing order. For every edge u -> v across two
        components, u's component comes first.

    Raises:
        DecompositionCancelledError: If `cancel` returned True.

    """
    preorder: dict[Hashable, int] = {}
    assigned: set[Hashable] = set()
    # S: visited vertices not yet assigned to a component
    pending: list[tuple[T, Hashable]] = []
    # P: potential roots of the component being discovered
    roots: list[Hashable] = []
    frames: list[_Frame[T]] = []
    components: list[list[T]] = []

    def enter(vertex: T, vertex_key: Hashable) -> None:
        _check_cancel(cancel)
        preorder[vertex_key] = len(preorder)
        pending.append((vertex, vertex_key))
        roots.append(vertex_key)
        frames.append((vertex_key, iter(index.predecessors(vertex))))

    for start in vertices:
        start_key = key(start)
        if start_key in preorder:
            continue
        enter(start, start_key)

        while frames:
            vertex_key, remaining = frames[-1]
            for predecessor in remaining:
                predecessor_key = key(predecessor)
                if predecessor_key not in preorder:
                    enter(predecessor, predecessor_key)
                    break
                if predecessor_key not in assigned:
                    bound = preorder[predecessor_key]
                    while preorder[roots[-1]] > bound:
                        roots.pop()
            else:
                frames.pop()
                if roots[-1] != vertex_key:
                    continue
                roots.pop()
                component: list[T] = []
                while True:
                    member, member_key = pending.pop()
                    assigned.add(member_key)
                    component.append(member)
                    if member_key == vertex_key:
                        break
                components.append(component)

    return components


def tarjan_components[T](
    vertices: Iterable[T],
    index: EdgeIndex[T],
    key: Callable[[T], Hashable],
    cancel: CancelCheck | None = None,
) -> list[list[T]]:
    """Compute strongly connected components with Tarjan's algorithm.

    Produces exactly the same output as `path_based_components`.
    """
    indices: dict[Hashable, int] = {}
    lowlink: dict[Hashable, int] = {}
    stack: list[tuple[T, Hashable]] = []
    on_stack: set[Hashable] = set()
    frames: list[_Frame[T]] = []
    components: list[list[T]] = []

    def enter(vertex: T, vertex_key: Hashable) -> None:
        _check_cancel(cancel)
        indices[vertex_key] = lowlink[vertex_key] = len(indices)
        stack.append((vertex, vertex_key))
        on_stack.add(vertex_key)
        frames.append((vertex_key, iter(index.predecessors(vertex))))

    for start in vertices:
        start_key = key(start)
        if start_key in indices:
            continue
        enter(start, start_key)

        while frames:
            vertex_key, remaining = frames[-1]
            for predecessor in remaining:
                predecessor_key = key(predecessor)
                if predecessor_key not in indices:
                    enter(predecessor, predecessor_key)
                    break
                if predecessor_key in on_stack:
                    lowlink[vertex_key] = min(lowlink[vertex_key], indices[predecessor_key])
            else:
                frames.pop()
                if frames:
                    parent_key = frames[-1][0]
                    lowlink[parent_key] = min(lowlink[parent_key], lowlink[vertex_key])
                if lowlink[vertex_key] != indices[vertex_key]:
                    continue
                component: list[T] = []
                while True:
                    member, member_key = stack.pop()
                    on_stack.discard(member_key)
                    component.append(member)
                    if member_key == vertex_key:
                        break
                components.append(component)

    return components


_ALGORITHMS = {
    SccAlgorithm.PATH_BASED: path_based_components,
    SccAlgorithm.TARJAN: tarjan_components,
}


def strongly_connected_components[T](
    vertices: Iterable[T],
    index: EdgeIndex[T],
    key: Callable[[T], Hashable],
    *,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[list[T]]:
    """Partition vertices into strongly connected components.

    Args:
        vertices: Vertices in visiting order. Duplicates are visited once.
        index: Predecessor lookup.
        key: Function mapping an element to its dictionary key.
        algorithm: Which algorithm to run. Both give identical results.
        cancel: Optional hook checked at every vertex visit.

    Returns:
        Components ordered so that predecessors' components come first.

    Example:
        >>> from toposcc._graph import PairEdgeIndex
        >>> index = PairEdgeIndex.from_pairs([("a", "b"), ("b", "a"), ("b", "c")], key=str)
        >>> strongly_connected_components("abc", index, key=str)
        [['b', 'a'], ['c']]

    """
    run = _ALGORITHMS[SccAlgorithm.parse(algorithm)]
    components = run(vertices, index, key, cancel)
    logger.debug(f"Found {len(components)} strongly connected components")
    return components
