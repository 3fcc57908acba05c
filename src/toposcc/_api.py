"""Public entry points.

Every variant reduces to one ascending core: the descending variants flip the
direction of the edges before indexing, and never reverse the result.

An edge (a, b), or `comes_before(a, b) == True`, means "a must come before b".
"""

import logging
from collections.abc import Callable, Hashable, Iterable

from ._equality import Equality, vertex_key
from ._errors import InvalidArgumentError
from ._graph import (
    CancelCheck,
    ComesBefore,
    EdgeIndex,
    PairEdgeIndex,
    PredicateEdgeIndex,
    SccAlgorithm,
    flip,
    strongly_connected_components,
)
from ._order import extract_order

logger = logging.getLogger(__name__)


def _require_vertices[T](vertices: Iterable[T] | None) -> list[T]:
    if vertices is None:
        msg = "vertices must not be None"
        raise InvalidArgumentError(msg)
    return list(vertices)


def _pair_index[T](
    edges: Iterable[tuple[T, T]] | None,
    key: Callable[[T], Hashable],
    *,
    reverse: bool,
) -> PairEdgeIndex[T]:
    if edges is None:
        msg = "edges must not be None"
        raise InvalidArgumentError(msg)
    return PairEdgeIndex.from_pairs(edges, key, reverse=reverse)


def _predicate_index[T](
    vertices: list[T],
    comes_before: ComesBefore[T] | None,
    *,
    reverse: bool,
) -> PredicateEdgeIndex[T]:
    if comes_before is None or not callable(comes_before):
        msg = f"comes_before must be a callable taking two elements, got {comes_before!r}"
        raise InvalidArgumentError(msg)
    return PredicateEdgeIndex(vertices, flip(comes_before) if reverse else comes_before)


def _connect[T](
    vertices: list[T],
    index: EdgeIndex[T],
    key: Callable[[T], Hashable],
    algorithm: SccAlgorithm | str,
    cancel: CancelCheck | None,
) -> list[list[T]]:
    logger.debug(f"Decomposing {len(vertices)} vertices with the {algorithm} algorithm")
    return strongly_connected_components(vertices, index, key, algorithm=algorithm, cancel=cancel)


def _decompose_pairs[T](
    vertices: Iterable[T] | None,
    edges: Iterable[tuple[T, T]] | None,
    *,
    reverse: bool,
    equality: Equality[T] | None,
    algorithm: SccAlgorithm | str,
    cancel: CancelCheck | None,
) -> tuple[list[list[T]], EdgeIndex[T]]:
    vertex_list = _require_vertices(vertices)
    key = vertex_key(equality)
    algorithm = SccAlgorithm.parse(algorithm)
    index = _pair_index(edges, key, reverse=reverse)
    return _connect(vertex_list, index, key, algorithm, cancel), index


def _decompose_predicate[T](
    vertices: Iterable[T] | None,
    comes_before: ComesBefore[T] | None,
    *,
    reverse: bool,
    equality: Equality[T] | None,
    algorithm: SccAlgorithm | str,
    cancel: CancelCheck | None,
) -> tuple[list[list[T]], EdgeIndex[T]]:
    vertex_list = _require_vertices(vertices)
    key = vertex_key(equality)
    algorithm = SccAlgorithm.parse(algorithm)
    index = _predicate_index(vertex_list, comes_before, reverse=reverse)
    return _connect(vertex_list, index, key, algorithm, cancel), index


# =============================================================================
# Pair-list forms
# =============================================================================


def decompose[T](
    vertices: Iterable[T],
    edges: Iterable[tuple[T, T]],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[list[T]]:
    """Partition vertices into strongly connected components.

    Args:
        vertices: Elements to partition, visited in this order.
        edges: Pairs (a, b) meaning "a must come before b".
        equality: Equality capability. Defaults to `==` / `hash()`.
        algorithm: Component algorithm. Both algorithms give identical results.
        cancel: Optional hook checked at every vertex visit.

    Returns:
        Components ordered so that, for every edge (a, b) across two
        components, a's component comes first. Never fails on cycles.

    Raises:
        InvalidArgumentError: If `vertices` or `edges` is missing or malformed.

    Example:
        >>> decompose("abc", [("a", "b"), ("b", "a"), ("b", "c")])
        [['b', 'a'], ['c']]

    """
    components, _ = _decompose_pairs(
        vertices, edges, reverse=False, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return components


def decompose_desc[T](
    vertices: Iterable[T],
    edges: Iterable[tuple[T, T]],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[list[T]]:
    """Like `decompose`, but components are ordered against the edges."""
    components, _ = _decompose_pairs(
        vertices, edges, reverse=True, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return components


def order[T](
    vertices: Iterable[T],
    edges: Iterable[tuple[T, T]],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[T]:
    """Order vertices topologically.

    Returns:
        Every vertex exactly once, with a before b for every edge (a, b).

    Raises:
        InvalidArgumentError: If `vertices` or `edges` is missing or malformed.
        CycleDetectedError: If the edges contain a cycle, including a self-loop.

    Example:
        >>> order("bcade", [("a", "d"), ("a", "b"), ("b", "c"), ("d", "e"), ("c", "d")])
        ['a', 'b', 'c', 'd', 'e']

    """
    components, index = _decompose_pairs(
        vertices, edges, reverse=False, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return extract_order(components, index)


def order_desc[T](
    vertices: Iterable[T],
    edges: Iterable[tuple[T, T]],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[T]:
    """Order vertices so that b comes before a for every edge (a, b)."""
    components, index = _decompose_pairs(
        vertices, edges, reverse=True, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return extract_order(components, index)


# =============================================================================
# Predicate forms
# =============================================================================


def decompose_by[T](
    vertices: Iterable[T],
    comes_before: ComesBefore[T],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[list[T]]:
    """Partition vertices into components using a precedence predicate.

    `comes_before(a, b)` is evaluated for ordered pairs of the supplied vertices,
    including (v, v). Costs O(V^2) predicate calls.
    """
    components, _ = _decompose_predicate(
        vertices, comes_before, reverse=False, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return components


def decompose_by_desc[T](
    vertices: Iterable[T],
    comes_before: ComesBefore[T],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[list[T]]:
    components, _ = _decompose_predicate(
        vertices, comes_before, reverse=True, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return components


def order_by[T](
    vertices: Iterable[T],
    comes_before: ComesBefore[T],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[T]:
    """Order vertices topologically using a precedence predicate.

    Raises:
        InvalidArgumentError: If `vertices` is missing or `comes_before` is not callable.
        CycleDetectedError: If the predicate describes a cycle, including
            `comes_before(v, v)` for some v.

    """
    components, index = _decompose_predicate(
        vertices, comes_before, reverse=False, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return extract_order(components, index)


def order_by_desc[T](
    vertices: Iterable[T],
    comes_before: ComesBefore[T],
    *,
    equality: Equality[T] | None = None,
    algorithm: SccAlgorithm | str = SccAlgorithm.PATH_BASED,
    cancel: CancelCheck | None = None,
) -> list[T]:
    components, index = _decompose_predicate(
        vertices, comes_before, reverse=True, equality=equality, algorithm=algorithm, cancel=cancel
    )
    return extract_order(components, index)
