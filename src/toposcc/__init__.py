"""Strongly connected components and topological ordering."""

__all__ = [
    "CancelCheck",
    "ComesBefore",
    "CycleDetectedError",
    "DecompositionCancelledError",
    "EdgeIndex",
    "Equality",
    "InvalidArgumentError",
    "KeyEquality",
    "NaturalEquality",
    "PairEdgeIndex",
    "PredicateEdgeIndex",
    "SccAlgorithm",
    "ToposccError",
    "decompose",
    "decompose_by",
    "decompose_by_desc",
    "decompose_desc",
    "extract_order",
    "order",
    "order_by",
    "order_by_desc",
    "order_desc",
    "strongly_connected_components",
    "vertex_key",
]

from ._api import (
    decompose,
    decompose_by,
    decompose_by_desc,
    decompose_desc,
    order,
    order_by,
    order_by_desc,
    order_desc,
)
from ._equality import Equality, KeyEquality, NaturalEquality, vertex_key
from ._errors import CycleDetectedError, DecompositionCancelledError, InvalidArgumentError, ToposccError
from ._graph import (
    CancelCheck,
    ComesBefore,
    EdgeIndex,
    PairEdgeIndex,
    PredicateEdgeIndex,
    SccAlgorithm,
    strongly_connected_components,
)
from ._order import extract_order
