"""Graph module providing predecessor indexes and component algorithms.

This module contains:
- PairEdgeIndex / PredicateEdgeIndex: predecessor lookups over the two edge forms
- strongly_connected_components: path-based and Tarjan decompositions
"""

from ._algorithms import (
    CancelCheck,
    SccAlgorithm,
    path_based_components,
    strongly_connected_components,
    tarjan_components,
)
from ._edge_index import ComesBefore, EdgeIndex, PairEdgeIndex, PredicateEdgeIndex, flip

__all__ = [
    "CancelCheck",
    "ComesBefore",
    "EdgeIndex",
    "PairEdgeIndex",
    "PredicateEdgeIndex",
    "SccAlgorithm",
    "flip",
    "path_based_components",
    "strongly_connected_components",
    "tarjan_components",
]
