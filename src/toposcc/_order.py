"""Flatten a component sequence into a total order."""

import logging
from collections.abc import Sequence

from ._errors import CycleDetectedError
from ._graph import EdgeIndex

logger = logging.getLogger(__name__)


def is_cyclic[T](component: Sequence[T], index: EdgeIndex[T]) -> bool:
    """Check whether a component represents a cycle.

    A component of several elements is always a cycle. A single element is a
    cycle only when it has an edge to itself, which the partition alone cannot
    tell apart from an ordinary singleton.
    """
    return len(component) > 1 or index.has_self_loop(component[0])


def extract_order[T](components: Sequence[Sequence[T]], index: EdgeIndex[T]) -> list[T]:
    """Turn a component sequence into a total order.

    Args:
        components: Components as returned by `strongly_connected_components`.
        index: The edge index the components were computed from.

    Returns:
        The sole element of every component, in component order.

    Raises:
        CycleDetectedError: If any component is a cycle. Carries all of them.

    """
    cycles = [component for component in components if is_cyclic(component, index)]
    if cycles:
        logger.debug(f"Refusing to order: {len(cycles)} cyclic components")
        raise CycleDetectedError(cycles)
    return [component[0] for component in components]
