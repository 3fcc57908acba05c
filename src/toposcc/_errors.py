"""Error types raised by toposcc."""

from collections.abc import Sequence


class ToposccError(Exception):
    """Base class for all toposcc errors."""


class InvalidArgumentError(ToposccError, ValueError):
    """Raised when a required input is missing or malformed.

    Always raised before any computation starts.
    """


class CycleDetectedError(ToposccError, ValueError):
    """Raised when a total order is requested for a graph containing cycles.

    A self-looping element is reported as a one-element component.

    Attributes:
        components: Every offending component, in component sequence order.

    """

    def __init__(self, components: Sequence[Sequence[object]]) -> None:
        self.components = [list(component) for component in components]
        rendered = ", ".join(
            "[" + ", ".join(repr(member) for member in component) + "]" for component in self.components
        )
        super().__init__(f"Cycle found while trying to topologically order the collection: {rendered}")

    @property
    def component(self) -> list[object]:
        """The first offending component."""
        return self.components[0]


class DecompositionCancelledError(ToposccError):
    """Raised when the cancellation hook asks the traversal to stop."""
