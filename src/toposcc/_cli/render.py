"""Rich rendering utilities for the command line tool."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console


def _format_members(members: Sequence[str]) -> str:
    return ", ".join(escape(member) for member in members)


def render_components(components: Sequence[Sequence[str]], cyclic: Sequence[bool], console: Console) -> None:
    """Render a component sequence as a Rich table.

    Args:
        components: Components in sequence order.
        cyclic: For each component, whether it is a cycle.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Members")
    table.add_column("Size", justify="right")
    table.add_column("Cycle")

    for position, (members, is_cycle) in enumerate(zip(components, cyclic, strict=True), start=1):
        table.add_row(
            str(position),
            _format_members(members),
            str(len(members)),
            "[red]yes[/red]" if is_cycle else "[green]no[/green]",
        )

    console.print(table)
    n_cycles = sum(cyclic)
    console.print(f"\n[dim]Total: {len(components)} components, {n_cycles} cyclic[/dim]")


def render_order(ordered: Sequence[str], console: Console) -> None:
    """Render a total order, one element per line.

    Args:
        ordered: Elements in order.
        console: Rich Console to output to.

    """
    for element in ordered:
        console.print(escape(element), highlight=False)


def render_cycles(cycles: Sequence[Sequence[object]], console: Console) -> None:
    """Render the offending components of a failed ordering.

    Args:
        cycles: Offending components.
        console: Rich Console to output to.

    """
    console.print("[red]✗ Cycle detected, no topological order exists:[/red]")
    for members in cycles:
        console.print(f"  [red]•[/red] {_format_members([str(member) for member in members])}")
