import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from toposcc._api import decompose, decompose_desc, order, order_desc
from toposcc._equality import vertex_key
from toposcc._errors import CycleDetectedError
from toposcc._graph import PairEdgeIndex, SccAlgorithm
from toposcc._order import is_cyclic

from .config import ConfigError, ToposccConfig, get_config
from .graph_file import GraphDocument, GraphFileError, load_graph_file
from .render import render_components, render_cycles, render_order

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a TOML graph file. Defaults to the graph configured in pyproject.toml"),
]
DescOption = Annotated[
    bool | None,
    typer.Option(
        "--desc/--asc",
        help="Order against the edges (--desc) or along them (--asc). Defaults to the configured direction",
    ),
]
AlgorithmOption = Annotated[
    SccAlgorithm | None,
    typer.Option("--algorithm", "-a", help="Strongly connected component algorithm"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Toposcc CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> ToposccConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e


def _load_graph(graph: Path | None, config: ToposccConfig) -> GraphDocument:
    """Load the graph file given on the command line, or the configured one."""
    if graph is None:
        graph = config.graph
    if graph is None:
        err_console.print(f"[red]✗ No graph file given and no {escape('[tool.toposcc]')}.graph configured[/red]")
        raise typer.Exit(code=2)

    err_console.print(f"[cyan]Loading graph from:[/cyan] {escape(str(graph))}")
    try:
        return load_graph_file(graph)
    except GraphFileError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e


@app.command()
def components(
    graph: GraphArgument = None,
    *,
    desc: DescOption = None,
    algorithm: AlgorithmOption = None,
) -> None:
    """Print the strongly connected components of a graph."""
    config = _load_config()
    document = _load_graph(graph, config)
    descending = config.descending if desc is None else desc
    chosen = algorithm or config.algorithm
    logger.debug(f"Decomposing with algorithm={chosen}, descending={descending}")

    connect = decompose_desc if descending else decompose
    result = connect(document.all_vertices(), document.edges, algorithm=chosen)

    index = PairEdgeIndex.from_pairs(document.edges, vertex_key(), reverse=descending)
    cyclic = [is_cyclic(members, index) for members in result]
    render_components(result, cyclic, out_console)


@app.command(name="order")
def order_command(
    graph: GraphArgument = None,
    *,
    desc: DescOption = None,
    algorithm: AlgorithmOption = None,
) -> None:
    """Print a topological order of a graph, or the cycles preventing one."""
    config = _load_config()
    document = _load_graph(graph, config)
    descending = config.descending if desc is None else desc
    chosen = algorithm or config.algorithm
    logger.debug(f"Ordering with algorithm={chosen}, descending={descending}")

    sort = order_desc if descending else order
    try:
        ordered = sort(document.all_vertices(), document.edges, algorithm=chosen)
    except CycleDetectedError as e:
        render_cycles(e.components, err_console)
        raise typer.Exit(code=1) from e

    render_order(ordered, out_console)


if __name__ == "__main__":
    app()
