"""Graph description files for the command line tool.

A graph file is a TOML document listing vertices and (before, after) edges:

    vertices = ["a", "b", "c"]
    edges = [["a", "b"], ["b", "c"]]
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Raised when a graph file cannot be read or does not validate."""


class GraphDocument(BaseModel):
    """Validated contents of a graph file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    vertices: list[str] = []
    edges: list[tuple[str, str]] = []

    def all_vertices(self) -> list[str]:
        """Return the listed vertices followed by any edge endpoints not listed.

        Endpoints are appended in order of first appearance.
        """
        result = list(self.vertices)
        seen = set(result)
        for edge in self.edges:
            for endpoint in edge:
                if endpoint not in seen:
                    seen.add(endpoint)
                    result.append(endpoint)
        return result


def load_graph_file(path: Path | str) -> GraphDocument:
    """Load and validate a graph file.

    Args:
        path: Path to the TOML graph file.

    Returns:
        The validated GraphDocument.

    Raises:
        GraphFileError: If the file is missing, is not valid TOML, or does not
            match the expected shape.

    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {path}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise GraphFileError(msg) from e

    try:
        document = GraphDocument.model_validate(contents)
    except ValidationError as e:
        msg = f"Invalid graph file {path}:\n{e}"
        raise GraphFileError(msg) from e

    logger.debug(f"Loaded graph with {len(document.vertices)} vertices and {len(document.edges)} edges from {path}")
    return document
