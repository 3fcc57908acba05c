"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from toposcc._errors import InvalidArgumentError
from toposcc._graph import SccAlgorithm


class ConfigError(Exception):
    """Error in toposcc configuration."""


@dataclass(slots=True, frozen=True)
class ToposccConfig:
    """Configuration loaded from the [tool.toposcc] section of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    algorithm: SccAlgorithm = SccAlgorithm.PATH_BASED
    descending: bool = False
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_graph_path(value: object, project_root: Path) -> Path:
    if not isinstance(value, str):
        msg = "Invalid [tool.toposcc].graph: expected string path"
        raise ConfigError(msg)
    graph_path = Path(value)
    if not graph_path.is_absolute():
        graph_path = project_root / graph_path
    return graph_path


def _parse_algorithm(value: object) -> SccAlgorithm:
    if not isinstance(value, str):
        msg = "Invalid [tool.toposcc].algorithm: expected string"
        raise ConfigError(msg)
    try:
        return SccAlgorithm.parse(value)
    except InvalidArgumentError as e:
        msg = f"Invalid [tool.toposcc].algorithm: {e}"
        raise ConfigError(msg) from e


def load_config(pyproject_path: Path) -> ToposccConfig:
    """Load and validate [tool.toposcc] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed ToposccConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("toposcc", {})
    if not section:
        return ToposccConfig(project_root=project_root)

    unknown = sorted(set(section) - {"graph", "algorithm", "descending"})
    if unknown:
        msg = f"Unknown [tool.toposcc] keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    graph_path: Path | None = None
    if "graph" in section:
        graph_path = _parse_graph_path(section["graph"], project_root)

    algorithm = SccAlgorithm.PATH_BASED
    if "algorithm" in section:
        algorithm = _parse_algorithm(section["algorithm"])

    descending = section.get("descending", False)
    if not isinstance(descending, bool):
        msg = "Invalid [tool.toposcc].descending: expected boolean"
        raise ConfigError(msg)

    return ToposccConfig(
        graph=graph_path,
        algorithm=algorithm,
        descending=descending,
        project_root=project_root,
    )


def get_config() -> ToposccConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        ToposccConfig (defaults if no pyproject.toml or no [tool.toposcc] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return ToposccConfig()
    return load_config(pyproject_path)
