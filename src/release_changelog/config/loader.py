"""Loading configuration from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_changelog.config.models import ReleaseChangelogConfig
from release_changelog.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_NAME = "release-changelog"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in start or any of its parents.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    current = (start or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and decode a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigValidationError: If the file isn't valid UTF-8 TOML or can't be read
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigValidationError(f"Could not read {path}: {e}") from e


def extract_release_changelog_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the [tool.release-changelog] table, or {} if absent."""
    return pyproject.get("tool", {}).get(TOOL_NAME, {})


def resolve_pyproject_path(path: Path | None = None) -> Path:
    """Accept a pyproject.toml path, a directory to search from, or None."""
    if path is None:
        return find_pyproject_toml()
    if path.is_dir():
        return find_pyproject_toml(path)
    return path


def load_config(path: Path | None = None) -> ReleaseChangelogConfig:
    """Load configuration for the project at path.

    Args:
        path: Project directory or pyproject.toml path

    Returns:
        Validated configuration

    Raises:
        ConfigNotFoundError: If pyproject.toml cannot be found
        ConfigValidationError: If the configuration is invalid
    """
    pyproject_path = resolve_pyproject_path(path)
    data = extract_release_changelog_config(load_pyproject_toml(pyproject_path))

    try:
        config = ReleaseChangelogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid [tool.{TOOL_NAME}] configuration in {pyproject_path}:\n{e}"
        ) from e

    logger.debug("Loaded configuration from %s", pyproject_path)
    return config
