"""Configuration loading.

Looks for configuration from the given directory upwards:

1. ``.monoreleaser.toml`` (top-level keys)
2. ``pyproject.toml`` with a ``[tool.monoreleaser]`` table

The first file found wins. Without any file, defaults are used.
Environment variables with the ``MR_`` prefix override file values.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from monoreleaser.config.models import MonoreleaserConfig
from monoreleaser.exceptions import ConfigNotFoundError, ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".monoreleaser.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_SECTION = "monoreleaser"
ENV_PREFIX = "MR_"


def load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def find_config_file(start: Path | None = None) -> Path:
    """Find the nearest configuration file, searching parent directories.

    A ``pyproject.toml`` only counts if it parses and has a ``[tool.monoreleaser]``
    table.

    Raises:
        ConfigNotFoundError: If no configuration file is found
    """
    current = (start or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        config_file = directory / CONFIG_FILENAME
        if config_file.is_file():
            return config_file

        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_section(pyproject):
            return pyproject

    raise ConfigNotFoundError(
        f"No {CONFIG_FILENAME} or [tool.{TOOL_SECTION}] in {PYPROJECT_FILENAME} found "
        f"from {current}"
    )


def _has_tool_section(pyproject: Path) -> bool:
    try:
        data = load_toml(pyproject)
    except ConfigValidationError as e:
        logger.debug("Skipping unreadable %s: %s", pyproject, e)
        return False
    return TOOL_SECTION in data.get("tool", {})


def extract_config(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    """Extract the monoreleaser settings from a loaded configuration file."""
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get(TOOL_SECTION, {}))
    return dict(data)


def apply_env_overrides(
    data: dict[str, Any],
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Apply ``MR_*`` environment variables on top of file values.

    Only secrets are read from the environment: ``MR_GITHUB_TOKEN``.
    """
    env = os.environ if environ is None else environ
    token = env.get(f"{ENV_PREFIX}GITHUB_TOKEN")
    if token:
        data = {**data, "github": {**data.get("github", {}), "token": token}}
    return data


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> MonoreleaserConfig:
    """Load configuration for the project at ``path``.

    Args:
        path: Directory to start searching from (default: current directory)
        environ: Environment to read overrides from (default: ``os.environ``)

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    try:
        config_file = find_config_file(path)
    except ConfigNotFoundError:
        logger.debug("No configuration file found, using defaults")
        data: dict[str, Any] = {}
    else:
        logger.debug("Loading configuration from %s", config_file)
        data = extract_config(config_file, load_toml(config_file))

    data = apply_env_overrides(data, environ)

    try:
        return MonoreleaserConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e
