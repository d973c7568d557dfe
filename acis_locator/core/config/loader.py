"""
Configuration loader — reads locator.yml into a LocatorConfig.

The file is optional for a plain lookup: without it every setting takes
its default and the CLI options fill in the rest.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from acis_locator.core.models.config import LocatorConfig

logger = logging.getLogger(__name__)

# Default config filename
LOCATOR_CONFIG_FILE = "locator.yml"


class ConfigError(Exception):
    """Raised when locator configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for locator.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to locator.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / LOCATOR_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path) -> LocatorConfig:
    """Load and validate locator configuration.

    Args:
        path: Path to locator.yml.

    Returns:
        Validated LocatorConfig model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading locator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file is a valid "all defaults" config
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Allow the settings to sit under a "locator" key
    if "locator" in data and isinstance(data["locator"], dict):
        data = data["locator"]

    try:
        config = LocatorConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid locator configuration: {e}") from e

    config = _resolve_relative_paths(config, path.parent.resolve())
    logger.info("Loaded locator config for toolkit '%s' from %s", config.toolkit, path)
    return config


def load_config_or_default(path: Path | None = None) -> tuple[LocatorConfig, Path | None]:
    """Load ``path`` (or the nearest locator.yml); defaults when none exists.

    Returns:
        The config and the file it came from (None for defaults).

    Raises:
        ConfigError: If an explicit path is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
    if path is None:
        logger.debug("No %s found, using defaults", LOCATOR_CONFIG_FILE)
        return LocatorConfig(), None
    return load_config(path), path


def _resolve_relative_paths(config: LocatorConfig, base: Path) -> LocatorConfig:
    """Make path-valued settings relative to the config file's directory."""
    updates: dict = {}
    if config.root and not Path(config.root).is_absolute():
        updates["root"] = str(base / config.root)
    if config.toolkits_dir and not Path(config.toolkits_dir).is_absolute():
        updates["toolkits_dir"] = str(base / config.toolkits_dir)
    if config.toolkit.endswith((".yml", ".yaml")) and not Path(config.toolkit).is_absolute():
        updates["toolkit"] = str(base / config.toolkit)
    return config.model_copy(update=updates) if updates else config
