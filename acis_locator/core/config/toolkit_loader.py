"""
Toolkit loader — loads toolkit descriptors from YAML files.

Descriptors live in toolkits/<name>/toolkit.yml.  The package ships its
own under ``acis_locator/toolkits``; a project may add more through the
``toolkits_dir`` setting, and those win over built-ins of the same name.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from acis_locator.core.config.loader import ConfigError
from acis_locator.core.models.toolkit import ToolkitDescriptor

logger = logging.getLogger(__name__)

BUILTIN_TOOLKITS_DIR = Path(__file__).resolve().parent.parent.parent / "toolkits"
DEFAULT_TOOLKIT = "acis"


def load_toolkit(path: Path) -> ToolkitDescriptor | None:
    """Load a single toolkit descriptor from a YAML file.

    Args:
        path: Path to toolkit.yml file.

    Returns:
        ToolkitDescriptor, or None if loading fails.
    """
    try:
        raw = path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
        if not isinstance(data, dict):
            logger.warning("Toolkit file %s is not a mapping, skipping", path)
            return None
        toolkit = ToolkitDescriptor.model_validate(data)
        logger.debug("Loaded toolkit: %s from %s", toolkit.name, path)
        return toolkit
    except Exception as e:
        logger.warning("Failed to load toolkit from %s: %s", path, e)
        return None


def discover_toolkits(toolkits_dir: Path) -> dict[str, ToolkitDescriptor]:
    """Walk toolkits/ and load every toolkit.yml, keyed by lower-case name.

    Expects structure::

        toolkits/
            acis/
                toolkit.yml
            ...
    """
    toolkits: dict[str, ToolkitDescriptor] = {}

    if not toolkits_dir.is_dir():
        logger.debug("Toolkits directory not found: %s", toolkits_dir)
        return toolkits

    for child in sorted(toolkits_dir.iterdir()):
        if not child.is_dir():
            continue
        toolkit_file = child / "toolkit.yml"
        if not toolkit_file.is_file():
            toolkit_file = child / "toolkit.yaml"
        if not toolkit_file.is_file():
            continue

        toolkit = load_toolkit(toolkit_file)
        if toolkit:
            toolkits[toolkit.name.lower()] = toolkit

    logger.debug("Discovered %d toolkits in %s: %s", len(toolkits), toolkits_dir, list(toolkits))
    return toolkits


def available_toolkits(extra_dir: Path | None = None) -> dict[str, ToolkitDescriptor]:
    """Built-in descriptors merged with a project's own (project wins)."""
    toolkits = discover_toolkits(BUILTIN_TOOLKITS_DIR)
    if extra_dir is not None:
        toolkits.update(discover_toolkits(extra_dir))
    return toolkits


def resolve_toolkit(ref: str | None = None, extra_dir: Path | None = None) -> ToolkitDescriptor:
    """Turn a toolkit reference into a descriptor.

    Args:
        ref: A toolkit name (``acis``) or a path to a toolkit.yml.
            Defaults to ``acis``.
        extra_dir: Optional project directory of additional descriptors.

    Raises:
        ConfigError: If the reference names nothing loadable.
    """
    ref = ref or DEFAULT_TOOLKIT

    if ref.endswith((".yml", ".yaml")) or "/" in ref or "\\" in ref:
        path = Path(ref)
        if not path.is_file():
            raise ConfigError(f"Toolkit file not found: {path}")
        toolkit = load_toolkit(path)
        if toolkit is None:
            raise ConfigError(f"Invalid toolkit descriptor: {path}")
        return toolkit

    toolkits = available_toolkits(extra_dir)
    toolkit = toolkits.get(ref.lower())
    if toolkit is None:
        known = ", ".join(sorted(toolkits)) or "none"
        raise ConfigError(f"Unknown toolkit '{ref}' (available: {known})")
    return toolkit
