"""
Architecture tag detection.

Precedence: explicit override > environment variable > per-platform
rule from the toolkit descriptor (directory glob under the root, or a
fixed tag).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from acis_locator.core.models.platform import PlatformVariant
from acis_locator.core.models.result import ArchTag
from acis_locator.core.models.toolkit import ToolkitDescriptor

logger = logging.getLogger(__name__)


def detect_arch(
    toolkit: ToolkitDescriptor,
    root_dir: Path,
    platform: PlatformVariant,
    environ: Mapping[str, str],
    override: str | None = None,
) -> ArchTag | None:
    """Determine the architecture tag for an installation.

    Args:
        toolkit: Descriptor with the arch rule.
        root_dir: Toolkit root (parent of the include directory).
        platform: Target platform variant.
        environ: Environment to read the arch variable from.
        override: Caller-supplied tag; bypasses everything else.

    Returns:
        The tag, or None when no rule yields one.
    """
    if override:
        return ArchTag(override, "override")

    rule = toolkit.arch
    env_value = environ.get(rule.env_var) if rule.env_var else None
    if env_value:
        return ArchTag(env_value, "env")

    pattern = rule.glob.get(platform.value)
    if pattern:
        tag = glob_arch(root_dir, pattern)
        if tag:
            return ArchTag(tag, "detected")
        logger.debug("No %s directory under %s", pattern, root_dir)

    fixed = rule.fixed.get(platform.value)
    if fixed:
        return ArchTag(fixed, "fixed")

    logger.info("Cannot determine %s architecture for %s", toolkit.prefix, platform.value)
    return None


def glob_arch(root_dir: Path, pattern: str) -> str | None:
    """Return the last directory (sorted by name) under root matching pattern."""
    if not root_dir.is_dir():
        return None
    matches = sorted(p.name for p in root_dir.glob(pattern) if p.is_dir())
    return matches[-1] if matches else None
