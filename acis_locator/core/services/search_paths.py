"""
Search paths — build the ordered list of candidate install directories.

Three sources, most specific first:

    1. the explicit root given by the caller
    2. the toolkit's install-path environment variable (``A3DT``)
    3. the descriptor's hint globs (``/opt/acis``, ``/opt/r26`` …)

Pure logic over the filesystem — reads only.
"""

from __future__ import annotations

import glob
import logging
import re
from collections.abc import Mapping
from pathlib import Path

from acis_locator.core.models.result import SOURCE_ENV, SOURCE_HINT, SOURCE_ROOT, SearchGroup
from acis_locator.core.models.toolkit import ToolkitDescriptor

logger = logging.getLogger(__name__)

_VAR_RE = re.compile(r"\$(?:\{(\w+)\}|(\w+))")


def expand_hint(hint: str, environ: Mapping[str, str]) -> str | None:
    """Expand ``$VAR`` / ``${VAR}`` references from ``environ``.

    Returns None when a referenced variable is unset or empty, so a hint
    like ``$PROGRAMFILES/Spatial/acis`` is skipped off Windows instead of
    collapsing to ``/Spatial/acis``.
    """
    missing: list[str] = []

    def _sub(match: re.Match) -> str:
        name = match.group(1) or match.group(2)
        value = environ.get(name, "")
        if not value:
            missing.append(name)
        return value

    expanded = _VAR_RE.sub(_sub, hint)
    if missing:
        logger.debug("Skipping hint %s: unset %s", hint, ", ".join(missing))
        return None
    return expanded


def glob_hint(pattern: str) -> list[Path]:
    """Expand a hint to existing directories: the hint itself plus ``hint*``."""
    matches = set(glob.glob(pattern)) | set(glob.glob(pattern + "*"))
    return [Path(m) for m in sorted(matches) if Path(m).is_dir()]


def build_search_groups(
    toolkit: ToolkitDescriptor,
    root: str | Path | None,
    environ: Mapping[str, str],
) -> list[SearchGroup]:
    """Build the ordered search groups for one lookup.

    Args:
        toolkit: Descriptor supplying the env var name and hints.
        root: Explicit install root, or None.
        environ: Environment to read variables from.

    Returns:
        Groups in priority order.  Sources that contribute nothing are
        left out.
    """
    groups: list[SearchGroup] = []

    if root:
        groups.append(SearchGroup(SOURCE_ROOT, (Path(root),), origin="root"))

    if toolkit.root_env:
        env_value = environ.get(toolkit.root_env)
        if env_value:
            groups.append(SearchGroup(SOURCE_ENV, (Path(env_value),), origin=toolkit.root_env))

    for hint in toolkit.hints:
        expanded = expand_hint(hint, environ)
        if expanded is None:
            continue
        dirs = glob_hint(expanded)
        if dirs:
            groups.append(SearchGroup(SOURCE_HINT, tuple(dirs), origin=hint))

    logger.debug(
        "Search groups for %s: %s",
        toolkit.prefix,
        [(g.source, [str(p) for p in g.paths]) for g in groups],
    )
    return groups
