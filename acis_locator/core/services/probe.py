"""
File probes — look for a header or a library below candidate directories.

Each candidate directory is checked with its suffixes first and then on
its own, the same order a build system's path finder uses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from acis_locator.core.models.platform import PlatformStrategy
from acis_locator.core.models.result import SearchGroup

logger = logging.getLogger(__name__)


@dataclass
class HeaderMatch:
    """Outcome of the header search across every search group."""

    include_dir: Path | None = None
    source: str | None = None
    shadowed: list[Path] = field(default_factory=list)


def candidate_dirs(base: Path, suffixes: list[str]) -> list[Path]:
    """``base/<suffix>`` for every suffix, then ``base`` itself."""
    dirs = [base / s for s in suffixes if s]
    dirs.append(base)
    return dirs


def find_file_dir(filename: str, base: Path, suffixes: list[str]) -> Path | None:
    """Return the first candidate directory of ``base`` that contains ``filename``."""
    for directory in candidate_dirs(base, suffixes):
        if (directory / filename).is_file():
            return directory
    return None


def find_header(header: str, groups: list[SearchGroup], suffixes: list[str]) -> HeaderMatch:
    """Search every group for the signature header.

    The first path (groups in priority order, paths in group order) that
    contains the header wins.  Every other path is still probed, including
    the rest of the winning group; any other directory holding the same
    header is recorded as shadowed.
    """
    match = HeaderMatch()

    for group in groups:
        for base in group.paths:
            found = find_file_dir(header, base, suffixes)
            if found is None:
                continue
            if match.include_dir is None:
                match.include_dir = found
                match.source = group.source
                logger.debug("Found %s in %s (%s)", header, found, group.source)
            elif found.resolve() != match.include_dir.resolve() and found not in match.shadowed:
                match.shadowed.append(found)
                logger.debug("Ignoring %s in %s: shadowed by %s", header, found, match.include_dir)

    return match


def find_library(
    names: list[str],
    root: Path,
    suffixes: list[str],
    strategy: PlatformStrategy,
) -> Path | None:
    """Find the first library file matching ``names`` below ``root``.

    Names are tried in order; for each name every decorated file name is
    checked in every candidate directory before moving on.
    """
    dirs = candidate_dirs(root, suffixes)
    for name in names:
        for filename in strategy.library_filenames([name]):
            for directory in dirs:
                path = directory / filename
                if path.is_file():
                    logger.debug("Found library %s", path)
                    return path
    return None
