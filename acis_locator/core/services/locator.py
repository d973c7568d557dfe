"""
Artifact locator — resolve a toolkit installation into build artifacts.

This is the core of the package.  Given a toolkit descriptor and a
request (explicit root, environment, requested components, optional
platform and architecture overrides) it:

    1. builds the ordered search groups
    2. finds the signature header (first group by priority wins)
    3. takes the header directory's parent as the toolkit root
    4. determines the architecture tag
    5. finds release/debug libraries for the toolkit and each component
    6. on success, adds the threads dependency and imported targets

Reads the filesystem only.  Nothing is cached between runs, so two runs
over the same inputs return the same result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from acis_locator.core.models.config import normalize_components
from acis_locator.core.models.platform import PlatformStrategy, PlatformVariant
from acis_locator.core.models.result import LibraryResult, LocateResult
from acis_locator.core.models.toolkit import ComponentDescriptor, LibraryLayout, ToolkitDescriptor
from acis_locator.core.services.arch import detect_arch
from acis_locator.core.services.probe import find_header, find_library
from acis_locator.core.services.search_paths import build_search_groups
from acis_locator.core.services.targets import build_targets
from acis_locator.core.services.threads import LibraryFinder, resolve_threads

logger = logging.getLogger(__name__)


@dataclass
class LocateRequest:
    """Inputs of one locator run."""

    toolkit: ToolkitDescriptor
    root: str | Path | None = None
    environ: Mapping[str, str] = field(default_factory=dict)
    components: list[str] = field(default_factory=list)
    required_components: list[str] = field(default_factory=list)
    platform: PlatformVariant | None = None
    arch: str | None = None
    thread_finder: LibraryFinder | None = None


def locate(request: LocateRequest) -> LocateResult:
    """Run the locator.

    Returns:
        LocateResult.  ``found`` is True only when the header directory
        and the toolkit library were both resolved and every required
        component was found.  Optional components that are missing are
        reported through their own ``found`` flag only.
    """
    toolkit = request.toolkit
    prefix = toolkit.prefix
    platform = request.platform or PlatformVariant.detect()
    strategy = platform.strategy
    required = normalize_components(request.required_components)
    requested = normalize_components(list(request.components) + required)

    result = LocateResult(
        toolkit=toolkit.name,
        platform=platform,
        required_components=required,
        fail_message=toolkit.fail_message,
    )
    result.search_groups = build_search_groups(toolkit, request.root, request.environ)

    # ── Header ─────────────────────────────────────────────────
    header = find_header(toolkit.header, result.search_groups, toolkit.include_suffixes)
    result.shadowed_headers = header.shadowed

    if header.include_dir is None:
        logger.info("%s: %s not found in any search path", prefix, toolkit.header)
        for name in requested:
            result.components[name] = LibraryResult(name, known=toolkit.get_component(name) is not None)
        result.missing = [f"{prefix}_LIBRARIES", f"{prefix}_INCLUDE_DIR"]
        result.missing.extend(_missing_required(result, required))
        return result

    result.include_dir = header.include_dir
    result.include_source = header.source
    result.root_dir = header.include_dir.parent

    # ── Architecture ───────────────────────────────────────────
    result.arch = detect_arch(
        toolkit, result.root_dir, platform, request.environ, override=request.arch
    )
    arch = result.arch.value if result.arch else None

    # ── Libraries ──────────────────────────────────────────────
    result.library = resolve_library(toolkit.primary, result.root_dir, arch, toolkit.layout, strategy)

    for name in requested:
        descriptor = toolkit.get_component(name)
        if descriptor is None:
            logger.warning("%s: unknown component '%s' (known: %s)",
                           prefix, name, ", ".join(toolkit.component_names) or "none")
            result.components[name] = LibraryResult(name, known=False)
            continue
        comp = resolve_library(descriptor, result.root_dir, arch, toolkit.layout, strategy)
        if not comp.found:
            logger.info("%s: component %s not found", prefix, name)
        result.components[name] = comp

    # ── Verdict ────────────────────────────────────────────────
    if not result.library.found:
        result.missing.append(f"{prefix}_LIBRARIES")
    result.missing.extend(_missing_required(result, required))
    result.found = not result.missing

    if not result.found:
        logger.info("%s", result.failure_message)
        return result

    if toolkit.threads:
        finder = request.thread_finder
        result.thread_libraries = (
            resolve_threads(platform, finder) if finder else resolve_threads(platform)
        )
    result.targets = build_targets(result, toolkit, strategy)

    logger.info(
        "Found %s: %s (arch %s, components: %s)",
        prefix,
        result.root_dir,
        arch,
        ", ".join(c.name for c in result.found_components) or "none",
    )
    return result


def resolve_library(
    component: ComponentDescriptor,
    root_dir: Path,
    arch: str | None,
    layout: LibraryLayout,
    strategy: PlatformStrategy,
) -> LibraryResult:
    """Find the release and debug library of one toolkit library.

    Used for the primary toolkit and for every component alike.  Without
    an architecture tag there is no library directory to search.
    """
    lib = LibraryResult(component.name)
    if not arch:
        return lib

    def _expand(templates: list[str]) -> list[str]:
        return [t.format(arch=arch) for t in templates]

    if component.release_names:
        lib.release = find_library(
            component.release_names, root_dir, _expand(layout.release_suffixes), strategy
        )
    if component.debug_names:
        lib.debug = find_library(
            component.debug_names, root_dir, _expand(layout.debug_suffixes), strategy
        )

    if lib.found:
        lib.redist_release, lib.redist_debug = redist_paths(component, root_dir, arch, layout, strategy)
    return lib


def redist_paths(
    component: ComponentDescriptor,
    root_dir: Path,
    arch: str,
    layout: LibraryLayout,
    strategy: PlatformStrategy,
) -> tuple[Path | None, Path | None]:
    """Shared-library paths to ship with the application (release, debug).

    Platforms without separate debug binaries get one path for both.
    """
    release_name = (component.release_names or component.debug_names or [None])[0]
    debug_name = (component.debug_names or component.release_names or [None])[0]
    if release_name is None:
        return None, None

    release_dir = root_dir / layout.redist_release_dir.format(arch=arch)
    release = release_dir / strategy.shared_filename(release_name)

    if not strategy.separate_debug_redist:
        return release, release

    debug_dir = root_dir / layout.redist_debug_dir.format(arch=arch)
    return release, debug_dir / strategy.shared_filename(debug_name)


def _missing_required(result: LocateResult, required: list[str]) -> list[str]:
    prefix = result.prefix
    return [
        f"{prefix}_{name}_LIBRARY" for name in required if not result.component_found(name)
    ]
