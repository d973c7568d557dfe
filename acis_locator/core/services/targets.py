"""
Imported targets — consumable build targets for every found library.

The primary toolkit becomes ``ACIS::ACIS``; each found component becomes
``ACIS::<COMPONENT>`` and depends on the primary target.
"""

from __future__ import annotations

from acis_locator.core.models.platform import PlatformStrategy
from acis_locator.core.models.result import ImportedTarget, LibraryResult, LocateResult
from acis_locator.core.models.toolkit import ToolkitDescriptor


def build_targets(
    result: LocateResult,
    toolkit: ToolkitDescriptor,
    strategy: PlatformStrategy,
) -> list[ImportedTarget]:
    """Create targets for the primary toolkit and each found component."""
    if not result.found or result.library is None:
        return []

    compile_options = [] if strategy.msvc else list(toolkit.cxx_flags)
    primary_name = toolkit.target_name()

    targets = [
        _make_target(
            primary_name,
            result.library,
            result,
            strategy,
            link_libraries=list(result.thread_libraries),
            compile_options=compile_options,
        )
    ]
    for comp in result.found_components:
        targets.append(
            _make_target(
                toolkit.target_name(comp.name),
                comp,
                result,
                strategy,
                link_libraries=[primary_name],
                compile_options=compile_options,
            )
        )
    return targets


def _make_target(
    name: str,
    lib: LibraryResult,
    result: LocateResult,
    strategy: PlatformStrategy,
    link_libraries: list[str],
    compile_options: list[str],
) -> ImportedTarget:
    target = ImportedTarget(
        name=name,
        include_dirs=result.include_dirs,
        link_libraries=link_libraries,
        compile_options=compile_options,
    )

    # Windows links against the import library and runs the DLL
    if strategy.msvc:
        if lib.release:
            target.implib_release = str(lib.release)
            target.location_release = _str(lib.redist_release)
        if lib.debug:
            target.implib_debug = str(lib.debug)
            target.location_debug = _str(lib.redist_debug)
        target.kind = "SHARED"
        return target

    if lib.release:
        target.location_release = str(lib.release)
    if lib.debug:
        target.location_debug = str(lib.debug)
    target.kind = _kind(lib.library.name if lib.library else "", strategy)
    return target


def _kind(filename: str, strategy: PlatformStrategy) -> str:
    if strategy.is_shared(filename):
        return "SHARED"
    if filename.endswith(".a"):
        return "STATIC"
    return "UNKNOWN"


def _str(value: object) -> str | None:
    return str(value) if value is not None else None
