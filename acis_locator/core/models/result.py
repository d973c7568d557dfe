"""
Result models — what a locator run produces.

A ``LocateResult`` is returned from every run and threaded through the
exporters; nothing about a run is kept in module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from acis_locator.core.models.platform import PlatformVariant

# Search-group sources, in priority order
SOURCE_ROOT = "root"
SOURCE_ENV = "env"
SOURCE_HINT = "hint"


@dataclass(frozen=True)
class SearchGroup:
    """One source of candidate install directories."""

    source: str
    paths: tuple[Path, ...]
    origin: str = ""  # the option, variable or hint pattern that produced it

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "origin": self.origin,
            "paths": [str(p) for p in self.paths],
        }


@dataclass(frozen=True)
class ArchTag:
    """The architecture tag and how it was obtained.

    ``source`` is one of ``override`` (caller), ``env`` (environment
    variable), ``detected`` (directory glob) or ``fixed`` (per-platform
    constant).
    """

    value: str
    source: str

    def __str__(self) -> str:
        return self.value


@dataclass
class LibraryResult:
    """Resolved artifacts for the primary toolkit or one component."""

    name: str
    known: bool = True
    release: Path | None = None
    debug: Path | None = None
    redist_release: Path | None = None
    redist_debug: Path | None = None

    @property
    def found(self) -> bool:
        return bool(self.release or self.debug)

    @property
    def library(self) -> Path | None:
        """Single library for configuration-agnostic consumers."""
        return self.release or self.debug

    @property
    def libraries(self) -> list[str]:
        """Libraries with per-configuration keywords.

        Both configurations present gives ``optimized <rel> debug <dbg>``;
        a single configuration serves both and is listed alone.
        """
        if self.release and self.debug and self.release != self.debug:
            return ["optimized", str(self.release), "debug", str(self.debug)]
        lib = self.library
        return [str(lib)] if lib else []

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "found": self.found,
            "known": self.known,
            "release": _str(self.release),
            "debug": _str(self.debug),
            "libraries": self.libraries,
            "redist_release": _str(self.redist_release),
            "redist_debug": _str(self.redist_debug),
        }


class ImportedTarget(BaseModel):
    """A consumable build target for one found library."""

    name: str
    kind: str = "UNKNOWN"  # SHARED, STATIC or UNKNOWN
    include_dirs: list[str] = Field(default_factory=list)
    location_release: str | None = None
    location_debug: str | None = None
    implib_release: str | None = None
    implib_debug: str | None = None
    link_libraries: list[str] = Field(default_factory=list)
    compile_options: list[str] = Field(default_factory=list)

    @property
    def configurations(self) -> list[str]:
        configs = []
        if self.location_release or self.implib_release:
            configs.append("RELEASE")
        if self.location_debug or self.implib_debug:
            configs.append("DEBUG")
        return configs


@dataclass
class LocateResult:
    """Everything one locator run discovered."""

    toolkit: str
    platform: PlatformVariant
    search_groups: list[SearchGroup] = field(default_factory=list)
    include_dir: Path | None = None
    include_source: str | None = None
    root_dir: Path | None = None
    arch: ArchTag | None = None
    library: LibraryResult | None = None
    components: dict[str, LibraryResult] = field(default_factory=dict)
    required_components: list[str] = field(default_factory=list)
    thread_libraries: list[str] = field(default_factory=list)
    targets: list[ImportedTarget] = field(default_factory=list)
    shadowed_headers: list[Path] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    found: bool = False
    fail_message: str = ""

    @property
    def prefix(self) -> str:
        return self.toolkit.upper()

    @property
    def include_dirs(self) -> list[str]:
        return [str(self.include_dir)] if self.include_dir else []

    @property
    def libraries(self) -> list[str]:
        return self.library.libraries if self.library else []

    @property
    def found_components(self) -> list[LibraryResult]:
        return [c for c in self.components.values() if c.found]

    @property
    def link_libraries(self) -> list[str]:
        """Toolkit libraries, then threads, then every found component."""
        if not self.found:
            return []
        items = list(self.libraries) + list(self.thread_libraries)
        for comp in self.found_components:
            items.extend(comp.libraries)
        return items

    @property
    def version_string(self) -> str:
        return self.arch.value if self.arch else ""

    @property
    def redist_release(self) -> Path | None:
        return self.library.redist_release if self.found and self.library else None

    @property
    def redist_debug(self) -> Path | None:
        return self.library.redist_debug if self.found and self.library else None

    @property
    def failure_message(self) -> str:
        """Aggregate diagnostic naming the missing variables, or ``""``.

        The descriptor's fail message replaces the generic
        ``Could NOT find <PREFIX>`` lead-in.
        """
        if self.found:
            return ""
        text = self.fail_message or f"Could NOT find {self.prefix}"
        if self.missing:
            text += f" (missing: {' '.join(self.missing)})"
        return text

    def component_found(self, name: str) -> bool:
        comp = self.components.get(name.upper())
        return bool(comp and comp.found)

    def get_target(self, name: str) -> ImportedTarget | None:
        for target in self.targets:
            if target.name == name:
                return target
        return None

    def to_variables(self) -> dict[str, Any]:
        """Flatten into the build-variable namespace (``ACIS_FOUND`` …)."""
        from acis_locator.core.services.export import build_variables

        return build_variables(self)

    def to_dict(self) -> dict:
        return {
            "toolkit": self.toolkit,
            "platform": self.platform.value,
            "found": self.found,
            "include_dir": _str(self.include_dir),
            "include_source": self.include_source,
            "root_dir": _str(self.root_dir),
            "arch": self.arch.value if self.arch else None,
            "arch_source": self.arch.source if self.arch else None,
            "library": self.library.to_dict() if self.library else None,
            "components": {k: v.to_dict() for k, v in self.components.items()},
            "thread_libraries": self.thread_libraries,
            "link_libraries": self.link_libraries,
            "redist_release": _str(self.redist_release),
            "redist_debug": _str(self.redist_debug),
            "targets": [t.model_dump(mode="json") for t in self.targets],
            "search_groups": [g.to_dict() for g in self.search_groups],
            "shadowed_headers": [str(p) for p in self.shadowed_headers],
            "missing": self.missing,
            "message": self.failure_message,
        }


def _str(path: Path | None) -> str | None:
    return str(path) if path is not None else None
