"""
Platform model — the small set of host families the locator knows about.

Everything that differs per operating system (library file decoration,
redistributable layout, whether debug binaries exist separately, which
compiler family is assumed) lives in one ``PlatformStrategy`` per
``PlatformVariant``.  The rest of the locator asks the strategy instead
of branching on the OS itself.
"""

from __future__ import annotations

import platform as _platform
from dataclasses import dataclass
from enum import Enum


class PlatformVariant(str, Enum):
    """Host platform family."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"

    @classmethod
    def detect(cls, system: str | None = None) -> PlatformVariant:
        """Map ``platform.system()`` (or the given name) to a variant.

        Any Unix that is not macOS is treated as Linux: the toolkit only
        ships Linux binaries for that family.
        """
        name = (system if system is not None else _platform.system()).lower()
        if name in ("windows", "win32", "cygwin") or name.startswith("msys"):
            return cls.WINDOWS
        if name in ("darwin", "macos"):
            return cls.MACOS
        return cls.LINUX

    @classmethod
    def parse(cls, value: str | PlatformVariant | None) -> PlatformVariant | None:
        """Parse a user-supplied platform name; ``None`` passes through."""
        if value is None or isinstance(value, PlatformVariant):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown platform '{value}' (expected one of: {valid})") from None

    @property
    def strategy(self) -> PlatformStrategy:
        return STRATEGIES[self]


@dataclass(frozen=True)
class PlatformStrategy:
    """Per-platform conventions used while probing an installation.

    Patterns use ``{name}`` for the bare library name (``SpaACIS``).
    """

    variant: PlatformVariant
    library_patterns: tuple[str, ...]
    shared_pattern: str
    shared_suffixes: tuple[str, ...]
    separate_debug_redist: bool
    msvc: bool

    def library_filenames(self, names: list[str]) -> list[str]:
        """Decorate bare library names into candidate file names.

        Names are tried in the order given; each name expands into every
        platform pattern before the next name is considered.
        """
        filenames: list[str] = []
        for name in names:
            for pattern in self.library_patterns:
                candidate = pattern.format(name=name)
                if candidate not in filenames:
                    filenames.append(candidate)
        return filenames

    def shared_filename(self, name: str) -> str:
        return self.shared_pattern.format(name=name)

    def is_shared(self, filename: str) -> bool:
        return filename.endswith(self.shared_suffixes)


STRATEGIES: dict[PlatformVariant, PlatformStrategy] = {
    PlatformVariant.WINDOWS: PlatformStrategy(
        variant=PlatformVariant.WINDOWS,
        library_patterns=("{name}.lib",),
        shared_pattern="{name}.dll",
        shared_suffixes=(".dll",),
        separate_debug_redist=True,
        msvc=True,
    ),
    PlatformVariant.LINUX: PlatformStrategy(
        variant=PlatformVariant.LINUX,
        library_patterns=("lib{name}.so", "lib{name}.a"),
        shared_pattern="lib{name}.so",
        shared_suffixes=(".so",),
        separate_debug_redist=False,
        msvc=False,
    ),
    # The macOS kit ships its shared objects under the same name as Linux.
    PlatformVariant.MACOS: PlatformStrategy(
        variant=PlatformVariant.MACOS,
        library_patterns=("lib{name}.dylib", "lib{name}.tbd", "lib{name}.so", "lib{name}.a"),
        shared_pattern="lib{name}.so",
        shared_suffixes=(".dylib", ".so"),
        separate_debug_redist=False,
        msvc=False,
    ),
}
