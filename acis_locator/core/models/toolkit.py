"""
Toolkit model — what a locatable toolkit looks like on disk.

A toolkit descriptor captures everything the locator needs to know about
one vendor installation: the signature header, where installs usually
live, how the architecture directory is named, where libraries sit below
the architecture directory, and which optional components ship with it.

Descriptors are loaded from toolkits/<name>/toolkit.yml and are reusable
across projects.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ComponentDescriptor(BaseModel):
    """An optional add-on library bundled with the toolkit.

    The primary toolkit library is described with the same type so one
    resolution routine serves both.
    """

    name: str
    release_names: list[str] = Field(default_factory=list)
    debug_names: list[str] = Field(default_factory=list)
    description: str = ""

    @field_validator("name")
    @classmethod
    def _upper_name(cls, value: str) -> str:
        return value.strip().upper()


class ArchRule(BaseModel):
    """How to pick the architecture tag for an installation.

    ``glob`` maps a platform name to a directory pattern searched under
    the toolkit root (last match wins); ``fixed`` maps a platform name to
    a constant tag.
    """

    env_var: str = "ARCH"
    glob: dict[str, str] = Field(default_factory=dict)
    fixed: dict[str, str] = Field(default_factory=dict)


class LibraryLayout(BaseModel):
    """Sub-directories below the toolkit root, relative to ``{arch}``."""

    release_suffixes: list[str] = Field(
        default_factory=lambda: ["{arch}/code/lib", "{arch}/code/bin"]
    )
    debug_suffixes: list[str] = Field(
        default_factory=lambda: ["{arch}D/code/lib", "{arch}/code/bin"]
    )
    redist_release_dir: str = "{arch}/code/bin"
    redist_debug_dir: str = "{arch}D/code/bin"


class ToolkitDescriptor(BaseModel):
    """A locatable third-party toolkit."""

    name: str
    description: str = ""

    # Header search
    header: str
    include_suffixes: list[str] = Field(default_factory=lambda: ["include"])

    # Where to look
    root_env: str | None = None
    hints: list[str] = Field(default_factory=list)

    # How it is laid out
    arch: ArchRule = Field(default_factory=ArchRule)
    layout: LibraryLayout = Field(default_factory=LibraryLayout)

    # Primary library
    release_names: list[str] = Field(default_factory=list)
    debug_names: list[str] = Field(default_factory=list)

    # Optional add-ons
    components: list[ComponentDescriptor] = Field(default_factory=list)

    # What consumers need
    threads: bool = True
    cxx_flags: list[str] = Field(default_factory=list)  # non-MSVC compilers only
    fail_message: str = ""

    @property
    def prefix(self) -> str:
        """Variable prefix used for every exported name (``ACIS``)."""
        return self.name.upper()

    @property
    def primary(self) -> ComponentDescriptor:
        """The main library, expressed as a component."""
        return ComponentDescriptor(
            name=self.prefix,
            release_names=self.release_names,
            debug_names=self.debug_names,
        )

    def get_component(self, name: str) -> ComponentDescriptor | None:
        """Look up a component by name (case-insensitive)."""
        wanted = name.strip().upper()
        for comp in self.components:
            if comp.name == wanted:
                return comp
        return None

    @property
    def component_names(self) -> list[str]:
        return [c.name for c in self.components]

    def target_name(self, component: str | None = None) -> str:
        """Imported target name: ``ACIS::ACIS`` or ``ACIS::<COMPONENT>``."""
        return f"{self.prefix}::{(component or self.prefix).upper()}"
