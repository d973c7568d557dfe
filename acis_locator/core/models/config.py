"""
Locator configuration model — the contents of locator.yml.

Every field is optional; CLI options override whatever is set here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from acis_locator.core.models.platform import PlatformVariant


class LocatorConfig(BaseModel):
    """Settings for one project's toolkit lookup."""

    toolkit: str = "acis"              # built-in name or path to a toolkit.yml
    toolkits_dir: str | None = None    # extra <name>/toolkit.yml descriptors
    root: str | None = None            # explicit install root
    components: list[str] = Field(default_factory=list)
    required_components: list[str] = Field(default_factory=list)
    arch: str | None = None
    platform: PlatformVariant | None = None
    required: bool = False

    @field_validator("components", "required_components")
    @classmethod
    def _normalize_components(cls, value: list[str]) -> list[str]:
        return normalize_components(value)

    @field_validator("platform", mode="before")
    @classmethod
    def _parse_platform(cls, value: object) -> object:
        if isinstance(value, str):
            return PlatformVariant.parse(value)
        return value


def normalize_components(names: list[str] | tuple[str, ...] | None) -> list[str]:
    """Upper-case, strip and de-duplicate component names, keeping order."""
    seen: list[str] = []
    for name in names or []:
        upper = str(name).strip().upper()
        if upper and upper not in seen:
            seen.append(upper)
    return seen
