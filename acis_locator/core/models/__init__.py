"""
Domain models — pydantic types and result containers for the locator.

All models are re-exported here for convenient access:

    from acis_locator.core.models import ToolkitDescriptor, LocateResult, PlatformVariant
"""

from acis_locator.core.models.config import LocatorConfig, normalize_components
from acis_locator.core.models.platform import (
    STRATEGIES,
    PlatformStrategy,
    PlatformVariant,
)
from acis_locator.core.models.result import (
    ArchTag,
    ImportedTarget,
    LibraryResult,
    LocateResult,
    SearchGroup,
)
from acis_locator.core.models.toolkit import (
    ArchRule,
    ComponentDescriptor,
    LibraryLayout,
    ToolkitDescriptor,
)

__all__ = [
    # config.py
    "LocatorConfig",
    "normalize_components",
    # platform.py
    "STRATEGIES",
    "PlatformStrategy",
    "PlatformVariant",
    # result.py
    "ArchTag",
    "ImportedTarget",
    "LibraryResult",
    "LocateResult",
    "SearchGroup",
    # toolkit.py
    "ArchRule",
    "ComponentDescriptor",
    "LibraryLayout",
    "ToolkitDescriptor",
]
