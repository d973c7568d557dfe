"""
Threads dependency — the toolkit cannot run without the platform's
threading library, so every consumer links it alongside the toolkit.
"""

from __future__ import annotations

import ctypes.util
import logging
from collections.abc import Callable

from acis_locator.core.errors import DependencyError
from acis_locator.core.models.platform import PlatformVariant

logger = logging.getLogger(__name__)

LibraryFinder = Callable[[str], "str | None"]


def resolve_threads(
    platform: PlatformVariant,
    find_library: LibraryFinder = ctypes.util.find_library,
) -> list[str]:
    """Return the link items needed for threading on ``platform``.

    Windows threads are part of the C runtime, so nothing is added.  On
    Unix the pthread library is linked explicitly when it exists as a
    separate library; on C libraries that fold it in, the list is empty.

    Raises:
        DependencyError: For a platform with no known threading model.
    """
    if platform is PlatformVariant.WINDOWS:
        return []
    if platform in (PlatformVariant.LINUX, PlatformVariant.MACOS):
        lib = find_library("pthread")
        if lib:
            logger.debug("Threads: using %s", lib)
            return ["-lpthread"]
        logger.debug("Threads: provided by the C library")
        return []
    raise DependencyError(f"Threads: unsupported platform {platform!r}")
