"""
Locate use case — orchestrate one toolkit lookup.

Ties together config loading, toolkit resolution, the process
environment and the locator service.  Command-line values override
locator.yml values.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from acis_locator.core.config.loader import ConfigError, load_config_or_default
from acis_locator.core.config.toolkit_loader import resolve_toolkit
from acis_locator.core.errors import ToolkitNotFoundError
from acis_locator.core.models.config import LocatorConfig, normalize_components
from acis_locator.core.models.platform import PlatformVariant
from acis_locator.core.models.result import LocateResult
from acis_locator.core.models.toolkit import ToolkitDescriptor
from acis_locator.core.services.locator import LocateRequest, locate

logger = logging.getLogger(__name__)


@dataclass
class LocateRun:
    """Result of the locate use case."""

    result: LocateResult | None = None
    toolkit: ToolkitDescriptor | None = None
    config: LocatorConfig | None = None
    config_path: Path | None = None
    request: LocateRequest | None = None
    error: str | None = None


def prepare_request(
    config_path: Path | None = None,
    *,
    toolkit: str | None = None,
    root: str | None = None,
    components: list[str] | tuple[str, ...] | None = None,
    required_components: list[str] | tuple[str, ...] | None = None,
    arch: str | None = None,
    platform: str | PlatformVariant | None = None,
    environ: Mapping[str, str] | None = None,
) -> LocateRun:
    """Load configuration and build the locator request without running it.

    Returns:
        LocateRun with ``request`` set, or with ``error`` set on a
        configuration problem.
    """
    run = LocateRun()

    try:
        config, run.config_path = load_config_or_default(config_path)
        run.config = config
        descriptor = resolve_toolkit(
            toolkit or config.toolkit,
            Path(config.toolkits_dir) if config.toolkits_dir else None,
        )
        run.toolkit = descriptor
        platform_variant = PlatformVariant.parse(platform) or config.platform
    except (ConfigError, ValueError) as e:
        run.error = str(e)
        return run

    run.request = LocateRequest(
        toolkit=descriptor,
        root=root or config.root,
        environ=dict(os.environ if environ is None else environ),
        components=normalize_components(list(config.components) + list(components or [])),
        required_components=normalize_components(
            list(config.required_components) + list(required_components or [])
        ),
        platform=platform_variant,
        arch=arch or config.arch,
    )
    return run


def run_locate(
    config_path: Path | None = None,
    *,
    toolkit: str | None = None,
    root: str | None = None,
    components: list[str] | tuple[str, ...] | None = None,
    required_components: list[str] | tuple[str, ...] | None = None,
    arch: str | None = None,
    platform: str | PlatformVariant | None = None,
    required: bool | None = None,
    environ: Mapping[str, str] | None = None,
) -> LocateRun:
    """Locate the configured toolkit.

    Args:
        config_path: Optional explicit path to locator.yml.
        toolkit: Toolkit name or descriptor path (overrides config).
        root: Explicit install root (overrides config).
        components: Extra components to look for.
        required_components: Components whose absence fails the lookup.
        arch: Explicit architecture tag.
        platform: Platform name to resolve for instead of the host.
        required: Raise when the toolkit is not found (overrides config).
        environ: Environment to read; defaults to ``os.environ``.

    Returns:
        LocateRun with the locator result, or with ``error`` set when the
        configuration could not be loaded.

    Raises:
        ToolkitNotFoundError: If the lookup is required and failed.
    """
    run = prepare_request(
        config_path,
        toolkit=toolkit,
        root=root,
        components=components,
        required_components=required_components,
        arch=arch,
        platform=platform,
        environ=environ,
    )
    if run.error or run.request is None:
        return run

    run.result = locate(run.request)

    assert run.config is not None
    is_required = run.config.required if required is None else required
    if is_required and not run.result.found:
        raise ToolkitNotFoundError(run.result.failure_message, run.result.missing)

    return run
