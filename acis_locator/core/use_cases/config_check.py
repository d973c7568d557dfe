"""
Config check use case — validate locator.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from acis_locator.core.config.loader import ConfigError, find_config_file, load_config
from acis_locator.core.config.toolkit_loader import resolve_toolkit
from acis_locator.core.models.config import LocatorConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: LocatorConfig | None = None
    config_path: Path | None = None
    toolkit_name: str | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "toolkit": self.toolkit_name,
            "components": self.config.components if self.config else [],
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate locator configuration and report issues.

    Args:
        config_path: Optional explicit path to locator.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append("No locator.yml found.")
        return result

    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    try:
        toolkit = resolve_toolkit(
            config.toolkit,
            Path(config.toolkits_dir) if config.toolkits_dir else None,
        )
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.toolkit_name = toolkit.name

    # Semantic checks
    known = set(toolkit.component_names)
    for name in config.components + config.required_components:
        if name not in known:
            result.errors.append(
                f"Unknown component '{name}' for toolkit {toolkit.name} "
                f"(known: {', '.join(sorted(known)) or 'none'})"
            )

    overlap = set(config.components) & set(config.required_components)
    if overlap:
        result.warnings.append(
            f"Components listed as both optional and required: {', '.join(sorted(overlap))}"
        )

    if config.toolkits_dir and not Path(config.toolkits_dir).is_dir():
        result.warnings.append(f"Toolkits directory does not exist: {config.toolkits_dir}")

    if config.root and not Path(config.root).is_dir():
        result.warnings.append(f"Root directory does not exist: {config.root}")

    result.valid = len(result.errors) == 0
    return result
