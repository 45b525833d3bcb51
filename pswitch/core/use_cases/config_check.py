"""
Config check use case — validate the settings file and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pswitch.core.config.loader import find_config_file, read_settings
from pswitch.core.errors import ConfigError
from pswitch.core.models.settings import Settings
from pswitch.core.services.templating import PROJECT_PLACEHOLDER


@dataclass
class ConfigCheckResult:
    """Result of settings validation."""

    valid: bool = False
    settings: Settings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        s = self.settings
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "settings": {
                "projects": str(s.projects_dir),
                "open": s.open_command,
                "open_from_project": s.open_from_project,
                "git": s.git,
                "readme": s.readme,
            } if s else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Load the settings file and collect errors and warnings."""
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    try:
        settings, warnings = read_settings(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.settings = settings
    result.warnings.extend(warnings)

    if not settings.projects_dir.is_dir():
        result.warnings.append(f"Projects directory does not exist: {settings.projects_dir}")

    if settings.open_command and PROJECT_PLACEHOLDER not in settings.open_command:
        result.warnings.append(
            f"The 'open' command does not use {PROJECT_PLACEHOLDER}; "
            "the project path will not be passed to it"
        )

    result.valid = not result.errors
    return result
