"""
Create use case — make a new project under the projects directory.

The directory is the only hard requirement. git init and readme.md are
best effort: a failure is reported as a warning and the directory stays.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pswitch.adapters.registry import AdapterRegistry, default_registry
from pswitch.core.models.action import Action
from pswitch.core.models.settings import Settings

logger = logging.getLogger(__name__)

README_FILE = "readme.md"


@dataclass
class CreateResult:
    """Result of the create use case."""

    name: str = ""
    path: Path | None = None
    created: bool = False
    git_initialized: bool = False
    readme_created: bool = False
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {"name": self.name}
        if self.error:
            result["error"] = self.error
            return result
        result.update(
            {
                "path": str(self.path),
                "created": self.created,
                "git_initialized": self.git_initialized,
                "readme_created": self.readme_created,
                "warnings": self.warnings,
            }
        )
        return result


def validate_project_name(name: str) -> str | None:
    """Return an error message if ``name`` cannot be a project directory."""
    if not name or not name.strip():
        return "Project name must not be empty"
    if name in (".", ".."):
        return f"'{name}' is not a valid project name"
    if "/" in name or "\\" in name:
        return f"Project name must not contain path separators: '{name}'"
    return None


def create_project(
    settings: Settings,
    name: str,
    registry: AdapterRegistry | None = None,
) -> CreateResult:
    """Create ``projects_dir/name``, then optionally git init and a readme."""
    result = CreateResult(name=name)
    registry = registry or default_registry()

    invalid = validate_project_name(name)
    if invalid:
        result.error = invalid
        return result

    root = settings.projects_dir.expanduser().absolute()
    path = root / name
    result.path = path

    receipt = registry.execute_action(
        Action(id=f"new:{name}:mkdir", adapter="filesystem", params={"operation": "mkdir", "path": str(path)}),
        working_dir=str(root),
    )
    if receipt.failed:
        result.error = f"Could not create new project! {receipt.error}"
        return result
    result.created = True
    logger.info("Created %s", path)

    if settings.git:
        receipt = registry.execute_action(
            Action(id=f"new:{name}:git-init", adapter="git", params={"operation": "init"}),
            working_dir=str(path),
        )
        if receipt.ok:
            result.git_initialized = True
        else:
            result.warnings.append(f"git init failed: {receipt.error}")

    if settings.readme:
        receipt = registry.execute_action(
            Action(
                id=f"new:{name}:readme",
                adapter="filesystem",
                params={"operation": "touch", "path": README_FILE},
            ),
            working_dir=str(path),
        )
        if receipt.ok:
            result.readme_created = True
        else:
            result.warnings.append(f"Could not create {README_FILE}: {receipt.error}")

    return result
