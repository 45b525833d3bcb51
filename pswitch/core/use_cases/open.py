"""
Open use case — resolve a project and launch the configured command.

Flow:
    discover → resolve → build argv → (chdir) → launch in the foreground

An unknown name is reported, not raised. A launch failure ends the
operation with the adapter's error.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from pswitch.adapters.registry import AdapterRegistry, default_registry
from pswitch.core.errors import RootUnreadableError, TemplateError
from pswitch.core.models.action import Action, Receipt
from pswitch.core.models.project import ResolvedProject
from pswitch.core.models.settings import Settings
from pswitch.core.services.templating import build_command
from pswitch.core.use_cases.path import find_project

logger = logging.getLogger(__name__)


@dataclass
class OpenResult:
    """Result of the open use case."""

    name: str = ""
    project: ResolvedProject | None = None
    argv: list[str] = field(default_factory=list)
    working_dir: Path | None = None
    receipt: Receipt | None = None
    not_found: bool = False
    message: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.not_found

    def to_dict(self) -> dict:
        result: dict = {"name": self.name}
        if self.error:
            result["error"] = self.error
        if self.not_found:
            result["not_found"] = True
            result["message"] = self.message
            return result

        result["path"] = str(self.project.path) if self.project else None
        result["argv"] = self.argv
        result["working_dir"] = str(self.working_dir) if self.working_dir else None
        if self.receipt:
            result["status"] = self.receipt.status
            result["return_code"] = self.receipt.return_code
        return result


def open_project(
    settings: Settings,
    name: str,
    registry: AdapterRegistry | None = None,
    implicit: bool = False,
    dry_run: bool = False,
    chdir: Callable[[Path], None] = os.chdir,
) -> OpenResult:
    """Open project ``name`` with the configured command.

    Args:
        settings: Loaded settings.
        name: Display name of the project.
        registry: Adapter registry (default: the real adapters).
        implicit: The name came in as the first CLI word (``p NAME``);
            only changes the not-found message.
        dry_run: Build and validate the command without launching it or
            changing directory.
        chdir: Directory switch used when ``open_from_project`` is set.

    Returns:
        OpenResult describing what was launched.
    """
    result = OpenResult(name=name)
    registry = registry or default_registry()

    try:
        project = find_project(settings, name)
    except RootUnreadableError as e:
        result.error = str(e)
        return result

    if project is None:
        result.not_found = True
        result.message = (
            f"'{name}' command not supported" if implicit else f"Unknown project '{name}'"
        )
        return result
    result.project = project

    try:
        result.argv = build_command(settings.open_command, project, settings.projects_dir)
    except TemplateError as e:
        result.error = str(e)
        return result

    if settings.open_from_project:
        if not dry_run:
            try:
                # Affects this process and the launched command, not the user's shell
                chdir(project.path)
            except OSError as e:
                result.error = f"Could not change to project directory: {e}"
                return result
        result.working_dir = project.path
    else:
        result.working_dir = Path.cwd()

    logger.info("Opening %s with %s", project.path, result.argv)

    receipt = registry.execute_action(
        Action(id=f"open:{name}", adapter="shell", params={"argv": result.argv}),
        working_dir=str(result.working_dir),
        dry_run=dry_run,
    )
    result.receipt = receipt

    if receipt.failed:
        result.error = receipt.error or "Command failed"

    return result
