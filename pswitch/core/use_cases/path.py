"""
Path use case — where does project NAME live?

Backs ``p path NAME``, which the shell integration uses to ``cd``.
"""

from __future__ import annotations

from dataclasses import dataclass

from pswitch.core.errors import RootUnreadableError
from pswitch.core.models.project import ResolvedProject
from pswitch.core.models.settings import Settings
from pswitch.core.services.discovery import discover
from pswitch.core.services.resolver import resolve


def find_project(settings: Settings, name: str) -> ResolvedProject | None:
    """Discover, then resolve ``name``.

    Raises:
        RootUnreadableError: If the projects directory cannot be listed.
    """
    entries = discover(settings.projects_dir, structured=settings.structured)
    return resolve(entries, name)


@dataclass
class PathResult:
    """Result of the path use case."""

    name: str = ""
    project: ResolvedProject | None = None
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.project is not None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "name": self.name,
            "found": self.found,
            "path": str(self.project.path) if self.project else None,
        }


def project_path(settings: Settings, name: str) -> PathResult:
    """Resolve ``name`` to its directory. Unknown names are not an error."""
    result = PathResult(name=name)
    try:
        result.project = find_project(settings, name)
    except RootUnreadableError as e:
        result.error = str(e)
    return result
