"""
List use case — discover the projects under the configured root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pswitch.core.errors import RootUnreadableError
from pswitch.core.models.project import ProjectEntry
from pswitch.core.models.settings import Settings
from pswitch.core.services.discovery import discover


@dataclass
class ListResult:
    """Result of the list use case."""

    projects: list[ProjectEntry] = field(default_factory=list)
    projects_dir: Path | None = None
    structured: bool = False
    error: str | None = None

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.projects]

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}

        return {
            "projects_dir": str(self.projects_dir),
            "mode": "structured" if self.structured else "flat",
            "count": len(self.projects),
            "projects": [
                {"name": p.name, "path": str(p.path)} for p in self.projects
            ],
        }


def list_projects(settings: Settings, sort: bool = False) -> ListResult:
    """Discover projects.

    Args:
        settings: Loaded settings.
        sort: Sort by display name instead of keeping listing order.
    """
    result = ListResult(projects_dir=settings.projects_dir, structured=settings.structured)

    try:
        projects = discover(settings.projects_dir, structured=settings.structured)
    except RootUnreadableError as e:
        result.error = str(e)
        return result

    if sort:
        projects = sorted(projects, key=lambda p: (p.name, str(p.path)))

    result.projects = projects
    return result
