"""
Project models — what discovery finds and what resolution returns.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ProjectEntry(BaseModel):
    """One discovered project.

    ``name`` is the display name (last path segment). ``path`` is the
    directory itself: ``root/name`` in flat mode, the parent of the
    ``.git`` marker in structured mode.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path


class ResolvedProject(BaseModel):
    """A project name bound to an existing directory.

    Only produced by a successful resolve(); recomputed on every run.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path
