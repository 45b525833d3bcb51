"""
Settings model — the validated contents of p.conf / p.yml.

Built once by the config loader at startup and passed explicitly into
every operation. Frozen: nothing mutates it after construction.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    """User settings for the project switcher."""

    model_config = ConfigDict(frozen=True)

    projects_dir: Path
    open_command: str = ""          # template, may contain ${PROJECT}
    open_from_project: bool = False  # chdir into the project before opening
    git: bool = False               # structured discovery + git init on create
    readme: bool = False            # create readme.md on create

    @property
    def structured(self) -> bool:
        """Whether discovery walks the tree looking for .git markers."""
        return self.git
