"""
Project discovery — turn a projects directory into a list of entries.

Two strategies:

    flat        Every immediate subdirectory of the root is a project.
    structured  The root is walked recursively; every directory holding a
                ``.git`` directory is a project. Repositories nested inside
                another discovered repository (vendored code, checkouts of
                dependencies) are dropped by dedupe().

The root must be listable. If it is not, RootUnreadableError is raised
and nothing is returned.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pswitch.core.errors import RootUnreadableError
from pswitch.core.models.project import ProjectEntry
from pswitch.core.services.paths import display_name, is_subpath

logger = logging.getLogger(__name__)

# Directory whose presence marks its parent as a project boundary
REPOSITORY_MARKER = ".git"


def discover(root: str | os.PathLike[str], structured: bool = False) -> list[ProjectEntry]:
    """Discover projects under ``root``.

    Args:
        root: The projects directory. ``~`` is expanded and relative
            paths are made absolute.
        structured: Walk the tree for ``.git`` markers instead of
            listing immediate subdirectories.

    Returns:
        Entries in directory-listing order (not sorted).

    Raises:
        RootUnreadableError: If ``root`` is missing or cannot be listed.
    """
    root_path = Path(os.path.abspath(os.path.expanduser(os.fspath(root))))

    if structured:
        entries = dedupe(_discover_structured(root_path))
    else:
        entries = _discover_flat(root_path)

    logger.info(
        "Discovered %d project(s) under %s (%s mode)",
        len(entries),
        root_path,
        "structured" if structured else "flat",
    )
    return entries


def _discover_flat(root: Path) -> list[ProjectEntry]:
    entries: list[ProjectEntry] = []
    try:
        with os.scandir(root) as it:
            for item in it:
                # Entry type, like the listing reports it: symlinks are skipped
                if item.is_dir(follow_symlinks=False):
                    entries.append(ProjectEntry(name=item.name, path=root / item.name))
    except OSError as e:
        raise RootUnreadableError(_unreadable_message(root, e)) from e
    return entries


def _discover_structured(root: Path) -> list[ProjectEntry]:
    _check_listable(root)

    candidates: list[ProjectEntry] = []
    for dirpath, dirnames, _filenames in os.walk(root, onerror=_log_walk_error):
        if REPOSITORY_MARKER in dirnames:
            project_dir = Path(dirpath)
            name = display_name(project_dir) or str(project_dir)
            candidates.append(ProjectEntry(name=name, path=project_dir))
            logger.debug("Repository marker found in %s", project_dir)
            # Nothing inside the marker itself can be a project
            dirnames.remove(REPOSITORY_MARKER)

    return candidates


def dedupe(entries: list[ProjectEntry]) -> list[ProjectEntry]:
    """Drop entries nested inside another entry.

    An entry B is removed when some other entry A is a segment-wise
    ancestor of it. Survivors keep their input order.
    """
    survivors = [
        entry
        for entry in entries
        if not any(
            other.path != entry.path and is_subpath(entry.path, other.path)
            for other in entries
        )
    ]

    dropped = len(entries) - len(survivors)
    if dropped:
        logger.debug("Filtered %d nested repositor%s", dropped, "y" if dropped == 1 else "ies")
    return survivors


def _check_listable(root: Path) -> None:
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise RootUnreadableError(_unreadable_message(root, e)) from e


def _log_walk_error(error: OSError) -> None:
    # Below the root, an unreadable directory only hides its own subtree
    logger.debug("Skipping %s: %s", error.filename, error.strerror or error)


def _unreadable_message(root: Path, error: OSError) -> str:
    return f"Cannot read projects directory {root}: {error.strerror or error}"
