"""
Name resolver — map a short project name to a discovered entry.
"""

from __future__ import annotations

import logging

from pswitch.core.models.project import ProjectEntry, ResolvedProject
from pswitch.core.services.paths import display_name

logger = logging.getLogger(__name__)


def resolve(entries: list[ProjectEntry], short_name: str) -> ResolvedProject | None:
    """Find the project whose last path segment equals ``short_name``.

    The first match in enumeration order wins, so two projects sharing a
    display name resolve to whichever the filesystem listed first.

    Returns:
        The resolved project, or None for an unknown name.
    """
    for entry in entries:
        if display_name(entry.path) == short_name:
            logger.debug("Resolved '%s' to %s", short_name, entry.path)
            return ResolvedProject(name=short_name, path=entry.path)

    logger.debug("No project named '%s' among %d entries", short_name, len(entries))
    return None
