"""
Path utility — slash-delimited path segments.

Display names are the last segment of a project path. Nesting checks
compare whole segments, so ``/projects/foo`` is not treated as a parent
of ``/projects/foobar``.
"""

from __future__ import annotations

import os

SEPARATOR = "/"


def split_segments(path: str | os.PathLike[str]) -> list[str]:
    """Split a path on ``/`` and drop the empty segments.

    Trailing and duplicate separators are tolerated::

        >>> split_segments("/a/b//c/")
        ['a', 'b', 'c']
        >>> split_segments("")
        []
    """
    return [segment for segment in os.fspath(path).split(SEPARATOR) if segment]


def display_name(path: str | os.PathLike[str]) -> str | None:
    """Last segment of ``path``, or None when the path has no segments."""
    segments = split_segments(path)
    if not segments:
        return None
    return segments[-1]


def is_subpath(child: str | os.PathLike[str], parent: str | os.PathLike[str]) -> bool:
    """True if ``child`` lies strictly below ``parent``."""
    child_parts = split_segments(child)
    parent_parts = split_segments(parent)
    if len(child_parts) <= len(parent_parts):
        return False
    return child_parts[: len(parent_parts)] == parent_parts
