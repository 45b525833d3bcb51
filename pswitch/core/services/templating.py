"""
Command templating — turn the configured ``open`` template into argv.

    open=code ${PROJECT}
    open="tmux new-session -c ${PROJECT} -s work"

The template is tokenized first (shell-style, quotes honoured) and the
placeholder is substituted inside each token afterwards, so a project
path containing spaces stays a single argument.
"""

from __future__ import annotations

import os
import shlex

from pswitch.core.errors import TemplateError
from pswitch.core.models.project import ResolvedProject

PROJECT_PLACEHOLDER = "${PROJECT}"
PROJECTS_DIR_PLACEHOLDER = "${projects}"

# Used when no open template is configured
DEFAULT_EDITOR = "vim"


def build_command(
    template: str,
    project: ResolvedProject,
    projects_dir: str | os.PathLike[str] | None = None,
) -> list[str]:
    """Build the argv that opens ``project``.

    Args:
        template: The open-command template. Empty means DEFAULT_EDITOR.
        project: The resolved project; its path replaces ``${PROJECT}``.
        projects_dir: Replaces ``${projects}`` when given.

    Returns:
        Tokens; the first is the executable.

    Raises:
        TemplateError: If the template has unbalanced quotes.
    """
    if not template.strip():
        return [DEFAULT_EDITOR]

    try:
        tokens = shlex.split(template)
    except ValueError as e:
        raise TemplateError(f"Cannot parse open command {template!r}: {e}") from e

    project_path = os.fspath(project.path)
    root = os.fspath(projects_dir) if projects_dir is not None else None

    argv = []
    for token in tokens:
        token = token.replace(PROJECT_PLACEHOLDER, project_path)
        if root is not None:
            token = token.replace(PROJECTS_DIR_PLACEHOLDER, root)
        argv.append(token)
    return argv
