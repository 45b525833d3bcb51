"""
Git adapter — repository initialisation for new projects.

Uses the git CLI.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from pswitch.adapters.base import Adapter, ExecutionContext
from pswitch.core.models.action import Receipt

logger = logging.getLogger(__name__)

GIT_TIMEOUT = 30  # seconds


class GitAdapter(Adapter):
    """Git operations.

    Action params:
        operation (str): 'init'.
    """

    VALID_OPERATIONS = ("init",)

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.params.get("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"
        if operation not in self.VALID_OPERATIONS:
            return False, (
                f"Unknown operation '{operation}'. "
                f"Valid: {', '.join(self.VALID_OPERATIONS)}"
            )
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        if not self.is_available():
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error="git executable not found on PATH",
            )

        try:
            output = self._git(["init"], context.working_dir)
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"git init timed out after {GIT_TIMEOUT}s",
            )
        except (RuntimeError, OSError) as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Git error: {e}",
            )

        return Receipt.success(
            adapter=self.name,
            action_id=context.action.id,
            output=output.strip(),
        )

    def _git(self, args: list[str], cwd: str) -> str:
        """Run a git command and return stdout."""
        logger.debug("git %s (cwd=%s)", " ".join(args), cwd)
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
        )
        if result.returncode != 0:
            raise RuntimeError(result.stderr.strip() or f"git {args[0]} failed")
        return result.stdout
