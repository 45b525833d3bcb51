"""
Shell command adapter — launch the command that opens a project.

The command runs in the foreground with the terminal's stdin, stdout and
stderr connected, so an editor like vim takes over the terminal until
it exits.
"""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from pswitch.adapters.base import Adapter, ExecutionContext
from pswitch.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ShellCommandAdapter(Adapter):
    """Run an argv list, no shell in between.

    Action params:
        argv (list[str]): Executable followed by its arguments.
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return True

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        argv = context.params.get("argv")
        if not argv or not isinstance(argv, list):
            return False, "Missing required param: 'argv'"
        if not argv[0]:
            return False, "Empty executable name"

        if not Path(context.working_dir).is_dir():
            return False, f"Working directory does not exist: {context.working_dir}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        argv: list[str] = context.params["argv"]
        cwd = context.working_dir

        logger.debug("Executing: %s (cwd=%s)", argv, cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(argv, cwd=cwd)
        except FileNotFoundError:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command not found: {argv[0]}",
                metadata={"argv": argv},
            )
        except PermissionError:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Permission denied: {argv[0]}",
                metadata={"argv": argv},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Could not launch {argv[0]}: {e}",
                metadata={"argv": argv},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                return_code=0,
                duration_ms=elapsed_ms,
                metadata={"argv": argv},
            )

        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=f"{argv[0]} exited with code {result.returncode}",
            return_code=result.returncode,
            duration_ms=elapsed_ms,
            metadata={"argv": argv},
        )
