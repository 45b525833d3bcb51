"""
Filesystem adapter — the writes performed when creating a project.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pswitch.adapters.base import Adapter, ExecutionContext
from pswitch.core.models.action import Receipt

logger = logging.getLogger(__name__)


class FilesystemAdapter(Adapter):
    """Create directories and empty files.

    Action params:
        operation (str): 'mkdir' or 'touch'.
        path (str): Target, relative to the working directory or absolute.

    ``mkdir`` refuses to reuse an existing directory. ``touch`` creates
    (or truncates) an empty file.
    """

    VALID_OPERATIONS = ("mkdir", "touch")

    @property
    def name(self) -> str:
        return "filesystem"

    def is_available(self) -> bool:
        return True

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.params.get("operation", "")
        if operation not in self.VALID_OPERATIONS:
            return False, (
                f"Unknown operation '{operation}'. "
                f"Valid: {', '.join(self.VALID_OPERATIONS)}"
            )

        if not context.params.get("path"):
            return False, "Missing required param: 'path'"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        operation = context.params["operation"]
        target = Path(context.params["path"])
        if not target.is_absolute():
            target = Path(context.working_dir) / target

        try:
            if operation == "mkdir":
                target.mkdir()
                output = f"Directory created: {target}"
            else:
                with open(target, "w", encoding="utf-8"):
                    pass
                output = f"File created: {target}"
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"{e.strerror or e}: {target}",
                metadata={"operation": operation, "path": str(target)},
            )

        logger.debug(output)
        return Receipt.success(
            adapter=self.name,
            action_id=context.action.id,
            output=output,
            metadata={"operation": operation, "path": str(target)},
        )
