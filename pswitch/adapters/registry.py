"""
Adapter registry — single dispatch point for side effects.

Use cases hold a registry, not adapters. Tests register a MockAdapter
under the name of the adapter it replaces.
"""

from __future__ import annotations

import logging
import time

from pswitch.adapters.base import Adapter, ExecutionContext
from pswitch.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Adapters by name, plus the execute-with-receipt loop."""

    def __init__(self):
        self._adapters: dict[str, Adapter] = {}

    def register(self, adapter: Adapter) -> None:
        if adapter.name in self._adapters:
            logger.debug("Replacing adapter %s", adapter.name)
        self._adapters[adapter.name] = adapter

    def execute_action(
        self,
        action: Action,
        working_dir: str = ".",
        dry_run: bool = False,
    ) -> Receipt:
        """Validate and execute ``action`` in ``working_dir``. Never raises.

        With ``dry_run`` the action is validated and a skipped receipt is
        returned without executing anything.
        """
        started = time.monotonic()

        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"No adapter registered for '{action.adapter}'",
            )

        context = ExecutionContext(action=action, working_dir=working_dir, dry_run=dry_run)
        valid, reason = adapter.validate(context)
        if not valid:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation failed: {reason}",
            )

        if dry_run:
            return Receipt.skip(
                adapter=action.adapter,
                action_id=action.id,
                reason=f"[dry-run] {action.adapter}:{action.id}",
            )

        try:
            receipt = adapter.execute(context)
        except Exception as e:
            # Contract breach by the adapter; the caller still gets a receipt
            logger.error("Adapter %s raised: %s", action.adapter, e)
            receipt = Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Unexpected error: {e}",
            )

        if not receipt.duration_ms:
            receipt.duration_ms = int((time.monotonic() - started) * 1000)
        logger.debug("%s:%s -> %s", action.adapter, action.id, receipt.status)
        return receipt


def default_registry() -> AdapterRegistry:
    """Registry with the shell, git and filesystem adapters."""
    from pswitch.adapters.shell.command import ShellCommandAdapter
    from pswitch.adapters.shell.filesystem import FilesystemAdapter
    from pswitch.adapters.vcs.git import GitAdapter

    registry = AdapterRegistry()
    for adapter in (ShellCommandAdapter(), GitAdapter(), FilesystemAdapter()):
        registry.register(adapter)
    return registry
