"""
Mock adapter — records actions instead of performing them.

Tests register it under a real adapter name ("shell", "git") to see
what would have been launched or initialised.
"""

from __future__ import annotations

from pswitch.adapters.base import Adapter, ExecutionContext
from pswitch.core.models.action import Receipt


class MockAdapter(Adapter):
    """Succeeds for every action except the ones told to fail."""

    def __init__(self, adapter_name: str = "mock", available: bool = True):
        self._name = adapter_name
        self._available = available
        self._failures: dict[str, Receipt] = {}
        self.calls: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def launched(self) -> list[list[str]]:
        """argv of every recorded shell launch."""
        return [ctx.params["argv"] for ctx in self.calls if "argv" in ctx.params]

    def is_available(self) -> bool:
        return self._available

    def fail_on(self, action_id: str, error: str = "Mock failure") -> None:
        """Answer ``action_id`` with a failed receipt."""
        self._failures[action_id] = Receipt.failure(adapter=self._name, action_id=action_id, error=error)

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.calls.append(context)
        failure = self._failures.get(context.action.id)
        if failure is not None:
            return failure
        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=f"[mock] {context.action.id}",
            metadata={"mock": True},
        )
