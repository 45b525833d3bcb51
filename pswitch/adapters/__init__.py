"""Adapters — side effects behind a receipt-returning protocol."""

from pswitch.adapters.base import Adapter, ExecutionContext
from pswitch.adapters.mock import MockAdapter
from pswitch.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "default_registry",
]
