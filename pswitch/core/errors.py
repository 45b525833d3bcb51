"""
Error types shared by the core services.

Anything deriving from StartupError is unrecoverable for the current
run: the CLI prints the message and exits non-zero. Everything else is
reported at the boundary of the operation that produced it.
"""

from __future__ import annotations


class StartupError(Exception):
    """A precondition for the whole run does not hold."""


class ConfigError(StartupError):
    """Raised when the settings file is missing or invalid."""


class RootUnreadableError(StartupError):
    """Raised when the projects directory cannot be listed."""


class TemplateError(ValueError):
    """Raised when an open-command template cannot be tokenized."""
