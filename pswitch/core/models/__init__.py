"""
Domain models — pydantic types for the project switcher.

    from pswitch.core.models import Settings, ProjectEntry, ResolvedProject
"""

from pswitch.core.models.action import Action, Receipt
from pswitch.core.models.project import ProjectEntry, ResolvedProject
from pswitch.core.models.settings import Settings

__all__ = [
    "Action",
    "ProjectEntry",
    "Receipt",
    "ResolvedProject",
    "Settings",
]
