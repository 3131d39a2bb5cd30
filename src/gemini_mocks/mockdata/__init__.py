"""Mock data generation for the FAA.Zone dashboard."""

from .models import (
    Canvas,
    Chat,
    Integration,
    Message,
    TakeoutInteraction,
    UserPreferences,
    UserProfile,
    VaultNode,
)
from .prompts import quote_reference
from .reference import DEFAULT_MEMORY_LOG
from .service import MockDataService

__all__ = [  # noqa: RUF022
    "MockDataService",
    "quote_reference",
    "DEFAULT_MEMORY_LOG",
    # Records
    "UserProfile",
    "UserPreferences",
    "Chat",
    "Message",
    "Canvas",
    "VaultNode",
    "Integration",
    "TakeoutInteraction",
]
