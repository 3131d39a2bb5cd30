"""Domain payload records produced by the mock data generators.

These are plain ``TypedDict`` records: decoded JSON is returned as-is and
typed by cast, never re-validated.
"""

from typing import Literal, TypedDict

Theme = Literal["dark", "light"]
Sender = Literal["user", "gemini"]
CanvasType = Literal["Code Project", "Document", "Whiteboard", "Design Mockup"]
VaultNodeType = Literal[
    "Marketing Protocol",
    "Execution Method",
    "Core System",
    "Signal Protocol",
    "Data Layer",
    "UI Component",
    "Security Key",
]
VaultNodeStatus = Literal["Active", "Dormant", "Building", "Locked"]
IntegrationCategory = Literal["CRM", "Finance", "HR", "Marketing", "Custom App"]
IntegrationStatus = Literal["Live", "Pending", "Error"]


class UserPreferences(TypedDict, total=False):
    theme: Theme
    notifications: bool


class UserProfile(TypedDict):
    name: str
    email: str
    bio: str
    avatarUrl: str  # noqa: N815
    preferences: UserPreferences


class Chat(TypedDict):
    id: str
    title: str
    summary: str
    lastUpdated: str  # noqa: N815


class Message(TypedDict):
    id: str
    sender: Sender
    content: str
    timestamp: str


class Canvas(TypedDict):
    id: str
    title: str
    type: CanvasType
    thumbnailUrl: str  # noqa: N815
    lastModified: str  # noqa: N815


class VaultNode(TypedDict):
    id: str
    title: str
    description: str
    type: VaultNodeType
    status: VaultNodeStatus


class Integration(TypedDict):
    id: str
    name: str
    description: str
    category: IntegrationCategory
    status: IntegrationStatus
    url: str


class TakeoutInteraction(TypedDict):
    id: str
    prompt: str
    response: str
    timestamp: str
