"""Declared output shapes for each mock data family."""

from typing import get_args

from gemini_mocks.core.shape import Shape, array, boolean, obj, record, string

from .models import (
    CanvasType,
    IntegrationCategory,
    IntegrationStatus,
    Sender,
    Theme,
    VaultNodeStatus,
    VaultNodeType,
)

USER_PROFILE: Shape = obj(
    {
        "name": string(),
        "email": string(),
        "bio": string("A short, interesting bio."),
        "avatarUrl": string("A URL from picsum.photos."),
        # preferences declares no required fields
        "preferences": obj(
            {
                "theme": string(enum=get_args(Theme)),
                "notifications": boolean(),
            }
        ),
    },
    required=("name", "email", "bio", "avatarUrl", "preferences"),
)

CHAT_LIST: Shape = array(
    record(id=string(), title=string(), summary=string(), lastUpdated=string())
)

CHAT_HISTORY: Shape = array(
    record(
        id=string(),
        sender=string(enum=get_args(Sender)),
        content=string(),
        timestamp=string(),
    )
)

CANVAS_LIST: Shape = array(
    record(
        id=string(),
        title=string(),
        type=string(enum=get_args(CanvasType)),
        thumbnailUrl=string(),
        lastModified=string(),
    )
)

VAULT_NODES: Shape = array(
    record(
        id=string(),
        title=string(),
        description=string(),
        type=string(enum=get_args(VaultNodeType)),
        status=string(enum=get_args(VaultNodeStatus)),
    )
)

INTEGRATIONS: Shape = array(
    record(
        id=string(),
        name=string(),
        description=string(),
        category=string(enum=get_args(IntegrationCategory)),
        status=string(enum=get_args(IntegrationStatus)),
        url=string(),
    )
)

TAKEOUT_INTERACTIONS: Shape = array(
    record(id=string(), prompt=string(), response=string(), timestamp=string())
)
