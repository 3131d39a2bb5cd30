"""Adapter protocols for the remote generative endpoint.

Generators never talk to the SDK directly; they receive an adapter at
construction. Adapters accept neutral ``GenerationRequest`` values and return
neutral ``RawResponse`` values.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from gemini_mocks.core.types import GenerationRequest, RawResponse


@runtime_checkable
class ChatReply(Protocol):
    """Anything carrying the text of one model turn."""

    @property
    def text(self) -> str | None: ...  # noqa: D102


@runtime_checkable
class ChatSession(Protocol):
    """An externally owned conversation.

    The session keeps its own turn history; callers only append one user turn
    and read one reply per call.
    """

    async def send_message(self, message: str) -> ChatReply: ...  # noqa: D102


@runtime_checkable
class GenerationAdapter(Protocol):
    """Provider capability used by the generators.

    ``generate`` performs exactly one request and raises ``APIError`` when the
    exchange does not complete.
    """

    async def generate(self, request: GenerationRequest) -> RawResponse: ...  # noqa: D102

    def start_session(  # noqa: D102
        self, *, model: str | None = None, history: Sequence[Any] | None = None
    ) -> ChatSession: ...
