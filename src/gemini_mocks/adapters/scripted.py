"""Deterministic adapter used for tests and offline runs (no network)."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import json
from typing import Any

from gemini_mocks.core.shape import Shape, ShapeType
from gemini_mocks.core.types import GenerationRequest, RawResponse, TextSegment

type ScriptedReply = RawResponse | str | Exception


def sample_value(shape: Shape) -> Any:
    """Smallest value that satisfies ``shape``.

    Strings are a placeholder (or the first allowed value), numbers are 0,
    booleans are false and arrays hold a single element.
    """
    match shape.type:
        case ShapeType.STRING:
            return shape.enum[0] if shape.enum else "sample"
        case ShapeType.NUMBER:
            return 0
        case ShapeType.BOOLEAN:
            return False
        case ShapeType.OBJECT:
            return {
                name: sample_value(child)
                for name, child in (shape.properties or {}).items()
            }
        case ShapeType.ARRAY:
            assert shape.items is not None
            return [sample_value(shape.items)]


def _as_response(reply: RawResponse | str) -> RawResponse:
    if isinstance(reply, RawResponse):
        return reply
    return RawResponse(text=reply, segments=(TextSegment(reply),))


@dataclass(frozen=True, slots=True)
class ScriptedChatReply:
    """Reply object mirroring the ``.text`` attribute of SDK chat replies."""

    text: str | None


@dataclass
class ScriptedSession:
    """Chat session that answers from a queue and records every turn."""

    replies: deque[str | None | Exception] = field(default_factory=deque)
    history: list[tuple[str, str | None]] = field(default_factory=list)

    async def send_message(self, message: str) -> ScriptedChatReply:
        reply = self.replies.popleft() if self.replies else None
        if isinstance(reply, Exception):
            raise reply
        self.history.append((message, reply))
        return ScriptedChatReply(text=reply)


class ScriptedAdapter:
    """``GenerationAdapter`` that replays queued replies in order.

    Each queued reply is a ``RawResponse``, a plain string (wrapped as a single
    text segment) or an exception, which is raised instead of replying. Once
    the queue is empty, shaped requests get a sample value built from their
    shape and other requests get the instruction echoed back as text.
    Every request is recorded in ``requests``.
    """

    def __init__(
        self,
        replies: Iterable[ScriptedReply] = (),
        *,
        chat_replies: Iterable[str | None | Exception] = (),
    ) -> None:
        self._replies: deque[ScriptedReply] = deque(replies)
        self._chat_replies = list(chat_replies)
        self.requests: list[GenerationRequest] = []
        self.sessions: list[ScriptedSession] = []

    def queue(self, *replies: ScriptedReply) -> None:
        self._replies.extend(replies)

    async def generate(self, request: GenerationRequest) -> RawResponse:
        self.requests.append(request)
        if not self._replies:
            if request.shape is not None:
                return _as_response(json.dumps(sample_value(request.shape)))
            return _as_response(f"echo: {request.instruction}")
        reply = self._replies.popleft()
        if isinstance(reply, Exception):
            raise reply
        return _as_response(reply)

    def start_session(
        self,
        *,
        model: str | None = None,  # noqa: ARG002
        history: Sequence[Any] | None = None,
    ) -> ScriptedSession:
        session = ScriptedSession(
            replies=deque(self._chat_replies),
            history=list(history or []),
        )
        self.sessions.append(session)
        return session
