"""Free-form chat continuation over an externally owned session."""

from __future__ import annotations

import logging

from gemini_mocks.adapters.base import ChatSession
from gemini_mocks.adapters.errors import GenerationErrorHandler
from gemini_mocks.core.types import _require
from gemini_mocks.exceptions import APIError

log = logging.getLogger(__name__)


class ChatRelay:
    """Appends one user turn to a session and returns the reply text.

    The session owns its history; the relay keeps no state between calls.
    """

    def __init__(self, error_handler: GenerationErrorHandler | None = None) -> None:
        self._error_handler = error_handler or GenerationErrorHandler()

    async def send(self, session: ChatSession, message: str) -> str | None:
        """Send ``message`` and return the reply, or None if it has no text.

        Raises:
            APIError: If the exchange did not complete.
            ValidationError: If ``message`` is not a string.
        """
        _require(
            condition=isinstance(message, str),
            message="must be a string",
            field_name="message",
        )
        try:
            reply = await session.send_message(message)
        except APIError:
            raise
        except Exception as e:
            # Sessions from other providers raise their own errors
            self._error_handler.handle(e, operation="chat")
        text = getattr(reply, "text", None)
        if not text:
            log.debug("Chat reply contained no text.")
            return None
        return text
