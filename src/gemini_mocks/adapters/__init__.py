"""Adapters for the remote generative endpoint.

``GeminiAdapter`` talks to Google Gemini; ``ScriptedAdapter`` replays canned
replies. Both satisfy ``GenerationAdapter``.
"""

from gemini_mocks.adapters.base import ChatReply, ChatSession, GenerationAdapter
from gemini_mocks.adapters.errors import GenerationErrorHandler
from gemini_mocks.adapters.gemini import GeminiAdapter, GeminiChatSession
from gemini_mocks.adapters.scripted import ScriptedAdapter, ScriptedSession

__all__ = [
    "ChatReply",
    "ChatSession",
    "GeminiAdapter",
    "GeminiChatSession",
    "GenerationAdapter",
    "GenerationErrorHandler",
    "ScriptedAdapter",
    "ScriptedSession",
]
