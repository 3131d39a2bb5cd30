"""Google GenAI adapter.

The only module that imports the provider SDK at runtime. The SDK client is
created on first use so that a missing or invalid credential surfaces as an
``APIError`` from the first call rather than at construction.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
import httpx

from gemini_mocks.adapters.errors import GenerationErrorHandler
from gemini_mocks.config import DEFAULT_MODEL
from gemini_mocks.core.types import (
    BinarySegment,
    GenerationRequest,
    Modality,
    RawResponse,
    ResponseSegment,
    TextSegment,
)

log = logging.getLogger(__name__)

# Exceptions that mean the exchange did not complete
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    genai_errors.APIError,
    httpx.HTTPError,
    TimeoutError,
    OSError,
)


def build_contents(request: GenerationRequest) -> list[types.Part] | str:
    """Build request contents.

    Edit requests send the source image before the instruction; every other
    request sends the instruction first.
    """
    if request.image is None:
        return request.instruction
    image_part = types.Part.from_bytes(
        data=request.image.data, mime_type=request.image.mime_type
    )
    text_part = types.Part.from_text(text=request.instruction)
    if request.modality is Modality.IMAGE:
        return [image_part, text_part]
    return [text_part, image_part]


def build_config(request: GenerationRequest) -> types.GenerateContentConfig | None:
    """Map modality and shape onto the SDK generation config."""
    match request.modality:
        case Modality.JSON:
            schema = (
                request.shape.to_genai_schema() if request.shape is not None else None
            )
            return types.GenerateContentConfig(
                response_mime_type="application/json", response_schema=schema
            )
        case Modality.IMAGE:
            return types.GenerateContentConfig(response_modalities=["IMAGE"])
        case _:
            return None


def to_raw_response(response: Any) -> RawResponse:
    """Convert an SDK ``GenerateContentResponse`` into a ``RawResponse``.

    Only the first candidate is read. Thought parts are skipped.
    """
    segments: list[ResponseSegment] = []
    candidates = getattr(response, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    for part in getattr(content, "parts", None) or []:
        if getattr(part, "thought", None):
            continue
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data is not None:
            segments.append(
                BinarySegment(
                    data=bytes(inline.data),
                    mime_type=inline.mime_type or "application/octet-stream",
                )
            )
        elif isinstance(getattr(part, "text", None), str):
            segments.append(TextSegment(text=part.text))

    texts = [s.text for s in segments if isinstance(s, TextSegment)]
    return RawResponse(text="".join(texts) if texts else None, segments=tuple(segments))


class GeminiChatSession:
    """Wraps an SDK async chat so its failures surface as ``APIError``."""

    def __init__(self, chat: Any, error_handler: GenerationErrorHandler) -> None:
        self._chat = chat
        self._error_handler = error_handler

    @property
    def history(self) -> list[Any]:
        """Turn history as kept by the SDK chat."""
        return list(self._chat.get_history())

    async def send_message(self, message: str) -> Any:
        try:
            return await self._chat.send_message(message)
        except TRANSPORT_ERRORS as e:
            self._error_handler.handle(e, operation="chat")


class GeminiAdapter:
    """``GenerationAdapter`` backed by ``google.genai.Client``."""

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float | None = None,
        client: genai.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self._timeout_seconds = timeout_seconds
        self._client = client
        self._error_handler = GenerationErrorHandler()

    @property
    def client(self) -> genai.Client:
        """The SDK client, created on first access."""
        if self._client is None:
            http_options = None
            if self._timeout_seconds is not None:
                http_options = types.HttpOptions(
                    timeout=int(self._timeout_seconds * 1000)
                )
            try:
                self._client = genai.Client(
                    api_key=self._api_key, http_options=http_options
                )
            except ValueError as e:
                # Raised by the SDK when no credential can be found
                self._error_handler.handle(e, operation="client setup")
        return self._client

    async def generate(self, request: GenerationRequest) -> RawResponse:
        model = request.model or self.model
        log.debug(
            "Generating with model=%s modality=%s shaped=%s image=%s",
            model,
            request.modality.value,
            request.shape is not None,
            request.image is not None,
        )
        client = self.client
        try:
            response = await client.aio.models.generate_content(
                model=model,
                contents=build_contents(request),
                config=build_config(request),
            )
        except TRANSPORT_ERRORS as e:
            self._error_handler.handle(
                e, operation="generation", response_schema=request.shape
            )
        return to_raw_response(response)

    def start_session(
        self, *, model: str | None = None, history: Sequence[Any] | None = None
    ) -> GeminiChatSession:
        chat = self.client.aio.chats.create(
            model=model or self.model,
            history=list(history) if history else None,
        )
        return GeminiChatSession(chat, self._error_handler)
