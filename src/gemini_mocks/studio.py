"""The caller-facing entry point.

``MockStudio`` composes the generator, the mock data service, the vision
operations and the chat relay around one adapter built from one frozen
configuration. ``create_studio`` is the only place where ambient
configuration is resolved.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from gemini_mocks.adapters import (
    ChatSession,
    GeminiAdapter,
    GenerationAdapter,
    ScriptedAdapter,
)
from gemini_mocks.chat import ChatRelay
from gemini_mocks.config import FrozenConfig, resolve_config
from gemini_mocks.core.types import InlineImage
from gemini_mocks.generation import SchemaGenerator
from gemini_mocks.mockdata import (
    DEFAULT_MEMORY_LOG,
    Canvas,
    Chat,
    Integration,
    Message,
    MockDataService,
    TakeoutInteraction,
    UserProfile,
    VaultNode,
)
from gemini_mocks.telemetry import TelemetryContext, TelemetryContextProtocol
from gemini_mocks.vision import VisionOperations

log = logging.getLogger(__name__)


def build_adapter(config: FrozenConfig) -> GenerationAdapter:
    """Build the adapter the configuration asks for."""
    if config.use_real_api:
        return GeminiAdapter(
            config.api_key,
            model=config.model,
            timeout_seconds=config.timeout_seconds,
        )
    log.info("use_real_api is off; replies come from the scripted adapter.")
    return ScriptedAdapter()


class MockStudio:
    """Mock data, vision and chat operations over a single adapter.

    Every operation issues exactly one request. Undecodable structured
    replies come back as None; transport failures raise ``APIError``.
    """

    def __init__(
        self,
        config: FrozenConfig,
        adapter: GenerationAdapter | None = None,
        *,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        """Wire the studio.

        Args:
            config: Frozen configuration for models and behavior switches.
            adapter: Optional adapter overriding the one built from ``config``.
            telemetry: Optional telemetry context shared by every component.
        """
        self.config = config
        self.adapter = adapter if adapter is not None else build_adapter(config)
        ctx = telemetry or TelemetryContext()
        self.generator = SchemaGenerator(
            self.adapter, check_shapes=config.check_shapes, telemetry=ctx
        )
        self.data = MockDataService(
            self.generator,
            extraction_model=config.extraction_model,
            telemetry=ctx,
        )
        self.vision = VisionOperations(
            self.adapter, image_model=config.image_model, telemetry=ctx
        )
        self.relay = ChatRelay()

    # --- Mock data ---

    async def generate_user_profile(self) -> UserProfile | None:
        return await self.data.generate_user_profile()

    async def generate_chat_list(self) -> list[Chat] | None:
        return await self.data.generate_chat_list()

    async def generate_chat_history(self, chat_title: str) -> list[Message] | None:
        return await self.data.generate_chat_history(chat_title)

    async def generate_canvas_list(self) -> list[Canvas] | None:
        return await self.data.generate_canvas_list()

    async def generate_vault_nodes(
        self, memory_log: str = DEFAULT_MEMORY_LOG
    ) -> list[VaultNode] | None:
        return await self.data.generate_vault_nodes(memory_log)

    async def generate_integrations(self) -> list[Integration] | None:
        return await self.data.generate_integrations()

    async def process_takeout_data(
        self, takeout_data: str
    ) -> list[TakeoutInteraction] | None:
        return await self.data.process_takeout_data(takeout_data)

    # --- Vision ---

    async def describe_image(
        self, image: InlineImage | str, mime_type: str | None = None
    ) -> str | None:
        return await self.vision.describe_image(image, mime_type)

    async def edit_image(
        self,
        image: InlineImage | str,
        prompt: str,
        mime_type: str | None = None,
    ) -> InlineImage | None:
        return await self.vision.edit_image(image, prompt, mime_type)

    # --- Chat ---

    def start_chat(self, history: Sequence[Any] | None = None) -> ChatSession:
        """Open a new endpoint-owned chat session on the default model."""
        return self.adapter.start_session(model=self.config.model, history=history)

    async def send_chat(self, session: ChatSession, message: str) -> str | None:
        return await self.relay.send(session, message)


def create_studio(
    config: FrozenConfig | None = None,
    *,
    adapter: GenerationAdapter | None = None,
    **overrides: Any,
) -> MockStudio:
    """Create a studio with optional configuration.

    If no configuration is given, it is resolved from the environment with
    ``overrides`` taking precedence.

    Args:
        config: Optional frozen configuration. Mutually exclusive with
            ``overrides``.
        adapter: Optional adapter, e.g. a ``ScriptedAdapter`` in tests.
        **overrides: Programmatic configuration values.

    Raises:
        ConfigurationError: If the resolved configuration is invalid.
        TypeError: If both ``config`` and ``overrides`` are given.
    """
    if config is not None and overrides:
        raise TypeError("Pass either a FrozenConfig or keyword overrides, not both.")
    final_config = config or resolve_config(overrides).to_frozen()
    return MockStudio(final_config, adapter)
