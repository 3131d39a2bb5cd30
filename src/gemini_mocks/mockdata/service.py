"""Mock data generators.

Each method fixes an instruction and a shape and delegates to a
``SchemaGenerator``. Requested item counts are hints to the model only: a
reply with more or fewer items than asked for is returned unchanged.
"""

from __future__ import annotations

import logging
from typing import cast

from gemini_mocks.generation import SchemaGenerator
from gemini_mocks.telemetry import TelemetryContext, TelemetryContextProtocol

from . import prompts, shapes
from .models import (
    Canvas,
    Chat,
    Integration,
    Message,
    TakeoutInteraction,
    UserProfile,
    VaultNode,
)
from .reference import DEFAULT_MEMORY_LOG

log = logging.getLogger(__name__)


class MockDataService:
    """Generates mock domain records through a schema generator."""

    def __init__(
        self,
        generator: SchemaGenerator,
        *,
        extraction_model: str | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self._generator = generator
        self._extraction_model = extraction_model
        self._telemetry = telemetry or TelemetryContext()

    async def generate_user_profile(self) -> UserProfile | None:
        with self._telemetry("generate.user_profile"):
            value = await self._generator.generate(
                prompts.USER_PROFILE, shapes.USER_PROFILE
            )
        return cast("UserProfile | None", value)

    async def generate_chat_list(self) -> list[Chat] | None:
        with self._telemetry("generate.chat_list"):
            value = await self._generator.generate(prompts.CHAT_LIST, shapes.CHAT_LIST)
        return cast("list[Chat] | None", value)

    async def generate_chat_history(self, chat_title: str) -> list[Message] | None:
        """Generate 6-10 alternating messages for the titled conversation."""
        with self._telemetry("generate.chat_history"):
            value = await self._generator.generate(
                prompts.chat_history(chat_title), shapes.CHAT_HISTORY
            )
        return cast("list[Message] | None", value)

    async def generate_canvas_list(self) -> list[Canvas] | None:
        with self._telemetry("generate.canvas_list"):
            value = await self._generator.generate(
                prompts.CANVAS_LIST, shapes.CANVAS_LIST
            )
        return cast("list[Canvas] | None", value)

    async def generate_vault_nodes(
        self, memory_log: str = DEFAULT_MEMORY_LOG
    ) -> list[VaultNode] | None:
        """Restructure a memory log into vault nodes.

        Execution methods become 'Execution Method' nodes and applied
        scenarios become 'Marketing Protocol' nodes; eight are requested.
        """
        with self._telemetry("generate.vault_nodes"):
            value = await self._generator.generate(
                prompts.vault_nodes(memory_log), shapes.VAULT_NODES
            )
        return cast("list[VaultNode] | None", value)

    async def generate_integrations(self) -> list[Integration] | None:
        with self._telemetry("generate.integrations"):
            value = await self._generator.generate(
                prompts.INTEGRATIONS, shapes.INTEGRATIONS
            )
        return cast("list[Integration] | None", value)

    async def process_takeout_data(
        self, takeout_data: str
    ) -> list[TakeoutInteraction] | None:
        """Consolidate raw Takeout export text into interaction records.

        The export is treated as opaque text: it is quoted into the
        instruction and never parsed locally.
        """
        log.debug("Extracting interactions from %d chars of takeout data.", len(takeout_data))
        with self._telemetry("generate.takeout"):
            value = await self._generator.generate(
                prompts.takeout_extraction(takeout_data),
                shapes.TAKEOUT_INTERACTIONS,
                model=self._extraction_model,
            )
        return cast("list[TakeoutInteraction] | None", value)
