"""Schema-constrained generation through SchemaGenerator."""

import logging

import pytest

from gemini_mocks.adapters import ScriptedAdapter
from gemini_mocks.core import (
    Decoded,
    DecodeFailure,
    GenerationRequest,
    Modality,
    TransportFailure,
    array,
    record,
    string,
)
from gemini_mocks.exceptions import APIError, ValidationError
from gemini_mocks.generation import SchemaGenerator
from gemini_mocks.telemetry import InMemoryReporter, TelemetryContext

pytestmark = pytest.mark.unit

CHAT_SHAPE = array(
    record(id=string(), title=string(), summary=string(), lastUpdated=string())
)


def _chat(index: int) -> str:
    return (
        f'{{"id": "{index}", "title": "Chat {index}", "summary": "s", '
        f'"lastUpdated": "2024-05-0{index}T10:00:00Z"}}'
    )


class TestGenerate:
    @pytest.mark.asyncio
    async def test_fenced_array_is_decoded(self):
        body = ", ".join(_chat(i) for i in range(1, 6))
        adapter = ScriptedAdapter([f"```json\n[{body}]\n```"])
        generator = SchemaGenerator(adapter)

        value = await generator.generate("List five chats.", CHAT_SHAPE)

        assert isinstance(value, list)
        assert len(value) == 5
        assert value[0]["title"] == "Chat 1"
        assert value[4]["lastUpdated"] == "2024-05-05T10:00:00Z"

    @pytest.mark.asyncio
    async def test_sends_exactly_one_request_with_the_declared_shape(self):
        adapter = ScriptedAdapter(["[]"])
        generator = SchemaGenerator(adapter)

        await generator.generate("List chats.", CHAT_SHAPE, model="gemini-x")

        assert len(adapter.requests) == 1
        request = adapter.requests[0]
        assert request.instruction == "List chats."
        assert request.shape is CHAT_SHAPE
        assert request.modality is Modality.JSON
        assert request.model == "gemini-x"

    @pytest.mark.asyncio
    async def test_leading_prose_returns_none_and_logs(self, caplog):
        adapter = ScriptedAdapter(['Here is your data: {"a":1}'])
        generator = SchemaGenerator(adapter)

        with caplog.at_level(logging.WARNING, logger="gemini_mocks.generation"):
            value = await generator.generate("Give me data.", CHAT_SHAPE)

        assert value is None
        assert "Failed to parse JSON" in caplog.text
        assert "Here is your data" in caplog.text

    @pytest.mark.asyncio
    async def test_item_counts_are_not_enforced(self):
        adapter = ScriptedAdapter([f"[{_chat(1)}, {_chat(2)}]"])
        generator = SchemaGenerator(adapter)

        value = await generator.generate("List five chats.", CHAT_SHAPE)

        assert len(value) == 2

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self):
        adapter = ScriptedAdapter([APIError("quota exceeded")])
        generator = SchemaGenerator(adapter)

        with pytest.raises(APIError, match="quota exceeded"):
            await generator.generate("List chats.", CHAT_SHAPE)
        assert len(adapter.requests) == 1

    @pytest.mark.asyncio
    async def test_empty_instruction_is_rejected_before_any_request(self):
        adapter = ScriptedAdapter()
        generator = SchemaGenerator(adapter)

        with pytest.raises(ValidationError, match="instruction"):
            await generator.generate("   ", CHAT_SHAPE)
        assert adapter.requests == []


class TestExecute:
    @pytest.mark.asyncio
    async def test_classifies_decoded(self):
        generator = SchemaGenerator(ScriptedAdapter(['{"ok": true}']))
        result = await generator.execute(GenerationRequest("Check."))
        assert result == Decoded({"ok": True})

    @pytest.mark.asyncio
    async def test_classifies_decode_failure(self):
        generator = SchemaGenerator(ScriptedAdapter(["{broken"]))
        result = await generator.execute(GenerationRequest("Check."))
        assert isinstance(result, DecodeFailure)
        assert result.raw_text == "{broken"

    @pytest.mark.asyncio
    async def test_classifies_transport_failure(self):
        error = APIError("unreachable")
        generator = SchemaGenerator(ScriptedAdapter([error]))
        result = await generator.execute(GenerationRequest("Check."))
        assert result == TransportFailure(error)


class TestShapeChecks:
    @pytest.mark.asyncio
    async def test_violations_are_logged_and_value_returned_unchanged(self, caplog):
        reply = '[{"id": "1", "title": "t"}]'
        generator = SchemaGenerator(ScriptedAdapter([reply]), check_shapes=True)

        with caplog.at_level(logging.WARNING, logger="gemini_mocks.generation"):
            value = await generator.generate("List chats.", CHAT_SHAPE)

        assert value == [{"id": "1", "title": "t"}]
        assert "missing required field 'summary'" in caplog.text

    @pytest.mark.asyncio
    async def test_checks_are_off_by_default(self, caplog):
        generator = SchemaGenerator(ScriptedAdapter(['[{"id": "1"}]']))

        with caplog.at_level(logging.WARNING, logger="gemini_mocks.generation"):
            await generator.generate("List chats.", CHAT_SHAPE)

        assert caplog.records == []


class TestTelemetry:
    @pytest.mark.asyncio
    async def test_decode_failures_are_counted_when_enabled(self, monkeypatch):
        monkeypatch.setenv("GEMINI_MOCKS_TELEMETRY", "1")
        reporter = InMemoryReporter()
        generator = SchemaGenerator(
            ScriptedAdapter(["nope"]), telemetry=TelemetryContext(reporter)
        )

        await generator.generate("Check.")

        assert "generate.execute" in reporter.timings
        assert "generate.execute.decode_failures" in reporter.metrics
