"""Schema-constrained generation.

``SchemaGenerator`` sends one request per call and decodes the reply text.
Outcomes follow a simple policy:

- transport failures (``APIError``) propagate from ``generate``;
- undecodable or empty replies degrade to ``None`` with a logged diagnostic;
- decoded values are returned as-is, without re-validating them against the
  declared shape (an optional record-only check can log violations).

``execute`` exposes the same exchange as a ``GenerationResult`` value for
callers that prefer to branch on outcomes instead of catching exceptions.
"""

from __future__ import annotations

import logging
from typing import Any

from gemini_mocks.adapters.base import GenerationAdapter
from gemini_mocks.core.decode import decode_json
from gemini_mocks.core.shape import Shape
from gemini_mocks.core.types import (
    Decoded,
    DecodeFailure,
    GenerationRequest,
    GenerationResult,
    Modality,
    TransportFailure,
)
from gemini_mocks.exceptions import APIError
from gemini_mocks.telemetry import TelemetryContext, TelemetryContextProtocol

log = logging.getLogger(__name__)


class SchemaGenerator:
    """Turns an instruction plus a declared shape into a decoded value."""

    def __init__(
        self,
        adapter: GenerationAdapter,
        *,
        check_shapes: bool = False,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        """Bind the generator to an explicit endpoint adapter.

        Args:
            adapter: Endpoint used for every request.
            check_shapes: If True, log (but do not act on) shape violations
                found in decoded values.
            telemetry: Optional telemetry context for scope timings.
        """
        self._adapter = adapter
        self.check_shapes = check_shapes
        self._telemetry = telemetry or TelemetryContext()

    async def execute(self, request: GenerationRequest) -> GenerationResult[Any]:
        """Run one exchange and classify its outcome."""
        with self._telemetry("generate.execute", modality=request.modality.value):
            try:
                response = await self._adapter.generate(request)
            except APIError as e:
                return TransportFailure(e)

            outcome = decode_json(response.text)
            if isinstance(outcome, DecodeFailure):
                self._telemetry.count("decode_failures")
                log.warning(
                    "Failed to parse JSON: %s. Original string: %r",
                    outcome.error,
                    outcome.raw_text,
                )
                return outcome

            if self.check_shapes and request.shape is not None:
                self._log_violations(request.shape, outcome.value)
            return outcome

    async def generate(
        self,
        instruction: str,
        shape: Shape | None = None,
        modality: Modality = Modality.JSON,
        *,
        model: str | None = None,
    ) -> Any | None:
        """Generate a value conforming to ``shape``.

        Args:
            instruction: Natural-language prompt. Must be non-empty.
            shape: Declared output shape, sent as the response schema.
            modality: Requested modality; JSON unless noted otherwise.
            model: Optional model override for this call.

        Returns:
            The decoded value, or None when the reply could not be decoded.

        Raises:
            APIError: If the remote call did not complete.
            ValidationError: If ``instruction`` is empty.
        """
        request = GenerationRequest(
            instruction=instruction, shape=shape, modality=modality, model=model
        )
        match await self.execute(request):
            case Decoded(value=value):
                return value
            case TransportFailure(error=error):
                raise error
            case _:
                return None

    def _log_violations(self, shape: Shape, value: Any) -> None:
        violations = shape.violations(value)
        for violation in violations:
            log.warning("Decoded value departs from declared shape: %s", violation)
        if violations:
            self._telemetry.count("shape_violations", len(violations))
