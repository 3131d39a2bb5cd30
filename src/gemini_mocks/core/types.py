"""Core data types that flow between callers, generators and adapters.

Every value here is immutable and built fresh per call. Adapters translate
SDK objects into these neutral types so that nothing above the adapter layer
depends on the provider SDK.
"""

from __future__ import annotations

import base64
import binascii
import dataclasses
from enum import Enum
import typing

from gemini_mocks.exceptions import APIError, ValidationError

if typing.TYPE_CHECKING:
    from gemini_mocks.core.shape import Shape


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValidationError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


class Modality(str, Enum):
    """Output modality requested from the model."""

    TEXT = "text"
    IMAGE = "image"
    JSON = "json"


# --- Response segments ---


@dataclasses.dataclass(frozen=True, slots=True)
class TextSegment:
    """A text part of a multimodal response."""

    text: str


@dataclasses.dataclass(frozen=True, slots=True)
class BinarySegment:
    """An inline binary part of a multimodal response."""

    data: bytes
    mime_type: str

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.data, bytes | bytearray),
            message="must be bytes",
            field_name="data",
            exc=TypeError,
        )


type ResponseSegment = TextSegment | BinarySegment


@dataclasses.dataclass(frozen=True, slots=True)
class InlineImage:
    """Image payload with its declared mime type."""

    data: bytes
    mime_type: str

    def __post_init__(self) -> None:
        _require(
            condition=bool(self.mime_type),
            message="must be a non-empty string",
            field_name="mime_type",
        )

    @classmethod
    def from_base64(cls, payload: str, mime_type: str) -> InlineImage:
        """Build an image from a base64 string."""
        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValidationError(f"Image payload is not valid base64: {e}") from e
        return cls(data=data, mime_type=mime_type)

    def to_base64(self) -> str:
        """Return the payload as an ASCII base64 string."""
        return base64.b64encode(self.data).decode("ascii")


@dataclasses.dataclass(frozen=True, slots=True)
class RawResponse:
    """Provider-neutral reply from the remote model.

    ``text`` is the concatenation of the reply's text parts (None when there
    are none); ``segments`` keeps every part in the order it was returned.
    """

    text: str | None = None
    segments: tuple[ResponseSegment, ...] = ()


# --- Requests ---


@dataclasses.dataclass(frozen=True, slots=True)
class GenerationRequest:
    """A single generation request.

    Attributes:
        instruction: Natural-language prompt sent to the model.
        shape: Declared output shape, if the output is constrained.
        modality: Requested output modality.
        model: Optional model override; adapters fall back to their default.
        image: Optional image input sent alongside the instruction.
    """

    instruction: str
    shape: Shape | None = None
    modality: Modality = Modality.JSON
    model: str | None = None
    image: InlineImage | None = None

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.instruction, str)
            and bool(self.instruction.strip()),
            message="must be a non-empty string",
            field_name="instruction",
        )
        _require(
            condition=isinstance(self.modality, Modality),
            message="must be a Modality",
            field_name="modality",
            exc=TypeError,
        )


# --- Generation outcomes ---
# Three mutually exclusive outcomes of one schema-constrained exchange.


@dataclasses.dataclass(frozen=True, slots=True)
class Decoded[T]:
    """The reply decoded into a value."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class DecodeFailure:
    """The call completed but its text could not be decoded."""

    raw_text: str | None
    error: str


@dataclasses.dataclass(frozen=True, slots=True)
class TransportFailure:
    """The remote call itself did not complete."""

    error: APIError


type GenerationResult[T] = Decoded[T] | DecodeFailure | TransportFailure
