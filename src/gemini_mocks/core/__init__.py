"""Provider-neutral building blocks: request and response types, shapes,
decoding and segment extraction."""

from gemini_mocks.core.decode import decode_json, safe_json_parse, strip_json_fence
from gemini_mocks.core.segments import MultipartExtractor, first_image
from gemini_mocks.core.shape import (
    Shape,
    ShapeType,
    Violation,
    array,
    boolean,
    number,
    obj,
    record,
    string,
)
from gemini_mocks.core.types import (
    BinarySegment,
    Decoded,
    DecodeFailure,
    GenerationRequest,
    GenerationResult,
    InlineImage,
    Modality,
    RawResponse,
    ResponseSegment,
    TextSegment,
    TransportFailure,
)

__all__ = [  # noqa: RUF022
    # Types
    "GenerationRequest",
    "GenerationResult",
    "Decoded",
    "DecodeFailure",
    "TransportFailure",
    "Modality",
    "InlineImage",
    "RawResponse",
    "ResponseSegment",
    "TextSegment",
    "BinarySegment",
    # Shapes
    "Shape",
    "ShapeType",
    "Violation",
    "string",
    "number",
    "boolean",
    "obj",
    "array",
    "record",
    # Decoding
    "decode_json",
    "safe_json_parse",
    "strip_json_fence",
    # Segments
    "MultipartExtractor",
    "first_image",
]
