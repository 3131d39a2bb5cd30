"""Mock data generation and multimodal helpers on top of Google Gemini."""

import importlib.metadata
import logging

from gemini_mocks.adapters import (
    ChatSession,
    GeminiAdapter,
    GenerationAdapter,
    ScriptedAdapter,
)
from gemini_mocks.chat import ChatRelay
from gemini_mocks.config import FrozenConfig, MockSettings, resolve_config
from gemini_mocks.core import (
    Decoded,
    DecodeFailure,
    GenerationRequest,
    GenerationResult,
    InlineImage,
    Modality,
    MultipartExtractor,
    RawResponse,
    Shape,
    TransportFailure,
    safe_json_parse,
)
from gemini_mocks.exceptions import (
    APIError,
    ConfigurationError,
    GeminiMocksError,
    ShapeError,
    ValidationError,
)
from gemini_mocks.generation import SchemaGenerator
from gemini_mocks.mockdata import MockDataService
from gemini_mocks.studio import MockStudio, create_studio
from gemini_mocks.telemetry import TelemetryContext, TelemetryReporter
from gemini_mocks.vision import VisionOperations

try:
    __version__ = importlib.metadata.version("gemini-mocks")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Entry points
    "MockStudio",
    "create_studio",
    # Components
    "SchemaGenerator",
    "MockDataService",
    "VisionOperations",
    "ChatRelay",
    "MultipartExtractor",
    # Adapters
    "GenerationAdapter",
    "GeminiAdapter",
    "ScriptedAdapter",
    "ChatSession",
    # Configuration
    "resolve_config",
    "FrozenConfig",
    "MockSettings",
    # Types
    "GenerationRequest",
    "GenerationResult",
    "Decoded",
    "DecodeFailure",
    "TransportFailure",
    "Modality",
    "InlineImage",
    "RawResponse",
    "Shape",
    "safe_json_parse",
    # Telemetry
    "TelemetryContext",
    "TelemetryReporter",
    # Exceptions
    "GeminiMocksError",
    "APIError",
    "ConfigurationError",
    "ValidationError",
    "ShapeError",
]
