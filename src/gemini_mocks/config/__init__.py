"""Configuration management for gemini_mocks.

Configuration is resolved once (defaults < environment < programmatic),
then frozen and handed to the adapters and generators that need it.
"""

from .resolver import resolve_config
from .schema import (
    DEFAULT_EXTRACTION_MODEL,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_MODEL,
    MockSettings,
)
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [  # noqa: RUF022
    "resolve_config",
    "ResolvedConfig",
    "FrozenConfig",
    "SourceMap",
    "ConfigOrigin",
    "MockSettings",
    "DEFAULT_MODEL",
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_EXTRACTION_MODEL",
]
