"""Configuration schema and validation using Pydantic.

Validates and coerces values gathered from defaults, the environment and
programmatic overrides. Environment variables use the ``GEMINI_`` prefix; the
credential is also accepted as a bare ``API_KEY``.
"""

from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_EXTRACTION_MODEL = "gemini-2.5-pro"


class MockSettings(BaseSettings):
    """Pydantic settings schema for the mock generation client."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        description="Google Gemini API key",
        validation_alias=AliasChoices("api_key", "GEMINI_API_KEY", "API_KEY"),
    )

    model: str = Field(
        default=DEFAULT_MODEL,
        description="Model used for structured and text generation",
        min_length=1,
    )

    image_model: str = Field(
        default=DEFAULT_IMAGE_MODEL,
        description="Model used for image editing",
        min_length=1,
    )

    extraction_model: str = Field(
        default=DEFAULT_EXTRACTION_MODEL,
        description="Model used for log-to-JSON extraction",
        min_length=1,
    )

    use_real_api: bool = Field(
        default=True,
        description="Call the real endpoint instead of the scripted adapter",
    )

    check_shapes: bool = Field(
        default=False,
        description="Log shape violations found in decoded values",
    )

    timeout_seconds: float | None = Field(
        default=None,
        description="Per-request timeout handed to the SDK transport",
        gt=0,
    )

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary of every field, keyed by field name."""
        return {name: getattr(self, name) for name in type(self).model_fields}
