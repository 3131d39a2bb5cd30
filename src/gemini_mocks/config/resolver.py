"""Configuration resolution with precedence handling.

Precedence, highest first: programmatic overrides > environment > defaults.
An optional ``.env`` file is loaded into the environment first; it never
overrides variables that are already set.
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from gemini_mocks.exceptions import ConfigurationError

from .schema import MockSettings
from .types import ConfigOrigin, ResolvedConfig

log = logging.getLogger(__name__)

# Field name -> environment variables consulted, first match wins
ENV_VARS: dict[str, tuple[str, ...]] = {
    "api_key": ("GEMINI_API_KEY", "API_KEY"),
    "model": ("GEMINI_MODEL",),
    "image_model": ("GEMINI_IMAGE_MODEL",),
    "extraction_model": ("GEMINI_EXTRACTION_MODEL",),
    "use_real_api": ("GEMINI_USE_REAL_API",),
    "check_shapes": ("GEMINI_CHECK_SHAPES",),
    "timeout_seconds": ("GEMINI_TIMEOUT_SECONDS",),
}


def _load_env_values(env_file: str | Path | None) -> dict[str, str]:
    if env_file is not None:
        env_path = Path(env_file)
        if not env_path.exists():
            raise ConfigurationError(f"Environment file not found: {env_path}")
        load_dotenv(env_path, override=False)

    values: dict[str, str] = {}
    for field, names in ENV_VARS.items():
        for name in names:
            if name in os.environ:
                values[field] = os.environ[name]
                break
    return values


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    env_file: str | Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration from all sources with proper precedence.

    Args:
        programmatic: Overrides with the highest precedence. Unknown keys are
            ignored.
        env_file: Optional ``.env`` file loaded before reading the environment.

    Returns:
        ResolvedConfig with merged values and the origin of each field.

    Raises:
        ConfigurationError: If a value fails validation or ``env_file`` is
            missing.
    """
    merged: dict[str, Any] = {}
    origins: dict[str, ConfigOrigin] = {}

    for name, field in MockSettings.model_fields.items():
        merged[name] = field.default
        origins[name] = "default"

    for name, value in _load_env_values(env_file).items():
        merged[name] = value
        origins[name] = "env"

    for name, value in (programmatic or {}).items():
        if name in merged:
            merged[name] = value
            origins[name] = "programmatic"
        else:
            log.debug("Ignoring unknown configuration key '%s'.", name)

    try:
        settings = MockSettings(_env_file=None, **merged)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e

    final = settings.to_dict()
    log.debug(
        "Configuration resolved: model=%s, use_real_api=%s, api_key_present=%s",
        final["model"],
        final["use_real_api"],
        bool(final["api_key"]),
    )
    return ResolvedConfig(**final, origin=origins)
