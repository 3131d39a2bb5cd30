"""Decoding of model text into JSON values.

Gemini sometimes wraps JSON output in a markdown fence even when a JSON mime
type was requested. The only normalization performed is removing that fence
when it sits at the very start and very end of the text; anything else
(leading prose, truncated output, stray whitespace before the fence) is a
decode failure.
"""

import json
import logging
from typing import Any

from gemini_mocks.core.types import Decoded, DecodeFailure

log = logging.getLogger(__name__)

JSON_FENCE_OPEN = "```json\n"
FENCE_CLOSE = "```"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def strip_json_fence(text: str) -> str:
    """Remove a leading ```json line and a trailing ``` marker, if present."""
    if text.startswith(JSON_FENCE_OPEN):
        text = text[len(JSON_FENCE_OPEN) :]
    if text.endswith("\n" + FENCE_CLOSE):
        text = text[: -len(FENCE_CLOSE) - 1]
    elif text.endswith(FENCE_CLOSE):
        text = text[: -len(FENCE_CLOSE)]
    return text


def decode_json(text: str | None) -> Decoded[Any] | DecodeFailure:
    """Decode model text into a JSON value without raising.

    Returns:
        ``Decoded`` carrying the parsed value, or ``DecodeFailure`` carrying the
        raw text and the parse error.
    """
    if text is None:
        return DecodeFailure(raw_text=None, error="Response contained no text.")
    try:
        value = json.loads(strip_json_fence(text), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:  # JSONDecodeError is a ValueError
        return DecodeFailure(raw_text=text, error=str(e))
    return Decoded(value)


def safe_json_parse(text: str | None) -> Any | None:
    """Parse model text as JSON, returning None (and logging) on failure."""
    outcome = decode_json(text)
    if isinstance(outcome, DecodeFailure):
        log.warning(
            "Failed to parse JSON: %s. Original string: %r",
            outcome.error,
            outcome.raw_text,
        )
        return None
    return outcome.value
