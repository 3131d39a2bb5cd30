"""Configuration data types, following the resolve-once, freeze-then-flow pattern."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

ConfigOrigin = Literal["programmatic", "env", "default"]
SourceMap = Mapping[str, ConfigOrigin]

FIELD_ORDER = (
    "api_key",
    "model",
    "image_model",
    "extraction_model",
    "use_real_api",
    "check_shapes",
    "timeout_seconds",
)


class ResolvedConfig(NamedTuple):
    """Configuration after resolution, with the origin of every field."""

    api_key: str | None
    model: str
    image_model: str
    extraction_model: str
    use_real_api: bool
    check_shapes: bool
    timeout_seconds: float | None

    origin: SourceMap

    def __str__(self) -> str:
        """String representation with redacted API key for safe logging."""
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"ResolvedConfig(api_key={api_key_display!r}, model={self.model!r}, "
            f"image_model={self.image_model!r}, "
            f"extraction_model={self.extraction_model!r}, "
            f"use_real_api={self.use_real_api!r}, "
            f"check_shapes={self.check_shapes!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, "
            f"origin={dict(self.origin)!r})"
        )

    def __repr__(self) -> str:
        return self.__str__()

    def to_frozen(self) -> "FrozenConfig":
        """Drop audit metadata and return the immutable runtime config."""
        return FrozenConfig(**{name: getattr(self, name) for name in FIELD_ORDER})

    def audit(self) -> str:
        """Redacted report of where each field value came from."""
        lines = []
        for field in FIELD_ORDER:
            if field not in self.origin:
                continue
            origin = self.origin[field]
            value = getattr(self, field)
            if field == "api_key":
                display = f"{origin}:None" if value is None else f"{origin}:[REDACTED]"
            elif origin == "env":
                display = f"env:GEMINI_{field.upper()}={value}"
            else:
                display = f"{origin}:{value}"
            lines.append(f"{field}: {display}")
        return "\n".join(lines)


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration handed to adapters and generators."""

    api_key: str | None
    model: str
    image_model: str
    extraction_model: str
    use_real_api: bool
    check_shapes: bool
    timeout_seconds: float | None

    def __str__(self) -> str:
        """String representation with redacted API key for safe logging."""
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"FrozenConfig(api_key={api_key_display!r}, model={self.model!r}, "
            f"image_model={self.image_model!r}, "
            f"extraction_model={self.extraction_model!r}, "
            f"use_real_api={self.use_real_api!r}, "
            f"check_shapes={self.check_shapes!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    def __repr__(self) -> str:
        return self.__str__()
