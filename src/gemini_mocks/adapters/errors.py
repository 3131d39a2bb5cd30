"""Translation of SDK and transport errors into ``APIError``."""

from typing import Any, NoReturn

from gemini_mocks.exceptions import APIError


class GenerationErrorHandler:
    """Turns provider exceptions into informative ``APIError`` instances."""

    def to_api_error(
        self,
        error: Exception,
        *,
        operation: str = "generation",
        response_schema: Any | None = None,
    ) -> APIError:
        """Build an ``APIError`` describing ``error``; the caller raises it."""
        if isinstance(error, APIError):
            return error

        error_str = str(error).lower()
        code = getattr(error, "code", None)

        if code in (401, 403) or "api key" in error_str or "api_key" in error_str:
            message = (
                f"Authentication failed during {operation}. Provide a valid key via "
                f"GEMINI_API_KEY. Original error: {error}"
            )
        elif response_schema is not None and (
            "json" in error_str or "schema" in error_str
        ):
            message = (
                f"Structured {operation} was rejected. "
                f"Check the declared shape. Original error: {error}"
            )
        elif code == 429 or "quota" in error_str or "resource_exhausted" in error_str:
            message = f"Quota or rate limit exceeded during {operation}: {error}"
        elif code == 404 or "not found" in error_str:
            message = f"Model or resource not found during {operation}: {error}"
        elif "timed out" in error_str or "timeout" in error_str:
            message = f"Request timed out during {operation}: {error}"
        else:
            message = f"Remote {operation} failed: {error}"

        api_error = APIError(message)
        api_error.__cause__ = error
        return api_error

    def handle(
        self,
        error: Exception,
        *,
        operation: str = "generation",
        response_schema: Any | None = None,
    ) -> NoReturn:
        """Raise the translated error, chained to the original."""
        if isinstance(error, APIError):
            raise error
        raise self.to_api_error(
            error, operation=operation, response_schema=response_schema
        ) from error
