"""Exceptions for Gemini mock generation"""


class GeminiMocksError(Exception):
    """Base exception for Gemini mock generation errors"""


class APIError(GeminiMocksError):
    """Raised when a call to the remote model does not complete"""


class ConfigurationError(GeminiMocksError):
    """Raised when configuration values are invalid"""


class ValidationError(GeminiMocksError):
    """Raised when input validation fails"""


class ShapeError(ValidationError):
    """Raised when a declared output shape is malformed"""
