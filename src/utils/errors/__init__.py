"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MalformedJsonError,
    MissingRequiredFieldError,
    NgsiParseError,
    PayloadTooLargeError,
    UnsupportedDialectError,
)

__all__ = [
    "MalformedJsonError",
    "MissingRequiredFieldError",
    "NgsiParseError",
    "PayloadTooLargeError",
    "UnsupportedDialectError",
]
