"""Exceptions raised by the card masking helpers."""

from __future__ import annotations

INVALID_LENGTH_MESSAGE = "Invalid card number: must be 13-19 digits"


class CardMaskError(Exception):
    """Base class for cardmask errors."""


class ValidationError(CardMaskError, ValueError):
    """Raised when input validation is requested and the card number fails it."""

    def __init__(self, message: str = INVALID_LENGTH_MESSAGE):
        super().__init__(message)


__all__ = ["CardMaskError", "INVALID_LENGTH_MESSAGE", "ValidationError"]
