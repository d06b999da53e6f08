"""Errors raised while decoding notes or placing the cursor."""

from __future__ import annotations

from typing import Optional, Tuple


class NoteFormatError(ValueError):
    """Raised when stored note bytes cannot be decoded.

    ``offset`` is the byte position of the offending value, ``value`` the
    byte itself (or the byte count for length failures).
    """

    def __init__(
        self,
        message: str,
        *,
        offset: Optional[int] = None,
        value: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.offset = offset
        self.value = value


class InvalidEncodingError(NoteFormatError):
    """A character byte outside the 0-127 range."""


class InvalidColorTagError(NoteFormatError):
    """A color byte (or color name) with no matching ColorTag."""


class MalformedLengthError(NoteFormatError):
    """A byte stream whose length is not a whole number of pairs."""


class BufferValidationError(RuntimeError):
    """Raised when a caller places the cursor outside the document."""

    def __init__(
        self, message: str, *, cursor: Optional[Tuple[int, int]] = None
    ) -> None:
        super().__init__(message)
        self.cursor = cursor


__all__ = [
    "BufferValidationError",
    "InvalidColorTagError",
    "InvalidEncodingError",
    "MalformedLengthError",
    "NoteFormatError",
]
