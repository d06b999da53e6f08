"""Cursor checks shared across buffer services."""

from __future__ import annotations

from .document import NoteDocument
from .errors import BufferValidationError
from .state import Cursor


def ensure_cursor(document: NoteDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > document.line_length(row):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def clamp_cursor(document: NoteDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    row = max(0, min(row, document.line_count - 1))
    col = max(0, min(col, document.line_length(row)))
    return (row, col)


__all__ = ["clamp_cursor", "ensure_cursor"]
