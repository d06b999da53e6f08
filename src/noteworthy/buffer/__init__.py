"""Bounded note buffer: document model, encoding, history, and the engine."""

from .codec import decode_note, encode_note
from .colors import ActiveColorSelection, ColoredChar, ColorTag
from .config import EditorConfig
from .document import NoteDocument
from .engine import BufferEngine, EditTransaction, NoteMirror
from .errors import (
    BufferValidationError,
    InvalidColorTagError,
    InvalidEncodingError,
    MalformedLengthError,
    NoteFormatError,
)
from .fit import FitResult, fit_to_viewport
from .folding import fold_to_ascii
from .state import BufferState, Cursor, EditMode, Viewport, WriteMode
from .undo import BoundedStack, HistoryEntry, HistoryManager
from .validation import clamp_cursor, ensure_cursor

__all__ = [
    "ActiveColorSelection",
    "BoundedStack",
    "BufferEngine",
    "BufferState",
    "BufferValidationError",
    "ColorTag",
    "ColoredChar",
    "Cursor",
    "EditMode",
    "EditTransaction",
    "EditorConfig",
    "FitResult",
    "HistoryEntry",
    "HistoryManager",
    "InvalidColorTagError",
    "InvalidEncodingError",
    "MalformedLengthError",
    "NoteDocument",
    "NoteFormatError",
    "NoteMirror",
    "Viewport",
    "WriteMode",
    "clamp_cursor",
    "decode_note",
    "encode_note",
    "ensure_cursor",
    "fit_to_viewport",
    "fold_to_ascii",
]
