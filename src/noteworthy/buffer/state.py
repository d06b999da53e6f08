"""Cursor, viewport, and edit-mode state for an open note."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .colors import ActiveColorSelection

Cursor = Tuple[int, int]  # (row, column)


class EditMode(str, Enum):
    """Whether the note fits the viewport and may be edited."""

    EDITABLE = "editable"
    VIEWABLE = "viewable"


class WriteMode(str, Enum):
    """How typed characters interact with the text under the cursor."""

    INSERT = "insert"
    OVERWRITE = "overwrite"


@dataclass(frozen=True, slots=True)
class Viewport:
    """Size of the editable area in character cells."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Viewport must be at least 1x1 cells, got {self.width}x{self.height}"
            )

    def contains(self, other: "Viewport") -> bool:
        return other.width <= self.width and other.height <= self.height


@dataclass(slots=True)
class BufferState:
    """Mutable editor state tied to one NoteDocument."""

    cursor: Cursor = (0, 0)
    write_mode: WriteMode = WriteMode.INSERT
    active_color: ActiveColorSelection = ActiveColorSelection.NONE
    mode: EditMode = EditMode.EDITABLE
    unsaved: bool = False

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)


__all__ = ["BufferState", "Cursor", "EditMode", "Viewport", "WriteMode"]
