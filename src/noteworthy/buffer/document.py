"""List-of-lines storage for the characters of one note."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from .colors import ColoredChar, ColorTag

Line = List[ColoredChar]
Snapshot = Tuple[Tuple[ColoredChar, ...], ...]


@dataclass(slots=True)
class NoteDocument:
    """Mutable grid of colored characters.

    There is always at least one line; an empty note is a single empty line.
    Bounds (viewport width/height) are enforced by the engine, not here.
    ``truncated`` marks a document produced by cutting a larger one down to
    a viewport; its markers are then not part of the note.
    """

    _lines: List[Line] = field(default_factory=lambda: [[]])
    truncated: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [[]]

    @classmethod
    def from_lines(cls, lines: Iterable[Iterable[ColoredChar]]) -> "NoteDocument":
        return cls(_lines=[list(line) for line in lines])

    @classmethod
    def from_text(cls, text: str, color: ColorTag = ColorTag.NONE) -> "NoteDocument":
        return cls.from_lines(
            [ColoredChar(char, color) for char in line] for line in text.split("\n")
        )

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of every line."""

        return tuple(tuple(line) for line in self._lines)

    def clone(self) -> "NoteDocument":
        copy = NoteDocument.from_lines(self._lines)
        copy.truncated = self.truncated
        return copy

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def char_count(self) -> int:
        return sum(len(line) for line in self._lines)

    def get_line(self, row: int) -> Sequence[ColoredChar]:
        return tuple(self._lines[row])

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def line_text(self, row: int) -> str:
        return "".join(glyph.char for glyph in self._lines[row])

    def text(self) -> str:
        return "\n".join(self.line_text(row) for row in range(self.line_count))

    # Mutation primitives; the engine checks bounds before calling these.

    def insert_char(self, row: int, col: int, glyph: ColoredChar) -> None:
        self._lines[row].insert(col, glyph)

    def replace_char(self, row: int, col: int, glyph: ColoredChar) -> None:
        self._lines[row][col] = glyph

    def delete_range(self, row: int, start: int, end: int) -> None:
        del self._lines[row][start:end]

    def set_line(self, row: int, glyphs: Iterable[ColoredChar]) -> None:
        self._lines[row] = list(glyphs)

    def split_line(self, row: int, col: int) -> None:
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])

    def join_with_next(self, row: int) -> None:
        self._lines[row].extend(self._lines.pop(row + 1))

    def remove_line(self, row: int) -> None:
        del self._lines[row]

    def swap_lines(self, first: int, second: int) -> None:
        lines = self._lines
        lines[first], lines[second] = lines[second], lines[first]


__all__ = ["Line", "NoteDocument", "Snapshot"]
