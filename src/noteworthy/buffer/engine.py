"""Bounded text-buffer engine: the editing surface of one open note."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Tuple

from noteworthy.runtime import telemetry

from .codec import decode_note, encode_note
from .colors import ActiveColorSelection, ColoredChar, ColorTag, SPACE
from .config import EditorConfig
from .document import NoteDocument
from .fit import fit_to_viewport
from .folding import fold_to_ascii
from .state import BufferState, Cursor, EditMode, Viewport, WriteMode
from .undo import HistoryEntry, HistoryManager
from .validation import clamp_cursor, ensure_cursor
from .words import next_word_start, previous_word_start

MirrorLine = Tuple[Tuple[str, Optional[ColorTag]], ...]


@dataclass(frozen=True, slots=True)
class NoteMirror:
    """Host-facing snapshot of everything needed to paint the note."""

    name: str
    lines: Tuple[MirrorLine, ...]
    cursor: Cursor
    unsaved: bool
    typing_disabled: bool
    insert_mode: bool
    active_color: ActiveColorSelection


class BufferEngine:
    """Owns the document, cursor and history of one open note.

    Editing operations never raise during normal use: boundary cases (full
    line, full buffer, start or end of the note, a note too large for the
    viewport) are no-ops that return ``False``. Operations that change
    something return ``True``.
    """

    def __init__(
        self,
        viewport: Viewport,
        *,
        config: Optional[EditorConfig] = None,
        document: Optional[NoteDocument] = None,
        history: Optional[HistoryManager] = None,
        name: str = "untitled",
    ) -> None:
        self.name = name
        self.config = config or EditorConfig()
        self.viewport = viewport
        self.history = history or HistoryManager(
            capacity=self.config.history_capacity,
            snapshot_interval=self.config.snapshot_interval,
        )
        self.state = BufferState(write_mode=self.config.write_mode)
        self.document = NoteDocument()
        # Untruncated content, retained only while the note is viewable.
        self._full: Optional[NoteDocument] = None
        self._adopt(document or NoteDocument())

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        viewport: Viewport,
        *,
        config: Optional[EditorConfig] = None,
        name: str = "untitled",
    ) -> "BufferEngine":
        return cls(viewport, config=config, document=decode_note(data), name=name)

    @classmethod
    def from_text(
        cls,
        text: str,
        viewport: Viewport,
        *,
        config: Optional[EditorConfig] = None,
        name: str = "untitled",
    ) -> "BufferEngine":
        return cls(
            viewport, config=config, document=NoteDocument.from_text(text), name=name
        )

    # ------------------------------------------------------------------ queries

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def mode(self) -> EditMode:
        return self.state.mode

    @property
    def typing_disabled(self) -> bool:
        return self.state.mode is EditMode.VIEWABLE

    @property
    def truncated(self) -> bool:
        return self._full is not None

    @property
    def unsaved_changes(self) -> bool:
        return self.state.unsaved

    @property
    def insert_mode(self) -> bool:
        return self.state.write_mode is WriteMode.INSERT

    @property
    def active_color(self) -> ActiveColorSelection:
        return self.state.active_color

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def char_count(self) -> int:
        return self.document.char_count

    def text(self) -> str:
        return self.document.text()

    def line_text(self, row: int) -> str:
        return self.document.line_text(row)

    def mirror(self) -> NoteMirror:
        lines = tuple(
            tuple(
                (glyph.char, glyph.color if glyph.color.is_colored else None)
                for glyph in line
            )
            for line in self.document.snapshot()
        )
        return NoteMirror(
            name=self.name,
            lines=lines,
            cursor=self.state.cursor,
            unsaved=self.state.unsaved,
            typing_disabled=self.typing_disabled,
            insert_mode=self.insert_mode,
            active_color=self.state.active_color,
        )

    # -------------------------------------------------------------- persistence

    def to_bytes(self) -> bytes:
        """Encode the whole note, including text hidden by truncation."""

        return encode_note(self._full if self._full is not None else self.document)

    def mark_saved(self) -> None:
        self.state.unsaved = False

    def resize(self, viewport: Viewport) -> None:
        """Re-fit the note to a new viewport.

        A truncated note is re-fitted from its full content, so growing the
        viewport enough makes it editable again. Shrinking drops history,
        whose snapshots may no longer fit.
        """

        if viewport == self.viewport:
            return
        if not viewport.contains(self.viewport):
            self.history.clear()
        source = self._full if self._full is not None else self.document
        self.viewport = viewport
        self._adopt(source)
        telemetry.record_event(
            "buffer.resize",
            data={
                "note": self.name,
                "width": viewport.width,
                "height": viewport.height,
                "mode": self.state.mode.value,
            },
        )

    def _adopt(self, document: NoteDocument) -> None:
        result = fit_to_viewport(document, self.viewport)
        self.document = result.document
        self.state.mode = result.mode
        self._full = document.clone() if result.truncated else None
        self.state.cursor = clamp_cursor(self.document, self.state.cursor)
        if result.truncated:
            telemetry.record_event(
                "buffer.truncated",
                level="warning",
                data={
                    "note": self.name,
                    "lines": document.line_count,
                    "width": self.viewport.width,
                    "height": self.viewport.height,
                },
            )

    # ------------------------------------------------------------------ history

    def capture(self) -> HistoryEntry:
        return HistoryEntry(lines=self.document.snapshot(), cursor=self.state.cursor)

    def undo(self) -> bool:
        if self.typing_disabled:
            return False
        entry = self.history.undo(self.capture())
        if entry is None:
            return False
        self._restore(entry, label="undo")
        return True

    def redo(self) -> bool:
        if self.typing_disabled:
            return False
        entry = self.history.redo(self.capture())
        if entry is None:
            return False
        self._restore(entry, label="redo")
        return True

    def _restore(self, entry: HistoryEntry, *, label: str) -> None:
        self.document = NoteDocument.from_lines(entry.lines)
        self.state.cursor = entry.cursor
        self.state.unsaved = True
        telemetry.record_event(
            f"buffer.{label}",
            level="debug",
            data={
                "note": self.name,
                "undo_depth": self.history.undo_depth,
                "redo_depth": self.history.redo_depth,
            },
        )

    # ------------------------------------------------------------ mode toggles

    def toggle_insert_mode(self) -> WriteMode:
        self.state.write_mode = (
            WriteMode.OVERWRITE if self.insert_mode else WriteMode.INSERT
        )
        return self.state.write_mode

    def set_active_color(self, selection: ActiveColorSelection) -> None:
        self.state.active_color = selection

    def toggle_color(self, selection: ActiveColorSelection) -> ActiveColorSelection:
        """Activate ``selection``, or clear it if it is already active."""

        if self.state.active_color is selection:
            selection = ActiveColorSelection.NONE
        self.state.active_color = selection
        return selection

    # ----------------------------------------------------------------- editing

    def _transaction(self, label: str, *, coarse: bool) -> "EditTransaction":
        return EditTransaction(self, label, coarse=coarse)

    def _line_full(self, row: int) -> bool:
        return self.document.line_length(row) >= self.viewport.width

    def insert_char(self, char: str) -> bool:
        if self.typing_disabled or len(char) != 1:
            return False
        folded = fold_to_ascii(char)
        if not folded.isprintable():
            return False

        row, col = self.state.cursor
        at_end = col == self.document.line_length(row)
        if self._line_full(row) and (self.insert_mode or at_end):
            return False

        glyph = ColoredChar(folded, self.config.color_for(self.state.active_color))
        with self._transaction("insert_char", coarse=False):
            self._put(row, col, glyph, at_end=at_end)
            self.state.set_cursor(row, col + 1)
        return True

    def insert_tab(self) -> bool:
        """Type ``tab_size`` spaces as one edit, only if all of them fit."""

        if self.typing_disabled:
            return False
        size = self.config.tab_size
        row, col = self.state.cursor
        length = self.document.line_length(row)
        needed = length + size if self.insert_mode else max(length, col + size)
        if needed > self.viewport.width:
            return False

        glyph = ColoredChar(SPACE, self.config.color_for(self.state.active_color))
        with self._transaction("insert_tab", coarse=False):
            for offset in range(size):
                at_end = col + offset == self.document.line_length(row)
                self._put(row, col + offset, glyph, at_end=at_end)
            self.state.set_cursor(row, col + size)
        return True

    def _put(self, row: int, col: int, glyph: ColoredChar, *, at_end: bool) -> None:
        if at_end or self.insert_mode:
            self.document.insert_char(row, col, glyph)
        else:
            self.document.replace_char(row, col, glyph)

    def delete_char_backward(self) -> bool:
        if self.typing_disabled:
            return False
        row, col = self.state.cursor
        if col == 0:
            return row > 0 and self._merge_into_previous(row, "delete_char_backward")
        with self._transaction("delete_char_backward", coarse=False):
            self.document.delete_range(row, col - 1, col)
            self.state.set_cursor(row, col - 1)
        return True

    def delete_char_forward(self) -> bool:
        if self.typing_disabled:
            return False
        row, col = self.state.cursor
        if col == self.document.line_length(row):
            return self._merge_next_into(row, "delete_char_forward")
        with self._transaction("delete_char_forward", coarse=False):
            self.document.delete_range(row, col, col + 1)
        return True

    def delete_word_backward(self) -> bool:
        if self.typing_disabled:
            return False
        row, col = self.state.cursor
        if col == 0:
            return row > 0 and self._merge_into_previous(row, "delete_word_backward")
        start = previous_word_start(self.document.get_line(row), col)
        with self._transaction("delete_word_backward", coarse=True):
            self.document.delete_range(row, start, col)
            self.state.set_cursor(row, start)
        return True

    def delete_word_forward(self) -> bool:
        if self.typing_disabled:
            return False
        row, col = self.state.cursor
        if col == self.document.line_length(row):
            return self._merge_next_into(row, "delete_word_forward")
        end = next_word_start(self.document.get_line(row), col)
        with self._transaction("delete_word_forward", coarse=True):
            self.document.delete_range(row, col, end)
        return True

    def _merge_into_previous(self, row: int, label: str) -> bool:
        joined_at = self.document.line_length(row - 1)
        if joined_at + self.document.line_length(row) > self.viewport.width:
            return False
        with self._transaction(label, coarse=True):
            self.document.join_with_next(row - 1)
            self.state.set_cursor(row - 1, joined_at)
        return True

    def _merge_next_into(self, row: int, label: str) -> bool:
        if row >= self.document.line_count - 1:
            return False
        joined = self.document.line_length(row) + self.document.line_length(row + 1)
        if joined > self.viewport.width:
            return False
        with self._transaction(label, coarse=True):
            self.document.join_with_next(row)
        return True

    def insert_line(self) -> bool:
        """Split the current line at the cursor; the tail moves down a line."""

        if self.typing_disabled or self.document.line_count >= self.viewport.height:
            return False
        row, col = self.state.cursor
        with self._transaction("insert_line", coarse=True):
            self.document.split_line(row, col)
            self.state.set_cursor(row + 1, 0)
        return True

    def delete_line(self) -> bool:
        if self.typing_disabled:
            return False
        row, _ = self.state.cursor
        if self.document.line_count == 1:
            if self.document.line_length(0) == 0:
                return False
            with self._transaction("delete_line", coarse=True):
                self.document.set_line(0, [])
                self.state.set_cursor(0, 0)
            return True
        with self._transaction("delete_line", coarse=True):
            self.document.remove_line(row)
            self.state.set_cursor(min(row, self.document.line_count - 1), 0)
        return True

    def move_line_up(self) -> bool:
        if self.typing_disabled:
            return False
        row, col = self.state.cursor
        if row == 0:
            return False
        with self._transaction("move_line_up", coarse=True):
            self.document.swap_lines(row, row - 1)
            self.state.set_cursor(row - 1, col)
        return True

    def move_line_down(self) -> bool:
        if self.typing_disabled:
            return False
        row, col = self.state.cursor
        if row >= self.document.line_count - 1:
            return False
        with self._transaction("move_line_down", coarse=True):
            self.document.swap_lines(row, row + 1)
            self.state.set_cursor(row + 1, col)
        return True

    # -------------------------------------------------------------- navigation

    def _move_to(self, row: int, col: int) -> bool:
        target = (row, col)
        if target == self.state.cursor:
            return False
        self.state.cursor = target
        return True

    def set_cursor(self, row: int, col: int) -> None:
        """Place the caret explicitly; raises ``BufferValidationError``."""

        self.state.cursor = ensure_cursor(self.document, (row, col))

    def move_up(self) -> bool:
        row, col = self.state.cursor
        if row == 0:
            return False
        return self._move_to(row - 1, min(col, self.document.line_length(row - 1)))

    def move_down(self) -> bool:
        row, col = self.state.cursor
        if row == self.document.line_count - 1:
            # Already on the last line: go to its end instead.
            return self._move_to(row, self.document.line_length(row))
        return self._move_to(row + 1, min(col, self.document.line_length(row + 1)))

    def move_left(self) -> bool:
        row, col = self.state.cursor
        if col > 0:
            return self._move_to(row, col - 1)
        if row == 0:
            return False
        return self._move_to(row - 1, self.document.line_length(row - 1))

    def move_right(self) -> bool:
        row, col = self.state.cursor
        if col < self.document.line_length(row):
            return self._move_to(row, col + 1)
        if row == self.document.line_count - 1:
            return False
        return self._move_to(row + 1, 0)

    def move_to_line_start(self) -> bool:
        return self._move_to(self.state.cursor[0], 0)

    def move_to_line_end(self) -> bool:
        row = self.state.cursor[0]
        return self._move_to(row, self.document.line_length(row))

    def move_to_buffer_start(self) -> bool:
        return self._move_to(0, 0)

    def move_to_buffer_end(self) -> bool:
        last = self.document.line_count - 1
        return self._move_to(last, self.document.line_length(last))

    def move_word_left(self) -> bool:
        row, col = self.state.cursor
        if col == 0:
            if row == 0:
                return False
            return self._move_to(row - 1, self.document.line_length(row - 1))
        return self._move_to(
            row, previous_word_start(self.document.get_line(row), col)
        )

    def move_word_right(self) -> bool:
        row, col = self.state.cursor
        if col == self.document.line_length(row):
            if row == self.document.line_count - 1:
                return False
            return self._move_to(row + 1, 0)
        return self._move_to(row, next_word_start(self.document.get_line(row), col))

    def go_to_line(self, number: int) -> bool:
        """Jump to the start of 1-based line ``number`` (clamped to the end)."""

        if number < 1:
            raise ValueError(f"Line numbers start at 1, got {number}")
        return self._move_to(min(number, self.document.line_count) - 1, 0)


class EditTransaction(AbstractContextManager["EditTransaction"]):
    """Wraps one mutating operation: history first, then the edit, then dirty.

    Each transaction runs inside a telemetry span labelled ``buffer::<op>``.
    """

    def __init__(self, engine: BufferEngine, label: str, *, coarse: bool) -> None:
        self.engine = engine
        self.label = label
        self.coarse = coarse
        self.snapshotted = False
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "EditTransaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"note": self.engine.name},
        )
        self._span_cm.__enter__()
        self.snapshotted = self.engine.history.record_if_due(
            self.engine.capture, coarse=self.coarse
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.engine.state.unsaved = True
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["BufferEngine", "EditTransaction", "MirrorLine", "NoteMirror"]
