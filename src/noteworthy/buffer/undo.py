"""Bounded undo/redo history with throttled character-edit snapshots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Generic, Optional, TypeVar

from .document import Snapshot
from .state import Cursor

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """LIFO stack that silently drops its oldest item when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: Deque[T] = deque(maxlen=capacity)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Point-in-time copy of a note's lines and cursor.

    ``lines`` is a tuple of tuples, so later edits to the live document can
    never reach back into a stored entry.
    """

    lines: Snapshot
    cursor: Cursor


class HistoryManager:
    """Undo and redo stacks for one open note.

    Coarse edits (line and word operations) are always snapshotted.
    Character edits share snapshots: the first one after any snapshot is
    recorded, then one in every ``snapshot_interval``.
    """

    def __init__(self, capacity: int = 10, snapshot_interval: int = 10) -> None:
        if snapshot_interval < 1:
            raise ValueError("snapshot_interval must be positive")
        self.snapshot_interval = snapshot_interval
        self._undo: BoundedStack[HistoryEntry] = BoundedStack(capacity)
        self._redo: BoundedStack[HistoryEntry] = BoundedStack(capacity)
        self._pending_chars = 0

    @property
    def capacity(self) -> int:
        return self._undo.capacity

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def push(self, entry: HistoryEntry) -> None:
        self._undo.push(entry)
        self._pending_chars = 0

    def record_if_due(
        self, capture: Callable[[], HistoryEntry], *, coarse: bool = False
    ) -> bool:
        """Call before every mutation; returns True when a snapshot was taken.

        Always invalidates the redo stack, since the timeline branches here.
        """

        self._redo.clear()
        if coarse:
            self.push(capture())
            return True
        due = self._pending_chars == 0
        if due:
            self._undo.push(capture())
        self._pending_chars = (self._pending_chars + 1) % self.snapshot_interval
        return due

    def undo(self, current: HistoryEntry) -> Optional[HistoryEntry]:
        if not self._undo:
            return None
        self._redo.push(current)
        self._pending_chars = 0
        return self._undo.pop()

    def redo(self, current: HistoryEntry) -> Optional[HistoryEntry]:
        if not self._redo:
            return None
        self._undo.push(current)
        self._pending_chars = 0
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
        self._pending_chars = 0


__all__ = ["BoundedStack", "HistoryEntry", "HistoryManager"]
