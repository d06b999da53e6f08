"""Note persistence: raw byte storage and the open-note session."""

from .files import FileNoteStorage, NoteStorage
from .session import NoteSession

__all__ = ["FileNoteStorage", "NoteSession", "NoteStorage"]
