"""Raw byte storage for notes."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union


class NoteStorage(Protocol):
    """Where a session reads and writes the encoded bytes of a note."""

    def read_bytes(self, note_id: str) -> bytes:
        """Return the stored bytes; raise ``FileNotFoundError`` if absent."""
        ...

    def write_bytes(self, note_id: str, data: bytes) -> None:
        """Replace the stored bytes in one whole-note write."""
        ...

    def exists(self, note_id: str) -> bool:
        ...


class FileNoteStorage:
    """Stores each note as a file under ``root``; ids are relative paths."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def path_for(self, note_id: str) -> Path:
        path = (self.root / note_id).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise ValueError(f"Note id '{note_id}' escapes the storage root")
        return path

    def read_bytes(self, note_id: str) -> bytes:
        return self.path_for(note_id).read_bytes()

    def write_bytes(self, note_id: str, data: bytes) -> None:
        path = self.path_for(note_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def exists(self, note_id: str) -> bool:
        return self.path_for(note_id).is_file()


__all__ = ["FileNoteStorage", "NoteStorage"]
