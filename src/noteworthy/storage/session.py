"""One open note at a time: load, save, reload and resize."""

from __future__ import annotations

from typing import Optional

from noteworthy.buffer import BufferEngine, EditorConfig, Viewport
from noteworthy.runtime import telemetry

from .files import NoteStorage

LOGGER_NAME = "noteworthy.storage"


class NoteSession:
    """Owns the engine of the currently open note.

    Opening another note discards the previous engine; nothing is saved
    implicitly. Decoding errors from ``open``/``reload`` propagate so the
    caller can decide how to treat a corrupt note.
    """

    def __init__(
        self,
        storage: NoteStorage,
        viewport: Viewport,
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.storage = storage
        self.viewport = viewport
        self.config = config or EditorConfig()
        self.note_id: Optional[str] = None
        self.engine: Optional[BufferEngine] = None
        self.logger_name = LOGGER_NAME

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self, note_id: str) -> BufferEngine:
        data = self.storage.read_bytes(note_id)
        with telemetry.span(
            "session::open",
            logger_name=self.logger_name,
            component="storage",
            metadata={"note": note_id},
        ):
            engine = BufferEngine.from_bytes(
                data, self.viewport, config=self.config, name=note_id
            )
        self.note_id = note_id
        self.engine = engine
        telemetry.record_event(
            "session.open",
            logger_name=self.logger_name,
            data={
                "note": note_id,
                "bytes": len(data),
                "mode": engine.mode.value,
            },
        )
        return engine

    def create(self, note_id: str) -> BufferEngine:
        """Write an empty note and open it; refuses to overwrite."""

        if self.storage.exists(note_id):
            raise FileExistsError(note_id)
        self.storage.write_bytes(note_id, b"")
        return self.open(note_id)

    def save(self) -> bool:
        """Write the note if it has unsaved changes; returns True if written."""

        engine = self.engine
        if engine is None or self.note_id is None or not engine.unsaved_changes:
            return False
        data = engine.to_bytes()
        self.storage.write_bytes(self.note_id, data)
        engine.mark_saved()
        telemetry.record_event(
            "session.save",
            logger_name=self.logger_name,
            data={"note": self.note_id, "bytes": len(data)},
        )
        return True

    def reload(self) -> Optional[BufferEngine]:
        """Re-read the open note from storage, discarding unsaved changes."""

        if self.note_id is None:
            return None
        return self.open(self.note_id)

    def resize(self, viewport: Viewport) -> None:
        self.viewport = viewport
        if self.engine is not None:
            self.engine.resize(viewport)

    def close(self) -> None:
        if self.note_id is not None:
            telemetry.record_event(
                "session.close",
                logger_name=self.logger_name,
                data={"note": self.note_id},
            )
        self.engine = None
        self.note_id = None


__all__ = ["LOGGER_NAME", "NoteSession"]
