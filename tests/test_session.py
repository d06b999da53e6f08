from pathlib import Path

import pytest

from noteworthy.buffer import MalformedLengthError, Viewport
from noteworthy.storage import FileNoteStorage, NoteSession


def make_session(root: Path, width: int = 20, height: int = 5) -> NoteSession:
    return NoteSession(FileNoteStorage(root), Viewport(width, height))


def test_create_and_save_writes_encoded_bytes(tmp_path: Path) -> None:
    session = make_session(tmp_path)
    engine = session.create("todo")
    engine.insert_char("h")
    engine.insert_char("i")

    assert session.save() is True
    assert (tmp_path / "todo").read_bytes() == bytes([104, 0, 105, 0])
    assert engine.unsaved_changes is False
    assert session.save() is False


def test_open_missing_note_raises(tmp_path: Path) -> None:
    session = make_session(tmp_path)

    with pytest.raises(FileNotFoundError):
        session.open("nope")
    assert session.is_open is False


def test_create_refuses_existing_note(tmp_path: Path) -> None:
    (tmp_path / "todo").write_bytes(b"")
    session = make_session(tmp_path)

    with pytest.raises(FileExistsError):
        session.create("todo")


def test_reload_discards_unsaved_changes(tmp_path: Path) -> None:
    (tmp_path / "todo").write_bytes(bytes([97, 0]))
    session = make_session(tmp_path)
    session.open("todo").insert_char("b")

    engine = session.reload()

    assert engine is not None
    assert engine.text() == "a"
    assert engine.unsaved_changes is False


def test_corrupt_note_raises_format_error(tmp_path: Path) -> None:
    (tmp_path / "bad").write_bytes(bytes([97, 0, 98]))
    session = make_session(tmp_path)

    with pytest.raises(MalformedLengthError):
        session.open("bad")


def test_note_ids_cannot_escape_root(tmp_path: Path) -> None:
    storage = FileNoteStorage(tmp_path / "notes")

    with pytest.raises(ValueError):
        storage.path_for("../secret")


def test_nested_note_ids_create_directories(tmp_path: Path) -> None:
    session = make_session(tmp_path)
    session.create("work/ideas")

    assert (tmp_path / "work" / "ideas").is_file()


def test_truncated_note_saves_full_content(tmp_path: Path) -> None:
    stored = bytes([97, 0] * 10)
    (tmp_path / "wide").write_bytes(stored)
    session = make_session(tmp_path, width=5)
    engine = session.open("wide")
    assert engine.typing_disabled is True

    session.resize(Viewport(20, 5))
    engine.insert_char("b")
    session.save()

    assert (tmp_path / "wide").read_bytes() == bytes([98, 0]) + stored


def test_close_forgets_engine(tmp_path: Path) -> None:
    session = make_session(tmp_path)
    session.create("todo")

    session.close()

    assert session.is_open is False
    assert session.save() is False
    assert session.reload() is None
