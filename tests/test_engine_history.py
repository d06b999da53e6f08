from noteworthy.buffer import BufferEngine, EditorConfig, NoteDocument, Viewport


def make_engine(text: str = "", **config: int) -> BufferEngine:
    return BufferEngine.from_text(
        text, Viewport(20, 10), config=EditorConfig(**config)  # type: ignore[arg-type]
    )


def test_undo_sequence_returns_to_starting_state() -> None:
    engine = make_engine("hello\nworld")
    engine.set_cursor(0, 5)
    before = engine.capture()

    operations = [
        lambda: engine.insert_char("!"),
        engine.insert_line,
        lambda: engine.insert_char("x"),
        engine.delete_word_backward,
        engine.move_line_down,
        engine.delete_char_backward,
    ]
    for operation in operations:
        assert operation() is True
    after = engine.capture()
    assert engine.text() == "hello!\nworld"

    for _ in operations:
        assert engine.undo() is True
    assert engine.capture() == before

    for _ in operations:
        assert engine.redo() is True
    assert engine.capture() == after


def test_burst_of_typing_is_one_undo_step() -> None:
    engine = make_engine()
    for char in "hello":
        engine.insert_char(char)

    assert engine.undo() is True
    assert engine.text() == ""
    assert engine.cursor == (0, 0)

    assert engine.redo() is True
    assert engine.text() == "hello"
    assert engine.cursor == (0, 5)


def test_edit_after_undo_invalidates_redo() -> None:
    engine = make_engine()
    engine.insert_char("a")
    engine.undo()

    engine.insert_char("z")

    assert engine.redo() is False
    assert engine.text() == "z"


def test_undo_with_empty_history_is_noop() -> None:
    engine = make_engine("abc")

    assert engine.undo() is False
    assert engine.redo() is False
    assert engine.unsaved_changes is False


def test_history_keeps_only_capacity_most_recent_steps() -> None:
    engine = make_engine(history_capacity=3)
    for _ in range(4):
        engine.insert_line()
    assert engine.line_count == 5
    assert engine.history.undo_depth == 3

    assert [engine.undo() for _ in range(4)] == [True, True, True, False]
    assert engine.line_count == 2


def test_snapshots_are_independent_of_live_lines() -> None:
    engine = make_engine("abc")
    engine.move_to_line_end()
    entry = engine.capture()

    engine.insert_char("z")
    engine.delete_word_backward()

    assert NoteDocument.from_lines(entry.lines).text() == "abc"


def test_undo_marks_note_unsaved() -> None:
    engine = make_engine()
    engine.insert_char("a")
    engine.mark_saved()

    engine.undo()

    assert engine.unsaved_changes is True
