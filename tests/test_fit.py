from noteworthy.buffer import EditMode, NoteDocument, Viewport, fit_to_viewport


def test_fit_leaves_fitting_note_untouched() -> None:
    document = NoteDocument.from_text("short\nnote")

    result = fit_to_viewport(document, Viewport(10, 3))

    assert result.truncated is False
    assert result.mode is EditMode.EDITABLE
    assert result.document.snapshot() == document.snapshot()


def test_fit_replaces_last_visible_line_when_too_tall() -> None:
    document = NoteDocument.from_text("1\n2\n3\n4\n5")

    result = fit_to_viewport(document, Viewport(10, 3))

    assert result.truncated is True
    assert result.mode is EditMode.VIEWABLE
    assert result.document.text() == "1\n2\n..."


def test_fit_cuts_wide_lines_with_ellipsis() -> None:
    document = NoteDocument.from_text("abcdefghijklmno\nok")

    result = fit_to_viewport(document, Viewport(10, 5))

    assert result.truncated is True
    assert result.document.line_text(0) == "abcdef ..."
    assert result.document.line_text(1) == "ok"


def test_fit_does_not_touch_its_input() -> None:
    document = NoteDocument.from_text("abcdefghijklmno")

    fit_to_viewport(document, Viewport(5, 1))

    assert document.text() == "abcdefghijklmno"


def test_fit_is_idempotent() -> None:
    viewport = Viewport(10, 3)
    once = fit_to_viewport(NoteDocument.from_text("abcdefghijklmno\n2\n3\n4"), viewport)

    twice = fit_to_viewport(once.document, viewport)

    assert twice.document.snapshot() == once.document.snapshot()
    assert twice.truncated is once.truncated is True
    assert twice.mode is once.mode is EditMode.VIEWABLE
    assert once.document.text() == "abcdef ...\n2\n..."


def test_fit_of_fitting_note_stays_editable_when_repeated() -> None:
    viewport = Viewport(10, 3)
    once = fit_to_viewport(NoteDocument.from_text("ok"), viewport)

    twice = fit_to_viewport(once.document, viewport)

    assert (once.truncated, twice.truncated) == (False, False)
    assert twice.mode is EditMode.EDITABLE


def test_marker_text_typed_by_user_is_not_truncation() -> None:
    document = NoteDocument.from_text("a\n...\nabcdef ...")

    result = fit_to_viewport(document, Viewport(10, 3))

    assert result.truncated is False
    assert result.mode is EditMode.EDITABLE


def test_fit_on_tiny_viewport_still_shows_dots() -> None:
    result = fit_to_viewport(NoteDocument.from_text("abcdef"), Viewport(2, 1))

    assert result.document.text() == ".."
