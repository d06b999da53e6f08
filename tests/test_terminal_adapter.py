from typing import List, Sequence

import pytest
from rich.color import Color
from rich.text import Text

from noteworthy.adapters.terminal import NoteViewAdapter, TerminalUIHooks, render_line
from noteworthy.buffer import ActiveColorSelection, BufferEngine, ColorTag, Viewport
from noteworthy.buffer.state import Cursor


class Recorder:
    def __init__(self) -> None:
        self.lines: List[Sequence[Text]] = []
        self.status: List[str] = []
        self.cursor: List[Cursor] = []
        self.logs: List[str] = []

    def hooks(self) -> TerminalUIHooks:
        return TerminalUIHooks(
            update_lines=self.lines.append,
            update_status=self.status.append,
            place_cursor=self.cursor.append,
            log=self.logs.append,
        )


def make_adapter(text: str = "", **kwargs) -> tuple[NoteViewAdapter, Recorder]:
    recorder = Recorder()
    engine = BufferEngine.from_text(text, kwargs.pop("viewport", Viewport(20, 5)), **kwargs)
    return NoteViewAdapter(engine, recorder.hooks()), recorder


def test_adapter_repaints_after_operation() -> None:
    adapter, recorder = make_adapter()
    assert recorder.status == ["untitled [INS]"]

    assert adapter.run("insert_char", "x") is True

    assert [line.plain for line in recorder.lines[-1]] == ["x"]
    assert recorder.status[-1] == "untitled * [INS]"
    assert recorder.cursor[-1] == (0, 1)
    assert recorder.logs[0].startswith("op ->")
    assert recorder.logs[-1].startswith("result <-")


def test_colored_characters_are_styled() -> None:
    adapter, recorder = make_adapter()
    adapter.run("toggle_color", ActiveColorSelection.PRIMARY)
    adapter.run("insert_char", "y")

    (line,) = recorder.lines[-1]
    (span,) = line.spans
    assert span.style.color == Color.from_ansi(ColorTag.BLUE.to_byte())


def test_uncolored_line_has_no_spans() -> None:
    line = render_line((("a", None), ("b", None)))

    assert line.plain == "ab"
    assert line.spans == []


def test_viewable_note_status() -> None:
    _, recorder = make_adapter("abcdefgh", viewport=Viewport(4, 2), name="big")

    assert recorder.status[-1] == "big - enlarge console to edit note"


@pytest.mark.parametrize("operation", ["_adopt", "explode", "name"])
def test_unknown_operations_are_rejected(operation: str) -> None:
    adapter, _ = make_adapter()

    with pytest.raises(AttributeError):
        adapter.run(operation)
