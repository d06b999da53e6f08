"""Adapter that pushes engine state to a terminal host as rich renderables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from rich.color import Color
from rich.style import Style
from rich.text import Text

from noteworthy.buffer import BufferEngine, ColorTag, NoteMirror
from noteworthy.buffer.engine import MirrorLine
from noteworthy.buffer.state import Cursor

VIEWABLE_NOTICE = "enlarge console to edit note"


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TerminalUIHooks:
    """Callbacks the host supplies to repaint its widgets."""

    update_lines: Callable[[Sequence[Text]], None]
    update_status: Callable[[str], None] = _noop
    place_cursor: Callable[[Cursor], None] = _noop
    log: Callable[[str], None] = _noop


_STYLES: Dict[ColorTag, Style] = {
    tag: Style(color=Color.from_ansi(tag.to_byte()))
    for tag in ColorTag
    if tag.is_colored
}


def render_line(line: MirrorLine) -> Text:
    text = Text(no_wrap=True, end="")
    for char, color in line:
        text.append(char, style=_STYLES[color] if color is not None else None)
    return text


def status_line(mirror: NoteMirror) -> str:
    if mirror.typing_disabled:
        return f"{mirror.name} - {VIEWABLE_NOTICE}"
    marker = " *" if mirror.unsaved else ""
    mode = "INS" if mirror.insert_mode else "OVR"
    return f"{mirror.name}{marker} [{mode}]"


class NoteViewAdapter:
    """Runs engine operations on behalf of a host and repaints after each."""

    def __init__(self, engine: BufferEngine, hooks: TerminalUIHooks) -> None:
        self.engine = engine
        self.hooks = hooks
        self.refresh()

    def run(self, operation: str, *args: object) -> object:
        """Invoke ``engine.<operation>(*args)`` and repaint.

        Raises ``AttributeError`` for names that are not engine operations.
        """

        method = getattr(self.engine, operation, None)
        if operation.startswith("_") or not callable(method):
            raise AttributeError(f"BufferEngine has no operation '{operation}'")
        self._log("op ->", op=operation, args=args or None)
        outcome = method(*args)
        mirror = self.refresh()
        self._log("result <-", outcome=outcome, cursor=mirror.cursor)
        return outcome

    def refresh(self) -> NoteMirror:
        mirror = self.engine.mirror()
        self.hooks.update_lines([render_line(line) for line in mirror.lines])
        self.hooks.update_status(status_line(mirror))
        self.hooks.place_cursor(mirror.cursor)
        return mirror

    def _log(self, prefix: str, **fields: Optional[object]) -> None:
        parts = [prefix, f"note={self.engine.name!r}"]
        parts.extend(
            f"{key}={value!r}" for key, value in fields.items() if value is not None
        )
        self.hooks.log(" ".join(parts))


__all__ = [
    "NoteViewAdapter",
    "TerminalUIHooks",
    "VIEWABLE_NOTICE",
    "render_line",
    "status_line",
]
