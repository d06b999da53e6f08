"""Terminal host adapter built on rich renderables."""

from .controller import (
    NoteViewAdapter,
    TerminalUIHooks,
    VIEWABLE_NOTICE,
    render_line,
    status_line,
)

__all__ = [
    "NoteViewAdapter",
    "TerminalUIHooks",
    "VIEWABLE_NOTICE",
    "render_line",
    "status_line",
]
