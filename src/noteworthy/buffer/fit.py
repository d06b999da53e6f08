"""Make a loaded note fit the viewport without ever failing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .colors import ColoredChar
from .document import NoteDocument
from .state import EditMode, Viewport

ELLIPSIS = " ..."
OVERFLOW_MARKER = "..."


@dataclass(frozen=True, slots=True)
class FitResult:
    document: NoteDocument
    truncated: bool

    @property
    def mode(self) -> EditMode:
        return EditMode.VIEWABLE if self.truncated else EditMode.EDITABLE


def _glyphs(text: str, width: int) -> List[ColoredChar]:
    # Keep the tail so a narrow viewport still shows the dots.
    return [ColoredChar(char) for char in text[max(0, len(text) - width) :]]


def fit_to_viewport(document: NoteDocument, viewport: Viewport) -> FitResult:
    """Return a copy of ``document`` cut down to ``viewport``.

    Extra lines are dropped and the last visible line becomes ``...``;
    over-wide lines keep ``width - 4`` characters followed by ``" ..."``.
    The input document is left untouched. Fitting an already truncated
    document reports it as truncated again, even when it now fits.
    """

    fitted = document.clone()
    truncated = document.truncated

    if fitted.line_count > viewport.height:
        truncated = True
        for _ in range(fitted.line_count - viewport.height):
            fitted.remove_line(fitted.line_count - 1)
        fitted.set_line(
            fitted.line_count - 1, _glyphs(OVERFLOW_MARKER, viewport.width)
        )

    for row in range(fitted.line_count):
        if fitted.line_length(row) > viewport.width:
            truncated = True
            keep = max(0, viewport.width - len(ELLIPSIS))
            head = list(fitted.get_line(row)[:keep])
            fitted.set_line(row, head + _glyphs(ELLIPSIS, viewport.width - keep))

    fitted.truncated = truncated
    return FitResult(document=fitted, truncated=truncated)


__all__ = ["ELLIPSIS", "OVERFLOW_MARKER", "FitResult", "fit_to_viewport"]
