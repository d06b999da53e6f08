"""Word-boundary scans shared by word navigation and word deletion.

A word is a maximal run of non-space characters.
"""

from __future__ import annotations

from typing import Sequence

from .colors import ColoredChar


def _skip_left(line: Sequence[ColoredChar], index: int, *, spaces: bool) -> int:
    while index > 0 and line[index - 1].is_space == spaces:
        index -= 1
    return index


def previous_word_start(line: Sequence[ColoredChar], col: int) -> int:
    """Column of the first character of the previous word left of ``col``.

    The scan skips the space run left of ``col``, then the word it reaches,
    then one more space run and the word before that. From
    ``"My name is John Smith"`` at column 11 the result is 3 (the ``n`` of
    ``name``). Stops at column 0 when the line runs out first.
    """

    index = min(col, len(line))
    index = _skip_left(line, index, spaces=True)
    index = _skip_left(line, index, spaces=False)
    index = _skip_left(line, index, spaces=True)
    return _skip_left(line, index, spaces=False)


def next_word_start(line: Sequence[ColoredChar], col: int) -> int:
    """Column just past the word right of ``col`` and its trailing spaces.

    Returns ``len(line)`` when no further word follows on the line.
    """

    length = len(line)
    index = max(col, 0)
    while index < length and line[index].is_space:
        index += 1
    while index < length and not line[index].is_space:
        index += 1
    while index < length and line[index].is_space:
        index += 1
    return index


__all__ = ["next_word_start", "previous_word_start"]
