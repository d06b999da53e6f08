"""Two-bytes-per-character note encoding.

A note is a flat stream of ``(char, color)`` byte pairs. A newline character
with color ``0`` separates lines; there is no trailing terminator, and an
empty stream is a note with one empty line.
"""

from __future__ import annotations

from .colors import MAX_CODEPOINT, ColoredChar, ColorTag
from .document import NoteDocument
from .errors import InvalidColorTagError, InvalidEncodingError, MalformedLengthError

NEWLINE = 0x0A


def decode_note(data: bytes) -> NoteDocument:
    """Parse stored bytes into a document.

    Raises ``MalformedLengthError`` for an odd byte count,
    ``InvalidEncodingError`` for a character byte above 127 and
    ``InvalidColorTagError`` for an unknown color byte.
    """

    if len(data) % 2:
        raise MalformedLengthError(
            f"Note data has odd length {len(data)}", value=len(data)
        )

    lines: list[list[ColoredChar]] = [[]]
    for offset in range(0, len(data), 2):
        char_byte, color_byte = data[offset], data[offset + 1]
        if char_byte > MAX_CODEPOINT:
            raise InvalidEncodingError(
                f"Character byte {char_byte} at offset {offset} is outside 0-127",
                offset=offset,
                value=char_byte,
            )
        try:
            color = ColorTag(color_byte)
        except ValueError:
            raise InvalidColorTagError(
                f"Unrecognized color byte {color_byte} at offset {offset + 1}",
                offset=offset + 1,
                value=color_byte,
            ) from None
        if char_byte == NEWLINE:
            lines.append([])
        else:
            lines[-1].append(ColoredChar(chr(char_byte), color))
    return NoteDocument.from_lines(lines)


def encode_note(document: NoteDocument) -> bytes:
    out = bytearray()
    for row, line in enumerate(document.snapshot()):
        if row:
            out += bytes((NEWLINE, ColorTag.NONE.to_byte()))
        for glyph in line:
            out += bytes(glyph.to_bytes())
    return bytes(out)


__all__ = ["NEWLINE", "decode_note", "encode_note"]
