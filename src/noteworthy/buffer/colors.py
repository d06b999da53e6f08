"""Color tags and the colored characters a note is made of."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

from .errors import InvalidColorTagError, InvalidEncodingError

SPACE = " "
MAX_CODEPOINT = 127


class ColorTag(IntEnum):
    """Display color stored in the second byte of every character pair.

    Values are the standard 16-color terminal palette indices, except that
    ``0`` means "no color" (the terminal default) instead of black.
    """

    NONE = 0
    MAROON = 1
    GREEN = 2
    OLIVE = 3
    NAVY = 4
    PURPLE = 5
    TEAL = 6
    SILVER = 7
    GREY = 8
    RED = 9
    LIME = 10
    YELLOW = 11
    BLUE = 12
    FUCHSIA = 13
    AQUA = 14
    WHITE = 15

    @classmethod
    def from_byte(cls, value: int) -> "ColorTag":
        try:
            return cls(value)
        except ValueError:
            raise InvalidColorTagError(
                f"Unrecognized color byte {value!r}", value=value
            ) from None

    @classmethod
    def from_name(cls, name: str) -> "ColorTag":
        """Resolve a color name (``"blue"``) or palette index (``"12"``)."""

        key = name.strip()
        if key.isdigit():
            return cls.from_byte(int(key))
        try:
            return cls[key.upper()]
        except KeyError:
            raise InvalidColorTagError(f"Unknown color name '{name}'") from None

    def to_byte(self) -> int:
        return int(self)

    @property
    def is_colored(self) -> bool:
        return self is not ColorTag.NONE


class ActiveColorSelection(str, Enum):
    """Which configured color, if any, newly typed characters receive."""

    NONE = "none"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


@dataclass(frozen=True, slots=True)
class ColoredChar:
    """One ASCII character plus its color tag."""

    char: str
    color: ColorTag = ColorTag.NONE

    def __post_init__(self) -> None:
        if len(self.char) != 1 or ord(self.char) > MAX_CODEPOINT:
            raise InvalidEncodingError(
                f"Character {self.char!r} is not a single ASCII character"
            )
        if not isinstance(self.color, ColorTag):
            object.__setattr__(self, "color", ColorTag.from_byte(self.color))

    @classmethod
    def from_bytes(cls, char_byte: int, color_byte: int) -> "ColoredChar":
        if not 0 <= char_byte <= MAX_CODEPOINT:
            raise InvalidEncodingError(
                f"Character byte {char_byte} is outside 0-127", value=char_byte
            )
        return cls(chr(char_byte), ColorTag.from_byte(color_byte))

    def to_bytes(self) -> Tuple[int, int]:
        return ord(self.char), self.color.to_byte()

    @property
    def is_space(self) -> bool:
        return self.char == SPACE

    def same_char(self, other: "ColoredChar | str") -> bool:
        """Compare characters only, ignoring color."""

        if isinstance(other, ColoredChar):
            return self.char == other.char
        return self.char == other


__all__ = [
    "ActiveColorSelection",
    "ColorTag",
    "ColoredChar",
    "MAX_CODEPOINT",
    "SPACE",
]
