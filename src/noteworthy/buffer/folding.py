"""Fold accented input down to the ASCII range notes are stored in."""

from __future__ import annotations

from typing import Dict

UNKNOWN = "?"

_VARIANTS: Dict[str, str] = {
    "A": "ÀÁÂÃÄÅÆ",
    "E": "ÈÉÊË",
    "I": "ÌÍÎÏ",
    "O": "ÒÓÔÕÖØ",
    "U": "ÙÚÛÜ",
    "Y": "Ý",
    "C": "Ç",
    "D": "Ð",
    "N": "Ñ",
    "a": "àáâãäåæ",
    "e": "èéêë",
    "i": "ìíîï",
    "o": "òóôõöø",
    "u": "ùúûü",
    "y": "ý",
    "c": "ç",
    "n": "ñ",
    "d": "ð",
    "s": "ß",
}

FOLDING_TABLE: Dict[str, str] = {
    variant: base for base, variants in _VARIANTS.items() for variant in variants
}


def fold_to_ascii(char: str) -> str:
    """Map ``char`` to ASCII: unchanged if already ASCII, else its base
    letter from the folding table, else ``"?"``."""

    if ord(char) <= 127:
        return char
    return FOLDING_TABLE.get(char, UNKNOWN)


__all__ = ["FOLDING_TABLE", "UNKNOWN", "fold_to_ascii"]
