"""Character classes for positional BBAN grammars.

Each position of an IBAN body is governed by exactly one class. The four
SWIFT classes come from the registry's format tokens (``n``, ``a``, ``c``,
``i``); ``literal`` pins a position to one fixed character and is used for the
two country-code characters.
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum


class CharKind(str, Enum):
    """SWIFT format letters plus the synthetic literal kind."""
    DIGIT = "n"
    UPPER_ALPHA = "a"
    ALNUM_ANY = "c"
    ALNUM_UPPER = "i"
    LITERAL = "literal"


_ALPHABETS = {
    CharKind.DIGIT: string.digits,
    CharKind.UPPER_ALPHA: string.ascii_uppercase,
    CharKind.ALNUM_UPPER: string.digits + string.ascii_uppercase,
    CharKind.ALNUM_ANY: string.digits + string.ascii_letters,
}

_REGEX = {
    CharKind.DIGIT: "[0-9]",
    CharKind.UPPER_ALPHA: "[A-Z]",
    CharKind.ALNUM_UPPER: "[A-Z0-9]",
    CharKind.ALNUM_ANY: "[A-Za-z0-9]",
}


@dataclass(frozen=True)
class CharacterClass:
    kind: CharKind
    literal: str = ""

    def __post_init__(self) -> None:
        if (self.kind is CharKind.LITERAL) != (len(self.literal) == 1):
            raise ValueError("literal classes carry exactly one character; others none")

    @property
    def preserves_case(self) -> bool:
        """Only ``c`` positions keep the caller's letter case."""
        return self.kind is CharKind.ALNUM_ANY

    @property
    def alphabet(self) -> str:
        if self.kind is CharKind.LITERAL:
            return self.literal
        return _ALPHABETS[self.kind]

    def accepts(self, ch: str) -> bool:
        """Return True if the single character ``ch`` is legal here.

        Callers pass the upper-cased character for every class except
        ``ALNUM_ANY``, which sees the character as given.
        """
        if len(ch) != 1 or not ch.isascii():
            return False
        if self.kind is CharKind.LITERAL:
            return ch == self.literal
        return ch in _ALPHABETS[self.kind]

    def regex(self) -> str:
        if self.kind is CharKind.LITERAL:
            return self.literal
        return _REGEX[self.kind]

    def __repr__(self) -> str:
        if self.kind is CharKind.LITERAL:
            return f"Literal({self.literal!r})"
        return f"CharacterClass.{self.kind.name}"


DIGIT = CharacterClass(CharKind.DIGIT)
UPPER_ALPHA = CharacterClass(CharKind.UPPER_ALPHA)
ALNUM_ANY = CharacterClass(CharKind.ALNUM_ANY)
ALNUM_UPPER = CharacterClass(CharKind.ALNUM_UPPER)

# SWIFT format letter -> class
SWIFT_CLASSES = {
    "n": DIGIT,
    "a": UPPER_ALPHA,
    "c": ALNUM_ANY,
    "i": ALNUM_UPPER,
}


def literal(ch: str) -> CharacterClass:
    return CharacterClass(CharKind.LITERAL, ch)


__all__ = [
    "CharKind",
    "CharacterClass",
    "DIGIT",
    "UPPER_ALPHA",
    "ALNUM_ANY",
    "ALNUM_UPPER",
    "SWIFT_CLASSES",
    "literal",
]
