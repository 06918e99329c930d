from __future__ import annotations

from enum import Enum
from typing import Optional


class IbanError(Exception):
    """Base class for every error raised by ibancore."""


class ParseErrorKind(str, Enum):
    COUNTRY_CODE = "country_code"
    CHECK_DIGIT = "check_digit"
    INVALID_CHARACTER = "invalid_character"
    TOO_LONG = "too_long"
    UNKNOWN_COUNTRY = "unknown_country"
    INVALID_LENGTH = "invalid_length"
    INVALID_BBAN = "invalid_bban"
    WRONG_CHECKSUM = "wrong_checksum"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ParseErrorKind.COUNTRY_CODE: "invalid country code",
    ParseErrorKind.CHECK_DIGIT: "invalid check digit",
    ParseErrorKind.INVALID_CHARACTER: "invalid character",
    ParseErrorKind.TOO_LONG: "too long",
    ParseErrorKind.UNKNOWN_COUNTRY: "unknown country",
    ParseErrorKind.INVALID_LENGTH: "invalid length",
    ParseErrorKind.INVALID_BBAN: "invalid bban",
    ParseErrorKind.WRONG_CHECKSUM: "checksum validation failed",
}


class ParseError(IbanError, ValueError):
    """Input is not a valid IBAN. ``kind`` names the first violated rule."""

    def __init__(self, kind: ParseErrorKind):
        super().__init__(kind.message)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name})"


class RegistryError(IbanError):
    """The country registry could not be built."""


class GrammarError(RegistryError):
    def __init__(self, message: str, country_code: Optional[str] = None):
        prefix = f"{country_code}: " if country_code else ""
        super().__init__(prefix + message)
        self.country_code = country_code


__all__ = [
    "IbanError",
    "ParseErrorKind",
    "ParseError",
    "RegistryError",
    "GrammarError",
]
