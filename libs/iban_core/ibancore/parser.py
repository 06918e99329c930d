"""IBAN parse/validate state machine.

Steps, each a possible exit with exactly one ParseErrorKind:

1. normalize: drop whitespace
2. country code: two ASCII letters (upper-cased)
3. check digits: two ASCII digits
4. registry lookup
5. BBAN walk: one character per grammar position
6. length check
7. MOD-97-10 checksum

Characters are upper-cased before comparison except at ``c`` (ALNUM_ANY)
positions, which keep the caller's case.
"""
from __future__ import annotations

import logging
from typing import List, Mapping, Tuple

from .checksum import calculate_checksum
from .constants import BBAN_OFFSET, CHECK_DIGITS_LENGTH, COUNTRY_CODE_LENGTH, IBAN_MAX_LENGTH
from .errors import ParseError, ParseErrorKind
from .rules import CountryRule

log = logging.getLogger("ibancore.parser")


def normalize(text: str) -> str:
    """Remove all whitespace; case is left to the BBAN walk."""
    return "".join(ch for ch in text if not ch.isspace())


def _reject(kind: ParseErrorKind) -> ParseError:
    log.debug("IBAN rejected: %s", kind.value)
    return ParseError(kind)


def scan(text: str, registry: Mapping[str, CountryRule]) -> Tuple[str, CountryRule]:
    """Run the state machine over ``text``.

    Returns the electronic form and the matching CountryRule, or raises
    ParseError on the first violated rule.
    """
    if not isinstance(text, str):
        raise TypeError(f"IBAN input must be str, got {type(text).__name__}")
    compact = normalize(text)
    buf: List[str] = []

    head = compact[:COUNTRY_CODE_LENGTH]
    if len(head) < COUNTRY_CODE_LENGTH or not all(ch.isascii() and ch.isalpha() for ch in head):
        raise _reject(ParseErrorKind.COUNTRY_CODE)
    buf.extend(ch.upper() for ch in head)

    digits = compact[COUNTRY_CODE_LENGTH:BBAN_OFFSET]
    if len(digits) < CHECK_DIGITS_LENGTH or not all(ch.isascii() and ch.isdigit() for ch in digits):
        raise _reject(ParseErrorKind.CHECK_DIGIT)
    buf.extend(digits)

    rule = registry.get("".join(buf[:COUNTRY_CODE_LENGTH]))
    if rule is None:
        raise _reject(ParseErrorKind.UNKNOWN_COUNTRY)

    classes = rule.bban_classes
    for idx, ch in enumerate(compact[BBAN_OFFSET:]):
        if not (ch.isascii() and ch.isalnum()):
            raise _reject(ParseErrorKind.INVALID_CHARACTER)
        if len(buf) >= IBAN_MAX_LENGTH:
            raise _reject(ParseErrorKind.TOO_LONG)
        if idx >= len(classes):
            raise _reject(ParseErrorKind.INVALID_LENGTH)
        cls = classes[idx]
        candidate = ch if cls.preserves_case else ch.upper()
        if not cls.accepts(candidate):
            raise _reject(ParseErrorKind.INVALID_BBAN)
        buf.append(candidate)

    if len(buf) != rule.expected_length:
        raise _reject(ParseErrorKind.INVALID_LENGTH)

    electronic = "".join(buf)
    if calculate_checksum(electronic) != 1:
        raise _reject(ParseErrorKind.WRONG_CHECKSUM)
    return electronic, rule


__all__ = ["normalize", "scan"]
