"""ISO 7064 MOD 97-10 over IBAN characters.

The IBAN is rotated so the BBAN comes first, followed by country code and
check digits. Digits count as themselves and letters (any case) as 10..35, so
each character contributes one or two decimal digits to one long number. The
number is folded left to right and reduced mod 97 whenever the accumulator
passes 9_999_999, which keeps it small without changing the remainder.
"""
from __future__ import annotations

from typing import Iterator, Union

from .constants import BBAN_OFFSET

_FOLD_LIMIT = 9_999_999


def _char_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    raise ValueError(f"character {ch!r} has no MOD-97 value")


def _digits(value: int) -> Iterator[int]:
    if value >= 10:
        yield value // 10
    yield value % 10


def calculate_checksum(iban: Union[str, bytes]) -> int:
    """Return the MOD-97-10 remainder of a full IBAN; valid IBANs give 1."""
    if isinstance(iban, bytes):
        iban = iban.decode("ascii")
    rotated = iban[BBAN_OFFSET:] + iban[:BBAN_OFFSET]
    acc = 0
    for ch in rotated:
        for digit in _digits(_char_value(ch)):
            acc = acc * 10 + digit
            if acc > _FOLD_LIMIT:
                acc %= 97
    return acc % 97


def compute_check_digits(country_code: str, bban: str) -> str:
    """Check digits that make ``country_code + digits + bban`` checksum to 1."""
    remainder = calculate_checksum(country_code + "00" + bban)
    return f"{98 - remainder:02d}"


__all__ = ["calculate_checksum", "compute_check_digits"]
