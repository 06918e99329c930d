from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import List, Optional, Pattern, Tuple

from .charclass import DIGIT, CharacterClass, CharKind
from .constants import CHECK_DIGITS_LENGTH, COUNTRY_CODE_LENGTH, GROUP_SIZE

Offset = Tuple[int, int]
Segment = Tuple[int, CharacterClass]


@dataclass(frozen=True)
class CountryRule:
    """Compiled registry row for one country.

    ``segments`` describes the IBAN body: two literal country-code segments
    followed by the BBAN grammar. The check digits are not a segment, so
    ``sum(count for count, _ in segments) + 2 == expected_length``.

    Offsets are half-open ``(start, end)`` ranges into the full IBAN string,
    or None when the country has no such sub-field.
    """
    country_code: str
    expected_length: int
    segments: Tuple[Segment, ...]
    bank_offset: Optional[Offset] = None
    branch_offset: Optional[Offset] = None
    checksum_offset: Optional[Offset] = None
    country_name: str = ""

    @cached_property
    def bban_classes(self) -> Tuple[CharacterClass, ...]:
        """Per-position classes of the BBAN, literal country-code positions skipped."""
        flat: List[CharacterClass] = []
        for count, cls in self.segments:
            flat.extend([cls] * count)
        return tuple(flat[COUNTRY_CODE_LENGTH:])

    @property
    def bban_length(self) -> int:
        return self.expected_length - COUNTRY_CODE_LENGTH - CHECK_DIGITS_LENGTH

    def iban_classes(self) -> Tuple[CharacterClass, ...]:
        """Per-position classes of the whole IBAN, check digits included."""
        head: List[CharacterClass] = []
        for count, cls in self.segments[:COUNTRY_CODE_LENGTH]:
            head.extend([cls] * count)
        return tuple(head) + (DIGIT,) * CHECK_DIGITS_LENGTH + self.bban_classes

    def pattern(self, spaced: bool = False) -> Pattern[str]:
        """Regular expression for the electronic form, or the print form if ``spaced``.

        Use with ``fullmatch``. In the print form a class run that crosses a
        four-character group boundary is split around the space.
        """
        classes = self.iban_classes()
        if not spaced:
            return re.compile(_compress(classes))
        groups = [classes[i:i + GROUP_SIZE] for i in range(0, len(classes), GROUP_SIZE)]
        return re.compile(" ".join(_compress(g) for g in groups))


def _compress(classes: Tuple[CharacterClass, ...]) -> str:
    out: List[str] = []
    i = 0
    while i < len(classes):
        cls = classes[i]
        j = i
        while j < len(classes) and classes[j] == cls:
            j += 1
        if cls.kind is CharKind.LITERAL:
            out.append(re.escape(cls.literal) * (j - i))
        else:
            out.append(f"{cls.regex()}{{{j - i}}}")
        i = j
    return "".join(out)


__all__ = ["CountryRule", "Offset", "Segment"]
