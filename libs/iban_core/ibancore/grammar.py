"""SWIFT BBAN format compiler.

The registry describes each country's BBAN with tokens such as ``4!a6!n8!n``:
a repeat count, ``!`` (fixed length) and one of ``n`` (digits), ``a``
(uppercase letters), ``c`` (alphanumerics, any case) or ``i`` (digits and
uppercase letters). The compiler turns a registry row into a CountryRule.

The variable-length form without ``!`` (``<count><letter>``, a maximum rather
than an exact length) is rejected: no registry country uses it and treating it
as fixed would silently accept wrong lengths.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from .charclass import SWIFT_CLASSES, literal
from .constants import BBAN_OFFSET, COUNTRY_CODE_LENGTH, IBAN_MAX_LENGTH
from .errors import GrammarError
from .rules import CountryRule, Offset, Segment

_TOKEN = re.compile(r"([0-9]+)(!?)([A-Za-z])")

# (start, stop) columns, BBAN-relative and inclusive, as published in the registry
Columns = Tuple[Optional[int], Optional[int]]


@dataclass(frozen=True)
class RegistryRow:
    country_code: str
    bban_format: str
    iban_length: int
    bank_columns: Columns = (None, None)
    branch_columns: Columns = (None, None)
    checksum_columns: Columns = (None, None)
    country_name: str = ""
    iban_example: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "RegistryRow":
        """Build a row from a registry record (column name -> cell text)."""
        code = (record.get("country_code") or "").strip()
        try:
            return cls(
                country_code=code,
                bban_format=(record.get("bban_format_swift") or "").strip(),
                iban_length=int(record.get("iban_length") or ""),
                bank_columns=(
                    _opt_int(record.get("bban_bankid_start_offset")),
                    _opt_int(record.get("bban_bankid_stop_offset")),
                ),
                branch_columns=(
                    _opt_int(record.get("bban_branchid_start_offset")),
                    _opt_int(record.get("bban_branchid_stop_offset")),
                ),
                checksum_columns=(
                    _opt_int(record.get("bban_checksum_start_offset")),
                    _opt_int(record.get("bban_checksum_stop_offset")),
                ),
                country_name=(record.get("country_name") or "").strip(),
                iban_example=(record.get("iban_example") or "").strip(),
            )
        except ValueError as e:
            raise GrammarError(f"bad numeric column ({e})", code or None) from e


def _opt_int(cell: Any) -> Optional[int]:
    if cell is None:
        return None
    text = str(cell).strip()
    return int(text) if text else None


def compile_bban_format(fmt: str, country_code: Optional[str] = None) -> Tuple[Segment, ...]:
    """Translate a SWIFT BBAN format string into ``(count, class)`` segments."""
    if not fmt:
        raise GrammarError("empty BBAN format", country_code)
    segments: List[Segment] = []
    pos = 0
    while pos < len(fmt):
        m = _TOKEN.match(fmt, pos)
        if m is None:
            raise GrammarError(f"malformed token at offset {pos} in {fmt!r}", country_code)
        count_text, fixed, letter = m.groups()
        if not fixed:
            raise GrammarError(f"variable-length token {m.group(0)!r} is not supported", country_code)
        cls = SWIFT_CLASSES.get(letter.lower())
        if cls is None:
            raise GrammarError(f"unknown character class {letter!r} in {fmt!r}", country_code)
        count = int(count_text)
        if count == 0:
            raise GrammarError(f"zero repeat count in {fmt!r}", country_code)
        segments.append((count, cls))
        pos = m.end()
    return tuple(segments)


def _offset(columns: Columns, bban_length: int, field: str, country_code: str) -> Optional[Offset]:
    start, stop = columns
    if start is None or stop is None:
        return None
    if start < 0 or stop < start or stop >= bban_length:
        raise GrammarError(
            f"{field} columns {start}..{stop} outside BBAN of length {bban_length}", country_code
        )
    return (start + BBAN_OFFSET, stop + 1 + BBAN_OFFSET)


def compile_country_rule(row: RegistryRow) -> CountryRule:
    code = row.country_code
    if len(code) != COUNTRY_CODE_LENGTH or not (code.isascii() and code.isalpha() and code.isupper()):
        raise GrammarError(f"country code must be two uppercase letters, got {code!r}")
    if row.iban_length > IBAN_MAX_LENGTH:
        raise GrammarError(f"IBAN length {row.iban_length} exceeds {IBAN_MAX_LENGTH}", code)

    bban = compile_bban_format(row.bban_format, code)
    bban_length = sum(count for count, _ in bban)
    if bban_length + BBAN_OFFSET != row.iban_length:
        raise GrammarError(
            f"format {row.bban_format!r} gives {bban_length + BBAN_OFFSET} characters, "
            f"registry says {row.iban_length}",
            code,
        )

    return CountryRule(
        country_code=code,
        expected_length=row.iban_length,
        segments=tuple((1, literal(ch)) for ch in code) + bban,
        bank_offset=_offset(row.bank_columns, bban_length, "bank", code),
        branch_offset=_offset(row.branch_columns, bban_length, "branch", code),
        checksum_offset=_offset(row.checksum_columns, bban_length, "checksum", code),
        country_name=row.country_name,
    )


__all__ = ["RegistryRow", "compile_bban_format", "compile_country_rule"]
