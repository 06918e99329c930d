"""Validated IBAN values and their BBAN view.

``Iban(text)`` parses; there is no other way to build one, so every instance
is known to be valid for its country. ``str()`` gives the print form (groups
of four), ``as_str()`` the electronic form.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from .constants import BBAN_OFFSET, COUNTRY_CODE_LENGTH, GROUP_SIZE
from .parser import scan
from .registry import get_registry
from .rules import CountryRule, Offset


def format_groups(value: str) -> str:
    """Insert a single space after every fourth character."""
    return " ".join(value[i:i + GROUP_SIZE] for i in range(0, len(value), GROUP_SIZE))


class _Frozen:
    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


class Bban(_Frozen):
    """BBAN part of an Iban plus its registry sub-fields.

    Obtained from ``Iban.bban``; validity comes from the owning Iban.
    """
    __slots__ = ("_iban", "_rule")

    def __init__(self, iban: "Iban"):
        object.__setattr__(self, "_iban", iban.as_str())
        object.__setattr__(self, "_rule", iban.rule)

    def _slice(self, offset: Optional[Offset]) -> Optional[str]:
        if offset is None:
            return None
        start, end = offset
        return self._iban[start:end]

    @property
    def bank_identifier(self) -> Optional[str]:
        return self._slice(self._rule.bank_offset)

    @property
    def branch_identifier(self) -> Optional[str]:
        return self._slice(self._rule.branch_offset)

    @property
    def checksum(self) -> Optional[str]:
        """National check digits inside the BBAN, where the country has them."""
        return self._slice(self._rule.checksum_offset)

    def as_str(self) -> str:
        return self._iban[BBAN_OFFSET:]

    @property
    def formatted(self) -> str:
        return format_groups(self.as_str())

    def __str__(self) -> str:
        return self.formatted

    def __repr__(self) -> str:
        return f"Bban({self.as_str()!r})"

    def __len__(self) -> int:
        return len(self._iban) - BBAN_OFFSET

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bban):
            return NotImplemented
        return self._iban == other._iban

    def __hash__(self) -> int:
        return hash(("bban", self._iban))


class Iban(_Frozen):
    """A validated International Bank Account Number.

    Args:
        value: IBAN text, with or without whitespace, in any letter case.
        registry: country rules to validate against; the process registry by default.

    Raises:
        ParseError: ``value`` is not a valid IBAN.
    """
    __slots__ = ("_value", "_rule")

    def __init__(self, value: Any, registry: Optional[Mapping[str, CountryRule]] = None):
        if isinstance(value, Iban):
            # revalidate against the rule it was built with
            if registry is None:
                registry = {value.country_code: value.rule}
            value = value.as_str()
        electronic, rule = scan(value, registry if registry is not None else get_registry())
        object.__setattr__(self, "_value", electronic)
        object.__setattr__(self, "_rule", rule)

    @property
    def country_code(self) -> str:
        return self._value[:COUNTRY_CODE_LENGTH]

    @property
    def check_digits(self) -> str:
        return self._value[COUNTRY_CODE_LENGTH:BBAN_OFFSET]

    @property
    def bban(self) -> Bban:
        return Bban(self)

    @property
    def rule(self) -> CountryRule:
        return self._rule

    def as_str(self) -> str:
        """Electronic form: no spaces."""
        return self._value

    @property
    def electronic(self) -> str:
        return self._value

    @property
    def formatted(self) -> str:
        """Print form: groups of four separated by single spaces."""
        return format_groups(self._value)

    def __str__(self) -> str:
        return self.formatted

    def __repr__(self) -> str:
        return f"Iban({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Iban):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        return (Iban, (self._value, {self.country_code: self._rule}))


def parse(text: str, registry: Optional[Mapping[str, CountryRule]] = None) -> Iban:
    """Parse and validate ``text``; raises ParseError on failure."""
    return Iban(text, registry=registry)


__all__ = ["Iban", "Bban", "parse", "format_groups"]
