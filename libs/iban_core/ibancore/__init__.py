# path: libs/iban_core/ibancore/__init__.py
"""
ibancore package.

Exports IBAN parsing and validation, the country-format registry, the
MOD-97-10 checksum and random IBAN generation.
"""
from .charclass import CharacterClass, CharKind
from .checksum import calculate_checksum, compute_check_digits
from .errors import IbanError, ParseError, ParseErrorKind, RegistryError, GrammarError
from .grammar import RegistryRow, compile_bban_format, compile_country_rule
from .rules import CountryRule
from .registry import Registry, get_registry, load_registry, read_registry_rows
from .iban import Iban, Bban, parse
from .generator import generate
from .validators import validate_iban

__all__ = [
    "CharacterClass",
    "CharKind",
    "calculate_checksum",
    "compute_check_digits",
    "IbanError",
    "ParseError",
    "ParseErrorKind",
    "RegistryError",
    "GrammarError",
    "RegistryRow",
    "compile_bban_format",
    "compile_country_rule",
    "CountryRule",
    "Registry",
    "get_registry",
    "load_registry",
    "read_registry_rows",
    "Iban",
    "Bban",
    "parse",
    "generate",
    "validate_iban",
]
