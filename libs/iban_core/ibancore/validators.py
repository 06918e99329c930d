"""
Dict-style IBAN validation.

Wraps the parser for callers that want a result object instead of an
exception: ``{"valid": bool, "errors": [...], "metadata": {...}}``.
"""

from typing import Any, Dict, Mapping, Optional

import iso3166

from .errors import ParseError
from .iban import Iban
from .parser import normalize
from .rules import CountryRule


def country_name(country_code: str, rule: Optional[CountryRule] = None) -> str:
    """ISO 3166 short name, falling back to the registry name for non-ISO codes."""
    country = iso3166.countries_by_alpha2.get(country_code)
    if country is not None:
        return country.name
    return rule.country_name if rule is not None else ""


def validate_iban(iban: Any, registry: Optional[Mapping[str, CountryRule]] = None) -> Dict[str, Any]:
    """
    Validate International Bank Account Number (IBAN).

    Args:
        iban: IBAN string to validate
        registry: country rules; the process registry by default

    Returns:
        Dict with validation results including valid flag, errors, and metadata
    """
    if not iban or not isinstance(iban, str):
        return {
            "valid": False,
            "errors": ["IBAN is required"],
            "metadata": {"input": iban}
        }

    iban_clean = normalize(iban).upper()

    try:
        value = Iban(iban, registry=registry)
    except ParseError as e:
        return {
            "valid": False,
            "errors": [f"IBAN {e}"],
            "metadata": {
                "input": iban,
                "cleaned": iban_clean,
                "country_code": iban_clean[:2],
                "error_kind": e.kind.value,
            }
        }

    bban = value.bban
    return {
        "valid": True,
        "errors": [],
        "metadata": {
            "input": iban,
            "cleaned": value.as_str(),
            "formatted": value.formatted,
            "country_code": value.country_code,
            "country_name": country_name(value.country_code, value.rule),
            "check_digits": value.check_digits,
            "bban": bban.as_str(),
            "bank_identifier": bban.bank_identifier,
            "branch_identifier": bban.branch_identifier,
            "national_checksum": bban.checksum,
            "format": "ISO 13616"
        }
    }


__all__ = ["validate_iban", "country_name"]
