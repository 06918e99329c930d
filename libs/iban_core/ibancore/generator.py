from __future__ import annotations

import random
from typing import Mapping, Optional

from .checksum import compute_check_digits
from .errors import ParseError, ParseErrorKind
from .iban import Iban
from .registry import get_registry
from .rules import CountryRule


def generate(
    country_code: str,
    rng: Optional[random.Random] = None,
    registry: Optional[Mapping[str, CountryRule]] = None,
) -> Iban:
    """Random, checksum-correct IBAN for ``country_code``.

    Each BBAN position is drawn from its class alphabet with ``rng.choice``;
    the check digits are computed afterwards and the result is validated
    through the normal parser.
    """
    reg = registry if registry is not None else get_registry()
    rule = reg.get(country_code.upper())
    if rule is None:
        raise ParseError(ParseErrorKind.UNKNOWN_COUNTRY)
    rng = rng if rng is not None else random.Random()

    bban = "".join(rng.choice(cls.alphabet) for cls in rule.bban_classes)
    digits = compute_check_digits(rule.country_code, bban)
    return Iban(rule.country_code + digits + bban, registry=reg)


__all__ = ["generate"]
