from __future__ import annotations

from pathlib import Path
from typing import Final

# Longest IBAN defined by any registry country; also the parse buffer capacity
IBAN_MAX_LENGTH: Final[int] = 34

COUNTRY_CODE_LENGTH: Final[int] = 2
CHECK_DIGITS_LENGTH: Final[int] = 2
# BBAN starts after country code + check digits
BBAN_OFFSET: Final[int] = COUNTRY_CODE_LENGTH + CHECK_DIGITS_LENGTH

# Display form groups
GROUP_SIZE: Final[int] = 4

# Registry data source
REGISTRY_DELIMITER: Final[str] = "|"
DEFAULT_REGISTRY_PATH: Final[Path] = Path(__file__).parent / "registry.txt"
ENV_REGISTRY_PATH: Final[str] = "IBANCORE_REGISTRY_PATH"  # alternative registry file

__all__ = [
    "IBAN_MAX_LENGTH",
    "COUNTRY_CODE_LENGTH",
    "CHECK_DIGITS_LENGTH",
    "BBAN_OFFSET",
    "GROUP_SIZE",
    "REGISTRY_DELIMITER",
    "DEFAULT_REGISTRY_PATH",
    "ENV_REGISTRY_PATH",
]
