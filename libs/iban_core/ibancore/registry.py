"""Country-format registry.

The registry is an immutable mapping from country code to CountryRule. It is
compiled in one pass from registry rows; if any row fails to compile nothing
is published. The process-wide default registry is built lazily, once, from
the bundled ``registry.txt`` or from the file named by
``IBANCORE_REGISTRY_PATH``.
"""
from __future__ import annotations

import csv
import logging
import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

import iso3166

from .constants import DEFAULT_REGISTRY_PATH, ENV_REGISTRY_PATH, REGISTRY_DELIMITER
from .errors import GrammarError, RegistryError
from .grammar import RegistryRow, compile_country_rule
from .rules import CountryRule

log = logging.getLogger("ibancore.registry")


class Registry(Mapping[str, CountryRule]):
    """Read-only country code -> CountryRule mapping."""

    def __init__(self, rules: Mapping[str, CountryRule], source: str = "<memory>"):
        self._rules = MappingProxyType(dict(rules))
        self.source = source

    @classmethod
    def from_rows(cls, rows: Iterable[RegistryRow], source: str = "<memory>") -> "Registry":
        compiled: Dict[str, CountryRule] = {}
        for row in rows:
            rule = compile_country_rule(row)
            if rule.country_code in compiled:
                raise GrammarError("duplicate registry entry", rule.country_code)
            compiled[rule.country_code] = rule
            if rule.country_code not in iso3166.countries_by_alpha2:
                log.debug("Registry country %s is not an ISO 3166 code", rule.country_code)
        if not compiled:
            raise RegistryError(f"registry {source} has no rows")
        log.info("Compiled %d country rules from %s", len(compiled), source)
        return cls(compiled, source=source)

    def __getitem__(self, country_code: str) -> CountryRule:
        return self._rules[country_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Registry({len(self)} countries from {self.source})"


def read_registry_rows(path: Union[str, Path]) -> List[RegistryRow]:
    """Read a pipe-delimited registry file with a header line."""
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f, delimiter=REGISTRY_DELIMITER)
            return [
                RegistryRow.from_record(rec)
                for rec in reader
                if any(isinstance(v, str) and v.strip() for v in rec.values())
            ]
    except OSError as e:
        raise RegistryError(f"cannot read registry {p}: {e}") from e


def load_registry(path: Union[str, Path, None] = None) -> Registry:
    p = Path(path) if path is not None else DEFAULT_REGISTRY_PATH
    return Registry.from_rows(read_registry_rows(p), source=str(p))


_default_registry: Optional[Registry] = None
_default_lock = threading.Lock()


def get_registry() -> Registry:
    """Return the process-wide registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                path = (os.getenv(ENV_REGISTRY_PATH) or "").strip() or None
                _default_registry = load_registry(path)
    return _default_registry


def _reset_default_registry() -> None:
    # test hook: forget the singleton so the next get_registry() reloads
    global _default_registry
    with _default_lock:
        _default_registry = None


__all__ = [
    "Registry",
    "read_registry_rows",
    "load_registry",
    "get_registry",
]
