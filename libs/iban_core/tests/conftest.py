from __future__ import annotations

import pytest

from ibancore.registry import _reset_default_registry


@pytest.fixture
def fresh_registry(monkeypatch):
    """Forget the process registry before and after the test."""
    monkeypatch.delenv("IBANCORE_REGISTRY_PATH", raising=False)
    _reset_default_registry()
    yield
    _reset_default_registry()


REGISTRY_HEADER = (
    "country_code|country_name|bban_format_swift|iban_length|"
    "bban_bankid_start_offset|bban_bankid_stop_offset|"
    "bban_branchid_start_offset|bban_branchid_stop_offset|"
    "bban_checksum_start_offset|bban_checksum_stop_offset|iban_example"
)


@pytest.fixture
def write_registry(tmp_path):
    def _write(*rows: str, name: str = "registry.txt"):
        path = tmp_path / name
        path.write_text("\n".join((REGISTRY_HEADER,) + rows) + "\n", encoding="utf-8")
        return path
    return _write
