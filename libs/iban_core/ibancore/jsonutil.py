from __future__ import annotations

import orjson
from typing import Any, Mapping, Optional, Tuple, Union

from .iban import Bban, Iban
from .rules import CountryRule


def _default(obj: Any) -> Any:
    # IBAN values serialize as their electronic string
    if isinstance(obj, (Iban, Bban)):
        return obj.as_str()
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def canonical_json_bytes(obj: Any) -> bytes:
    """Return deterministic JSON bytes (sorted keys, newline-terminated).

    Iban and Bban values anywhere in ``obj`` are written as strings.
    """
    return orjson.dumps(obj, default=_default, option=orjson.OPT_SORT_KEYS | orjson.OPT_APPEND_NEWLINE)


def try_parse_json(data: Union[str, bytes]) -> Tuple[Any, Optional[str]]:
    # (value, None) or (None, decoder message)
    try:
        value = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        return None, f"invalid JSON: {e}"
    return value, None


def iban_from_json(data: Union[str, bytes], registry: Optional[Mapping[str, CountryRule]] = None) -> Iban:
    """Decode a JSON string value and parse it as an IBAN.

    Raises ValueError for malformed JSON, ParseError for an invalid IBAN and
    TypeError if the JSON value is not a string.
    """
    value, err = try_parse_json(data)
    if err is not None:
        raise ValueError(err)
    if not isinstance(value, str):
        raise TypeError(f"expected a JSON string, got {type(value).__name__}")
    return Iban(value, registry=registry)


__all__ = ["canonical_json_bytes", "try_parse_json", "iban_from_json"]
