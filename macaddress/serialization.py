"""
Structured (de)serialization for MAC addresses.

Wire form is a single-field record holding the octets in order:

    {"eui":[18,52,86,171,205,239]}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Type, Union

from .address import MacAddress
from .config import EUI_LEN, OCTET_MAX, WIRE_FIELD
from .exceptions import DecodeError
from .logging_setup import log_debug


def to_dict(mac: MacAddress) -> dict:
    """Return ``{"eui": [o0, ..., o5]}``."""
    return {WIRE_FIELD: list(mac.eui)}


def from_dict(data: Any, cls: Type[MacAddress] = MacAddress) -> MacAddress:
    """
    Decode the structured form.

    Unknown keys are ignored. Octets are never coerced: bools, floats,
    strings and out-of-range ints are rejected.

    Raises:
        DecodeError: If the record is malformed
    """
    if not isinstance(data, Mapping):
        raise _fail(f"Expected a mapping, got {type(data).__name__}")

    if WIRE_FIELD not in data:
        raise _fail(f"Missing field '{WIRE_FIELD}'")

    eui = data[WIRE_FIELD]
    if not isinstance(eui, (list, tuple)):
        raise _fail(f"Field '{WIRE_FIELD}' must be an array, got {type(eui).__name__}")

    if len(eui) != EUI_LEN:
        raise _fail(f"Field '{WIRE_FIELD}' must hold {EUI_LEN} octets, got {len(eui)}")

    for index, octet in enumerate(eui):
        if isinstance(octet, bool) or not isinstance(octet, int):
            raise _fail(f"Octet {index} is not an integer: {octet!r}")
        if not 0 <= octet <= OCTET_MAX:
            raise _fail(f"Octet {index} out of range 0-{OCTET_MAX}: {octet}")

    return cls(tuple(eui))


def dumps(mac: MacAddress) -> str:
    """Encode as compact JSON, e.g. ``{"eui":[18,52,86,171,205,239]}``."""
    return json.dumps(to_dict(mac), separators=(",", ":"))


def loads(text: Union[str, bytes, bytearray], cls: Type[MacAddress] = MacAddress) -> MacAddress:
    """
    Decode from JSON text.

    Raises:
        DecodeError: If the text is not JSON or the record is malformed
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise _fail(f"Invalid JSON: {e}") from e
    return from_dict(data, cls)


def _fail(reason: str) -> DecodeError:
    log_debug(f"[DECODE] {reason}")
    return DecodeError(reason)
