"""
MAC (EUI-48) address value type.

A MacAddress owns exactly 6 octets and is immutable once built. All
construction paths validate; the named patterns (zero, broadcast) cannot
fail.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Tuple, Union

from .config import (
    EUI_LEN,
    OCTET_MAX,
    ZERO_EUI,
    BROADCAST_EUI,
    MULTICAST_BIT,
    LOCAL_BIT,
    LINK_LOCAL_PREFIX,
)
from .exceptions import InvalidAddressLengthError, InvalidOctetError
from .parser import parse_mac_address


class InitType(Enum):
    """Named address patterns."""

    ZERO = "zero"
    BROADCAST = "broadcast"


def _validate_eui(eui: Union[bytes, bytearray, Iterable[int]]) -> Tuple[int, ...]:
    octets = tuple(eui)
    if len(octets) != EUI_LEN:
        raise InvalidAddressLengthError(len(octets), EUI_LEN)
    for index, octet in enumerate(octets):
        # bool is an int subclass but never a meaningful octet
        if isinstance(octet, bool) or not isinstance(octet, int):
            raise InvalidOctetError(index, octet)
        if not 0 <= octet <= OCTET_MAX:
            raise InvalidOctetError(index, octet)
    return octets


@dataclass(frozen=True, repr=False)
class MacAddress:
    """
    A 48-bit hardware address.

    Equality and hashing use the octets only. ``str()`` gives the
    colon-separated form, ``repr()`` wraps it as ``MacAddress("...")``.
    """

    eui: Tuple[int, ...] = field(default=ZERO_EUI)

    def __post_init__(self) -> None:
        object.__setattr__(self, "eui", _validate_eui(self.eui))

    # ---------------- Construction ----------------

    @classmethod
    def from_bytes(cls, eui: Union[bytes, bytearray, Iterable[int]]) -> "MacAddress":
        """
        Build an address from exactly 6 octets.

        Raises:
            InvalidAddressLengthError: If the sequence is not 6 long
            InvalidOctetError: If an element is not an int in 0-255
        """
        return cls(_validate_eui(eui))

    @classmethod
    def from_string(cls, text: str) -> "MacAddress":
        """
        Parse an address from text.

        Raises:
            ParseError: InvalidLength or InvalidCharacter from the parser
        """
        return cls(tuple(parse_mac_address(text)))

    @classmethod
    def with_type(cls, init_type: InitType) -> "MacAddress":
        if init_type is InitType.BROADCAST:
            return cls(BROADCAST_EUI)
        return cls(ZERO_EUI)

    @classmethod
    def zero(cls) -> "MacAddress":
        return cls.with_type(InitType.ZERO)

    @classmethod
    def broadcast(cls) -> "MacAddress":
        return cls.with_type(InitType.BROADCAST)

    @classmethod
    def from_mac_address(cls, mac: "MacAddress") -> "MacAddress":
        """Copy another address."""
        return cls(mac.eui)

    def copy(self) -> "MacAddress":
        return self.from_mac_address(self)

    # ---------------- Predicates ----------------

    @property
    def is_zero(self) -> bool:
        return self.eui == ZERO_EUI

    @property
    def is_broadcast(self) -> bool:
        return self.eui == BROADCAST_EUI

    @property
    def is_unicast(self) -> bool:
        """I/G bit of the first octet is clear."""
        return self.eui[0] & MULTICAST_BIT == 0

    @property
    def is_multicast(self) -> bool:
        """I/G bit of the first octet is set."""
        return self.eui[0] & MULTICAST_BIT == MULTICAST_BIT

    @property
    def is_universal(self) -> bool:
        """U/L bit of the first octet is clear."""
        return self.eui[0] & LOCAL_BIT == 0

    @property
    def is_local(self) -> bool:
        """U/L bit of the first octet is set."""
        return self.eui[0] & LOCAL_BIT == LOCAL_BIT

    # ---------------- Formatters ----------------

    @property
    def hexadecimal(self) -> str:
        """``0x123456abcdef``"""
        return "0x" + bytes(self.eui).hex()

    @property
    def hex_format(self) -> str:
        """``12:34:56:ab:cd:ef``"""
        return ":".join(f"{o:02x}" for o in self.eui)

    @property
    def dot_format(self) -> str:
        """``1234.56ab.cdef``"""
        o = self.eui
        return f"{o[0]:02x}{o[1]:02x}.{o[2]:02x}{o[3]:02x}.{o[4]:02x}{o[5]:02x}"

    @property
    def canonical_format(self) -> str:
        """``12-34-56-ab-cd-ef``"""
        return "-".join(f"{o:02x}" for o in self.eui)

    @property
    def interface_id(self) -> str:
        """
        Modified EUI-64 interface identifier.

        The U/L bit is flipped and ``ff:fe`` is inserted between the third
        and fourth octets: ``12:34:56:ab:cd:ef`` -> ``1034:56ff:feab:cdef``.
        """
        o = self.eui
        return (
            f"{o[0] ^ LOCAL_BIT:02x}{o[1]:02x}:{o[2]:02x}ff:"
            f"fe{o[3]:02x}:{o[4]:02x}{o[5]:02x}"
        )

    @property
    def link_local(self) -> str:
        return LINK_LOCAL_PREFIX + self.interface_id

    # ---------------- Conversions ----------------

    @property
    def packed(self) -> bytes:
        return bytes(self.eui)

    def __bytes__(self) -> bytes:
        return self.packed

    def __str__(self) -> str:
        return self.hex_format

    def __repr__(self) -> str:
        return f'{type(self).__name__}("{self.hex_format}")'

    def to_dict(self) -> dict:
        from .serialization import to_dict
        return to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MacAddress":
        from .serialization import from_dict
        return from_dict(data, cls)

    def to_json(self) -> str:
        from .serialization import dumps
        return dumps(self)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "MacAddress":
        from .serialization import loads
        return loads(text, cls)
