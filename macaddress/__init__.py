"""
macaddress - MAC (EUI-48) address value type.

Provides validated construction, bit-level classification, the common
textual formats, string parsing and JSON (de)serialization.
"""

from .address import InitType, MacAddress
from .exceptions import (
    MacAddressError,
    ValidationError,
    InvalidAddressLengthError,
    InvalidOctetError,
    ParseError,
    InvalidLength,
    InvalidCharacter,
    DecodeError,
)
from .parser import parse_mac_address

__version__ = "1.0.0"
__author__ = "macaddress Contributors"

__all__ = [
    "InitType",
    "MacAddress",
    "MacAddressError",
    "ValidationError",
    "InvalidAddressLengthError",
    "InvalidOctetError",
    "ParseError",
    "InvalidLength",
    "InvalidCharacter",
    "DecodeError",
    "parse_mac_address",
]
