"""
Custom exceptions for the macaddress library.

Construction, parse and decode failures each have their own branch so
callers can tell them apart.
"""

from typing import Any


class MacAddressError(Exception):
    """Base exception for all macaddress errors."""
    pass


# ---------------- Construction Errors ----------------

class ValidationError(MacAddressError, ValueError):
    """Octet sequence does not form a valid address."""
    pass


class InvalidAddressLengthError(ValidationError):
    """Octet sequence is not exactly 6 long."""

    def __init__(self, length: int, expected_len: int = 6):
        super().__init__(length, expected_len)
        self.length = length
        self.expected_len = expected_len

    def __str__(self) -> str:
        return f"Invalid address length {self.length}: expected {self.expected_len} octets"


class InvalidOctetError(ValidationError):
    """Octet is not an integer in 0-255."""

    def __init__(self, index: int, value: Any):
        super().__init__(index, value)
        self.index = index
        self.value = value

    def __str__(self) -> str:
        return f"Invalid octet {self.value!r} at index {self.index} (must be an int 0-255)"


# ---------------- Parse Errors ----------------

class ParseError(MacAddressError, ValueError):
    """
    Base class for string parse failures.

    Parse errors are values: two errors of the same variant with the same
    payload compare equal.
    """

    summary = "MacAddress parse error"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidLength(ParseError):
    """Input is not 14 or 17 characters, or holds the wrong digit count."""

    def __init__(self, length: int):
        super().__init__(length)
        self.length = length

    def __str__(self) -> str:
        return f"Invalid length; expecting 14 or 17 characters, found {self.length}"


class InvalidCharacter(ParseError):
    """Input holds a character that is neither a hex digit nor a separator."""

    def __init__(self, character: str, offset: int):
        super().__init__(character, offset)
        self.character = character
        self.offset = offset

    def __str__(self) -> str:
        return f"Invalid character; found '{self.character}' at offset {self.offset}"


# ---------------- Decode Errors ----------------

class DecodeError(MacAddressError, ValueError):
    """Structured (dict / JSON) form could not be decoded."""
    pass
