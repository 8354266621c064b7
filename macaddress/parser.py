"""
String parser for MAC addresses.

Accepts the 17-character separated forms (``12:34:56:ab:cd:ef``,
``12-34-56-ab-cd-ef``, ``1234.56ab.cdef`` padded to 17) and the
14-character ``0x123456abcdef`` form.
"""

from __future__ import annotations

import logging

from .config import (
    EUI_LEN,
    HEX_DIGITS,
    HEX_PREFIXES,
    SEPARATORS,
    VALID_TEXT_LENGTHS,
)
from .exceptions import InvalidCharacter, InvalidLength, ParseError
from .logging_setup import get_logger, log_debug, format_block


def _scan(text: str) -> bytes:
    length = len(text)
    if length not in VALID_TEXT_LENGTHS:
        raise InvalidLength(length)

    start = 2 if text.startswith(HEX_PREFIXES) else 0

    eui = bytearray(EUI_LEN)
    index = 0
    high_nibble = True

    for offset, char in enumerate(text[start:], start):
        if index >= EUI_LEN:
            # Digits left over after the sixth octet
            raise InvalidLength(length)

        if char in SEPARATORS:
            continue
        if char not in HEX_DIGITS:
            raise InvalidCharacter(char, offset)

        nibble = int(char, 16)
        if high_nibble:
            eui[index] = nibble << 4
        else:
            eui[index] |= nibble
            index += 1
        high_nibble = not high_nibble

    if index != EUI_LEN:
        raise InvalidLength(length)

    return bytes(eui)


def parse_mac_address(text: str) -> bytes:
    """
    Parse a textual MAC address into its 6 octets.

    Separators (``-``, ``:``, ``.``) are skipped wherever they appear; their
    placement is not checked. A leading ``0x``/``0X`` is skipped but still
    counts toward the 14/17 character length.

    Args:
        text: Address text

    Returns:
        The 6 octets, most significant first

    Raises:
        InvalidLength: Wrong character count, or too few/many hex digits
        InvalidCharacter: A character that is not a hex digit or separator
            (offset counts from the start of ``text``, prefix included)
    """
    try:
        return _scan(text)
    except ParseError as e:
        if get_logger().isEnabledFor(logging.DEBUG):
            log_debug(format_block("PARSE", [f"input: {text!r}", f"error: {e}"]))
        raise
