"""
Tests for macaddress.parser module.
"""

import pytest
import logging

from macaddress import parser
from macaddress.config import LOGGER_NAME
from macaddress.logging_setup import setup_logging
from macaddress.parser import parse_mac_address
from macaddress.exceptions import (
    ParseError,
    InvalidLength,
    InvalidCharacter,
)


SAMPLE = bytes([0x12, 0x34, 0x56, 0xAB, 0xCD, 0xEF])


class TestSuccessfulParse:
    """Tests for accepted forms."""

    @pytest.mark.parametrize("text", [
        "0x123456ABCDEF",
        "0X123456abcdef",
        "1234.56AB.CDEF",
        "12:34:56:AB:CD:EF",
        "12-34-56-ab-cd-ef",
        "12.34.56.ab.cd.ef",
    ])
    def test_accepted_forms(self, text):
        """Test each supported layout yields the same octets."""
        assert parse_mac_address(text) == SAMPLE

    def test_mixed_separators(self):
        """Test separator placement and consistency are not checked."""
        assert parse_mac_address("12:34-56.AB:CD-EF") == SAMPLE
        assert parse_mac_address("1:23:456:ABC::DEF") == SAMPLE

    def test_case_insensitive(self):
        """Test upper and lower case digits are equivalent."""
        assert parse_mac_address("AB:CD:EF:AB:CD:EF") == parse_mac_address("ab:cd:ef:ab:cd:ef")

    def test_returns_bytes(self):
        result = parse_mac_address("ff:ff:ff:ff:ff:ff")
        assert isinstance(result, bytes)
        assert result == b"\xff" * 6


class TestInvalidLength:
    """Tests for InvalidLength failures."""

    @pytest.mark.parametrize("text,length", [
        ("", 0),
        ("0", 1),
        ("123456ABCDEF", 12),
        ("0x1234567890A", 13),
        ("1234567890ABCDEF", 16),
    ])
    def test_wrong_character_count(self, text, length):
        """Test strings that are not 14 or 17 long."""
        with pytest.raises(InvalidLength) as exc_info:
            parse_mac_address(text)
        assert exc_info.value == InvalidLength(length)
        assert exc_info.value.length == length

    @pytest.mark.parametrize("text", [
        "1234567890ABCD",
        "0x00:00:00:00:",
        "::::::::::::::",
    ])
    def test_wrong_digit_count_14(self, text):
        """Test 14-character strings with too many or too few digits."""
        with pytest.raises(InvalidLength) as exc_info:
            parse_mac_address(text)
        assert exc_info.value == InvalidLength(14)

    @pytest.mark.parametrize("text", [
        "01234567890ABCDEF",
        "0x1234567890ABCDE",
        "0x00:00:00:00:00:",
        ":::::::::::::::::",
    ])
    def test_wrong_digit_count_17(self, text):
        """Test 17-character strings with too many or too few digits."""
        with pytest.raises(InvalidLength) as exc_info:
            parse_mac_address(text)
        assert exc_info.value == InvalidLength(17)

    def test_trailing_separator_after_six_octets(self):
        """Test input left over after the sixth octet is rejected."""
        with pytest.raises(InvalidLength):
            parse_mac_address("123456abcdef:::::")


class TestInvalidCharacter:
    """Tests for InvalidCharacter failures."""

    def test_stray_prefix(self):
        """Test an 'x' after the prefix is reported at its absolute offset."""
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_mac_address("0x0x0x0x0x0x0x")
        assert exc_info.value == InvalidCharacter("x", 3)

    def test_leading_character(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_mac_address("!0x00000000000")
        assert exc_info.value == InvalidCharacter("!", 0)

    def test_trailing_character(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_mac_address("0x00000000000!")
        assert exc_info.value.character == "!"
        assert exc_info.value.offset == 13

    def test_whitespace_is_invalid(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_mac_address("12 34 56 ab cd ef")
        assert exc_info.value == InvalidCharacter(" ", 2)

    def test_non_ascii_digit_is_invalid(self):
        """Test digits outside ASCII are not treated as hex."""
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_mac_address("12:34:56:ab:cd:e٣")
        assert exc_info.value.offset == 16


class TestParseErrorValues:
    """Tests for ParseError behaviour as values."""

    def test_equality(self):
        assert InvalidLength(3) == InvalidLength(3)
        assert InvalidLength(3) != InvalidLength(4)
        assert InvalidCharacter("x", 3) == InvalidCharacter("x", 3)
        assert InvalidCharacter("x", 3) != InvalidCharacter("y", 3)
        assert InvalidLength(3) != InvalidCharacter("x", 3)

    def test_hashable(self):
        errors = {InvalidLength(2), InvalidLength(2), InvalidCharacter("&", 2)}
        assert len(errors) == 2

    def test_messages(self):
        assert str(InvalidLength(2)) == "Invalid length; expecting 14 or 17 characters, found 2"
        assert str(InvalidCharacter("&", 2)) == "Invalid character; found '&' at offset 2"

    def test_summary(self):
        assert InvalidLength(2).summary == "MacAddress parse error"
        assert InvalidCharacter("&", 2).summary == "MacAddress parse error"

    def test_hierarchy(self):
        assert isinstance(InvalidLength(0), ParseError)
        assert isinstance(InvalidCharacter("!", 0), ParseError)
        assert isinstance(InvalidLength(0), ValueError)


class TestParseLogging:
    """Tests for debug output on rejected input."""

    def test_no_formatting_when_debug_disabled(self, clean_logging, monkeypatch):
        """Test the diagnostic block is only built when DEBUG is enabled."""
        calls = []
        monkeypatch.setattr(
            parser, "format_block", lambda title, lines: calls.append(title) or ""
        )
        setup_logging(log_level="WARNING")

        with pytest.raises(InvalidLength):
            parse_mac_address("0")
        assert calls == []

    def test_formatting_when_debug_enabled(self, clean_logging, caplog):
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            with pytest.raises(InvalidCharacter):
                parse_mac_address("!0x00000000000")

        assert "[PARSE]" in caplog.text
        assert "found '!' at offset 0" in caplog.text
