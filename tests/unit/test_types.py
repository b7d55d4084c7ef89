"""Tests for fixed-width parsing and result types."""

import pytest

from create2vanity.common.errors import InvalidInput
from create2vanity.common.types import (
    MiningResult,
    bytes_to_hex,
    hex_to_bytes,
    parse_address,
    parse_hash,
    parse_salt,
)


class TestHexHelpers:
    def test_hex_to_bytes(self):
        assert hex_to_bytes("0x") == b""
        assert hex_to_bytes("0x00") == b"\x00"
        assert hex_to_bytes("0XDEAD") == b"\xde\xad"

    def test_odd_length(self):
        with pytest.raises(InvalidInput, match="even"):
            hex_to_bytes("0xabc")

    def test_not_a_string(self):
        with pytest.raises(InvalidInput):
            hex_to_bytes(42)

    def test_bytes_to_hex(self):
        assert bytes_to_hex(b"") == "0x"
        assert bytes_to_hex(b"\xde\xad") == "0xdead"


class TestParseFixed:
    def test_address(self):
        assert parse_address("0x" + "11" * 20) == b"\x11" * 20

    def test_salt_bytearray(self):
        assert parse_salt(bytearray(32)) == bytes(32)

    def test_no_padding(self):
        with pytest.raises(InvalidInput):
            parse_hash("0x01")

    def test_no_truncation(self):
        with pytest.raises(InvalidInput):
            parse_address(b"\x00" * 32)


class TestMiningResult:
    def test_to_dict(self):
        result = MiningResult(
            salt=b"\x00" * 31 + b"\x05",
            address="0x8D5e55b29f444C4C67d6D4c15bbB5f1227B1db20",
            attempts=5,
            termination="b20",
        )
        assert result.to_dict() == {
            "salt": "0x" + "00" * 31 + "05",
            "address": "0x8D5e55b29f444C4C67d6D4c15bbB5f1227B1db20",
            "attempts": 5,
            "termination": "b20",
        }
