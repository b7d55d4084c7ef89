"""
Value types: fixed-width inputs, mining results and difficulty reports.

Addresses, salts and init-code hashes cross the external boundary as
0x-prefixed hex strings; internally they are plain bytes of a fixed width.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from eth_utils import is_hexstr

from create2vanity.common.errors import InvalidInput


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ADDRESS_SIZE = 20
SALT_SIZE = 32
HASH_SIZE = 32

ZERO_ADDRESS = b"\x00" * ADDRESS_SIZE
ZERO_SALT = b"\x00" * SALT_SIZE

HexOrBytes = Union[str, bytes]


# ---------------------------------------------------------------------------
# Hex helpers
# ---------------------------------------------------------------------------

def hex_to_bytes(value: str) -> bytes:
    if not isinstance(value, str):
        raise InvalidInput(f"Expected hex string, got {type(value).__name__}")
    if not value.startswith(("0x", "0X")):
        raise InvalidInput(f"Hex value must be 0x-prefixed: {value!r}")
    if not is_hexstr(value):
        raise InvalidInput(f"Invalid hex: {value!r}")
    body = value[2:]
    if len(body) % 2 != 0:
        raise InvalidInput("Hex length must be even")
    return bytes.fromhex(body)


def bytes_to_hex(value: bytes) -> str:
    return "0x" + value.hex()


def parse_fixed(value: HexOrBytes, size: int, name: str) -> bytes:
    """Parse a hex string or bytes into exactly ``size`` bytes.

    Raises InvalidInput on any width mismatch; values are never padded
    or truncated.
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raw = hex_to_bytes(value)
    if len(raw) != size:
        raise InvalidInput(f"{name} must be {size} bytes, got {len(raw)}")
    return raw


def parse_address(value: HexOrBytes) -> bytes:
    return parse_fixed(value, ADDRESS_SIZE, "Deployer address")


def parse_salt(value: HexOrBytes) -> bytes:
    return parse_fixed(value, SALT_SIZE, "Salt")


def parse_hash(value: HexOrBytes) -> bytes:
    return parse_fixed(value, HASH_SIZE, "Init code hash")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MiningResult:
    salt: bytes
    address: str
    attempts: int
    termination: str

    def to_dict(self) -> dict:
        return {
            "salt": bytes_to_hex(self.salt),
            "address": self.address,
            "attempts": self.attempts,
            "termination": self.termination,
        }


@dataclass(frozen=True)
class DifficultyReport:
    valid: bool
    cleaned: str
    difficulty: str
    estimated_time: str
    max_length: int
    expected_attempts: int = 0
    estimated_seconds: float = 0.0

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "cleaned": self.cleaned,
            "difficulty": self.difficulty,
            "estimatedTime": self.estimated_time,
            "maxLength": self.max_length,
            "expectedAttempts": self.expected_attempts,
            "estimatedSeconds": self.estimated_seconds,
        }
