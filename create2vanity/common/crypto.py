"""
Hashing and address rendering.

- keccak256 hashing (the pre-standard Keccak, NOT SHA3-256)
- EIP-55 mixed-case checksum encoding
"""

from __future__ import annotations

from Crypto.Hash import keccak as _keccak_mod
from eth_utils import to_checksum_address


def keccak256(data: bytes) -> bytes:
    """Compute Keccak-256 hash (NOT SHA3-256)."""
    h = _keccak_mod.new(digest_bits=256)
    h.update(data)
    return h.digest()


def to_checksum(address: bytes) -> str:
    """Render a 20-byte address as an EIP-55 checksummed 0x string."""
    if len(address) != 20:
        raise ValueError(f"Address must be 20 bytes, got {len(address)}")
    return to_checksum_address(address)
