"""CREATE2 address computation utilities (EIP-1014).

CREATE2 allows deterministic contract address generation before deployment.
The address is computed as:
    address = keccak256(0xff ++ sender_address ++ salt ++ keccak256(init_code))[12:]

Reference: https://eips.ethereum.org/EIPS/eip-1014
"""

from __future__ import annotations

from typing import Optional, Sequence

from eth_abi import encode as abi_encode
from eth_utils import is_hex_address

from create2vanity.common.crypto import keccak256, to_checksum
from create2vanity.common.errors import InvalidInput
from create2vanity.common.types import (
    ADDRESS_SIZE,
    HASH_SIZE,
    SALT_SIZE,
    HexOrBytes,
    hex_to_bytes,
    parse_address,
    parse_hash,
    parse_salt,
)

CREATE2_PREFIX = b"\xff"
_TRUE_STRINGS = ("1", "true", "yes", "y")
_FALSE_STRINGS = ("0", "false", "no", "n")


def compute_create2_address_with_code_hash(
    sender: bytes,
    salt: bytes,
    init_code_hash: bytes,
) -> bytes:
    """
    Compute CREATE2 address with pre-computed init_code hash.

    The contract address is the last 20 bytes of:
        keccak256(0xff ++ sender ++ salt ++ init_code_hash)

    Args:
        sender: 20-byte deployer address
        salt: 32-byte salt value
        init_code_hash: 32-byte keccak256 hash of init_code

    Returns:
        20-byte predicted contract address

    Raises:
        InvalidInput: If any input has the wrong length

    Example:
        >>> sender = bytes(20)
        >>> salt = bytes(32)
        >>> addr = compute_create2_address_with_code_hash(sender, salt, keccak256(b"\\x00"))
        >>> addr.hex()
        '4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38'
    """
    if len(sender) != ADDRESS_SIZE:
        raise InvalidInput(f"Sender must be 20 bytes, got {len(sender)}")
    if len(salt) != SALT_SIZE:
        raise InvalidInput(f"Salt must be 32 bytes, got {len(salt)}")
    if len(init_code_hash) != HASH_SIZE:
        raise InvalidInput(f"Init code hash must be 32 bytes, got {len(init_code_hash)}")

    preimage = CREATE2_PREFIX + sender + salt + init_code_hash
    return keccak256(preimage)[12:]


def compute_create2_address(
    sender: bytes,
    salt: bytes,
    init_code: bytes,
) -> bytes:
    """
    Compute CREATE2 contract address from the full init code.

    Note:
        The init_code includes the constructor arguments, so different
        arguments will produce different addresses.
    """
    return compute_create2_address_with_code_hash(sender, salt, keccak256(init_code))


def derive_address(
    deployer: HexOrBytes,
    salt: HexOrBytes,
    init_code_hash: HexOrBytes,
) -> str:
    """
    Derive the checksummed CREATE2 address for external inputs.

    Accepts 0x-prefixed hex strings or raw bytes. The result is the same for
    identical inputs on every call; there is no hidden state.
    """
    raw = compute_create2_address_with_code_hash(
        parse_address(deployer),
        parse_salt(salt),
        parse_hash(init_code_hash),
    )
    return to_checksum(raw)


def compute_init_code_hash(
    bytecode: HexOrBytes,
    constructor_types: Optional[Sequence[str]] = None,
    constructor_args: Optional[Sequence] = None,
) -> bytes:
    """
    Hash deployment bytecode with ABI-encoded constructor arguments appended.

    Args:
        bytecode: Creation bytecode, hex string or bytes
        constructor_types: ABI types, e.g. ["address", "uint256"]
        constructor_args: Values matching constructor_types

    Returns:
        32-byte keccak256 of bytecode ++ abi.encode(args)
    """
    code = bytes(bytecode) if isinstance(bytecode, (bytes, bytearray)) else hex_to_bytes(bytecode)
    if not code:
        raise InvalidInput("Bytecode must not be empty")

    types = list(constructor_types or [])
    args = list(constructor_args or [])
    if len(types) != len(args):
        raise InvalidInput(
            f"Constructor types/args mismatch: {len(types)} types, {len(args)} args"
        )
    if types:
        args = [_coerce_arg(t, a) for t, a in zip(types, args)]
        try:
            code += abi_encode(types, args)
        except Exception as e:
            raise InvalidInput(f"Cannot encode constructor args: {e}") from e

    return keccak256(code)


def _coerce_arg(abi_type: str, value):
    # JSON clients send big integers and byte strings as hex text.
    if not isinstance(value, str):
        return value
    if abi_type.startswith(("uint", "int")):
        try:
            return int(value, 0)
        except ValueError as e:
            raise InvalidInput(f"Invalid {abi_type} value: {value!r}") from e
    if abi_type == "address":
        if not is_hex_address(value):
            raise InvalidInput(f"Invalid address value: {value!r}")
        return value
    if abi_type.startswith("bytes"):
        return hex_to_bytes(value)
    if abi_type == "bool":
        flag = value.strip().lower()
        if flag in _TRUE_STRINGS:
            return True
        if flag in _FALSE_STRINGS:
            return False
        raise InvalidInput(f"Invalid bool value: {value!r}")
    return value
