"""Init code and init code hashes used across tests."""

from create2vanity.common.crypto import keccak256

# Empty bytecode
EMPTY_INIT_CODE = b""
EMPTY_INIT_CODE_HASH = bytes.fromhex(
    "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
)

# Single 0x00 byte, the init code of the EIP-1014 examples
EIP1014_INIT_CODE = b"\x00"

# Simple storage: store value 42 at slot 0, then return it
SIMPLE_STORAGE_INIT_CODE = bytes.fromhex("602a60005260206000f3")
SIMPLE_STORAGE_INIT_CODE_HASH = keccak256(SIMPLE_STORAGE_INIT_CODE)
SIMPLE_STORAGE_INIT_CODE_HASH_HEX = (
    "0x98e3a357b0a9519e7773d42cf7912a620a18c8f53cd8e1525ce5344917d07e76"
)
