"""Address derivation, salt mining and difficulty estimation."""

from .create2 import (
    compute_create2_address,
    compute_create2_address_with_code_hash,
    compute_init_code_hash,
    derive_address,
)
from .difficulty import estimate_difficulty
from .miner import mine, mine_sync
from .termination import clean_termination, normalize_termination

__all__ = [
    "compute_create2_address",
    "compute_create2_address_with_code_hash",
    "compute_init_code_hash",
    "derive_address",
    "estimate_difficulty",
    "mine",
    "mine_sync",
    "clean_termination",
    "normalize_termination",
]
