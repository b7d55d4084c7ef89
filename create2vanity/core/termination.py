"""Vanity termination normalization.

A termination is the hex suffix a mined address must end with. Callers may
write it with separators or mixed case ("DE:AD"); everything outside 0-9a-f
is stripped and the rest lowercased before validation.
"""

from __future__ import annotations

import re

from create2vanity.common.errors import InvalidInput

MAX_TERMINATION_LENGTH = 8

_NON_HEX = re.compile(r"[^0-9a-f]")
_HEX = re.compile(r"[0-9a-f]+")


def clean_termination(raw: str) -> str:
    return _NON_HEX.sub("", raw.lower())


def is_valid_termination(cleaned: str) -> bool:
    return (
        0 < len(cleaned) <= MAX_TERMINATION_LENGTH
        and _HEX.fullmatch(cleaned) is not None
    )


def normalize_termination(raw: str) -> str:
    """Clean and validate a termination, raising InvalidInput on failure."""
    if not isinstance(raw, str):
        raise InvalidInput(f"Termination must be a string, got {type(raw).__name__}")
    cleaned = clean_termination(raw)
    if not is_valid_termination(cleaned):
        raise InvalidInput(
            f"Invalid termination. Must be 1-{MAX_TERMINATION_LENGTH} hexadecimal characters."
        )
    return cleaned


def matches_termination(address: bytes, termination: str) -> bool:
    """Compare the trailing hex digits of a raw 20-byte address.

    The 0x prefix is never part of the comparison window.
    """
    return address.hex().endswith(termination)
