"""Shared types, errors, hashing and configuration."""

from .crypto import keccak256, to_checksum
from .errors import VanityError, InvalidInput, SearchExhausted, Cancelled

__all__ = [
    "keccak256",
    "to_checksum",
    "VanityError",
    "InvalidInput",
    "SearchExhausted",
    "Cancelled",
]
