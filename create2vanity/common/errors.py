"""
Error taxonomy for address derivation and salt mining.

None of these are retried internally; callers decide whether to try again
with a larger attempt cap or a shorter termination.
"""

from __future__ import annotations


class VanityError(Exception):
    """Base class for all errors raised by the core."""


class InvalidInput(VanityError, ValueError):
    """Malformed fixed-width value or termination string."""


class SearchExhausted(VanityError):
    """The attempt cap was reached without a matching salt."""

    def __init__(self, attempts: int, termination: str = "") -> None:
        self.attempts = attempts
        self.termination = termination
        super().__init__(
            f"Maximum attempts reached without finding suitable salt "
            f"({attempts} attempts)"
        )


class Cancelled(VanityError):
    """The search was stopped by a cancellation signal or deadline."""

    def __init__(self, attempts: int, reason: str = "cancelled") -> None:
        self.attempts = attempts
        self.reason = reason
        super().__init__(f"Search {reason} after {attempts} attempts")
