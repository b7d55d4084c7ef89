"""Difficulty estimation for vanity terminations.

Each extra hex character multiplies the expected work by 16. The tiers are
presentation aids only: time labels assume a fixed nominal attempt rate.
"""

from __future__ import annotations

from create2vanity.common.config import NOMINAL_ATTEMPTS_PER_SECOND
from create2vanity.common.errors import InvalidInput
from create2vanity.common.types import DifficultyReport
from create2vanity.core.termination import (
    MAX_TERMINATION_LENGTH,
    clean_termination,
    is_valid_termination,
)

# (exclusive upper bound on expected attempts, tier, time label)
DIFFICULTY_TIERS: list[tuple[int, str, str]] = [
    (2 ** 8, "Very Easy", "Instant"),
    (2 ** 12, "Easy", "Few seconds"),
    (2 ** 16, "Medium", "Few minutes"),
    (2 ** 20, "Hard", "Few hours"),
]
HARDEST_TIER = ("Very Hard", "Days or weeks")

TIER_ORDER = [tier for _, tier, _ in DIFFICULTY_TIERS] + [HARDEST_TIER[0]]


def _tier_for(expected_attempts: int) -> tuple[str, str]:
    for bound, tier, label in DIFFICULTY_TIERS:
        if expected_attempts < bound:
            return tier, label
    return HARDEST_TIER


def estimate_difficulty(
    termination: str,
    *,
    strict: bool = False,
    attempts_per_second: int = NOMINAL_ATTEMPTS_PER_SECOND,
) -> DifficultyReport:
    """Report the expected cost of mining ``termination``.

    Invalid terminations produce a report with ``valid=False``, or raise
    InvalidInput when ``strict`` is set.
    """
    cleaned = clean_termination(termination) if isinstance(termination, str) else ""

    if not is_valid_termination(cleaned):
        if strict:
            raise InvalidInput(
                f"Invalid termination. Must be 1-{MAX_TERMINATION_LENGTH} hexadecimal characters."
            )
        return DifficultyReport(
            valid=False,
            cleaned=cleaned,
            difficulty="Unknown",
            estimated_time="Unknown",
            max_length=MAX_TERMINATION_LENGTH,
        )

    expected_attempts = 16 ** len(cleaned)
    tier, label = _tier_for(expected_attempts)
    return DifficultyReport(
        valid=True,
        cleaned=cleaned,
        difficulty=tier,
        estimated_time=label,
        max_length=MAX_TERMINATION_LENGTH,
        expected_attempts=expected_attempts,
        # a match is expected halfway through the space on average
        estimated_seconds=expected_attempts / (2 * attempts_per_second),
    )
