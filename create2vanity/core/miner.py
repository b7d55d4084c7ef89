"""
Vanity salt mining.

Draws uniformly random 32-byte salts and derives CREATE2 addresses until one
ends with the requested termination. An N-character termination matches with
probability 16**-N per draw, so roughly 16**N / 2 attempts are expected.

The loop is a coroutine that yields to the event loop every ``batch_size``
attempts. Between batches it checks an optional cancellation event and
deadline, so a long search can be stopped before its attempt cap is reached.
Each call owns its counter and random source; concurrent searches share
nothing.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Callable, Optional, Protocol

from create2vanity.common.config import DEFAULT_BATCH_SIZE, MAX_ATTEMPT_CAP
from create2vanity.common.crypto import to_checksum
from create2vanity.common.errors import Cancelled, InvalidInput, SearchExhausted
from create2vanity.common.types import (
    SALT_SIZE,
    HexOrBytes,
    MiningResult,
    parse_address,
    parse_hash,
)
from create2vanity.core.create2 import compute_create2_address_with_code_hash
from create2vanity.core.termination import matches_termination, normalize_termination

logger = logging.getLogger(__name__)


class CancelEvent(Protocol):
    """Anything with ``is_set()``: asyncio.Event and threading.Event both fit."""

    def is_set(self) -> bool: ...


def _validate_cap(attempt_cap, max_attempt_cap: int) -> int:
    if isinstance(attempt_cap, bool) or not isinstance(attempt_cap, int):
        raise InvalidInput(f"Attempt cap must be an integer, got {attempt_cap!r}")
    if attempt_cap <= 0:
        raise InvalidInput(f"Attempt cap must be positive, got {attempt_cap}")
    return min(attempt_cap, max_attempt_cap)


async def mine(
    deployer: HexOrBytes,
    init_code_hash: HexOrBytes,
    termination: str,
    attempt_cap: int,
    *,
    cancel_event: Optional[CancelEvent] = None,
    timeout: Optional[float] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    random_bytes: Callable[[int], bytes] = os.urandom,
    max_attempt_cap: int = MAX_ATTEMPT_CAP,
) -> MiningResult:
    """
    Search for a salt whose CREATE2 address ends with ``termination``.

    Args:
        deployer: 20-byte deployer address (hex or bytes)
        init_code_hash: 32-byte keccak256 of the init code (hex or bytes)
        termination: Desired suffix, normalized before use ("DE:AD" -> "dead")
        attempt_cap: Maximum salts to try, clamped to ``max_attempt_cap``
        cancel_event: Checked between batches; when set the search stops
        timeout: Wall-clock budget in seconds, checked between batches
        batch_size: Attempts between yields to the event loop
        random_bytes: Source of salts, must be safe for concurrent use

    Returns:
        MiningResult for the first matching salt; attempts is in [1, cap]

    Raises:
        InvalidInput: Malformed deployer, hash, termination or cap
        SearchExhausted: No match within the cap; ``attempts`` equals the cap
        Cancelled: Cancel event set or deadline passed before the cap
    """
    cleaned = normalize_termination(termination)
    sender = parse_address(deployer)
    code_hash = parse_hash(init_code_hash)
    cap = _validate_cap(attempt_cap, max_attempt_cap)
    if batch_size <= 0:
        raise InvalidInput(f"Batch size must be positive, got {batch_size}")

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout if timeout is not None else None

    logger.debug(
        "Mining termination %r for deployer 0x%s (cap=%d, batch=%d)",
        cleaned, sender.hex(), cap, batch_size,
    )

    attempts = 0
    if cancel_event is not None and cancel_event.is_set():
        raise Cancelled(attempts)

    while attempts < cap:
        salt = random_bytes(SALT_SIZE)
        address = compute_create2_address_with_code_hash(sender, salt, code_hash)
        attempts += 1

        if matches_termination(address, cleaned):
            result = MiningResult(
                salt=salt,
                address=to_checksum(address),
                attempts=attempts,
                termination=cleaned,
            )
            logger.info(
                "Found %s for termination %r after %d attempts",
                result.address, cleaned, attempts,
            )
            return result

        if attempts % batch_size == 0 and attempts < cap:
            await asyncio.sleep(0)
            if cancel_event is not None and cancel_event.is_set():
                logger.warning("Mining %r cancelled after %d attempts", cleaned, attempts)
                raise Cancelled(attempts)
            if deadline is not None and loop.time() >= deadline:
                logger.warning("Mining %r timed out after %d attempts", cleaned, attempts)
                raise Cancelled(attempts, reason="timed out")

    logger.warning("Mining %r exhausted %d attempts", cleaned, cap)
    raise SearchExhausted(cap, cleaned)


def mine_sync(*args, **kwargs) -> MiningResult:
    """Run :func:`mine` to completion outside an event loop."""
    return asyncio.run(mine(*args, **kwargs))
