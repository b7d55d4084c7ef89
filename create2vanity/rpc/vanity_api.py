"""
create2_ namespace JSON-RPC API handlers.

Thin transport around the core: parameters arrive in their external hex
form, core errors are mapped onto JSON-RPC error objects.
"""

from __future__ import annotations

import logging
from typing import Optional

from create2vanity.common.config import ServiceConfig
from create2vanity.common.errors import Cancelled, InvalidInput, SearchExhausted
from create2vanity.common.types import bytes_to_hex
from create2vanity.core.create2 import compute_init_code_hash, derive_address
from create2vanity.core.difficulty import estimate_difficulty
from create2vanity.core.miner import mine
from create2vanity.rpc.server import INVALID_PARAMS, RPCError, RPCServer

logger = logging.getLogger(__name__)

SEARCH_EXHAUSTED = -32010
SEARCH_CANCELLED = -32011


def register_vanity_api(rpc: RPCServer, config: Optional[ServiceConfig] = None) -> None:
    """Register all create2_ namespace methods on the RPC server."""
    config = config or ServiceConfig()

    @rpc.method("create2_computeAddress")
    def compute_address(deployer: str, salt: str, initCodeHash: str) -> str:
        try:
            return derive_address(deployer, salt, initCodeHash)
        except InvalidInput as e:
            raise RPCError(INVALID_PARAMS, str(e))

    @rpc.method("create2_mineAddress")
    async def mine_address(
        deployer: str,
        initCodeHash: str,
        termination: str,
        maxAttempts: Optional[int] = None,
    ) -> dict:
        if maxAttempts is not None and (
            isinstance(maxAttempts, bool) or not isinstance(maxAttempts, int)
        ):
            raise RPCError(INVALID_PARAMS, "maxAttempts must be an integer")
        cap = config.clamp_attempts(maxAttempts)
        try:
            result = await mine(
                deployer,
                initCodeHash,
                termination,
                cap,
                cancel_event=rpc.cancel_event(),
                timeout=config.mine_timeout,
                batch_size=config.batch_size,
                max_attempt_cap=config.max_attempt_cap,
            )
        except InvalidInput as e:
            raise RPCError(INVALID_PARAMS, str(e))
        except SearchExhausted as e:
            raise RPCError(SEARCH_EXHAUSTED, str(e), {"attempts": e.attempts})
        except Cancelled as e:
            raise RPCError(SEARCH_CANCELLED, str(e), {"attempts": e.attempts, "reason": e.reason})
        return result.to_dict()

    @rpc.method("create2_estimateDifficulty")
    def estimate(termination: str, strict: bool = False) -> dict:
        if not isinstance(strict, bool):
            raise RPCError(INVALID_PARAMS, "strict must be a boolean")
        try:
            report = estimate_difficulty(
                termination,
                strict=strict,
                attempts_per_second=config.attempts_per_second,
            )
        except InvalidInput as e:
            raise RPCError(INVALID_PARAMS, str(e))
        return report.to_dict()

    @rpc.method("create2_initCodeHash")
    def init_code_hash(
        bytecode: str,
        constructorTypes: Optional[list] = None,
        constructorArgs: Optional[list] = None,
    ) -> str:
        try:
            return bytes_to_hex(compute_init_code_hash(bytecode, constructorTypes, constructorArgs))
        except InvalidInput as e:
            raise RPCError(INVALID_PARAMS, str(e))

    logger.debug("Registered create2_ API: %s", ", ".join(rpc.method_names))
