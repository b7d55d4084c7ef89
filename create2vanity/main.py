"""
py-create2-vanity — CREATE2 address derivation and vanity salt mining.

Entry point. Subcommands:
  serve     Run the JSON-RPC service
  compute   Derive the address for a known salt
  mine      Search for a salt matching a termination
  estimate  Report the difficulty of a termination
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from create2vanity.common.config import ServiceConfig
from create2vanity.common.errors import VanityError
from create2vanity.core.create2 import derive_address
from create2vanity.core.difficulty import estimate_difficulty
from create2vanity.core.miner import mine_sync
from create2vanity.rpc.server import RPCServer
from create2vanity.rpc.vanity_api import register_vanity_api


logger = logging.getLogger("create2vanity")


def create_rpc(config: Optional[ServiceConfig] = None) -> RPCServer:
    """Build the RPC server with the create2_ API registered."""
    rpc = RPCServer()
    register_vanity_api(rpc, config or ServiceConfig())
    return rpc


def create_app(config: Optional[ServiceConfig] = None):
    return create_rpc(config).app


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_serve(args: argparse.Namespace, config: ServiceConfig) -> int:
    import uvicorn

    logger.info("Starting py-create2-vanity service")
    logger.info("  Listen: %s:%d", config.host, config.port)
    logger.info("  Max attempts per request: %d", config.max_attempt_cap)
    logger.info("  Mining timeout: %ss", config.mine_timeout)

    rpc = create_rpc(config)
    uv_config = uvicorn.Config(
        rpc.app,
        host=config.host,
        port=config.port,
        log_level="warning",
        loop="asyncio",
    )
    server = uvicorn.Server(uv_config)

    # uvicorn waits for in-flight requests before running lifespan shutdown,
    # so running searches must hear about the signal first
    handle_exit = server.handle_exit

    def _handle_exit(sig, frame) -> None:
        rpc.request_shutdown()
        handle_exit(sig, frame)

    server.handle_exit = _handle_exit
    asyncio.run(server.serve())
    logger.info("Service stopped")
    return 0


def cmd_compute(args: argparse.Namespace, config: ServiceConfig) -> int:
    print(derive_address(args.deployer, args.salt, args.init_code_hash))
    return 0


def cmd_mine(args: argparse.Namespace, config: ServiceConfig) -> int:
    result = mine_sync(
        args.deployer,
        args.init_code_hash,
        args.termination,
        config.clamp_attempts(args.max_attempts),
        timeout=args.timeout,
        batch_size=config.batch_size,
        max_attempt_cap=config.max_attempt_cap,
    )
    print(json.dumps(result.to_dict(), indent=2))
    return 0


def cmd_estimate(args: argparse.Namespace, config: ServiceConfig) -> int:
    report = estimate_difficulty(
        args.termination,
        attempts_per_second=config.attempts_per_second,
    )
    print(json.dumps(report.to_dict(), indent=2))
    return 0 if report.valid else 1


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create2-vanity",
        description="CREATE2 address derivation and vanity salt mining",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--max-attempts-cap",
        type=int,
        default=None,
        help="System-wide ceiling on attempts per search (default: 1000000)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the JSON-RPC service")
    serve.add_argument("--host", type=str, default=None, help="Listen host (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=None, help="Listen port (default: 3000)")
    serve.add_argument(
        "--mine-timeout",
        type=float,
        default=None,
        help="Per-request mining timeout in seconds (default: 60)",
    )
    serve.set_defaults(func=cmd_serve)

    compute = sub.add_parser("compute", help="Derive the CREATE2 address for a salt")
    compute.add_argument("--deployer", required=True, help="0x-prefixed deployer address")
    compute.add_argument("--salt", required=True, help="0x-prefixed 32-byte salt")
    compute.add_argument("--init-code-hash", required=True, help="0x-prefixed 32-byte init code hash")
    compute.set_defaults(func=cmd_compute)

    mine = sub.add_parser("mine", help="Search for a salt matching a termination")
    mine.add_argument("--deployer", required=True, help="0x-prefixed deployer address")
    mine.add_argument("--init-code-hash", required=True, help="0x-prefixed 32-byte init code hash")
    mine.add_argument("--termination", required=True, help="Desired hex suffix, 1-8 chars")
    mine.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Attempts before giving up (default: 100000)",
    )
    mine.add_argument("--timeout", type=float, default=None, help="Wall-clock limit in seconds")
    mine.set_defaults(func=cmd_mine)

    estimate = sub.add_parser("estimate", help="Estimate the difficulty of a termination")
    estimate.add_argument("termination", help="Desired hex suffix")
    estimate.set_defaults(func=cmd_estimate)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ServiceConfig.from_env().with_overrides(
            log_level=args.log_level,
            max_attempt_cap=args.max_attempts_cap,
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
            mine_timeout=getattr(args, "mine_timeout", None),
        )
    except ValueError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration: %s", e)
        return 2

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        return args.func(args, config)
    except VanityError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
