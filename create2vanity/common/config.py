"""
Service configuration.

Defaults mirror the public service limits: mining requests default to
100,000 attempts and are never allowed more than 1,000,000.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional


DEFAULT_PORT = 3000
MAX_ATTEMPT_CAP = 1_000_000
DEFAULT_ATTEMPTS = 100_000
DEFAULT_BATCH_SIZE = 1000
NOMINAL_ATTEMPTS_PER_SECOND = 1000


@dataclass(frozen=True)
class ServiceConfig:
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    max_attempt_cap: int = MAX_ATTEMPT_CAP
    default_attempts: int = DEFAULT_ATTEMPTS
    batch_size: int = DEFAULT_BATCH_SIZE   # attempts between yields
    attempts_per_second: int = NOMINAL_ATTEMPTS_PER_SECOND
    mine_timeout: Optional[float] = 60.0   # request-level, seconds
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_attempt_cap <= 0:
            raise ValueError("max_attempt_cap must be positive")
        if self.default_attempts <= 0:
            raise ValueError("default_attempts must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.attempts_per_second <= 0:
            raise ValueError("attempts_per_second must be positive")
        if self.mine_timeout is not None and self.mine_timeout <= 0:
            raise ValueError("mine_timeout must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ServiceConfig:
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        kwargs: dict = {}
        if "HOST" in env:
            kwargs["host"] = env["HOST"]
        if "PORT" in env:
            kwargs["port"] = int(env["PORT"])
        if "VANITY_MAX_ATTEMPTS" in env:
            kwargs["max_attempt_cap"] = int(env["VANITY_MAX_ATTEMPTS"])
        if "VANITY_BATCH_SIZE" in env:
            kwargs["batch_size"] = int(env["VANITY_BATCH_SIZE"])
        if "VANITY_MINE_TIMEOUT" in env:
            kwargs["mine_timeout"] = float(env["VANITY_MINE_TIMEOUT"])
        if "LOG_LEVEL" in env:
            kwargs["log_level"] = env["LOG_LEVEL"].upper()
        return cls(**kwargs)

    def with_overrides(self, **overrides) -> ServiceConfig:
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def clamp_attempts(self, requested: Optional[int]) -> int:
        if requested is None:
            requested = self.default_attempts
        return min(requested, self.max_attempt_cap)
