"""Tests for service configuration."""

import pytest

from create2vanity.common.config import MAX_ATTEMPT_CAP, ServiceConfig


class TestServiceConfig:
    def test_defaults(self):
        config = ServiceConfig()
        assert config.port == 3000
        assert config.max_attempt_cap == 1_000_000
        assert config.default_attempts == 100_000
        assert config.batch_size == 1000

    def test_from_env(self):
        config = ServiceConfig.from_env({
            "PORT": "8080",
            "HOST": "0.0.0.0",
            "VANITY_MAX_ATTEMPTS": "5000",
            "VANITY_BATCH_SIZE": "50",
            "VANITY_MINE_TIMEOUT": "2.5",
            "LOG_LEVEL": "debug",
        })
        assert config.port == 8080
        assert config.host == "0.0.0.0"
        assert config.max_attempt_cap == 5000
        assert config.batch_size == 50
        assert config.mine_timeout == 2.5
        assert config.log_level == "DEBUG"

    def test_from_empty_env(self):
        assert ServiceConfig.from_env({}) == ServiceConfig()

    def test_overrides_skip_none(self):
        config = ServiceConfig().with_overrides(port=9000, host=None)
        assert config.port == 9000
        assert config.host == "127.0.0.1"

    def test_clamp_attempts(self):
        config = ServiceConfig()
        assert config.clamp_attempts(None) == 100_000
        assert config.clamp_attempts(10) == 10
        assert config.clamp_attempts(5_000_000) == MAX_ATTEMPT_CAP

    @pytest.mark.parametrize("field", ["max_attempt_cap", "default_attempts", "batch_size"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(ValueError):
            ServiceConfig(**{field: 0})
