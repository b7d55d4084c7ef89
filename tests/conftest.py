"""Pytest configuration and shared fixtures for all tests."""

import itertools

import pytest

from create2vanity.common.config import ServiceConfig
from tests.fixtures.addresses import VITALIK_DEPLOYER, ZERO_SALT
from tests.fixtures.contracts import SIMPLE_STORAGE_INIT_CODE_HASH


@pytest.fixture
def deployer():
    """Checksummed deployer address used by mining tests."""
    return VITALIK_DEPLOYER


@pytest.fixture
def init_code_hash():
    """keccak256 of the simple storage init code."""
    return SIMPLE_STORAGE_INIT_CODE_HASH


@pytest.fixture
def sequential_salts():
    """Salt source yielding 1, 2, 3, ... encoded as uint256."""
    counter = itertools.count(1)

    def _next(size: int) -> bytes:
        return next(counter).to_bytes(size, "big")

    return _next


@pytest.fixture
def constant_salt():
    """Salt source that always yields 32 zero bytes."""
    def _zero(size: int) -> bytes:
        return ZERO_SALT[:size]

    return _zero


@pytest.fixture
def config():
    """Service config with small batches for fast tests."""
    return ServiceConfig(batch_size=100, mine_timeout=30.0)
