"""Tests for the command-line interface."""

import json

import pytest

from create2vanity.main import build_parser, main
from tests.fixtures.addresses import (
    EMPTY_CODE_ADDRESS,
    VITALIK_DEPLOYER,
    ZERO_ADDRESS_HEX,
    ZERO_SALT_HEX,
)
from tests.fixtures.contracts import EMPTY_INIT_CODE_HASH, SIMPLE_STORAGE_INIT_CODE_HASH_HEX


class TestCLI:
    def test_compute(self, capsys):
        code = main([
            "compute",
            "--deployer", ZERO_ADDRESS_HEX,
            "--salt", ZERO_SALT_HEX,
            "--init-code-hash", "0x" + EMPTY_INIT_CODE_HASH.hex(),
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == EMPTY_CODE_ADDRESS

    def test_compute_invalid(self):
        code = main([
            "compute",
            "--deployer", "0x00",
            "--salt", ZERO_SALT_HEX,
            "--init-code-hash", "0x" + EMPTY_INIT_CODE_HASH.hex(),
        ])
        assert code == 1

    def test_mine(self, capsys):
        code = main([
            "mine",
            "--deployer", VITALIK_DEPLOYER,
            "--init-code-hash", SIMPLE_STORAGE_INIT_CODE_HASH_HEX,
            "--termination", "e",
        ])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["address"].lower().endswith("e")
        assert data["termination"] == "e"

    def test_mine_exhausted(self):
        code = main([
            "--max-attempts-cap", "1",
            "mine",
            "--deployer", VITALIK_DEPLOYER,
            "--init-code-hash", SIMPLE_STORAGE_INIT_CODE_HASH_HEX,
            "--termination", "deadbeef",
        ])
        assert code == 1

    def test_estimate(self, capsys):
        assert main(["estimate", "abc"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["difficulty"] == "Medium"

    def test_estimate_invalid(self, capsys):
        assert main(["estimate", "zzz"]) == 1
        assert json.loads(capsys.readouterr().out)["valid"] is False

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    @pytest.mark.parametrize("name,value", [
        ("PORT", "not-a-port"),
        ("VANITY_MAX_ATTEMPTS", "lots"),
        ("VANITY_BATCH_SIZE", "0"),
        ("VANITY_MINE_TIMEOUT", "soon"),
    ])
    def test_bad_environment(self, monkeypatch, caplog, name, value):
        monkeypatch.setenv(name, value)
        code = main(["estimate", "abc"])
        assert code == 2
        assert "Invalid configuration" in caplog.text
