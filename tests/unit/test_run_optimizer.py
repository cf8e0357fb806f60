"""Tests for the run_optimizer command line script."""

import json

import pytest
import structlog

from scripts.run_optimizer import main

SCENARIO_ARGS = [
    "--principal", "1000",
    "--apy-a", "1200", "--fee-a", "50", "--risk-a", "1500",
    "--apy-b", "900", "--fee-b", "100", "--risk-b", "2500",
]


@pytest.fixture(autouse=True)
def reset_logging():
    """main() points structlog at the captured stderr; undo it after each test."""
    yield
    structlog.reset_defaults()


class TestRunOptimizer:
    def test_prints_recommendation(self, capsys):
        assert main(SCENARIO_ARGS) == 0
        output = json.loads(capsys.readouterr().out)
        assert (output["allocation_pct_a"], output["allocation_pct_b"]) == (60, 40)
        assert output["projected_net_apy_bps"] == 1_133
        assert output["expected_yield_units"].startswith("120.")

    def test_fractional_principal(self, capsys):
        assert main([*SCENARIO_ARGS[2:], "--principal", "0.5"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert int(output["expected_yield"]) > 0

    def test_invalid_principal(self, capsys):
        assert main([*SCENARIO_ARGS[2:], "--principal", "-1"]) == 1
        assert "Invalid principal" in capsys.readouterr().err

    def test_optimizer_rejection(self, capsys):
        assert main([*SCENARIO_ARGS, "--periods", "0"]) == 1
        output = json.loads(capsys.readouterr().out)
        assert output == {"error": "InvalidOptimizerInput", "code": 1}
