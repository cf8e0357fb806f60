#!/usr/bin/env python3
"""Run one yield optimization from the command line.

Usage:
    python scripts/run_optimizer.py --principal 1000 \\
        --apy-a 1200 --fee-a 50 --risk-a 1500 \\
        --apy-b 900 --fee-b 100 --risk-b 2500 \\
        --periods 365

The principal is given in whole units and scaled to 18 decimals. Prints the
recommendation as JSON; exits 1 with the error name and code on failure.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

import structlog

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from yield_optimizer import OptimizerError, OptimizerInput, optimize  # noqa: E402
from yield_optimizer.math.fixed_point import format_units, to_fixed  # noqa: E402

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recommend a split between two yield destinations")
    parser.add_argument("--principal", required=True, help="Capital in whole units (e.g. 1000.5)")
    parser.add_argument("--apy-a", type=int, required=True, help="Gross APY of A in bps")
    parser.add_argument("--apy-b", type=int, required=True, help="Gross APY of B in bps")
    parser.add_argument("--fee-a", type=int, default=0, help="Fee on A's yield in bps")
    parser.add_argument("--fee-b", type=int, default=0, help="Fee on B's yield in bps")
    parser.add_argument("--risk-a", type=int, default=0, help="Risk score of A (0-10000)")
    parser.add_argument("--risk-b", type=int, default=0, help="Risk score of B (0-10000)")
    parser.add_argument("--periods", type=int, default=365, help="Compounding periods")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log pipeline steps")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    try:
        principal = to_fixed(args.principal)
    except ValueError as err:
        print(f"Invalid principal: {err}", file=sys.stderr)
        return 1

    request = OptimizerInput(
        principal=principal,
        apy_a_bps=args.apy_a,
        apy_b_bps=args.apy_b,
        fee_a_bps=args.fee_a,
        fee_b_bps=args.fee_b,
        risk_a=args.risk_a,
        risk_b=args.risk_b,
        projection_periods=args.periods,
    )

    try:
        recommendation = optimize(request)
    except OptimizerError as err:
        logger.error("optimize_failed", error=type(err).__name__, code=int(err.code))
        print(json.dumps({"error": type(err).__name__, "code": int(err.code)}))
        return 1

    output = asdict(recommendation)
    output["expected_yield"] = str(recommendation.expected_yield)
    output["expected_yield_units"] = format_units(recommendation.expected_yield)
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
