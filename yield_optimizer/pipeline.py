"""Yield optimization pipeline.

Composes the math primitives into a single recommendation:

1. Validate the input
2. Compound the full principal at each gross APY to get gross yield
3. Deduct each destination's protocol fee
4. Convert each net yield back into a window-relative rate in basis points
5. Split the principal by risk-adjusted rate, compound each partition at its
   net rate and project the blended rate and total expected yield

The pipeline is a pure function. It holds no state between calls and either
returns a complete recommendation or raises; there is no partial result.
"""

from __future__ import annotations

import structlog

from yield_optimizer.constants import BPS_DENOMINATOR
from yield_optimizer.errors import InvalidOptimizerInput, MathError, OptimizerMathError
from yield_optimizer.math.yield_math import (
    compound,
    fee_adjusted_yield,
    optimal_split,
    weighted_average,
)
from yield_optimizer.models.optimizer import OptimizerInput, YieldRecommendation
from yield_optimizer.safe_int import S

logger = structlog.get_logger()

# Declared width of each OptimizerInput field
_FIELD_WIDTHS = {
    "principal": 128,
    "apy_a_bps": 32,
    "apy_b_bps": 32,
    "fee_a_bps": 32,
    "fee_b_bps": 32,
    "risk_a": 32,
    "risk_b": 32,
    "projection_periods": 32,
}


def optimize(request: OptimizerInput) -> YieldRecommendation:
    """Recommend how to split `request.principal` between destinations A and B.

    Args:
        request: Observed rates, fees and risk scores plus the projection window

    Returns:
        YieldRecommendation with percentages summing to exactly 100

    Raises:
        InvalidOptimizerInput: If the input fails validation (zero principal,
            zero periods, fee above 100%, field outside its width)
        OptimizerMathError: If any arithmetic step fails; wraps the MathError
    """
    _validate(request)

    try:
        return _run(request)
    except MathError as err:
        logger.warning(
            "optimizer_math_error",
            error=type(err).__name__,
            code=int(err.code),
            detail=str(err),
        )
        raise OptimizerMathError(err) from err


def _validate(request: OptimizerInput) -> None:
    """Reject inputs before any arithmetic runs."""
    for name, bits in _FIELD_WIDTHS.items():
        value = getattr(request, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidOptimizerInput(f"{name} must be an int, got {type(value).__name__}")
        if value < 0 or value > (1 << bits) - 1:
            raise InvalidOptimizerInput(f"{name} out of uint{bits} range: {value}")

    if request.principal == 0:
        raise InvalidOptimizerInput("principal must be positive")
    if request.projection_periods == 0:
        raise InvalidOptimizerInput("projection_periods must be positive")
    if request.fee_a_bps > BPS_DENOMINATOR or request.fee_b_bps > BPS_DENOMINATOR:
        raise InvalidOptimizerInput(
            f"Fees must be <= {BPS_DENOMINATOR} bps, got {request.fee_a_bps}, {request.fee_b_bps}"
        )


def _net_rate_bps(request: OptimizerInput, apy_bps: int, fee_bps: int) -> int:
    """Steps 2-4 for one destination: gross yield, fee deduction, net rate.

    The rate is relative to the projection window, not annualized. Both
    destinations share the window, so the rates are directly comparable.
    """
    principal = S(request.principal)
    compounded = compound(request.principal, apy_bps, request.projection_periods)
    gross_yield = S(compounded) - principal
    net_yield = fee_adjusted_yield(gross_yield.value, fee_bps)
    return ((S(net_yield) * BPS_DENOMINATOR) // principal).to_uint(32)


def _run(request: OptimizerInput) -> YieldRecommendation:
    net_a = _net_rate_bps(request, request.apy_a_bps, request.fee_a_bps)
    net_b = _net_rate_bps(request, request.apy_b_bps, request.fee_b_bps)
    logger.debug("optimizer_net_rates", net_a_bps=net_a, net_b_bps=net_b)

    pct_a, pct_b = optimal_split(net_a, net_b, request.risk_a, request.risk_b)
    logger.debug("optimizer_split", pct_a=pct_a, pct_b=pct_b)

    # B takes the remainder so the partitions sum to the principal exactly
    principal = S(request.principal)
    principal_a = (principal * pct_a) // 100
    principal_b = principal - principal_a

    final_a = compound(principal_a.value, net_a, request.projection_periods)
    final_b = compound(principal_b.value, net_b, request.projection_periods)
    expected_yield = (S(final_a) + final_b) - principal

    blended = weighted_average([net_a, net_b], [pct_a, pct_b])

    recommendation = YieldRecommendation(
        use_a=pct_a > 0,
        use_b=pct_b > 0,
        allocation_pct_a=pct_a,
        allocation_pct_b=pct_b,
        projected_net_apy_bps=S(blended).to_uint(32),
        expected_yield=expected_yield.value,
    )
    logger.debug(
        "optimizer_recommendation",
        pct_a=pct_a,
        pct_b=pct_b,
        net_apy_bps=recommendation.projected_net_apy_bps,
        expected_yield=recommendation.expected_yield,
    )
    return recommendation


__all__ = ["optimize"]
