"""Math library precompile.

Exposes each yield_math primitive as a selector-addressed function:

    compound(uint128,uint32,uint32)            -> uint128
    annualize(uint32,uint64)                   -> uint32
    feeAdjustedYield(uint128,uint32)           -> uint128
    weightedAverage(uint128[],uint128[])       -> uint128
    optimalSplit(uint32,uint32,uint32,uint32)  -> (uint64, uint64)
"""

from __future__ import annotations

from yield_optimizer.math import yield_math
from yield_optimizer.precompiles.base import Method, Precompile

COMPOUND = Method(
    signature="compound(uint128,uint32,uint32)",
    output_types=("uint128",),
    handler=lambda principal, rate_bps, periods: (
        yield_math.compound(principal, rate_bps, periods),
    ),
)

ANNUALIZE = Method(
    signature="annualize(uint32,uint64)",
    output_types=("uint32",),
    handler=lambda rate_bps, period_seconds: (yield_math.annualize(rate_bps, period_seconds),),
)

FEE_ADJUSTED_YIELD = Method(
    signature="feeAdjustedYield(uint128,uint32)",
    output_types=("uint128",),
    handler=lambda gross_yield, fee_bps: (yield_math.fee_adjusted_yield(gross_yield, fee_bps),),
)

WEIGHTED_AVERAGE = Method(
    signature="weightedAverage(uint128[],uint128[])",
    output_types=("uint128",),
    handler=lambda values, weights: (yield_math.weighted_average(values, weights),),
)

OPTIMAL_SPLIT = Method(
    signature="optimalSplit(uint32,uint32,uint32,uint32)",
    output_types=("uint64", "uint64"),
    handler=yield_math.optimal_split,
)


def create_math_lib_precompile() -> Precompile:
    """Build the math library precompile."""
    return Precompile(
        "math_lib",
        [COMPOUND, ANNUALIZE, FEE_ADJUSTED_YIELD, WEIGHTED_AVERAGE, OPTIMAL_SPLIT],
    )
