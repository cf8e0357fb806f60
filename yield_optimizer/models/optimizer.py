"""Optimizer request and recommendation records.

Field order of both records is the wire order used by the precompile codec.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OptimizerInput:
    """Market observations for one optimization call.

    Attributes:
        principal: Total capital to allocate (18-decimal fixed-point, uint128, > 0)
        apy_a_bps: Gross APY of destination A in basis points
        apy_b_bps: Gross APY of destination B in basis points
        fee_a_bps: Protocol fee on A's yield in basis points (<= 10_000)
        fee_b_bps: Protocol fee on B's yield in basis points (<= 10_000)
        risk_a: Risk score of A in [0, 10_000]
        risk_b: Risk score of B in [0, 10_000]
        projection_periods: Compounding steps to simulate (> 0), e.g. 365 for daily
    """

    principal: int
    apy_a_bps: int
    apy_b_bps: int
    fee_a_bps: int
    fee_b_bps: int
    risk_a: int
    risk_b: int
    projection_periods: int


@dataclass(frozen=True)
class YieldRecommendation:
    """Recommended allocation and projected yield.

    Attributes:
        use_a: Whether any capital goes to A (allocation_pct_a > 0)
        use_b: Whether any capital goes to B (allocation_pct_b > 0)
        allocation_pct_a: Percentage of principal for A (0-100)
        allocation_pct_b: Percentage of principal for B; the two sum to exactly 100
        projected_net_apy_bps: Allocation-weighted net rate in basis points
        expected_yield: Absolute yield over the projection window (18-decimal
            fixed-point). Not annualized.
    """

    use_a: bool
    use_b: bool
    allocation_pct_a: int
    allocation_pct_b: int
    projected_net_apy_bps: int
    expected_yield: int
