"""Fixed-point yield math.

Core primitives used by the optimizer: compounding, rate annualization,
fee deduction, weighted averaging and the risk-adjusted allocation split.

All amounts are uint128 integers scaled by PRECISION (10^18) and all rates are
in basis points. Every operation goes through SafeInt, so any result that
does not fit its declared width raises instead of wrapping.
"""

from __future__ import annotations

from collections.abc import Sequence

from yield_optimizer.constants import BPS_DENOMINATOR, MAX_RISK_SCORE, SECONDS_PER_YEAR
from yield_optimizer.errors import InvalidInput
from yield_optimizer.safe_int import S, require_uint


def compound(principal: int, rate_bps: int, periods: int) -> int:
    """Compound a principal over a discrete number of periods.

    Formula:
        amount = principal * (1 + rate / (D * periods)) ^ periods

    applied one period at a time so that each intermediate product stays
    small and its overflow bound is predictable:
        amount = amount * (D * periods + rate_bps) // (D * periods)

    Args:
        principal: Fixed-point amount (uint128)
        rate_bps: Rate over the whole window in basis points (uint32)
        periods: Number of compounding steps (uint32)

    Returns:
        The compounded amount (principal + yield)

    Raises:
        InvalidInput: If an argument is outside its declared width
        Overflow: If any intermediate product exceeds uint128
    """
    require_uint(principal, 128, "principal")
    require_uint(rate_bps, 32, "rate_bps")
    require_uint(periods, 32, "periods")

    if principal == 0:
        return 0
    if rate_bps == 0 or periods == 0:
        return principal

    denominator = S(BPS_DENOMINATOR) * periods
    numerator = denominator + rate_bps

    amount = S(principal)
    for _ in range(periods):
        amount = (amount * numerator) // denominator

    return amount.value


def annualize(rate_bps: int, period_seconds: int) -> int:
    """Normalize a rate observed over `period_seconds` to a 365-day year.

    Formula:
        annual_rate_bps = rate_bps * SECONDS_PER_YEAR // period_seconds

    Args:
        rate_bps: Observed rate in basis points (uint32)
        period_seconds: Length of the observation window (uint64)

    Returns:
        Annualized rate in basis points (uint32)

    Raises:
        InvalidInput: If an argument is outside its declared width
        DivisionByZero: If period_seconds is zero
        Overflow: If the annualized rate exceeds uint32
    """
    require_uint(rate_bps, 32, "rate_bps")
    require_uint(period_seconds, 64, "period_seconds")

    annual = (S(rate_bps) * SECONDS_PER_YEAR) // period_seconds
    return annual.to_uint(32)


def fee_adjusted_yield(gross_yield: int, fee_bps: int) -> int:
    """Deduct a protocol fee from a gross yield.

    Formula:
        net_yield = gross_yield - gross_yield * fee_bps // D

    Args:
        gross_yield: Fixed-point yield amount (uint128)
        fee_bps: Fee in basis points, at most 10_000 (100%)

    Returns:
        Net yield after the fee

    Raises:
        InvalidInput: If fee_bps exceeds 10_000 or an argument is outside its width
        Overflow: If gross_yield * fee_bps exceeds uint128
        Underflow: If the fee exceeds the gross yield
    """
    require_uint(gross_yield, 128, "gross_yield")
    require_uint(fee_bps, 32, "fee_bps")

    if fee_bps > BPS_DENOMINATOR:
        raise InvalidInput(f"Fee {fee_bps} bps exceeds 100%")
    if gross_yield == 0 or fee_bps == 0:
        return gross_yield

    gross = S(gross_yield)
    fee = (gross * fee_bps) // BPS_DENOMINATOR
    return (gross - fee).value


def weighted_average(values: Sequence[int], weights: Sequence[int]) -> int:
    """Weighted average of `values`, e.g. the blended APY of a split position.

    Formula:
        average = sum(value_i * weight_i) // sum(weight_i)

    The division truncates; no rounding adjustment is applied.

    Args:
        values: uint128 values
        weights: uint128 weights, same length as values

    Returns:
        The truncated weighted average

    Raises:
        InvalidInput: If the sequences are empty or differ in length
        DivisionByZero: If the weights sum to zero
        Overflow: If any product or running sum exceeds uint128
    """
    if len(values) == 0 or len(values) != len(weights):
        raise InvalidInput(
            f"values and weights must be non-empty and equal length "
            f"(got {len(values)} and {len(weights)})"
        )

    weighted_sum = S.zero()
    total_weight = S.zero()
    for i, (value, weight) in enumerate(zip(values, weights, strict=True)):
        require_uint(value, 128, f"values[{i}]")
        require_uint(weight, 128, f"weights[{i}]")
        weighted_sum = weighted_sum + S(value) * weight
        total_weight = total_weight + weight

    return (weighted_sum // total_weight).value


def optimal_split(yield_a: int, yield_b: int, risk_a: int, risk_b: int) -> tuple[int, int]:
    """Split capital between two destinations in proportion to risk-adjusted yield.

    Formula:
        adj_x = yield_x * (MAX_RISK - risk_x) // MAX_RISK
        pct_a = adj_a * 100 // (adj_a + adj_b)
        pct_b = 100 - pct_a

    pct_b is the remainder rather than its own division, so the two
    percentages always sum to exactly 100. When neither side has a positive
    risk-adjusted yield the split is the neutral (50, 50).

    Args:
        yield_a: Yield of destination A in basis points (uint32)
        yield_b: Yield of destination B in basis points (uint32)
        risk_a: Risk score of A in [0, 10_000]
        risk_b: Risk score of B in [0, 10_000]

    Returns:
        (pct_a, pct_b) with pct_a + pct_b == 100

    Raises:
        InvalidInput: If a risk score exceeds 10_000 or an argument is outside its width
    """
    require_uint(yield_a, 32, "yield_a")
    require_uint(yield_b, 32, "yield_b")
    require_uint(risk_a, 32, "risk_a")
    require_uint(risk_b, 32, "risk_b")

    if risk_a > MAX_RISK_SCORE or risk_b > MAX_RISK_SCORE:
        raise InvalidInput(f"Risk scores must be <= {MAX_RISK_SCORE}, got {risk_a}, {risk_b}")

    adj_a = (S(yield_a) * (S(MAX_RISK_SCORE) - risk_a)) // MAX_RISK_SCORE
    adj_b = (S(yield_b) * (S(MAX_RISK_SCORE) - risk_b)) // MAX_RISK_SCORE
    total = adj_a + adj_b

    if total == 0:
        return 50, 50

    pct_a = (adj_a * 100) // total
    pct_b = 100 - pct_a
    return pct_a.to_uint(64), pct_b.to_uint(64)


__all__ = [
    "compound",
    "annualize",
    "fee_adjusted_yield",
    "weighted_average",
    "optimal_split",
]
