"""Mathematical primitives for the yield optimizer.

This package provides:
- yield_math: checked fixed-point compounding, annualization, fee deduction,
  weighted averaging and the risk-adjusted allocation split
- fixed_point: conversions between whole units and 18-decimal integers
"""

from yield_optimizer.math.fixed_point import format_units, from_fixed, to_fixed
from yield_optimizer.math.yield_math import (
    annualize,
    compound,
    fee_adjusted_yield,
    optimal_split,
    weighted_average,
)

__all__ = [
    "annualize",
    "compound",
    "fee_adjusted_yield",
    "optimal_split",
    "weighted_average",
    "format_units",
    "from_fixed",
    "to_fixed",
]
