"""Yield Optimizer - deterministic fixed-point capital allocation."""

from yield_optimizer.errors import (
    DivisionByZero,
    ErrorCode,
    InvalidInput,
    InvalidOptimizerInput,
    MathError,
    OptimizerError,
    OptimizerMathError,
    Overflow,
    Underflow,
)
from yield_optimizer.models.optimizer import OptimizerInput, YieldRecommendation
from yield_optimizer.pipeline import optimize

__version__ = "0.1.0"
__all__ = [
    "optimize",
    "OptimizerInput",
    "YieldRecommendation",
    "ErrorCode",
    "MathError",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "InvalidInput",
    "OptimizerError",
    "InvalidOptimizerInput",
    "OptimizerMathError",
    "__version__",
]
