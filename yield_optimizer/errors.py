"""Error taxonomy for the math library and the optimizer.

Every failure kind carries a stable numeric code so the precompile boundary
can encode it without inspecting messages. The set is closed: callers can
rely on every raised error being one of the classes below.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class ErrorCode(IntEnum):
    """Numeric error codes returned across the precompile boundary.

    Codes 1-4 originate in the core. Codes 5 and 6 are produced only by the
    boundary layer.
    """

    INVALID_INPUT = 1
    OVERFLOW = 2
    UNDERFLOW = 3
    DIVISION_BY_ZERO = 4
    UNKNOWN_SELECTOR = 5
    DECODE_FAILED = 6


# =============================================================================
# Math errors
# =============================================================================


class MathError(ArithmeticError):
    """Base class for math library failures."""

    code: ClassVar[ErrorCode]


class Overflow(MathError):
    """Result does not fit the declared unsigned width."""

    code = ErrorCode.OVERFLOW


class Underflow(MathError):
    """Subtraction would produce a negative result."""

    code = ErrorCode.UNDERFLOW


class DivisionByZero(MathError):
    """Division or modulo by zero."""

    code = ErrorCode.DIVISION_BY_ZERO


class InvalidInput(MathError, ValueError):
    """Argument outside its domain (fee > 100%, risk > max, bad arrays)."""

    code = ErrorCode.INVALID_INPUT


# =============================================================================
# Optimizer errors
# =============================================================================


class OptimizerError(Exception):
    """Base class for optimizer pipeline failures."""

    code: ErrorCode


class InvalidOptimizerInput(OptimizerError):
    """Cross-field validation failure (zero principal, zero periods, ...)."""

    code = ErrorCode.INVALID_INPUT


class OptimizerMathError(OptimizerError):
    """A math library failure that aborted the pipeline.

    Attributes:
        error: The wrapped MathError
    """

    def __init__(self, error: MathError) -> None:
        super().__init__(f"{type(error).__name__}: {error}")
        self.error = error
        self.code = error.code


__all__ = [
    "ErrorCode",
    "MathError",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "InvalidInput",
    "OptimizerError",
    "InvalidOptimizerInput",
    "OptimizerMathError",
]
