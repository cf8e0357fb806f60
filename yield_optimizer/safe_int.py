"""Checked uint128 integer wrapper for fixed-point arithmetic.

This module provides SafeInt, a lightweight wrapper that makes arithmetic
operations safe by default:
- Results above uint128 raise Overflow
- Subtraction underflow raises Underflow
- Division by zero raises DivisionByZero

Usage pattern:
    from yield_optimizer.safe_int import S

    def calculate(a: int, b: int, c: int) -> int:
        # Wrap at entry
        sa, sb, sc = S(a), S(b), S(c)

        # Natural arithmetic - automatically checked
        result = (sa * sb) // sc  # Raises if sc == 0 or sa * sb > 2^128-1
        remainder = sa - sb       # Raises if sb > sa

        # Unwrap at exit
        return result.value
"""

from __future__ import annotations

from yield_optimizer.constants import UINT128_MAX
from yield_optimizer.errors import DivisionByZero, InvalidInput, Overflow, Underflow


class SafeInt:
    """Unsigned integer with checked uint128 arithmetic.

    Wraps an integer and provides arithmetic operators that raise
    typed errors instead of producing invalid results:
    - Sums and products exceeding 2^128-1 raise Overflow
    - Negative results from subtraction raise Underflow
    - Division by zero raises DivisionByZero

    Attributes:
        value: The underlying integer value (read-only)
    """

    MAX = UINT128_MAX

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Args:
            value: Integer value to wrap, or SafeInt to copy

        Raises:
            TypeError: If value is not an int or SafeInt
            Underflow: If value is negative
            Overflow: If value exceeds uint128
        """
        if isinstance(value, SafeInt):
            self._value = value._value
            return
        if not isinstance(value, int):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        if value < 0:
            raise Underflow(f"Negative value cannot be unsigned: {value}")
        if value > self.MAX:
            raise Overflow(f"Value exceeds uint128 max: {value}")
        self._value = value

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            Overflow: If the sum exceeds uint128
        """
        other_val = _extract_value(other)
        return _checked(self._value + other_val, f"{self._value} + {other_val}")

    def __radd__(self, other: int) -> SafeInt:
        return _checked(other + self._value, f"{other} + {self._value}")

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        """Subtract self from other (other - self).

        Raises:
            Underflow: If result would be negative
        """
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            Overflow: If the product exceeds uint128
        """
        other_val = _extract_value(other)
        return _checked(self._value * other_val, f"{self._value} * {other_val}")

    def __rmul__(self, other: int) -> SafeInt:
        return _checked(other * self._value, f"{other} * {self._value}")

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division (truncates; operands are unsigned).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        """Integer division (other // self).

        Raises:
            DivisionByZero: If self is zero
        """
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    def to_uint(self, bits: int) -> int:
        """Convert to int, validating it fits in an unsigned `bits`-wide type.

        Raises:
            Overflow: If value exceeds 2^bits-1
        """
        if self._value > (1 << bits) - 1:
            raise Overflow(f"Value exceeds uint{bits} max: {self._value}")
        return self._value

    @classmethod
    def zero(cls) -> SafeInt:
        """Create a SafeInt with value 0."""
        return cls(0)


def require_uint(value: object, bits: int, name: str) -> int:
    """Validate an unsigned argument of a declared width.

    Args:
        value: Argument to check
        bits: Declared width (32, 64, 128)
        name: Argument name for the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidInput: If value is not an int, is negative, or exceeds 2^bits-1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > (1 << bits) - 1:
        raise InvalidInput(f"{name} out of uint{bits} range: {value}")
    return value


def _checked(result: int, expr: str) -> SafeInt:
    """Wrap an add/mul result, raising Overflow above uint128."""
    if result > SafeInt.MAX:
        raise Overflow(f"Overflow: {expr} exceeds uint128")
    return SafeInt(result)


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
