"""Fixed-point amount conversions.

Amounts are integers scaled by 10^18. These helpers convert between that
representation and whole-unit decimals at the edges of the system (CLI
arguments, human-readable API fields). The math library never uses them.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from yield_optimizer.constants import PRECISION, UINT128_MAX

__all__ = ["to_fixed", "from_fixed", "format_units"]

# uint128 has 39 digits; keep every conversion exact
_DECIMAL_PREC = 80


def to_fixed(units: Decimal | int | str) -> int:
    """Scale a whole-unit amount to an 18-decimal fixed-point integer.

    Uses ROUND_HALF_UP for digits beyond the 18th decimal place.

    Args:
        units: Amount in whole units (e.g. "1000.5")

    Returns:
        The scaled integer

    Raises:
        ValueError: If the amount is not a number, is negative, or exceeds uint128
    """
    try:
        d = Decimal(units)
    except InvalidOperation as err:
        raise ValueError(f"Not a decimal amount: {units!r}") from err
    if not d.is_finite():
        raise ValueError(f"Amount must be finite, got {units!r}")
    if d < 0:
        raise ValueError(f"Amount must be non-negative, got {units!r}")

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        scaled = d * PRECISION
        if scaled > UINT128_MAX:
            raise ValueError(f"Amount {units!r} exceeds uint128 at 18 decimals")
        return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_fixed(value: int) -> Decimal:
    """Convert an 18-decimal fixed-point integer to whole units (exact)."""
    return Decimal(f"{value}E-18")


def format_units(value: int) -> str:
    """Render a fixed-point amount as a plain decimal string without trailing zeros."""
    units = from_fixed(value)
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        if units == units.to_integral_value():
            return str(units.quantize(Decimal("1")))
        return format(units.normalize(), "f")
