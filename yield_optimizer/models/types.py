"""Shared pydantic type definitions for the HTTP models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from yield_optimizer.constants import UINT32_MAX, UINT128_MAX


def _uint_validator(bits: int, maximum: int):  # type: ignore[no-untyped-def]
    """Build a validator accepting an unsigned int or its decimal string."""

    def validate(value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Uint{bits} must be string or int, got bool")

        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError as err:
                raise ValueError(f"Uint{bits} must be a decimal integer string: '{value}'") from err
        elif not isinstance(value, int):
            raise ValueError(f"Uint{bits} must be string or int, got {type(value).__name__}")

        if value < 0:
            raise ValueError(f"Uint{bits} cannot be negative: {value}")
        if value > maximum:
            raise ValueError(f"Uint{bits} overflow: {value} > 2^{bits}-1")
        return value

    return validate


# 128-bit unsigned integer (int or decimal string)
Uint128 = Annotated[
    int,
    BeforeValidator(_uint_validator(128, UINT128_MAX)),
    Field(description="128-bit unsigned integer"),
]

# 32-bit unsigned integer (int or decimal string)
Uint32 = Annotated[
    int,
    BeforeValidator(_uint_validator(32, UINT32_MAX)),
    Field(description="32-bit unsigned integer"),
]

# Arbitrary hex bytes
Bytes = Annotated[str, Field(pattern=r"^0x([a-fA-F0-9]{2})*$")]


def normalize_address(address: str) -> str:
    """Normalize an address to lowercase with a 0x prefix.

    Args:
        address: An address with or without 0x prefix

    Returns:
        Lowercase 0x-prefixed address
    """
    address = address.lower()
    if not address.startswith("0x"):
        address = "0x" + address
    return address
