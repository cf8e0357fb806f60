"""ABI encoding for the precompile boundary.

Calldata is a 4-byte selector followed by ABI-encoded 32-byte big-endian
words. Results are a leading bool success word followed by one word per
output field; failures are (false, uint32 error_code).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from eth_abi import decode, encode  # type: ignore[attr-defined]
from eth_utils import function_signature_to_4byte_selector

from yield_optimizer.errors import ErrorCode

SELECTOR_SIZE = 4

# OptimizerInput field order
OPTIMIZER_INPUT_TYPES = (
    "uint128",  # principal
    "uint32",  # apy_a_bps
    "uint32",  # apy_b_bps
    "uint32",  # fee_a_bps
    "uint32",  # fee_b_bps
    "uint32",  # risk_a
    "uint32",  # risk_b
    "uint32",  # projection_periods
)

# YieldRecommendation field order
YIELD_RECOMMENDATION_TYPES = (
    "bool",  # use_a
    "bool",  # use_b
    "uint64",  # allocation_pct_a
    "uint64",  # allocation_pct_b
    "uint32",  # projected_net_apy_bps
    "uint128",  # expected_yield
)


def selector(signature: str) -> bytes:
    """First four bytes of keccak256(signature), e.g. "compound(uint128,uint32,uint32)"."""
    return bytes(function_signature_to_4byte_selector(signature))


def argument_types(signature: str) -> tuple[str, ...]:
    """Argument types of a flat signature: "f(uint32,uint64)" -> ("uint32", "uint64")."""
    inner = signature[signature.index("(") + 1 : signature.rindex(")")]
    return tuple(t for t in inner.split(",") if t)


def decode_args(types: Sequence[str], data: bytes) -> tuple[Any, ...]:
    """Decode ABI words into Python values.

    Raises:
        eth_abi.exceptions.DecodingError: If the payload is too short or malformed
    """
    return tuple(decode(list(types), bytes(data)))


def encode_success(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """Encode (true, *values)."""
    return bytes(encode(["bool", *types], [True, *values]))


def encode_error(code: ErrorCode) -> bytes:
    """Encode (false, code). Always exactly two words."""
    return bytes(encode(["bool", "uint32"], [False, int(code)]))


__all__ = [
    "SELECTOR_SIZE",
    "OPTIMIZER_INPUT_TYPES",
    "YIELD_RECOMMENDATION_TYPES",
    "argument_types",
    "decode_args",
    "encode_error",
    "encode_success",
    "selector",
]
