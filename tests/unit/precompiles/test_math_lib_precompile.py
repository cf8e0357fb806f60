"""Tests for the math library precompile dispatch."""

from eth_abi import encode  # type: ignore[attr-defined]

from yield_optimizer.constants import PRECISION, SECONDS_PER_YEAR, UINT128_MAX
from yield_optimizer.errors import ErrorCode
from yield_optimizer.precompiles.encoding import selector
from yield_optimizer.precompiles.math_lib import (
    ANNUALIZE,
    COMPOUND,
    FEE_ADJUSTED_YIELD,
    OPTIMAL_SPLIT,
    WEIGHTED_AVERAGE,
)
from tests.helpers import build_calldata, decode_output


def _error_code(output: bytes) -> int:
    success, code = decode_output(output, ["uint32"])
    assert success is False
    return code


class TestSelectors:
    """Selectors are derived from the Solidity signatures."""

    def test_selectors_are_four_bytes(self):
        for method in (COMPOUND, ANNUALIZE, FEE_ADJUSTED_YIELD, WEIGHTED_AVERAGE, OPTIMAL_SPLIT):
            assert len(method.selector) == 4

    def test_selectors_are_distinct(self, math_lib):
        selectors = {m.selector for m in math_lib.methods}
        assert len(selectors) == 5

    def test_selector_matches_signature(self):
        assert COMPOUND.selector == selector("compound(uint128,uint32,uint32)")
        assert WEIGHTED_AVERAGE.argument_types == ("uint128[]", "uint128[]")


class TestCompoundDispatch:
    def test_happy_path(self, math_lib):
        """1000 units at 10% for one period returns exactly 1100 units."""
        output = math_lib.call(build_calldata(COMPOUND.signature, [1_000 * PRECISION, 1_000, 1]))
        assert output[31] == 1
        assert decode_output(output, ["uint128"]) == (True, 1_100 * PRECISION)

    def test_overflow_returns_code(self, math_lib):
        output = math_lib.call(build_calldata(COMPOUND.signature, [UINT128_MAX, 1_000, 1]))
        assert _error_code(output) == ErrorCode.OVERFLOW

    def test_truncated_args_fail_decode(self, math_lib):
        calldata = COMPOUND.selector + encode(["uint128"], [1_000])
        assert _error_code(math_lib.call(calldata)) == ErrorCode.DECODE_FAILED

    def test_value_wider_than_declared_type_fails_decode(self, math_lib):
        """A principal word with bits above uint128 is malformed."""
        calldata = COMPOUND.selector + encode(["uint256", "uint32", "uint32"], [2**200, 1, 1])
        assert _error_code(math_lib.call(calldata)) == ErrorCode.DECODE_FAILED


class TestAnnualizeDispatch:
    def test_one_year_identity(self, math_lib):
        output = math_lib.call(build_calldata(ANNUALIZE.signature, [500, SECONDS_PER_YEAR]))
        assert decode_output(output, ["uint32"]) == (True, 500)

    def test_zero_period_returns_division_by_zero(self, math_lib):
        output = math_lib.call(build_calldata(ANNUALIZE.signature, [500, 0]))
        assert _error_code(output) == ErrorCode.DIVISION_BY_ZERO

    def test_overflow_returns_code(self, math_lib):
        output = math_lib.call(build_calldata(ANNUALIZE.signature, [200, 1]))
        assert _error_code(output) == ErrorCode.OVERFLOW


class TestFeeAdjustedYieldDispatch:
    def test_half_fee(self, math_lib):
        output = math_lib.call(build_calldata(FEE_ADJUSTED_YIELD.signature, [200 * PRECISION, 5_000]))
        assert decode_output(output, ["uint128"]) == (True, 100 * PRECISION)

    def test_fee_above_100_percent_returns_invalid_input(self, math_lib):
        output = math_lib.call(build_calldata(FEE_ADJUSTED_YIELD.signature, [PRECISION, 10_001]))
        assert _error_code(output) == ErrorCode.INVALID_INPUT


class TestWeightedAverageDispatch:
    def test_sixty_forty(self, math_lib):
        output = math_lib.call(
            build_calldata(WEIGHTED_AVERAGE.signature, [[1_200, 900], [60, 40]])
        )
        assert decode_output(output, ["uint128"]) == (True, 1_080)

    def test_mismatched_lengths_return_invalid_input(self, math_lib):
        output = math_lib.call(build_calldata(WEIGHTED_AVERAGE.signature, [[1, 2], [1]]))
        assert _error_code(output) == ErrorCode.INVALID_INPUT

    def test_empty_arrays_return_invalid_input(self, math_lib):
        output = math_lib.call(build_calldata(WEIGHTED_AVERAGE.signature, [[], []]))
        assert _error_code(output) == ErrorCode.INVALID_INPUT

    def test_offset_past_end_fails_decode(self, math_lib):
        calldata = WEIGHTED_AVERAGE.selector + encode(["uint256", "uint256"], [2**32, 64])
        assert _error_code(math_lib.call(calldata)) == ErrorCode.DECODE_FAILED

    def test_array_length_past_end_fails_decode(self, math_lib):
        """A declared length of a million words with no tail is malformed."""
        calldata = WEIGHTED_AVERAGE.selector + encode(
            ["uint256", "uint256", "uint256"], [64, 64, 10**6]
        )
        assert _error_code(math_lib.call(calldata)) == ErrorCode.DECODE_FAILED

    def test_zero_weights_return_division_by_zero(self, math_lib):
        output = math_lib.call(build_calldata(WEIGHTED_AVERAGE.signature, [[1, 2], [0, 0]]))
        assert _error_code(output) == ErrorCode.DIVISION_BY_ZERO


class TestOptimalSplitDispatch:
    def test_returns_both_percentages(self, math_lib):
        output = math_lib.call(build_calldata(OPTIMAL_SPLIT.signature, [2_000, 1_000, 0, 0]))
        assert decode_output(output, ["uint64", "uint64"]) == (True, 66, 34)

    def test_equal_inputs_sum_to_100(self, math_lib):
        output = math_lib.call(build_calldata(OPTIMAL_SPLIT.signature, [1_000] * 4))
        _, pct_a, pct_b = decode_output(output, ["uint64", "uint64"])
        assert pct_a + pct_b == 100

    def test_risk_above_max_returns_invalid_input(self, math_lib):
        output = math_lib.call(build_calldata(OPTIMAL_SPLIT.signature, [1, 1, 10_001, 0]))
        assert _error_code(output) == ErrorCode.INVALID_INPUT


class TestMalformedCalls:
    """No malformed payload escapes as an exception."""

    def test_unknown_selector(self, math_lib):
        output = math_lib.call(bytes.fromhex("deadbeef"))
        assert _error_code(output) == ErrorCode.UNKNOWN_SELECTOR

    def test_input_shorter_than_selector(self, math_lib):
        assert _error_code(math_lib.call(b"\x01\x02")) == ErrorCode.DECODE_FAILED

    def test_empty_input(self, math_lib):
        assert _error_code(math_lib.call(b"")) == ErrorCode.DECODE_FAILED

    def test_selector_without_args(self, math_lib):
        assert _error_code(math_lib.call(OPTIMAL_SPLIT.selector)) == ErrorCode.DECODE_FAILED

    def test_error_encoding_layout(self, math_lib):
        """Failure is exactly two words: an all-zero flag, then the code."""
        output = math_lib.call(b"")
        assert len(output) == 64
        assert output[:32] == bytes(32)
        assert output[63] == ErrorCode.DECODE_FAILED
