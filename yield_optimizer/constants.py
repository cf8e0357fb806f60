"""Protocol constants for the yield optimizer.

Centralizes the fixed-point scale, rate units and integer widths shared by the
math library, the optimizer and the precompile boundary.
"""

# Fixed-point precision: all amounts carry 18 decimal places
# 1 unit = PRECISION
PRECISION = 10**18

# Basis points denominator (10_000 BPS = 100%)
BPS_DENOMINATOR = 10_000

# 365-day year, used to annualize rates observed over shorter windows
SECONDS_PER_YEAR = 31_536_000

# Risk scores live in [0, MAX_RISK_SCORE]; 0 = riskless, MAX = total loss expected
MAX_RISK_SCORE = 10_000

# Integer widths of the on-chain types
UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
UINT128_MAX = 2**128 - 1

# Fixed precompile addresses (must match the calling contract)
MATH_LIB_PRECOMPILE_ADDRESS = "0x0000000000000000000000000000000000001001"
YIELD_OPTIMIZER_PRECOMPILE_ADDRESS = "0x0000000000000000000000000000000000001002"
