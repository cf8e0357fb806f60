"""Pydantic models for the HTTP service."""

from pydantic import BaseModel, Field

from yield_optimizer.models.optimizer import OptimizerInput, YieldRecommendation
from yield_optimizer.models.types import Bytes, Uint32, Uint128


class OptimizeRequest(BaseModel):
    """JSON body of POST /optimize. Mirrors OptimizerInput."""

    principal: Uint128 = Field(description="Capital to allocate, 18-decimal fixed-point")
    apy_a_bps: Uint32
    apy_b_bps: Uint32
    fee_a_bps: Uint32
    fee_b_bps: Uint32
    risk_a: Uint32
    risk_b: Uint32
    projection_periods: Uint32

    def to_input(self) -> OptimizerInput:
        """Convert to the optimizer's input record."""
        return OptimizerInput(**self.model_dump())


class RecommendationResponse(BaseModel):
    """JSON body returned by POST /optimize."""

    use_a: bool
    use_b: bool
    allocation_pct_a: int
    allocation_pct_b: int
    projected_net_apy_bps: int
    expected_yield: str = Field(description="Fixed-point yield as decimal string")
    expected_yield_units: str = Field(description="Yield in whole units")

    @classmethod
    def from_recommendation(cls, rec: YieldRecommendation, units: str) -> "RecommendationResponse":
        """Build a response from a recommendation and its whole-unit rendering."""
        return cls(
            use_a=rec.use_a,
            use_b=rec.use_b,
            allocation_pct_a=rec.allocation_pct_a,
            allocation_pct_b=rec.allocation_pct_b,
            projected_net_apy_bps=rec.projected_net_apy_bps,
            expected_yield=str(rec.expected_yield),
            expected_yield_units=units,
        )


class ErrorResponse(BaseModel):
    """Body returned when the optimizer rejects a request."""

    error: str
    code: int


class PrecompileCall(BaseModel):
    """JSON body of POST /precompiles/{address}."""

    input: Bytes = Field(description="Calldata: 4-byte selector followed by ABI words")


class PrecompileResult(BaseModel):
    """Raw precompile output bytes."""

    output: Bytes
