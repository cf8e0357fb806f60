"""API endpoints for the yield optimizer."""

import asyncio

import structlog
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from yield_optimizer.errors import OptimizerError
from yield_optimizer.math.fixed_point import format_units
from yield_optimizer.models.api import (
    ErrorResponse,
    OptimizeRequest,
    PrecompileCall,
    PrecompileResult,
    RecommendationResponse,
)
from yield_optimizer.pipeline import optimize
from yield_optimizer.precompiles import PrecompileSet, get_default_precompile_set

logger = structlog.get_logger()

router = APIRouter()


def get_precompiles() -> PrecompileSet:
    """Dependency provider for the precompile set.

    Override this in tests to inject a custom set:
        app.dependency_overrides[get_precompiles] = lambda: custom_set
    """
    return get_default_precompile_set()


@router.post(
    "/optimize",
    response_model=RecommendationResponse,
    responses={400: {"model": ErrorResponse}},
)
async def optimize_endpoint(request: OptimizeRequest) -> RecommendationResponse | JSONResponse:
    """Run the optimizer on a JSON request.

    The pipeline runs in a worker thread so long projections do not block
    the event loop.

    Error Handling:
        - Invalid field types or widths: 422 Validation Error (Pydantic)
        - Optimizer rejection: 400 with the error name and numeric code
    """
    logger.info(
        "received_optimize",
        principal=request.principal,
        projection_periods=request.projection_periods,
    )

    loop = asyncio.get_running_loop()
    try:
        recommendation = await loop.run_in_executor(None, optimize, request.to_input())
    except OptimizerError as err:
        logger.warning("optimize_rejected", error=type(err).__name__, code=int(err.code))
        body = ErrorResponse(error=type(err).__name__, code=int(err.code))
        return JSONResponse(status_code=400, content=body.model_dump())

    return RecommendationResponse.from_recommendation(
        recommendation, format_units(recommendation.expected_yield)
    )


@router.post("/precompiles/{address}", response_model=PrecompileResult)
async def call_precompile(
    address: str,
    call: PrecompileCall,
    precompiles: PrecompileSet = Depends(get_precompiles),
) -> PrecompileResult:
    """Execute raw calldata against the precompile at `address`.

    Failures inside the precompile are part of the output bytes (success
    flag false plus error code), so this endpoint returns 200 for them.
    Only an address with no registered precompile is an HTTP error (404).
    """
    if not precompiles.is_precompile(address):
        raise HTTPException(status_code=404, detail=f"No precompile at {address}")

    loop = asyncio.get_running_loop()
    data = bytes.fromhex(call.input[2:])
    output = await loop.run_in_executor(None, precompiles.execute, address, data)
    if output is None:
        raise HTTPException(status_code=404, detail=f"No precompile at {address}")
    return PrecompileResult(output="0x" + output.hex())
