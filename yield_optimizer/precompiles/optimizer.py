"""Yield optimizer precompile.

Exposes the pipeline as a single function taking the eight OptimizerInput
fields and returning the six YieldRecommendation fields:

    optimize(uint128,uint32,uint32,uint32,uint32,uint32,uint32,uint32)
        -> (bool, bool, uint64, uint64, uint32, uint128)
"""

from __future__ import annotations

from dataclasses import astuple
from typing import Any

from yield_optimizer.models.optimizer import OptimizerInput
from yield_optimizer.pipeline import optimize
from yield_optimizer.precompiles.base import Method, Precompile
from yield_optimizer.precompiles.encoding import (
    OPTIMIZER_INPUT_TYPES,
    YIELD_RECOMMENDATION_TYPES,
)


def _optimize(*fields: int) -> tuple[Any, ...]:
    return astuple(optimize(OptimizerInput(*fields)))


OPTIMIZE = Method(
    signature=f"optimize({','.join(OPTIMIZER_INPUT_TYPES)})",
    output_types=YIELD_RECOMMENDATION_TYPES,
    handler=_optimize,
)


def create_yield_optimizer_precompile() -> Precompile:
    """Build the yield optimizer precompile."""
    return Precompile("yield_optimizer", [OPTIMIZE])
