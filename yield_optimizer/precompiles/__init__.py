"""Precompile boundary: selector dispatch, ABI codec and address routing."""

from yield_optimizer.precompiles.base import Method, Precompile
from yield_optimizer.precompiles.math_lib import create_math_lib_precompile
from yield_optimizer.precompiles.registry import PrecompileSet, get_default_precompile_set
from yield_optimizer.precompiles.optimizer import create_yield_optimizer_precompile

__all__ = [
    "Method",
    "Precompile",
    "PrecompileSet",
    "create_math_lib_precompile",
    "create_yield_optimizer_precompile",
    "get_default_precompile_set",
]
