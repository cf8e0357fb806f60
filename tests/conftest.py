"""Pytest configuration and fixtures."""

import pytest

from yield_optimizer.models.optimizer import OptimizerInput
from yield_optimizer.precompiles import (
    Precompile,
    PrecompileSet,
    create_math_lib_precompile,
    create_yield_optimizer_precompile,
    get_default_precompile_set,
)
from tests.helpers.factories import make_input


@pytest.fixture
def sample_input() -> OptimizerInput:
    """Two-destination scenario: 1000 units, 12%/0.5%/15 vs 9%/1%/25, daily for a year."""
    return make_input()


@pytest.fixture
def math_lib() -> Precompile:
    return create_math_lib_precompile()


@pytest.fixture
def yield_optimizer_precompile() -> Precompile:
    return create_yield_optimizer_precompile()


@pytest.fixture
def precompile_set() -> PrecompileSet:
    return get_default_precompile_set()
