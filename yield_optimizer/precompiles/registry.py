"""Address-based routing to the registered precompiles.

The host calls `is_precompile` to learn whether a call target is handled
here, then `execute` to run it. A registered address always yields output
bytes, even when the call itself fails.
"""

from __future__ import annotations

from functools import lru_cache

import structlog

from yield_optimizer.constants import (
    MATH_LIB_PRECOMPILE_ADDRESS,
    YIELD_OPTIMIZER_PRECOMPILE_ADDRESS,
)
from yield_optimizer.models.types import normalize_address
from yield_optimizer.precompiles.base import Precompile
from yield_optimizer.precompiles.math_lib import create_math_lib_precompile
from yield_optimizer.precompiles.optimizer import create_yield_optimizer_precompile

logger = structlog.get_logger()


class PrecompileSet:
    """Registry mapping call target addresses to precompiles.

    Usage:
        precompiles = PrecompileSet()
        precompiles.register(MATH_LIB_PRECOMPILE_ADDRESS, create_math_lib_precompile())

        if precompiles.is_precompile(target):
            output = precompiles.execute(target, calldata)
    """

    def __init__(self) -> None:
        self._precompiles: dict[str, Precompile] = {}

    def register(self, address: str, precompile: Precompile) -> None:
        """Register a precompile at an address.

        Raises:
            ValueError: If the address is already registered
        """
        key = normalize_address(address)
        if key in self._precompiles:
            raise ValueError(f"Address already registered: {key}")
        self._precompiles[key] = precompile

    @property
    def addresses(self) -> list[str]:
        """Registered addresses, normalized to lowercase."""
        return list(self._precompiles)

    def is_precompile(self, address: str) -> bool:
        return normalize_address(address) in self._precompiles

    def execute(self, address: str, data: bytes) -> bytes | None:
        """Run the precompile registered at `address`.

        Returns:
            Encoded output bytes, or None if no precompile lives at `address`
        """
        precompile = self._precompiles.get(normalize_address(address))
        if precompile is None:
            return None
        logger.debug("precompile_execute", precompile=precompile.name, size=len(data))
        return precompile.call(data)


@lru_cache(maxsize=1)
def get_default_precompile_set() -> PrecompileSet:
    """The math library and yield optimizer at their fixed addresses."""
    precompiles = PrecompileSet()
    precompiles.register(MATH_LIB_PRECOMPILE_ADDRESS, create_math_lib_precompile())
    precompiles.register(YIELD_OPTIMIZER_PRECOMPILE_ADDRESS, create_yield_optimizer_precompile())
    return precompiles
