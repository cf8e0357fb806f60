"""Selector dispatch shared by all precompiles."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import structlog
from eth_abi.exceptions import DecodingError

from yield_optimizer.errors import ErrorCode, MathError, OptimizerError
from yield_optimizer.precompiles.encoding import (
    SELECTOR_SIZE,
    argument_types,
    decode_args,
    encode_error,
    encode_success,
    selector,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class Method:
    """One callable precompile function.

    Attributes:
        signature: Solidity signature the selector is derived from
        output_types: ABI types of the returned words, after the success flag
        handler: Receives the decoded arguments, returns the output values
    """

    signature: str
    output_types: tuple[str, ...]
    handler: Callable[..., tuple[Any, ...]]
    selector: bytes = field(init=False)
    argument_types: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "selector", selector(self.signature))
        object.__setattr__(self, "argument_types", argument_types(self.signature))


class Precompile:
    """Routes calldata to a method by its 4-byte selector.

    `call` never raises: every failure, including short or undecodable
    payloads and unknown selectors, is returned as the encoded error tuple.
    """

    def __init__(self, name: str, methods: Iterable[Method]) -> None:
        self.name = name
        self._methods: dict[bytes, Method] = {}
        for method in methods:
            if method.selector in self._methods:
                raise ValueError(f"Selector collision in {name}: {method.signature}")
            self._methods[method.selector] = method

    @property
    def methods(self) -> list[Method]:
        return list(self._methods.values())

    def call(self, data: bytes) -> bytes:
        """Decode, execute and encode one call.

        Args:
            data: Raw calldata (selector + ABI-encoded arguments)

        Returns:
            Encoded (true, *outputs) on success, (false, code) on failure
        """
        if len(data) < SELECTOR_SIZE:
            logger.warning("precompile_short_input", precompile=self.name, size=len(data))
            return encode_error(ErrorCode.DECODE_FAILED)

        method = self._methods.get(bytes(data[:SELECTOR_SIZE]))
        if method is None:
            logger.warning(
                "precompile_unknown_selector",
                precompile=self.name,
                selector="0x" + bytes(data[:SELECTOR_SIZE]).hex(),
            )
            return encode_error(ErrorCode.UNKNOWN_SELECTOR)

        try:
            args = decode_args(method.argument_types, data[SELECTOR_SIZE:])
        except DecodingError as err:
            logger.warning(
                "precompile_decode_failed",
                precompile=self.name,
                method=method.signature,
                error=str(err),
            )
            return encode_error(ErrorCode.DECODE_FAILED)

        try:
            outputs = method.handler(*args)
        except (MathError, OptimizerError) as err:
            logger.debug(
                "precompile_call_failed",
                precompile=self.name,
                method=method.signature,
                error=type(err).__name__,
                code=int(err.code),
            )
            return encode_error(err.code)

        return encode_success(method.output_types, outputs)
