"""Test helpers module for shared test utilities.

- factories: OptimizerInput and calldata factory functions
"""

from tests.helpers.factories import build_calldata, decode_output, make_input
