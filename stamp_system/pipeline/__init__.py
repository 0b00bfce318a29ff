"""Stamp aggregation across configured platforms.

Provides:
- fetch_possible_evm_stamps: platforms whose EVM checks currently validate
"""

from stamp_system.pipeline.evm_stamps import (
    fetch_possible_evm_stamps,
    get_types_to_check,
)

__all__ = ["fetch_possible_evm_stamps", "get_types_to_check"]
