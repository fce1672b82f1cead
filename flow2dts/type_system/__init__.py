"""
Types module for the Flow to TypeScript declaration transpiler.

This module provides the fixed Flow to TypeScript type mappings.
"""

from .mappings import (
    flow_keyword_to_ts,
    generic_name_to_ts,
    FLOW_TO_TS_MAP,
    STRUCTURAL_OBJECT_NAME,
    TS_OBJECT_TYPE,
    DEFAULT_RETURN_TYPE,
    DEFAULT_INDEXER_NAME,
)

__all__ = [
    'flow_keyword_to_ts',
    'generic_name_to_ts',
    'FLOW_TO_TS_MAP',
    'STRUCTURAL_OBJECT_NAME',
    'TS_OBJECT_TYPE',
    'DEFAULT_RETURN_TYPE',
    'DEFAULT_INDEXER_NAME',
]
