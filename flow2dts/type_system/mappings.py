"""
Type mappings for Flow to TypeScript declarations.

This module contains the lookup table for the annotation kinds whose
TypeScript rendering is a fixed keyword, plus the handful of names that
are renamed on the way through.
"""

from typing import Optional


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

# Flow annotation node type -> TypeScript keyword
FLOW_TO_TS_MAP = {
    'StringTypeAnnotation': 'string',
    'NumberTypeAnnotation': 'number',
    'BooleanTypeAnnotation': 'boolean',
    'VoidTypeAnnotation': 'void',
    'MixedTypeAnnotation': 'any',
    'AnyTypeAnnotation': 'any',
    'EmptyTypeAnnotation': 'never',
    'NullLiteralTypeAnnotation': 'null',
    # A function type with no signature available
    'FunctionTypeAnnotation': 'Function',
}

# Flow's catch-all object type; TypeScript spells it lowercase
STRUCTURAL_OBJECT_NAME = 'Object'
TS_OBJECT_TYPE = 'object'

# Return type used for function types that declare none
DEFAULT_RETURN_TYPE = 'void'

# Indexer key name used when the source indexer is unnamed (`[string]: T`)
DEFAULT_INDEXER_NAME = 'key'


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def flow_keyword_to_ts(node_type: str) -> Optional[str]:
    """
    Look up the TypeScript keyword for a Flow annotation node type.

    Args:
        node_type: The annotation's node type (e.g. 'StringTypeAnnotation')

    Returns:
        The TypeScript keyword, or None when the kind has no fixed spelling
    """
    return FLOW_TO_TS_MAP.get(node_type)


def generic_name_to_ts(name: str) -> Optional[str]:
    """Return the replacement for a generic type name, or None if it renders as-is.

    Only the structural `Object` type is renamed; imported names are never
    resolved.
    """
    if name == STRUCTURAL_OBJECT_NAME:
        return TS_OBJECT_TYPE
    return None
