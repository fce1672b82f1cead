"""
Definition generation for Flow to TypeScript declarations.

This module handles type aliases (object-shaped aliases become interfaces)
and the `declare` forms that define types.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .type_converter import TypeConverter

from .base import BaseGenerator
from .errors import never_reach_here, node_kind
from ..parser.ast_nodes import (
    TypeAlias,
    DeclareTypeAlias,
    DeclareClass,
    AnyTypeAnnotation,
    MixedTypeAnnotation,
    VoidTypeAnnotation,
    EmptyTypeAnnotation,
    NullLiteralTypeAnnotation,
    NumberTypeAnnotation,
    StringTypeAnnotation,
    BooleanTypeAnnotation,
    FunctionTypeAnnotation,
    GenericTypeAnnotation,
    ObjectTypeAnnotation,
    UnionTypeAnnotation,
    IntersectionTypeAnnotation,
    StringLiteralTypeAnnotation,
    TupleTypeAnnotation,
)


# Right-hand sides rendered as `type Name = ...;`
ALIASABLE_TYPES = (
    StringTypeAnnotation,
    NumberTypeAnnotation,
    BooleanTypeAnnotation,
    VoidTypeAnnotation,
    MixedTypeAnnotation,
    AnyTypeAnnotation,
    EmptyTypeAnnotation,
    NullLiteralTypeAnnotation,
    GenericTypeAnnotation,
    StringLiteralTypeAnnotation,
    UnionTypeAnnotation,
    IntersectionTypeAnnotation,
    TupleTypeAnnotation,
    FunctionTypeAnnotation,
)

# Output for `declare class`, whose members are not translated
DECLARE_CLASS_STUB = 'declare class;'


class DefinitionGenerator(BaseGenerator):
    """
    Generates TypeScript code from Flow type definitions.

    This class handles:
    - Type aliases (as interfaces for object shapes, `type` otherwise)
    - `declare type` aliases
    - `declare class` (stub only)
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: 'TypeConverter',
    ):
        """
        Initialize the definition generator.

        Args:
            ctx: The code generation context
            type_converter: The type converter
        """
        super().__init__(ctx)
        self._type_converter = type_converter

    # =========================================================================
    # TYPE ALIASES
    # =========================================================================

    def generate_type_alias(self, alias: TypeAlias) -> str:
        """Generate an interface or a type alias.

        Args:
            alias: The type alias AST node

        Returns:
            TypeScript declaration text (no trailing newline)
        """
        type_params = self._type_converter.generate_type_parameters(alias.type_parameters)
        right = alias.right

        if isinstance(right, ObjectTypeAnnotation):
            return self.generate_interface(alias.name + type_params, right)

        if isinstance(right, ALIASABLE_TYPES):
            return f'type {alias.name}{type_params} = {self._type_converter.flow_type_to_ts(right)};'

        never_reach_here(f'Unhandled rval type of type alias: {node_kind(right)}', alias)

    def generate_interface(self, head: str, object_type: ObjectTypeAnnotation) -> str:
        """Generate `interface Head { ... }` from an object type."""
        return (
            f'interface {head} {{\n'
            + self._type_converter.generate_object_properties(object_type.properties)
            + self._type_converter.generate_object_indexers(object_type.indexers)
            + '}'
        )

    # =========================================================================
    # DECLARE FORMS
    # =========================================================================

    def generate_declare_type_alias(self, alias: DeclareTypeAlias) -> str:
        """Generate `declare type Name = ...;`."""
        type_params = self._type_converter.generate_type_parameters(alias.type_parameters)
        return f'declare type {alias.name}{type_params} = {self._type_converter.flow_type_to_ts(alias.right)};'

    def generate_declare_class(self, decl: DeclareClass) -> str:
        """Generate the `declare class` stub and record the gap."""
        self._ctx.diagnostics.warn_declare_class_stubbed(
            decl.name, self._ctx.file_path, self._line_of(decl)
        )
        return DECLARE_CLASS_STUB
