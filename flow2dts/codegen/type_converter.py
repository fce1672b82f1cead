"""
Type conversion utilities for code generation.

This module provides the TypeConverter class that renders Flow type
annotations as TypeScript type syntax. It is a pure recursive walk over
the annotation tree: every annotation kind it does not know aborts the
run instead of being guessed at.
"""

from typing import List, Optional

from .base import BaseGenerator
from .errors import never_reach_here, node_kind
from ..parser.ast_nodes import (
    ASTNode,
    ConcreteTypeAnnotation,
    TypeNode,
    FunctionTypeParam,
    FunctionTypeAnnotation,
    GenericTypeAnnotation,
    NullableTypeAnnotation,
    ObjectTypeProperty,
    ObjectTypeIndexer,
    ObjectTypeAnnotation,
    UnionTypeAnnotation,
    IntersectionTypeAnnotation,
    StringLiteralTypeAnnotation,
    BooleanLiteralTypeAnnotation,
    TupleTypeAnnotation,
    TypeParameter,
)
from ..type_system import (
    flow_keyword_to_ts,
    generic_name_to_ts,
    DEFAULT_RETURN_TYPE,
    DEFAULT_INDEXER_NAME,
)


class TypeConverter(BaseGenerator):
    """
    Handles Flow to TypeScript type conversions.

    This class renders:
    - Keyword types (string, number, any, ...) via the mapping table
    - Function types, generics, unions, intersections and tuples
    - Object type bodies (properties and indexers)
    - Type parameter and type argument lists
    """

    # =========================================================================
    # MAIN TYPE CONVERSION
    # =========================================================================

    def flow_type_to_ts(self, annotation: TypeNode) -> str:
        """Convert a Flow type annotation to TypeScript type syntax.

        Nullable wrappers render their inner type only; the optional
        marker is placed on parameter names by the function generator.

        Args:
            annotation: The annotation node to convert

        Returns:
            The TypeScript type string
        """
        keyword = flow_keyword_to_ts(type(annotation).__name__)

        if isinstance(annotation, FunctionTypeAnnotation):
            if annotation.params is None:
                return keyword
            return self.generate_function_type(annotation)

        if isinstance(annotation, ConcreteTypeAnnotation) and keyword is not None:
            return keyword

        if isinstance(annotation, GenericTypeAnnotation):
            renamed = generic_name_to_ts(annotation.name)
            if renamed is not None:
                return renamed
            return f'{annotation.name}{self.generate_type_arguments(annotation.type_parameters)}'

        if isinstance(annotation, NullableTypeAnnotation):
            return self.flow_type_to_ts(annotation.type_annotation)

        if isinstance(annotation, ObjectTypeAnnotation):
            return self.generate_object_type(annotation)

        if isinstance(annotation, UnionTypeAnnotation):
            return self.generate_union_type(annotation)

        if isinstance(annotation, IntersectionTypeAnnotation):
            return ' & '.join(self.flow_type_to_ts(member) for member in annotation.types)

        if isinstance(annotation, (StringLiteralTypeAnnotation, BooleanLiteralTypeAnnotation)):
            return annotation.raw

        if isinstance(annotation, TupleTypeAnnotation):
            return '[' + ', '.join(self.flow_type_to_ts(element) for element in annotation.types) + ']'

        never_reach_here(f'Unknown annotation type: {node_kind(annotation)}', annotation)

    def generate_union_type(self, union: UnionTypeAnnotation) -> str:
        """Render union members in source order, without deduplication."""
        return ' | '.join(self.flow_type_to_ts(member) for member in union.types)

    # =========================================================================
    # FUNCTION TYPES
    # =========================================================================

    def generate_function_type(self, function_type: FunctionTypeAnnotation) -> str:
        """Render `(params) => returnType`; a missing return type is `void`."""
        params = self.generate_function_type_params(function_type.params or [], function_type.rest)
        if function_type.return_type is not None:
            return_type = self.flow_type_to_ts(function_type.return_type)
        else:
            return_type = DEFAULT_RETURN_TYPE
        return f'({params}) => {return_type}'

    def generate_function_type_params(
        self,
        params: List[FunctionTypeParam],
        rest: Optional[FunctionTypeParam] = None,
    ) -> str:
        """Render function type parameters, comma-joined."""
        rendered = [self._generate_function_type_param(param) for param in params]
        if rest is not None:
            rendered.append('...' + self._generate_function_type_param(rest))
        return ', '.join(rendered)

    def _generate_function_type_param(self, param: FunctionTypeParam) -> str:
        type_str = self.flow_type_to_ts(param.type_annotation)
        if param.name:
            marker = '?' if param.optional else ''
            return f'{param.name}{marker}: {type_str}'
        return type_str

    # =========================================================================
    # OBJECT TYPES
    # =========================================================================

    def generate_object_type(self, object_type: ObjectTypeAnnotation) -> str:
        """Render an object type as a brace block, one member per line."""
        return (
            '{\n'
            + self.generate_object_properties(object_type.properties)
            + self.generate_object_indexers(object_type.indexers)
            + '}'
        )

    def generate_object_properties(self, properties: List[ASTNode]) -> str:
        """Render `  key: type;` lines (`key?` for optional properties)."""
        lines = []
        for prop in properties:
            if not isinstance(prop, ObjectTypeProperty):
                never_reach_here(f'Unknown object type member: {node_kind(prop)}', prop)
            marker = '?' if prop.optional else ''
            lines.append(f'  {prop.key}{marker}: {self.flow_type_to_ts(prop.value)};')
        return ''.join(line + '\n' for line in lines)

    def generate_object_indexers(self, indexers: List[ObjectTypeIndexer]) -> str:
        """Render `  [name: keyType]: valueType;` lines."""
        lines = []
        for indexer in indexers:
            name = indexer.name or DEFAULT_INDEXER_NAME
            key_type = self.flow_type_to_ts(indexer.key)
            value_type = self.flow_type_to_ts(indexer.value)
            lines.append(f'  [{name}: {key_type}]: {value_type};')
        return ''.join(line + '\n' for line in lines)

    # =========================================================================
    # TYPE PARAMETERS AND ARGUMENTS
    # =========================================================================

    def generate_type_arguments(self, type_arguments: Optional[List[TypeNode]]) -> str:
        """Render `<A, B>` for a generic's arguments; empty when there are none."""
        if not type_arguments:
            return ''
        return '<' + ', '.join(self.flow_type_to_ts(arg) for arg in type_arguments) + '>'

    def generate_type_parameters(self, type_parameters: Optional[List[TypeParameter]]) -> str:
        """Render a declaration's type parameters as `<A, B: bound>`."""
        if not type_parameters:
            return ''
        rendered = []
        for param in type_parameters:
            if param.bound is not None:
                rendered.append(f'{param.name}: {self.flow_type_to_ts(param.bound)}')
            else:
                rendered.append(param.name)
        return '<' + ', '.join(rendered) + '>'
