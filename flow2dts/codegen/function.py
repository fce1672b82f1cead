"""
Function generation for Flow to TypeScript declarations.

This module renders function declarations as bodiless signatures,
including parameter lists with rest and default-valued parameters.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .type_converter import TypeConverter

from .base import BaseGenerator
from .errors import never_reach_here, node_kind
from ..parser.ast_nodes import (
    ASTNode,
    TypeNode,
    Identifier,
    RestElement,
    AssignmentPattern,
    NullableTypeAnnotation,
    FunctionDeclaration,
)


class FunctionGenerator(BaseGenerator):
    """
    Generates TypeScript signatures from Flow function declarations.

    This class handles:
    - Function signatures (`function name<T>(params): ret;`)
    - Parameter lists, moving nullability onto the parameter name
    - Rest parameters and parameters with default values
    - Return type generation
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: 'TypeConverter',
    ):
        """
        Initialize the function generator.

        Args:
            ctx: The code generation context
            type_converter: The type converter
        """
        super().__init__(ctx)
        self._type_converter = type_converter

    # =========================================================================
    # FUNCTION DECLARATIONS
    # =========================================================================

    def generate_function_declaration(self, func: FunctionDeclaration) -> str:
        """Generate the bodiless signature for a function declaration."""
        name = f' {func.name}' if func.name else ''
        type_params = self._type_converter.generate_type_parameters(func.type_parameters)
        params = self.generate_parameters(func.params)
        return_type = self.generate_return_type(func.return_type)
        return f'function{name}{type_params}({params}){return_type};'

    def generate_return_type(self, return_type: Optional[TypeNode]) -> str:
        """Generate `: type`, or nothing when the function has no return annotation."""
        if return_type is None:
            return ''
        return f': {self._type_converter.flow_type_to_ts(return_type)}'

    # =========================================================================
    # PARAMETERS
    # =========================================================================

    def generate_parameters(self, params: List[ASTNode]) -> str:
        """Generate a comma-separated parameter list."""
        return ', '.join(self.generate_parameter(param) for param in params)

    def generate_parameter(self, param: ASTNode) -> str:
        """Generate a single parameter.

        Default values are dropped: a declaration only needs the name and type.
        """
        if isinstance(param, Identifier):
            return self._generate_identifier_param(param)

        if isinstance(param, RestElement):
            argument = param.argument
            if not isinstance(argument, Identifier):
                never_reach_here(f'Rest argument must be an identifier: {node_kind(argument)}', param)
            if argument.type_annotation is not None:
                return f'...{argument.name}: {self._type_converter.flow_type_to_ts(argument.type_annotation)}'
            return f'...{argument.name}'

        if isinstance(param, AssignmentPattern):
            if not isinstance(param.left, Identifier):
                never_reach_here(f'Unknown default parameter target: {node_kind(param.left)}', param)
            return self._generate_identifier_param(param.left)

        never_reach_here(f'Unknown parameter type: {node_kind(param)}', param)

    def _generate_identifier_param(self, param: Identifier) -> str:
        """`name: type`, or `name?: inner` when the annotation is nullable."""
        annotation = param.type_annotation
        optional = param.optional or isinstance(annotation, NullableTypeAnnotation)
        name = f'{param.name}?' if optional else param.name
        if annotation is None:
            return name
        # Nullable unwraps to its inner type in flow_type_to_ts
        return f'{name}: {self._type_converter.flow_type_to_ts(annotation)}'
