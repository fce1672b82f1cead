"""
Declaration generator entry point.

This module wires the specialized generators together and assembles the
final declaration document from a Program.
"""

from typing import Optional

from .context import CodeGenerationContext
from .diagnostics import TranspilerDiagnostics
from .type_converter import TypeConverter
from .function import FunctionGenerator
from .definition import DefinitionGenerator
from .imports import ImportGenerator
from .statement import StatementGenerator
from ..parser.ast_nodes import Program


class DeclarationGenerator:
    """
    Generates a TypeScript declaration document from a Flow Program.

    Usage:
        generator = DeclarationGenerator()
        output = generator.generate(program)
    """

    def __init__(self, ctx: Optional[CodeGenerationContext] = None):
        self._ctx = ctx or CodeGenerationContext()
        self._type_converter = TypeConverter(self._ctx)
        self._function = FunctionGenerator(self._ctx, self._type_converter)
        self._definition = DefinitionGenerator(self._ctx, self._type_converter)
        self._imports = ImportGenerator(self._ctx)
        self._statement = StatementGenerator(
            self._ctx, self._function, self._definition, self._imports
        )

    @property
    def diagnostics(self) -> TranspilerDiagnostics:
        """Diagnostics collected by every generate() call so far."""
        return self._ctx.diagnostics

    @property
    def type_converter(self) -> TypeConverter:
        return self._type_converter

    @property
    def function_generator(self) -> FunctionGenerator:
        return self._function

    def generate(self, program: Program) -> str:
        """Render every top-level statement, in source order.

        Skipped statements are dropped, the rest are separated by a blank
        line, and a non-empty document ends with exactly one newline.
        """
        rendered = [self._statement.generate(stmt) for stmt in program.body]
        result = '\n\n'.join(text for text in rendered if text != '')
        return f'{result}\n' if result else ''


def transform_program(program: Program, ctx: Optional[CodeGenerationContext] = None) -> str:
    """Render a Program as a TypeScript declaration document."""
    return DeclarationGenerator(ctx).generate(program)
