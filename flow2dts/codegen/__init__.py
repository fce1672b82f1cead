"""
Code generation module for the Flow to TypeScript declaration transpiler.

This module provides TypeScript declaration generation from Flow AST nodes.
"""

from .errors import UnhandledConstructError, never_reach_here, position
from .context import CodeGenerationContext
from .base import BaseGenerator
from .type_converter import TypeConverter
from .function import FunctionGenerator
from .definition import DefinitionGenerator
from .imports import ImportGenerator
from .statement import StatementGenerator
from .generator import DeclarationGenerator, transform_program
from .diagnostics import TranspilerDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'UnhandledConstructError',
    'never_reach_here',
    'position',
    'CodeGenerationContext',
    'BaseGenerator',
    'TypeConverter',
    'FunctionGenerator',
    'DefinitionGenerator',
    'ImportGenerator',
    'StatementGenerator',
    'DeclarationGenerator',
    'transform_program',
    'TranspilerDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
