"""
Flow to TypeScript Declaration Transpiler

This package converts Flow-annotated JavaScript, parsed by the Flow
parser, into TypeScript declaration text.

Module Structure:
- parser/: AST nodes, the ESTree loader and the bridge to the Flow parser
- type_system/: Fixed Flow to TypeScript type mappings
- codegen/: Declaration generation (type converter, statement generator, ...)
- flow2dts.py: Transpiler orchestration and command-line interface

Usage:
    from flow2dts import transform
    print(transform(source))

    # Or, with a tree produced elsewhere:
    from flow2dts import load_program, transform_program
    print(transform_program(load_program(tree)))
"""

# Re-export main classes for convenience
from .flow2dts import FlowToDeclarationTranspiler, transform
from .parser import FlowParser, FlowParseError, AstLoader, load_program
from .codegen import DeclarationGenerator, UnhandledConstructError, transform_program

__all__ = [
    'FlowToDeclarationTranspiler',
    'transform',
    'FlowParser',
    'FlowParseError',
    'AstLoader',
    'load_program',
    'DeclarationGenerator',
    'UnhandledConstructError',
    'transform_program',
]
