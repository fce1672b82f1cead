"""
Parser module for the Flow to TypeScript declaration transpiler.

This module provides the AST node definitions, the loader for the Flow
parser's ESTree output and the bridge to the parser itself.
"""

from .ast_nodes import (
    # Base
    ASTNode,
    UnknownNode,
    Identifier,
    Literal,
    Position,
    SourceLocation,
    # Type annotations
    ConcreteTypeAnnotation,
    AnyTypeAnnotation,
    MixedTypeAnnotation,
    EmptyTypeAnnotation,
    VoidTypeAnnotation,
    NullLiteralTypeAnnotation,
    NumberTypeAnnotation,
    StringTypeAnnotation,
    BooleanTypeAnnotation,
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
    # Patterns
    RestElement,
    AssignmentPattern,
    # Specifiers
    ImportSpecifier,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ExportSpecifier,
    ExportDefaultSpecifier,
    ExportNamespaceSpecifier,
    # Statements
    Statement,
    FunctionDeclaration,
    VariableDeclaration,
    TypeAlias,
    ImportDeclaration,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    ExportAllDeclaration,
    BlockStatement,
    DeclareModule,
    DeclareTypeAlias,
    DeclareClass,
    # Program
    ParseError,
    Program,
)
from .loader import AstLoader, load_program
from .flow_parser import (
    FlowParser,
    FlowParseError,
    FlowParserUnavailableError,
    check_parse_errors,
)

__all__ = [
    # Base
    'ASTNode',
    'UnknownNode',
    'Identifier',
    'Literal',
    'Position',
    'SourceLocation',
    # Type annotations
    'ConcreteTypeAnnotation',
    'AnyTypeAnnotation',
    'MixedTypeAnnotation',
    'EmptyTypeAnnotation',
    'VoidTypeAnnotation',
    'NullLiteralTypeAnnotation',
    'NumberTypeAnnotation',
    'StringTypeAnnotation',
    'BooleanTypeAnnotation',
    'FunctionTypeParam',
    'FunctionTypeAnnotation',
    'GenericTypeAnnotation',
    'NullableTypeAnnotation',
    'ObjectTypeProperty',
    'ObjectTypeIndexer',
    'ObjectTypeAnnotation',
    'UnionTypeAnnotation',
    'IntersectionTypeAnnotation',
    'StringLiteralTypeAnnotation',
    'BooleanLiteralTypeAnnotation',
    'TupleTypeAnnotation',
    'TypeParameter',
    # Patterns
    'RestElement',
    'AssignmentPattern',
    # Specifiers
    'ImportSpecifier',
    'ImportDefaultSpecifier',
    'ImportNamespaceSpecifier',
    'ExportSpecifier',
    'ExportDefaultSpecifier',
    'ExportNamespaceSpecifier',
    # Statements
    'Statement',
    'FunctionDeclaration',
    'VariableDeclaration',
    'TypeAlias',
    'ImportDeclaration',
    'ExportDefaultDeclaration',
    'ExportNamedDeclaration',
    'ExportAllDeclaration',
    'BlockStatement',
    'DeclareModule',
    'DeclareTypeAlias',
    'DeclareClass',
    # Program
    'ParseError',
    'Program',
    # Loading and parsing
    'AstLoader',
    'load_program',
    'FlowParser',
    'FlowParseError',
    'FlowParserUnavailableError',
    'check_parse_errors',
]
