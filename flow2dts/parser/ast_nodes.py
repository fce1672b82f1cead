"""
AST node definitions for Flow-annotated JavaScript.

This module contains the dataclasses representing the nodes of the
ESTree-style tree produced by the Flow parser. Only the shapes that the
declaration generator renders are modelled; everything else is carried
as an UnknownNode holding the parser's raw type tag.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


# =============================================================================
# SOURCE POSITIONS
# =============================================================================

@dataclass
class Position:
    """A line/column pair as reported by the parser (line 1-based, column 0-based)."""
    line: int
    column: int


@dataclass
class SourceLocation:
    """Start and end positions of a node in the source text."""
    start: Position
    end: Position
    source: Optional[str] = None


# =============================================================================
# BASE NODES
# =============================================================================

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    loc: Optional[SourceLocation] = field(default=None, kw_only=True, repr=False, compare=False)


@dataclass
class UnknownNode(ASTNode):
    """A node whose shape is not modelled; `type` is the parser's raw tag."""
    type: str


@dataclass
class Identifier(ASTNode):
    """Represents an identifier, optionally annotated (e.g. a parameter `x: T`)."""
    name: str
    type_annotation: Optional['TypeNode'] = None
    optional: bool = False  # `x?: T`


@dataclass
class Literal(ASTNode):
    """Represents a literal value (module sources, default values)."""
    value: Any
    raw: str = ''


# =============================================================================
# TYPE ANNOTATION NODES
# =============================================================================

@dataclass
class ConcreteTypeAnnotation(ASTNode):
    """Base class for type annotation nodes."""
    pass


@dataclass
class AnyTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class MixedTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class EmptyTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class VoidTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class NullLiteralTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class NumberTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class StringTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class BooleanTypeAnnotation(ConcreteTypeAnnotation):
    pass


@dataclass
class FunctionTypeParam(ASTNode):
    """A parameter of a function type; unnamed in forms like `(string) => void`."""
    name: Optional[str]
    type_annotation: 'TypeNode'
    optional: bool = False


@dataclass
class FunctionTypeAnnotation(ConcreteTypeAnnotation):
    """Represents a function type.

    `params` is None when no signature is available (the bare `Function` type).
    """
    params: Optional[List[FunctionTypeParam]] = None
    return_type: Optional['TypeNode'] = None
    rest: Optional[FunctionTypeParam] = None


@dataclass
class GenericTypeAnnotation(ConcreteTypeAnnotation):
    """Represents a named type with optional type arguments (e.g. Array<T>)."""
    name: str
    type_parameters: Optional[List['TypeNode']] = None


@dataclass
class NullableTypeAnnotation(ConcreteTypeAnnotation):
    """Represents `?T`."""
    type_annotation: 'TypeNode'


@dataclass
class ObjectTypeProperty(ASTNode):
    """A named member of an object type."""
    key: str
    value: 'TypeNode'
    optional: bool = False


@dataclass
class ObjectTypeIndexer(ASTNode):
    """An indexer member of an object type (e.g. `[key: string]: number`)."""
    name: Optional[str]
    key: 'TypeNode'
    value: 'TypeNode'


@dataclass
class ObjectTypeAnnotation(ConcreteTypeAnnotation):
    """Represents an object type `{ a: T, [k: K]: V }`."""
    properties: List[ObjectTypeProperty] = field(default_factory=list)
    indexers: List[ObjectTypeIndexer] = field(default_factory=list)
    exact: bool = False


@dataclass
class UnionTypeAnnotation(ConcreteTypeAnnotation):
    types: List['TypeNode'] = field(default_factory=list)


@dataclass
class IntersectionTypeAnnotation(ConcreteTypeAnnotation):
    types: List['TypeNode'] = field(default_factory=list)


@dataclass
class StringLiteralTypeAnnotation(ConcreteTypeAnnotation):
    value: str
    raw: str


@dataclass
class BooleanLiteralTypeAnnotation(ConcreteTypeAnnotation):
    value: bool
    raw: str


@dataclass
class TupleTypeAnnotation(ConcreteTypeAnnotation):
    types: List['TypeNode'] = field(default_factory=list)


@dataclass
class TypeParameter(ASTNode):
    """A declared type parameter, optionally bounded (`T: Base`)."""
    name: str
    bound: Optional['TypeNode'] = None


# Annotation positions may hold an UnknownNode for unmodelled variants
TypeNode = Union[ConcreteTypeAnnotation, UnknownNode]


# =============================================================================
# PATTERN NODES (function parameters)
# =============================================================================

@dataclass
class RestElement(ASTNode):
    """Represents `...name`; the argument must be an Identifier to render."""
    argument: ASTNode


@dataclass
class AssignmentPattern(ASTNode):
    """Represents a parameter with a default value (`x: T = value`)."""
    left: ASTNode  # only an Identifier renders
    right: ASTNode


# =============================================================================
# SPECIFIER NODES
# =============================================================================

@dataclass
class ImportSpecifier(ASTNode):
    """`{ imported as local }`"""
    imported: str
    local: str


@dataclass
class ImportDefaultSpecifier(ASTNode):
    local: str


@dataclass
class ImportNamespaceSpecifier(ASTNode):
    """`* as local`"""
    local: str


@dataclass
class ExportSpecifier(ASTNode):
    """`{ local as exported }`"""
    local: str
    exported: str


@dataclass
class ExportDefaultSpecifier(ASTNode):
    exported: str


@dataclass
class ExportNamespaceSpecifier(ASTNode):
    exported: str


# =============================================================================
# STATEMENT NODES
# =============================================================================

@dataclass
class Statement(ASTNode):
    """Base class for statement nodes."""
    pass


@dataclass
class FunctionDeclaration(Statement):
    name: Optional[str]
    params: List[ASTNode] = field(default_factory=list)
    return_type: Optional[TypeNode] = None
    type_parameters: Optional[List[TypeParameter]] = None


@dataclass
class VariableDeclaration(Statement):
    kind: str = 'var'  # 'var', 'let', 'const'


@dataclass
class TypeAlias(Statement):
    name: str
    right: TypeNode
    type_parameters: Optional[List[TypeParameter]] = None


@dataclass
class ImportDeclaration(Statement):
    source: str
    specifiers: List[ASTNode] = field(default_factory=list)
    import_kind: str = 'value'  # 'value', 'type', 'typeof'


@dataclass
class ExportDefaultDeclaration(Statement):
    declaration: ASTNode


@dataclass
class ExportNamedDeclaration(Statement):
    declaration: Optional[ASTNode] = None
    specifiers: List[ASTNode] = field(default_factory=list)
    source: Optional[str] = None
    export_kind: str = 'value'


@dataclass
class ExportAllDeclaration(Statement):
    source: str


@dataclass
class BlockStatement(Statement):
    body: List[ASTNode] = field(default_factory=list)


@dataclass
class DeclareModule(Statement):
    """Represents `declare module 'name' { ... }`."""
    name: str
    body: BlockStatement = field(default_factory=BlockStatement)


@dataclass
class DeclareTypeAlias(Statement):
    name: str
    right: TypeNode
    type_parameters: Optional[List[TypeParameter]] = None


@dataclass
class DeclareClass(Statement):
    name: str


# =============================================================================
# PROGRAM
# =============================================================================

@dataclass
class ParseError:
    """A syntax error reported by the parser."""
    message: str
    loc: Optional[SourceLocation] = None


@dataclass
class Program(ASTNode):
    """Root node representing an entire source file."""
    body: List[ASTNode] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)
