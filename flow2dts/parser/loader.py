"""
ESTree loader for Flow parser output.

The AstLoader converts the JSON tree emitted by the Flow parser (already
decoded into dicts and lists) into the dataclass node model. Node shapes
that the model does not cover are kept as UnknownNode so that the code
generator can report them together with their source position.
"""

from typing import Any, Dict, List, Optional

from .ast_nodes import (
    # Base
    ASTNode,
    UnknownNode,
    Identifier,
    Literal,
    Position,
    SourceLocation,
    # Type annotations
    TypeNode,
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


# Annotation tags whose nodes carry no fields besides their location
SIMPLE_TYPE_NODES = {
    'AnyTypeAnnotation': AnyTypeAnnotation,
    'MixedTypeAnnotation': MixedTypeAnnotation,
    'EmptyTypeAnnotation': EmptyTypeAnnotation,
    'VoidTypeAnnotation': VoidTypeAnnotation,
    'NullLiteralTypeAnnotation': NullLiteralTypeAnnotation,
    'NumberTypeAnnotation': NumberTypeAnnotation,
    'StringTypeAnnotation': StringTypeAnnotation,
    'BooleanTypeAnnotation': BooleanTypeAnnotation,
}


class AstLoader:
    """
    Builds the node model from an ESTree dictionary.

    The loader never fails on an unfamiliar node type; it only raises
    ValueError when the input is not a tree at all.
    """

    # =========================================================================
    # PROGRAM
    # =========================================================================

    def load_program(self, data: Dict[str, Any]) -> Program:
        """Load a Program node (the root of the parser output)."""
        if not isinstance(data, dict) or data.get('type') != 'Program':
            found = data.get('type') if isinstance(data, dict) else type(data).__name__
            raise ValueError(f'Expected a Program node, got {found}')
        return Program(
            body=[self.load_statement(stmt) for stmt in data.get('body') or []],
            errors=[self.load_parse_error(err) for err in data.get('errors') or []],
            loc=self.load_loc(data.get('loc')),
        )

    def load_parse_error(self, data: Dict[str, Any]) -> ParseError:
        return ParseError(message=data.get('message', ''), loc=self.load_loc(data.get('loc')))

    def load_loc(self, data: Optional[Dict[str, Any]]) -> Optional[SourceLocation]:
        """Load a `loc` record; returns None when the parser omitted it."""
        if not data or 'start' not in data:
            return None
        end = data.get('end') or data['start']
        return SourceLocation(
            start=Position(line=data['start']['line'], column=data['start']['column']),
            end=Position(line=end['line'], column=end['column']),
            source=data.get('source'),
        )

    def _unknown(self, data: Dict[str, Any]) -> UnknownNode:
        return UnknownNode(type=data.get('type', '<missing>'), loc=self.load_loc(data.get('loc')))

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def load_statement(self, data: Dict[str, Any]) -> ASTNode:
        """Load a statement or declaration node."""
        node_type = data.get('type')
        loc = self.load_loc(data.get('loc'))

        if node_type == 'FunctionDeclaration':
            return self.load_function_declaration(data)
        elif node_type == 'VariableDeclaration':
            return VariableDeclaration(kind=data.get('kind', 'var'), loc=loc)
        elif node_type == 'TypeAlias':
            return TypeAlias(
                name=data['id']['name'],
                right=self.load_type(data['right']),
                type_parameters=self.load_type_parameters(data.get('typeParameters')),
                loc=loc,
            )
        elif node_type == 'ImportDeclaration':
            return ImportDeclaration(
                source=self._source_value(data['source']),
                specifiers=[self.load_specifier(spec) for spec in data.get('specifiers') or []],
                import_kind=data.get('importKind') or 'value',
                loc=loc,
            )
        elif node_type == 'ExportDefaultDeclaration':
            return ExportDefaultDeclaration(declaration=self.load_statement(data['declaration']), loc=loc)
        elif node_type == 'ExportNamedDeclaration':
            declaration = data.get('declaration')
            source = data.get('source')
            return ExportNamedDeclaration(
                declaration=self.load_statement(declaration) if declaration else None,
                specifiers=[self.load_specifier(spec) for spec in data.get('specifiers') or []],
                source=self._source_value(source) if source else None,
                export_kind=data.get('exportKind') or 'value',
                loc=loc,
            )
        elif node_type == 'ExportAllDeclaration':
            return ExportAllDeclaration(source=self._source_value(data['source']), loc=loc)
        elif node_type == 'BlockStatement':
            return self.load_block(data)
        elif node_type == 'DeclareModule':
            body = data.get('body')
            return DeclareModule(
                name=self._module_name(data['id']),
                body=self.load_block(body) if body else BlockStatement(),
                loc=loc,
            )
        elif node_type == 'DeclareTypeAlias':
            return DeclareTypeAlias(
                name=data['id']['name'],
                right=self.load_type(data['right']),
                type_parameters=self.load_type_parameters(data.get('typeParameters')),
                loc=loc,
            )
        elif node_type == 'DeclareClass':
            return DeclareClass(name=data['id']['name'], loc=loc)

        return self._unknown(data)

    def load_block(self, data: Dict[str, Any]) -> BlockStatement:
        return BlockStatement(
            body=[self.load_statement(stmt) for stmt in data.get('body') or []],
            loc=self.load_loc(data.get('loc')),
        )

    def load_function_declaration(self, data: Dict[str, Any]) -> FunctionDeclaration:
        func_id = data.get('id')
        return FunctionDeclaration(
            name=func_id['name'] if func_id else None,
            params=[self.load_pattern(param) for param in data.get('params') or []],
            return_type=self._unwrap_annotation(data.get('returnType')),
            type_parameters=self.load_type_parameters(data.get('typeParameters')),
            loc=self.load_loc(data.get('loc')),
        )

    def _source_value(self, data: Dict[str, Any]) -> str:
        """Module source literal -> its string value."""
        value = data.get('value')
        if value is None:
            return data.get('raw', '').strip('\'"')
        return str(value)

    def _module_name(self, data: Dict[str, Any]) -> str:
        """`declare module` ids are string literals or plain identifiers."""
        if data.get('type') == 'Identifier':
            return data['name']
        return self._source_value(data)

    # =========================================================================
    # PATTERNS AND SPECIFIERS
    # =========================================================================

    def load_pattern(self, data: Dict[str, Any]) -> ASTNode:
        """Load a function parameter pattern."""
        node_type = data.get('type')
        loc = self.load_loc(data.get('loc'))

        if node_type == 'Identifier':
            return self.load_identifier(data)
        elif node_type == 'RestElement':
            return RestElement(argument=self.load_pattern(data['argument']), loc=loc)
        elif node_type == 'AssignmentPattern':
            left = self.load_pattern(data['left'])
            right = data.get('right') or {}
            return AssignmentPattern(
                left=left,
                right=self._load_expression(right),
                loc=loc,
            )
        return self._unknown(data)

    def load_identifier(self, data: Dict[str, Any]) -> Identifier:
        return Identifier(
            name=data['name'],
            type_annotation=self._unwrap_annotation(data.get('typeAnnotation')),
            optional=bool(data.get('optional')),
            loc=self.load_loc(data.get('loc')),
        )

    def _load_expression(self, data: Dict[str, Any]) -> ASTNode:
        """Expressions are never rendered; keep literals, tag the rest."""
        if data.get('type') == 'Literal':
            return Literal(value=data.get('value'), raw=data.get('raw', ''), loc=self.load_loc(data.get('loc')))
        if data.get('type') == 'Identifier':
            return self.load_identifier(data)
        return self._unknown(data)

    def load_specifier(self, data: Dict[str, Any]) -> ASTNode:
        """Load an import or export specifier."""
        node_type = data.get('type')
        loc = self.load_loc(data.get('loc'))

        if node_type == 'ImportSpecifier':
            imported = self._name_of(data.get('imported') or data.get('id'))
            local = self._name_of(data.get('local') or data.get('name')) or imported
            return ImportSpecifier(imported=imported, local=local, loc=loc)
        elif node_type == 'ImportDefaultSpecifier':
            return ImportDefaultSpecifier(local=self._name_of(data.get('local') or data.get('id')), loc=loc)
        elif node_type == 'ImportNamespaceSpecifier':
            return ImportNamespaceSpecifier(local=self._name_of(data.get('local') or data.get('id')), loc=loc)
        elif node_type == 'ExportSpecifier':
            local = self._name_of(data.get('local'))
            exported = self._name_of(data.get('exported')) or local
            return ExportSpecifier(local=local, exported=exported, loc=loc)
        elif node_type == 'ExportDefaultSpecifier':
            return ExportDefaultSpecifier(exported=self._name_of(data.get('exported')), loc=loc)
        elif node_type == 'ExportNamespaceSpecifier':
            return ExportNamespaceSpecifier(exported=self._name_of(data.get('exported')), loc=loc)
        return self._unknown(data)

    def _name_of(self, data: Optional[Dict[str, Any]]) -> str:
        if not data:
            return ''
        if data.get('type') == 'Literal':
            return str(data.get('value', ''))
        return data.get('name', '')

    # =========================================================================
    # TYPE ANNOTATIONS
    # =========================================================================

    def _unwrap_annotation(self, data: Optional[Dict[str, Any]]) -> Optional[TypeNode]:
        """Strip the `TypeAnnotation` wrapper the parser puts around annotations."""
        if not data:
            return None
        if data.get('type') == 'TypeAnnotation':
            inner = data.get('typeAnnotation')
            return self.load_type(inner) if inner else None
        return self.load_type(data)

    def load_type(self, data: Dict[str, Any]) -> TypeNode:
        """Load a concrete type annotation."""
        node_type = data.get('type')
        loc = self.load_loc(data.get('loc'))

        if node_type in SIMPLE_TYPE_NODES:
            return SIMPLE_TYPE_NODES[node_type](loc=loc)

        if node_type == 'FunctionTypeAnnotation':
            params = data.get('params')
            rest = data.get('rest')
            return_type = data.get('returnType')
            return FunctionTypeAnnotation(
                params=[self.load_function_type_param(p) for p in params] if params is not None else None,
                return_type=self.load_type(return_type) if return_type else None,
                rest=self.load_function_type_param(rest) if rest else None,
                loc=loc,
            )
        elif node_type == 'GenericTypeAnnotation':
            type_args = data.get('typeParameters')
            return GenericTypeAnnotation(
                name=self._qualified_name(data['id']),
                type_parameters=[self.load_type(p) for p in type_args.get('params') or []] if type_args else None,
                loc=loc,
            )
        elif node_type == 'NullableTypeAnnotation':
            return NullableTypeAnnotation(type_annotation=self.load_type(data['typeAnnotation']), loc=loc)
        elif node_type == 'ObjectTypeAnnotation':
            # Call properties and internal slots are rejected by the generator
            unsupported = (data.get('callProperties') or []) + (data.get('internalSlots') or [])
            return ObjectTypeAnnotation(
                properties=[self.load_object_property(p) for p in data.get('properties') or []]
                + [self._unknown(member) for member in unsupported],
                indexers=[self.load_object_indexer(i) for i in data.get('indexers') or []],
                exact=bool(data.get('exact')),
                loc=loc,
            )
        elif node_type == 'UnionTypeAnnotation':
            return UnionTypeAnnotation(types=[self.load_type(t) for t in data.get('types') or []], loc=loc)
        elif node_type == 'IntersectionTypeAnnotation':
            return IntersectionTypeAnnotation(types=[self.load_type(t) for t in data.get('types') or []], loc=loc)
        elif node_type == 'StringLiteralTypeAnnotation':
            return StringLiteralTypeAnnotation(value=data.get('value', ''), raw=data.get('raw', ''), loc=loc)
        elif node_type == 'BooleanLiteralTypeAnnotation':
            return BooleanLiteralTypeAnnotation(value=bool(data.get('value')), raw=data.get('raw', ''), loc=loc)
        elif node_type == 'TupleTypeAnnotation':
            elements = data.get('types')
            if elements is None:
                elements = data.get('elementTypes') or []
            return TupleTypeAnnotation(types=[self._load_tuple_element(e) for e in elements], loc=loc)

        return self._unknown(data)

    def _load_tuple_element(self, data: Dict[str, Any]) -> TypeNode:
        # Newer parsers wrap labeled elements: { type: 'TupleTypeLabeledElement', elementType }
        if 'elementType' in data and data.get('type', '').startswith('TupleType'):
            return self.load_type(data['elementType'])
        return self.load_type(data)

    def _qualified_name(self, data: Dict[str, Any]) -> str:
        """Identifier or QualifiedTypeIdentifier -> dotted name."""
        if data.get('type') == 'QualifiedTypeIdentifier':
            return f"{self._qualified_name(data['qualification'])}.{data['id']['name']}"
        return data['name']

    def load_function_type_param(self, data: Dict[str, Any]) -> FunctionTypeParam:
        name = data.get('name')
        if isinstance(name, dict):
            name = name.get('name')
        return FunctionTypeParam(
            name=name or None,
            type_annotation=self.load_type(data['typeAnnotation']),
            optional=bool(data.get('optional')),
            loc=self.load_loc(data.get('loc')),
        )

    def load_object_property(self, data: Dict[str, Any]) -> ASTNode:
        if data.get('type') != 'ObjectTypeProperty':
            return self._unknown(data)
        key = data['key']
        key_name = key['name'] if key.get('type') == 'Identifier' else key.get('raw', str(key.get('value', '')))
        return ObjectTypeProperty(
            key=key_name,
            value=self.load_type(data['value']),
            optional=bool(data.get('optional')),
            loc=self.load_loc(data.get('loc')),
        )

    def load_object_indexer(self, data: Dict[str, Any]) -> ObjectTypeIndexer:
        indexer_id = data.get('id')
        return ObjectTypeIndexer(
            name=indexer_id['name'] if indexer_id else None,
            key=self.load_type(data['key']),
            value=self.load_type(data['value']),
            loc=self.load_loc(data.get('loc')),
        )

    def load_type_parameters(self, data: Optional[Dict[str, Any]]) -> Optional[List[TypeParameter]]:
        """Load a TypeParameterDeclaration; None when the declaration has none."""
        if not data:
            return None
        return [
            TypeParameter(
                name=param['name'],
                bound=self._unwrap_annotation(param.get('bound')),
                loc=self.load_loc(param.get('loc')),
            )
            for param in data.get('params') or []
        ]


def load_program(data: Dict[str, Any]) -> Program:
    """Convenience wrapper: ESTree dict -> Program."""
    return AstLoader().load_program(data)
