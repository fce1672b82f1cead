#!/usr/bin/env python3
"""
Unit tests for the flow2dts transpiler.

Run with: python3 -m pytest flow2dts/test_transpiler.py
   or: python3 flow2dts/test_transpiler.py

Trees are written as the ESTree dictionaries the Flow parser emits, so the
loader is exercised together with the generators and the `flow` binary is
not needed.
"""

import sys
import os
# Add parent directory to path so the package imports without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import contextlib
import io
import json
import subprocess
import tempfile
import unittest
from unittest import mock

from flow2dts import transform, transform_program, load_program
from flow2dts.flow2dts import FlowToDeclarationTranspiler, main
from flow2dts.parser import (
    FlowParser,
    FlowParseError,
    FlowParserUnavailableError,
    GenericTypeAnnotation,
    Identifier,
    NullableTypeAnnotation,
    StringTypeAnnotation,
    UnknownNode,
)
from flow2dts.codegen import (
    CodeGenerationContext,
    DeclarationGenerator,
    UnhandledConstructError,
)


# =============================================================================
# ESTREE BUILDERS
# =============================================================================

def loc(line=1, column=0):
    return {'start': {'line': line, 'column': column}, 'end': {'line': line, 'column': column + 1}}


def node(node_type, line=1, column=0, **fields):
    data = {'type': node_type, 'loc': loc(line, column)}
    data.update(fields)
    return data


def ann(type_annotation):
    return node('TypeAnnotation', typeAnnotation=type_annotation)


def ident(name, type_annotation=None, optional=False):
    return node(
        'Identifier',
        name=name,
        typeAnnotation=ann(type_annotation) if type_annotation else None,
        optional=optional,
    )


def prim(name):
    return node(f'{name}TypeAnnotation')


def generic(name, *args):
    type_params = node('TypeParameterInstantiation', params=list(args)) if args else None
    return node('GenericTypeAnnotation', id=ident(name), typeParameters=type_params)


def nullable(inner):
    return node('NullableTypeAnnotation', typeAnnotation=inner)


def obj(properties=(), indexers=()):
    return node('ObjectTypeAnnotation', properties=list(properties), indexers=list(indexers), exact=False)


def prop(key, value, optional=False):
    return node('ObjectTypeProperty', key=ident(key), value=value, optional=optional)


def indexer(name, key, value):
    return node('ObjectTypeIndexer', id=ident(name) if name else None, key=key, value=value)


def fn_param(name, type_annotation):
    return node('FunctionTypeParam', name=ident(name) if name else None, typeAnnotation=type_annotation)


def fn_type(params, return_type=None, rest=None):
    return node('FunctionTypeAnnotation', params=list(params), returnType=return_type, rest=rest)


def literal(value):
    return node('Literal', value=value, raw=repr(value))


def func(name, params=(), return_type=None, type_params=None):
    return node(
        'FunctionDeclaration',
        id=ident(name) if name else None,
        params=list(params),
        body=node('BlockStatement', body=[]),
        returnType=ann(return_type) if return_type else None,
        typeParameters=type_params,
    )


def type_params(*params):
    return node('TypeParameterDeclaration', params=list(params))


def type_param(name, bound=None):
    return node('TypeParameter', name=name, bound=ann(bound) if bound else None)


def type_alias(name, right, params=None, line=1):
    return node('TypeAlias', line=line, id=ident(name), typeParameters=params, right=right)


def import_decl(source, specifiers, kind='value'):
    return node('ImportDeclaration', source=literal(source), specifiers=list(specifiers), importKind=kind)


def import_spec(imported, local=None):
    return node('ImportSpecifier', imported=ident(imported), local=ident(local or imported))


def export_named(declaration=None, specifiers=(), source=None):
    return node(
        'ExportNamedDeclaration',
        declaration=declaration,
        specifiers=list(specifiers),
        source=literal(source) if source else None,
        exportKind='value',
    )


def const_decl(name='foo'):
    return node(
        'VariableDeclaration',
        kind='const',
        declarations=[node('VariableDeclarator', id=ident(name), init=literal(1))],
    )


def program(*body, errors=()):
    return {'type': 'Program', 'loc': loc(), 'body': list(body), 'errors': list(errors), 'comments': []}


def render(*body):
    return transform_program(load_program(program(*body)))


def render_type(type_annotation):
    return render(type_alias('T', type_annotation)).rstrip('\n')


def render_params(*params):
    output = render(node('ExportDefaultDeclaration', declaration=func('f', params)))
    return output[len('export default function f('):-len(');\n')]


# =============================================================================
# TESTS
# =============================================================================

class TestDeclarationScenarios(unittest.TestCase):
    """End-to-end documents for representative inputs."""

    def test_export_default_function(self):
        """export default function foo(bar: string): string {}"""
        output = render(node(
            'ExportDefaultDeclaration',
            declaration=func('foo', [ident('bar', prim('String'))], prim('String')),
        ))
        self.assertEqual(output, 'export default function foo(bar: string): string;\n')

    def test_nullable_parameter_becomes_optional(self):
        """export default function foo(bar: ?string): void {}"""
        output = render(node(
            'ExportDefaultDeclaration',
            declaration=func('foo', [ident('bar', nullable(prim('String')))], prim('Void')),
        ))
        self.assertEqual(output, 'export default function foo(bar?: string): void;\n')

    def test_exported_object_type_becomes_interface(self):
        """export type Foo = { bar: number, baz: string }"""
        output = render(export_named(type_alias('Foo', obj([
            prop('bar', prim('Number')),
            prop('baz', prim('String')),
        ]))))
        self.assertEqual(output, 'export interface Foo {\n  bar: number;\n  baz: string;\n}\n')

    def test_type_import_becomes_plain_import(self):
        """import type { Foo, Baz } from 'bar';"""
        output = render(import_decl('bar', [import_spec('Foo'), import_spec('Baz')], kind='type'))
        self.assertEqual(output, "import { Foo, Baz } from 'bar';\n")

    def test_object_generic_becomes_lowercase_object(self):
        """type Foo = Object;"""
        self.assertEqual(render(type_alias('Foo', generic('Object'))), 'type Foo = object;\n')

    def test_constant_only_file_is_empty(self):
        """const foo = 1;"""
        self.assertEqual(render(const_decl()), '')


class TestTypeConverter(unittest.TestCase):
    """Test rendering of each type annotation kind."""

    def test_keyword_types(self):
        cases = {
            'String': 'string',
            'Number': 'number',
            'Boolean': 'boolean',
            'Void': 'void',
            'Mixed': 'any',
            'Any': 'any',
        }
        for flow_name, ts_name in cases.items():
            with self.subTest(flow_name=flow_name):
                self.assertEqual(render_type(prim(flow_name)), f'type T = {ts_name};')

    def test_empty_alias(self):
        self.assertEqual(render_type(prim('Empty')), 'type T = never;')

    def test_null_literal_alias(self):
        self.assertEqual(render_type(prim('NullLiteral')), 'type T = null;')

    def test_empty_and_null_literal_types(self):
        output = render_type(node('UnionTypeAnnotation', types=[prim('Empty'), prim('NullLiteral')]))
        self.assertEqual(output, 'type T = never | null;')

    def test_function_type(self):
        output = render_type(fn_type([fn_param('a', prim('String')), fn_param(None, prim('Number'))], prim('Boolean')))
        self.assertEqual(output, 'type T = (a: string, number) => boolean;')

    def test_function_type_without_return_is_void(self):
        self.assertEqual(render_type(fn_type([])), 'type T = () => void;')

    def test_function_type_rest_parameter(self):
        output = render_type(fn_type(
            [fn_param('a', prim('String'))],
            prim('Void'),
            rest=fn_param('rest', generic('Array', prim('Number'))),
        ))
        self.assertEqual(output, 'type T = (a: string, ...rest: Array<number>) => void;')

    def test_bare_function_type(self):
        converter = DeclarationGenerator().type_converter
        bare = load_program(program(type_alias('T', node('FunctionTypeAnnotation')))).body[0].right
        self.assertEqual(converter.flow_type_to_ts(bare), 'Function')

    def test_generic_with_arguments(self):
        output = render_type(generic('Map', prim('String'), generic('Array', prim('Number'))))
        self.assertEqual(output, 'type T = Map<string, Array<number>>;')

    def test_object_generic_ignores_arguments(self):
        self.assertEqual(render_type(generic('Object', prim('String'))), 'type T = object;')

    def test_qualified_generic_name(self):
        qualified = node(
            'GenericTypeAnnotation',
            id=node('QualifiedTypeIdentifier', qualification=ident('React'), id=ident('Node')),
            typeParameters=None,
        )
        self.assertEqual(render_type(qualified), 'type T = React.Node;')

    def test_union_preserves_order_and_duplicates(self):
        output = render_type(node('UnionTypeAnnotation', types=[prim('String'), prim('Number'), prim('String')]))
        self.assertEqual(output, 'type T = string | number | string;')

    def test_intersection(self):
        output = render_type(node('IntersectionTypeAnnotation', types=[generic('A'), generic('B')]))
        self.assertEqual(output, 'type T = A & B;')

    def test_literal_types_keep_source_text(self):
        output = render_type(node('UnionTypeAnnotation', types=[
            node('StringLiteralTypeAnnotation', value='foo', raw="'foo'"),
            node('StringLiteralTypeAnnotation', value='bar', raw='"bar"'),
        ]))
        self.assertEqual(output, 'type T = \'foo\' | "bar";')

    def test_boolean_literal_in_union(self):
        output = render_type(node('UnionTypeAnnotation', types=[
            node('BooleanLiteralTypeAnnotation', value=True, raw='true'),
            prim('Number'),
        ]))
        self.assertEqual(output, 'type T = true | number;')

    def test_tuple(self):
        output = render_type(node('TupleTypeAnnotation', types=[prim('String'), generic('Foo')]))
        self.assertEqual(output, 'type T = [string, Foo];')

    def test_tuple_element_types_key(self):
        output = render_type(node('TupleTypeAnnotation', elementTypes=[prim('Number'), prim('Boolean')]))
        self.assertEqual(output, 'type T = [number, boolean];')

    def test_nested_nullable_renders_inner_type_only(self):
        output = render_type(node('UnionTypeAnnotation', types=[nullable(prim('String')), prim('Number')]))
        self.assertEqual(output, 'type T = string | number;')

    def test_nested_object_type(self):
        output = render_type(generic('Array', obj([prop('a', prim('String'))])))
        self.assertEqual(output, 'type T = Array<{\n  a: string;\n}>;')

    def test_empty_object_type(self):
        output = render_type(generic('Array', obj()))
        self.assertEqual(output, 'type T = Array<{\n}>;')

    def test_unknown_annotation_raises(self):
        converter = DeclarationGenerator().type_converter
        synthetic = UnknownNode(type='NumberLiteralTypeAnnotation')
        with self.assertRaises(UnhandledConstructError) as cm:
            converter.flow_type_to_ts(synthetic)
        self.assertIn('Unknown annotation type: NumberLiteralTypeAnnotation', str(cm.exception))

    def test_unknown_annotation_reports_position(self):
        with self.assertRaises(UnhandledConstructError) as cm:
            render(type_alias('T', generic('Array', node('TypeofTypeAnnotation', line=4, column=9))))
        self.assertTrue(str(cm.exception).endswith('(4:10)'))
        self.assertEqual(cm.exception.loc.start.line, 4)


class TestObjectMembers(unittest.TestCase):
    """Test interface bodies: properties and indexers."""

    def test_optional_property(self):
        output = render(type_alias('Foo', obj([prop('a', prim('String'), optional=True)])))
        self.assertEqual(output, 'interface Foo {\n  a?: string;\n}\n')

    def test_properties_then_indexers_in_source_order(self):
        output = render(type_alias('Foo', obj(
            [prop('b', prim('Number')), prop('a', prim('String'))],
            [indexer('k', prim('String'), prim('Number')), indexer('n', prim('Number'), prim('String'))],
        )))
        self.assertEqual(output, (
            'interface Foo {\n'
            '  b: number;\n'
            '  a: string;\n'
            '  [k: string]: number;\n'
            '  [n: number]: string;\n'
            '}\n'
        ))

    def test_unnamed_indexer_gets_default_name(self):
        output = render(type_alias('Foo', obj(indexers=[indexer(None, prim('String'), prim('Any'))])))
        self.assertEqual(output, 'interface Foo {\n  [key: string]: any;\n}\n')

    def test_empty_object_alias(self):
        self.assertEqual(render(type_alias('Foo', obj())), 'interface Foo {\n}\n')

    def test_spread_property_raises(self):
        spread = node('ObjectTypeSpreadProperty', argument=generic('Base'))
        with self.assertRaises(UnhandledConstructError):
            render(type_alias('Foo', obj([spread])))

    def test_call_property_raises(self):
        """type Foo = { (): void }"""
        object_type = obj()
        object_type['callProperties'] = [node('ObjectTypeCallProperty', line=3, column=4, value=fn_type([]))]
        with self.assertRaises(UnhandledConstructError) as cm:
            render(type_alias('Foo', object_type))
        self.assertEqual(
            str(cm.exception),
            'Never reach here: Unknown object type member: ObjectTypeCallProperty (3:5)',
        )

    def test_internal_slot_raises(self):
        """type Foo = { [[call]]: () => void }"""
        object_type = obj()
        object_type['internalSlots'] = [node('ObjectTypeInternalSlot', id=ident('call'), value=fn_type([]))]
        with self.assertRaises(UnhandledConstructError) as cm:
            render(type_alias('Foo', object_type))
        self.assertIn('ObjectTypeInternalSlot', str(cm.exception))


class TestParameters(unittest.TestCase):
    """Test parameter list rendering."""

    def test_empty_list(self):
        self.assertEqual(render_params(), '')

    def test_unannotated_identifier(self):
        self.assertEqual(render_params(ident('a'), ident('b')), 'a, b')

    def test_annotated_identifier(self):
        self.assertEqual(render_params(ident('a', prim('Number'))), 'a: number')

    def test_optional_identifier(self):
        self.assertEqual(render_params(ident('a', prim('Number'), optional=True)), 'a?: number')

    def test_nullable_moves_to_name_exactly_once(self):
        inner_types = [prim('String'), generic('Array', prim('Number')), fn_type([]), obj()]
        for inner in inner_types:
            with self.subTest(inner=inner['type']):
                rendered = render_params(ident('a', nullable(inner)))
                self.assertTrue(rendered.startswith('a?: '))
                self.assertNotIn('??', rendered)
                self.assertNotIn('?', rendered[len('a?: '):])

    def test_optional_and_nullable_single_marker(self):
        self.assertEqual(render_params(ident('a', nullable(prim('String')), optional=True)), 'a?: string')

    def test_rest_element(self):
        rest = node('RestElement', argument=ident('args'))
        self.assertEqual(render_params(ident('a'), rest), 'a, ...args')

    def test_typed_rest_element(self):
        rest = node('RestElement', argument=ident('args', generic('Array', prim('String'))))
        self.assertEqual(render_params(rest), '...args: Array<string>')

    def test_rest_element_requires_identifier(self):
        rest = node('RestElement', argument=node('ArrayPattern', elements=[]))
        with self.assertRaises(UnhandledConstructError) as cm:
            render_params(rest)
        self.assertIn('Rest argument must be an identifier: ArrayPattern', str(cm.exception))

    def test_default_value_is_dropped(self):
        param = node('AssignmentPattern', left=ident('a', prim('Number')), right=literal(1))
        self.assertEqual(render_params(param), 'a: number')

    def test_default_value_without_annotation(self):
        param = node('AssignmentPattern', left=ident('a'), right=node('ObjectExpression', properties=[]))
        self.assertEqual(render_params(param), 'a')

    def test_default_value_with_nullable_type(self):
        param = node('AssignmentPattern', left=ident('a', nullable(prim('String'))), right=literal('x'))
        self.assertEqual(render_params(param), 'a?: string')

    def test_destructured_parameter_raises(self):
        with self.assertRaises(UnhandledConstructError) as cm:
            render_params(node('ObjectPattern', line=2, column=14, properties=[]))
        self.assertEqual(str(cm.exception), 'Never reach here: Unknown parameter type: ObjectPattern (2:15)')

    def test_parameter_generator_on_nodes(self):
        function_generator = DeclarationGenerator().function_generator
        param = Identifier(name='x', type_annotation=NullableTypeAnnotation(type_annotation=StringTypeAnnotation()))
        self.assertEqual(function_generator.generate_parameters([param]), 'x?: string')


class TestFunctionDeclarations(unittest.TestCase):
    """Test function signatures."""

    def test_export_named_function(self):
        output = render(export_named(func('foo', [ident('bar', prim('String'))], prim('Number'))))
        self.assertEqual(output, 'export function foo(bar: string): number;\n')

    def test_generic_return_type(self):
        output = render(export_named(func('foo', [], generic('Promise', generic('Baz')))))
        self.assertEqual(output, 'export function foo(): Promise<Baz>;\n')

    def test_missing_return_type(self):
        self.assertEqual(render(export_named(func('foo', [ident('a')]))), 'export function foo(a);\n')

    def test_type_parameters_with_bound(self):
        params = type_params(type_param('T'), type_param('U', generic('Base')))
        output = render(export_named(func('foo', [ident('a', generic('T'))], generic('U'), params)))
        self.assertEqual(output, 'export function foo<T, U: Base>(a: T): U;\n')

    def test_anonymous_default_export(self):
        output = render(node('ExportDefaultDeclaration', declaration=func(None, [], prim('Void'))))
        self.assertEqual(output, 'export default function(): void;\n')

    def test_unexported_function_is_dropped(self):
        self.assertEqual(render(func('foo', [ident('a', prim('String'))], prim('Void'))), '')

    def test_export_default_non_function_raises(self):
        stmt = node('ExportDefaultDeclaration', line=7, declaration=node('ClassDeclaration', line=7, id=ident('A')))
        with self.assertRaises(UnhandledConstructError) as cm:
            render(stmt)
        self.assertIn('Unhandled declaration: ClassDeclaration', str(cm.exception))


class TestTypeAliases(unittest.TestCase):
    """Test the type alias renderer."""

    def test_union_alias(self):
        output = render(type_alias('Foo', node('UnionTypeAnnotation', types=[prim('String'), generic('Bar')])))
        self.assertEqual(output, 'type Foo = string | Bar;\n')

    def test_function_alias(self):
        output = render(type_alias('Cb', fn_type([fn_param('err', generic('Error'))])))
        self.assertEqual(output, 'type Cb = (err: Error) => void;\n')

    def test_string_literal_alias(self):
        output = render(type_alias('Kind', node('StringLiteralTypeAnnotation', value='a', raw="'a'")))
        self.assertEqual(output, "type Kind = 'a';\n")

    def test_generic_interface(self):
        params = type_params(type_param('T'), type_param('K', prim('String')))
        output = render(type_alias('Box', obj([prop('value', generic('T'))]), params))
        self.assertEqual(output, 'interface Box<T, K: string> {\n  value: T;\n}\n')

    def test_generic_type_alias(self):
        output = render(type_alias('List', generic('Array', generic('T')), type_params(type_param('T'))))
        self.assertEqual(output, 'type List<T> = Array<T>;\n')

    def test_nullable_alias_raises(self):
        with self.assertRaises(UnhandledConstructError) as cm:
            render(type_alias('Maybe', nullable(prim('String')), line=5))
        self.assertEqual(
            str(cm.exception),
            'Never reach here: Unhandled rval type of type alias: NullableTypeAnnotation (5:1)',
        )


class TestImportsAndExports(unittest.TestCase):
    """Test import declarations and re-exports."""

    def test_default_import(self):
        spec = node('ImportDefaultSpecifier', local=ident('React'))
        self.assertEqual(render(import_decl('react', [spec])), "import React from 'react';\n")

    def test_named_import_alias(self):
        output = render(import_decl('bar', [import_spec('Foo', 'Bar')]))
        self.assertEqual(output, "import { Foo as Bar } from 'bar';\n")

    def test_default_then_named_import_has_no_braces(self):
        output = render(import_decl('m', [node('ImportDefaultSpecifier', local=ident('D')), import_spec('N')]))
        self.assertEqual(output, "import D, N from 'm';\n")

    def test_namespace_import_renders_empty_name(self):
        spec = node('ImportNamespaceSpecifier', local=ident('ns'))
        generator = DeclarationGenerator()
        output = generator.generate(load_program(program(import_decl('m', [spec]))))
        self.assertEqual(output, "import  from 'm';\n")
        self.assertEqual([d.code for d in generator.diagnostics.warnings], ['W001'])

    def test_export_specifiers(self):
        specs = [
            node('ExportSpecifier', local=ident('a'), exported=ident('a')),
            node('ExportSpecifier', local=ident('b'), exported=ident('c')),
        ]
        self.assertEqual(render(export_named(specifiers=specs)), 'export { a, b as c };\n')

    def test_export_specifiers_from_source(self):
        specs = [node('ExportSpecifier', local=ident('a'), exported=ident('a'))]
        self.assertEqual(render(export_named(specifiers=specs, source='./a')), "export { a } from './a';\n")

    def test_export_all(self):
        self.assertEqual(render(node('ExportAllDeclaration', source=literal('./types'))), "export * from './types';\n")

    def test_exported_variable_is_dropped(self):
        self.assertEqual(render(export_named(const_decl())), '')

    def test_export_named_unknown_declaration_raises(self):
        with self.assertRaises(UnhandledConstructError) as cm:
            render(export_named(node('ClassDeclaration', id=ident('A'))))
        self.assertIn('Unhandled expression: ClassDeclaration', str(cm.exception))


class TestDeclareForms(unittest.TestCase):
    """Test declare module / type / class and nested blocks."""

    def test_declare_module_indents_body(self):
        body = node('BlockStatement', body=[
            node('DeclareTypeAlias', id=ident('Bar'), typeParameters=None, right=obj([prop('a', prim('String'))])),
            type_alias('Baz', prim('Number')),
        ])
        output = render(node('DeclareModule', id=literal('foo'), body=body, kind='CommonJS'))
        self.assertEqual(output, (
            "declare module 'foo' {\n"
            "  declare type Bar = {\n"
            "    a: string;\n"
            "  };\n"
            "\n"
            "  type Baz = number;\n"
            "}\n"
        ))

    def test_declare_module_custom_indent(self):
        body = node('BlockStatement', body=[type_alias('A', prim('String'))])
        ctx = CodeGenerationContext(indent_str='    ')
        output = DeclarationGenerator(ctx).generate(
            load_program(program(node('DeclareModule', id=literal('m'), body=body)))
        )
        self.assertEqual(output, "declare module 'm' {\n    type A = string;\n}\n")

    def test_empty_declare_module(self):
        output = render(node('DeclareModule', id=literal('m'), body=node('BlockStatement', body=[])))
        self.assertEqual(output, "declare module 'm' {\n}\n")

    def test_declare_type_alias(self):
        output = render(node('DeclareTypeAlias', id=ident('A'), typeParameters=None, right=prim('String')))
        self.assertEqual(output, 'declare type A = string;\n')

    def test_declare_class_is_a_stub(self):
        generator = DeclarationGenerator()
        output = generator.generate(load_program(program(node('DeclareClass', id=ident('Foo'), body=obj()))))
        self.assertEqual(output, 'declare class;\n')
        self.assertEqual(generator.diagnostics.warnings[0].code, 'W003')

    def test_block_statement_renders_one_level_deeper(self):
        block = node('BlockStatement', body=[type_alias('A', prim('String')), const_decl(), type_alias('B', prim('Number'))])
        self.assertEqual(render(block), '  type A = string;\n\n  type B = number;\n')

    def test_unknown_statement_in_module_raises(self):
        body = node('BlockStatement', body=[node('DeclareFunction', line=2, column=2, id=ident('f'))])
        with self.assertRaises(UnhandledConstructError) as cm:
            render(node('DeclareModule', id=literal('m'), body=body))
        self.assertEqual(str(cm.exception), 'Never reach here: Unhandled expression: DeclareFunction (2:3)')


class TestDocumentAssembly(unittest.TestCase):
    """Test ordering, separators and determinism of the whole document."""

    def test_statements_keep_source_order_with_blank_lines(self):
        output = render(
            import_decl('x', [import_spec('X')]),
            func('hidden'),
            type_alias('B', prim('String')),
            const_decl(),
            type_alias('A', prim('Number')),
        )
        self.assertEqual(output, "import { X } from 'x';\n\ntype B = string;\n\ntype A = number;\n")

    def test_empty_program(self):
        self.assertEqual(render(), '')

    def test_unknown_statement_aborts_whole_document(self):
        with self.assertRaises(UnhandledConstructError) as cm:
            render(type_alias('A', prim('String')), node('IfStatement', line=3, test=ident('x')))
        self.assertEqual(str(cm.exception), 'Never reach here: Unhandled expression: IfStatement (3:1)')

    def test_rendering_is_deterministic(self):
        tree = program(
            import_decl('bar', [import_spec('Foo')], kind='type'),
            export_named(type_alias('Foo', obj([prop('a', nullable(prim('String')))]))),
            node('ExportDefaultDeclaration', declaration=func('f', [ident('x', nullable(generic('Foo')))])),
        )
        self.assertEqual(transform_program(load_program(tree)), transform_program(load_program(tree)))


class TestLoader(unittest.TestCase):
    """Test conversion of parser output to the node model."""

    def test_unwraps_type_annotation(self):
        fn = load_program(program(func('f', [ident('a', prim('String'))]))).body[0]
        self.assertIsInstance(fn.params[0].type_annotation, StringTypeAnnotation)

    def test_keeps_locations(self):
        alias = load_program(program(type_alias('A', prim('String'), line=12))).body[0]
        self.assertEqual(alias.loc.start.line, 12)

    def test_unknown_statement_becomes_unknown_node(self):
        stmt = load_program(program(node('WhileStatement'))).body[0]
        self.assertIsInstance(stmt, UnknownNode)
        self.assertEqual(stmt.type, 'WhileStatement')

    def test_generic_without_arguments(self):
        alias = load_program(program(type_alias('A', generic('Foo')))).body[0]
        self.assertIsInstance(alias.right, GenericTypeAnnotation)
        self.assertIsNone(alias.right.type_parameters)

    def test_rejects_non_program(self):
        with self.assertRaises(ValueError):
            load_program({'type': 'File'})


class TestFlowParser(unittest.TestCase):
    """Test the bridge to the `flow ast` command."""

    def _completed(self, stdout='', returncode=0, stderr=''):
        return subprocess.CompletedProcess(args=['flow', 'ast'], returncode=returncode, stdout=stdout, stderr=stderr)

    @mock.patch('flow2dts.parser.flow_parser.subprocess.run')
    def test_transform_runs_parser(self, run):
        tree = program(type_alias('Foo', generic('Object')))
        run.return_value = self._completed(json.dumps(tree))

        output = transform('type Foo = Object;', parser=FlowParser())

        self.assertEqual(output, 'type Foo = object;\n')
        run.assert_called_once()
        self.assertEqual(run.call_args[0][0], ['flow', 'ast'])
        self.assertEqual(run.call_args[1]['input'], 'type Foo = Object;')

    @mock.patch('flow2dts.parser.flow_parser.subprocess.run')
    def test_syntax_errors_raise(self, run):
        tree = program(errors=[{'loc': loc(2, 4), 'message': 'Unexpected token'}])
        run.return_value = self._completed(json.dumps(tree))

        with self.assertRaises(FlowParseError) as cm:
            FlowParser().parse('type = ;')
        self.assertIn('Unexpected token (2:5)', str(cm.exception))
        self.assertEqual(len(cm.exception.errors), 1)

    @mock.patch('flow2dts.parser.flow_parser.subprocess.run')
    def test_nonzero_exit_raises(self, run):
        run.return_value = self._completed(returncode=2, stderr='boom')
        with self.assertRaises(FlowParseError) as cm:
            FlowParser().parse_raw('x')
        self.assertIn('boom', str(cm.exception))

    @mock.patch('flow2dts.parser.flow_parser.subprocess.run')
    def test_invalid_json_raises(self, run):
        run.return_value = self._completed('not json')
        with self.assertRaises(FlowParseError):
            FlowParser().parse_raw('x')

    @mock.patch('flow2dts.parser.flow_parser.subprocess.run', side_effect=FileNotFoundError)
    def test_missing_binary(self, run):
        with self.assertRaises(FlowParserUnavailableError):
            FlowParser(flow_bin='no-such-flow').parse_raw('x')


class TestCommandLine(unittest.TestCase):
    """Test the CLI and the file-level transpiler API."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def _write_tree(self, tree, name='input.json'):
        path = os.path.join(self._tmp.name, name)
        with open(path, 'w') as f:
            json.dump(tree, f)
        return path

    def _run(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            main(list(argv))
        return stdout.getvalue(), stderr.getvalue()

    def test_transpiles_json_tree(self):
        path = self._write_tree(program(type_alias('Foo', generic('Object'))))
        stdout, _ = self._run(path)
        self.assertEqual(stdout, 'type Foo = object;\n')

    def test_dump_writes_raw_tree(self):
        tree = program(const_decl())
        path = self._write_tree(tree)
        stdout, _ = self._run(path, '--dump')
        self.assertTrue(stdout.endswith('\n'))
        self.assertEqual(json.loads(stdout), tree)

    def test_output_file(self):
        path = self._write_tree(program(type_alias('A', prim('String'))))
        out_path = os.path.join(self._tmp.name, 'out', 'index.d.ts')
        stdout, _ = self._run(path, '-o', out_path)
        self.assertEqual(stdout, '')
        with open(out_path) as f:
            self.assertEqual(f.read(), 'type A = string;\n')

    def test_unhandled_construct_exits_with_error(self):
        path = self._write_tree(program(node('IfStatement', line=1, test=ident('x'))))
        with self.assertRaises(SystemExit) as cm:
            self._run(path)
        self.assertEqual(cm.exception.code, 1)

    def test_missing_file_exits_with_error(self):
        with self.assertRaises(SystemExit) as cm:
            self._run(os.path.join(self._tmp.name, 'missing.js'))
        self.assertEqual(cm.exception.code, 1)

    def test_non_utf8_input_exits_with_error(self):
        path = os.path.join(self._tmp.name, 'bad.js')
        with open(path, 'wb') as f:
            f.write(b'\x80\xff')
        stderr = io.StringIO()
        with self.assertRaises(SystemExit) as cm:
            with contextlib.redirect_stdout(io.StringIO()), contextlib.redirect_stderr(stderr):
                main([path])
        self.assertEqual(cm.exception.code, 1)
        self.assertTrue(stderr.getvalue().startswith('Error: '))

    def test_warnings_summary_on_stderr(self):
        path = self._write_tree(program(node('DeclareClass', id=ident('Foo'))))
        stdout, stderr = self._run(path)
        self.assertEqual(stdout, 'declare class;\n')
        self.assertEqual(stderr, 'Transpiler warnings: 1 declare class\n')

    def test_no_summary_without_warnings(self):
        path = self._write_tree(program(func('hidden')))
        _, stderr = self._run(path)
        self.assertEqual(stderr, '')

    def test_verbose_lists_each_diagnostic(self):
        path = self._write_tree(program(node('DeclareClass', line=3, id=ident('Foo')), func('hidden')))
        _, stderr = self._run(path, '-v')
        self.assertIn('declare class: 1 occurrence(s)', stderr)
        self.assertIn(f'{path}:3: declare class "Foo"', stderr)
        self.assertIn('(I001)', stderr)

    def test_transpile_file_collects_diagnostics(self):
        path = self._write_tree(program(import_decl('m', [node('ImportNamespaceSpecifier', local=ident('ns'))])))
        transpiler = FlowToDeclarationTranspiler()
        transpiler.transpile_file(path)
        self.assertEqual(transpiler.diagnostics.get_summary(), 'Transpiler warnings: 1 import namespace')
        self.assertEqual(transpiler.diagnostics.warnings[0].file_path, path)


if __name__ == '__main__':
    unittest.main()
