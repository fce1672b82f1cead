"""
Statement generation for Flow to TypeScript declarations.

This module walks top-level and block-nested statements and renders the
declaration text for each. Implementation-only statements (unexported
functions and variables) render as the empty string and are dropped by
the caller.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .function import FunctionGenerator
    from .definition import DefinitionGenerator
    from .imports import ImportGenerator

from .base import BaseGenerator
from .errors import never_reach_here, node_kind
from ..parser.ast_nodes import (
    ASTNode,
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
)


class StatementGenerator(BaseGenerator):
    """
    Generates TypeScript declaration text from Flow statement AST nodes.

    Each statement is rendered independently. The nesting depth is passed
    explicitly and only affects indentation.
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        function_generator: 'FunctionGenerator',
        definition_generator: 'DefinitionGenerator',
        import_generator: 'ImportGenerator',
    ):
        """
        Initialize the statement generator.

        Args:
            ctx: The code generation context
            function_generator: Renders function signatures
            definition_generator: Renders type aliases and declare forms
            import_generator: Renders imports and re-exports
        """
        super().__init__(ctx)
        self._function = function_generator
        self._definition = definition_generator
        self._imports = import_generator

    # =========================================================================
    # MAIN DISPATCH
    # =========================================================================

    def generate(self, stmt: ASTNode, depth: int = 0) -> str:
        """Generate declaration text for a statement.

        Args:
            stmt: The statement AST node
            depth: Nesting depth (0 at top level)

        Returns:
            The rendered text indented for depth, or '' for skipped statements
        """
        if isinstance(stmt, BlockStatement):
            return self.generate_block(stmt, depth)
        elif isinstance(stmt, DeclareModule):
            return self.generate_declare_module(stmt, depth)

        return self.indent_lines(self._generate_flat(stmt), depth)

    def _generate_flat(self, stmt: ASTNode) -> str:
        """Render statements that contain no nested statements."""
        if isinstance(stmt, ExportDefaultDeclaration):
            return self.generate_export_default(stmt)
        elif isinstance(stmt, ImportDeclaration):
            return self._imports.generate_import_declaration(stmt)
        elif isinstance(stmt, ExportNamedDeclaration):
            return self.generate_export_named(stmt)
        elif isinstance(stmt, ExportAllDeclaration):
            return self._imports.generate_export_all(stmt)
        elif isinstance(stmt, TypeAlias):
            return self._definition.generate_type_alias(stmt)
        elif isinstance(stmt, FunctionDeclaration):
            self._record_dropped('function', stmt.name or '', stmt)
            return ''
        elif isinstance(stmt, VariableDeclaration):
            self._record_dropped(stmt.kind, '', stmt)
            return ''
        elif isinstance(stmt, DeclareTypeAlias):
            return self._definition.generate_declare_type_alias(stmt)
        elif isinstance(stmt, DeclareClass):
            return self._definition.generate_declare_class(stmt)

        never_reach_here(f'Unhandled expression: {node_kind(stmt)}', stmt)

    def _record_dropped(self, kind: str, name: str, stmt: ASTNode) -> None:
        self._ctx.diagnostics.info_implementation_dropped(
            kind, name, self._ctx.file_path, self._line_of(stmt)
        )

    # =========================================================================
    # EXPORTS
    # =========================================================================

    def generate_export_default(self, stmt: ExportDefaultDeclaration) -> str:
        """Only function declarations can be default-exported."""
        declaration = stmt.declaration
        if isinstance(declaration, FunctionDeclaration):
            return f'export default {self._function.generate_function_declaration(declaration)}'
        never_reach_here(f'Unhandled declaration: {node_kind(declaration)}', stmt)

    def generate_export_named(self, stmt: ExportNamedDeclaration) -> str:
        """Generate `export <declaration>` or a re-export specifier list."""
        declaration = stmt.declaration
        if declaration is None:
            return self._imports.generate_export_specifier_list(stmt)

        if isinstance(declaration, FunctionDeclaration):
            return f'export {self._function.generate_function_declaration(declaration)}'
        elif isinstance(declaration, TypeAlias):
            return f'export {self._definition.generate_type_alias(declaration)}'
        elif isinstance(declaration, VariableDeclaration):
            return ''

        never_reach_here(f'Unhandled expression: {node_kind(declaration)}', stmt)

    # =========================================================================
    # BLOCKS
    # =========================================================================

    def generate_block(self, block: BlockStatement, depth: int = 0) -> str:
        """Render the block's statements one level deeper, separated by blank lines."""
        rendered = [self.generate(stmt, depth + 1) for stmt in block.body]
        return '\n\n'.join(text for text in rendered if text != '')

    def generate_declare_module(self, stmt: DeclareModule, depth: int = 0) -> str:
        """Generate `declare module '<name>' { ... }` with an indented body."""
        lines = [f"{self.indent(depth)}declare module '{stmt.name}' {{"]
        body = self.generate_block(stmt.body, depth)
        if body:
            lines.append(body)
        lines.append(f'{self.indent(depth)}}}')
        return '\n'.join(lines)
