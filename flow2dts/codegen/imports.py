"""
Import and export generation for Flow to TypeScript declarations.

This module renders import declarations and re-export statements. Type-only
imports become plain imports, since a declaration file only refers to types.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator
from .errors import never_reach_here, node_kind
from ..parser.ast_nodes import (
    ASTNode,
    ImportDeclaration,
    ImportSpecifier,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ExportNamedDeclaration,
    ExportAllDeclaration,
    ExportSpecifier,
    ExportDefaultSpecifier,
    ExportNamespaceSpecifier,
)


class ImportGenerator(BaseGenerator):
    """
    Generates TypeScript import and re-export statements.

    This class handles:
    - `import` declarations (value and type-only)
    - `export { a as b } from '...'` specifier lists
    - `export * from '...'`
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the import generator.

        Args:
            ctx: The code generation context
        """
        super().__init__(ctx)

    # =========================================================================
    # IMPORTS
    # =========================================================================

    def generate_import_declaration(self, decl: ImportDeclaration) -> str:
        """Generate `import <specifiers> from '<source>';`."""
        return f"import {self.generate_import_specifiers(decl.specifiers)} from '{decl.source}';"

    def generate_import_specifiers(self, specifiers: List[ASTNode]) -> str:
        """Generate the specifier list, brace-wrapped when it starts with a named import."""
        contents = [self._generate_import_specifier(spec) for spec in specifiers]
        with_brace = bool(specifiers) and isinstance(specifiers[0], ImportSpecifier)
        joined = ', '.join(contents)
        return f'{{ {joined} }}' if with_brace else joined

    def _generate_import_specifier(self, spec: ASTNode) -> str:
        if isinstance(spec, ImportSpecifier):
            if spec.imported != spec.local:
                return f'{spec.imported} as {spec.local}'
            return spec.imported

        if isinstance(spec, ImportDefaultSpecifier):
            return spec.local

        if isinstance(spec, ImportNamespaceSpecifier):
            # Known gap: `* as name` is emitted as an empty entry
            self._ctx.diagnostics.warn_namespace_import_dropped(
                spec.local, self._ctx.file_path, self._line_of(spec)
            )
            return ''

        never_reach_here(f'Unknown import specifier: {node_kind(spec)}', spec)

    # =========================================================================
    # EXPORTS
    # =========================================================================

    def generate_export_specifier_list(self, decl: ExportNamedDeclaration) -> str:
        """Generate `export { specifiers }[ from '<source>'];`."""
        source = f" from '{decl.source}'" if decl.source is not None else ''
        return f'export {self.generate_export_specifiers(decl.specifiers)}{source};'

    def generate_export_specifiers(self, specifiers: List[ASTNode]) -> str:
        """Generate the brace-wrapped export specifier list."""
        return '{ ' + ', '.join(self._generate_export_specifier(spec) for spec in specifiers) + ' }'

    def _generate_export_specifier(self, spec: ASTNode) -> str:
        if isinstance(spec, ExportSpecifier):
            if spec.exported != spec.local:
                return f'{spec.local} as {spec.exported}'
            return spec.exported

        if isinstance(spec, ExportDefaultSpecifier):
            self._ctx.diagnostics.warn_export_specifier_dropped(
                'Default', spec.exported, self._ctx.file_path, self._line_of(spec)
            )
            return ''

        if isinstance(spec, ExportNamespaceSpecifier):
            self._ctx.diagnostics.warn_export_specifier_dropped(
                'Namespace', spec.exported, self._ctx.file_path, self._line_of(spec)
            )
            return ''

        never_reach_here(f'Unknown export specifier: {node_kind(spec)}', spec)

    def generate_export_all(self, decl: ExportAllDeclaration) -> str:
        """Generate `export * from '<source>';`."""
        return f"export * from '{decl.source}';"
