"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains common utilities
used across all specialized generator classes in the code generation pipeline.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from ..parser.ast_nodes import ASTNode


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared utilities for:
    - Indentation by nesting depth
    - Source line lookup for diagnostics
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context
        """
        self._ctx = ctx

    # =========================================================================
    # INDENTATION
    # =========================================================================

    def indent(self, depth: int) -> str:
        """Return the indentation string for a nesting depth."""
        return self._ctx.indent(depth)

    def indent_lines(self, text: str, depth: int) -> str:
        """Prefix every non-blank line of text with the indentation for depth."""
        if depth <= 0 or not text:
            return text
        prefix = self.indent(depth)
        return '\n'.join(prefix + line if line else line for line in text.split('\n'))

    # =========================================================================
    # DIAGNOSTICS
    # =========================================================================

    def _line_of(self, node: ASTNode) -> Optional[int]:
        """Source line of a node, if the parser recorded one."""
        if node.loc is not None:
            return node.loc.start.line
        return None
