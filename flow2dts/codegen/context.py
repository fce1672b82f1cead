"""
Code generation context for the declaration generator.

This module provides the context class shared by the specialized
generators. It carries configuration and the diagnostics sink only;
rendering state such as nesting depth is passed explicitly.
"""

from dataclasses import dataclass, field

from .diagnostics import TranspilerDiagnostics


@dataclass
class CodeGenerationContext:
    """
    Holds the configuration shared by all generators.
    """

    # Indentation unit for one nesting level
    indent_str: str = '  '

    # File context (used in diagnostics only)
    file_path: str = ''

    # Known-gap warnings collected while rendering
    diagnostics: TranspilerDiagnostics = field(default_factory=TranspilerDiagnostics)

    def indent(self, depth: int) -> str:
        """Return the indentation string for a nesting depth."""
        return self.indent_str * depth
