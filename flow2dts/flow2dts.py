#!/usr/bin/env python3
"""
Flow to TypeScript Declaration Transpiler

This transpiler converts Flow-annotated JavaScript into a TypeScript
declaration document: signatures, interfaces and type aliases, with every
implementation body left out.

Key features:
- Type-only imports become plain imports
- Object-shaped type aliases become interfaces
- Nullable parameter types become optional parameters (`x?: T`)
- Unexported functions and variables are dropped
- Unknown constructs abort the run with their source position

Usage:
    python -m flow2dts.flow2dts src/index.js
    python -m flow2dts.flow2dts src/index.js --dump

Parsing is delegated to the `flow` command-line tool. A `.json` input is
treated as an already-parsed tree.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .parser import FlowParser, FlowParseError, Program, AstLoader, check_parse_errors
from .parser.flow_parser import DEFAULT_FLOW_BIN
from .codegen import (
    CodeGenerationContext,
    DeclarationGenerator,
    TranspilerDiagnostics,
    UnhandledConstructError,
)


class FlowToDeclarationTranspiler:
    """Main transpiler class that orchestrates parsing and generation."""

    def __init__(
        self,
        flow_bin: str = DEFAULT_FLOW_BIN,
        indent_str: str = '  ',
        verbose: bool = False,
    ):
        self.parser = FlowParser(flow_bin)
        self.indent_str = indent_str
        self.diagnostics = TranspilerDiagnostics(verbose=verbose)

    def _make_context(self, file_path: str = '') -> CodeGenerationContext:
        return CodeGenerationContext(
            indent_str=self.indent_str,
            file_path=file_path,
            diagnostics=self.diagnostics,
        )

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_tree(self, filepath: str) -> Dict[str, Any]:
        """Read a file and return the raw parser tree.

        Flow sources go through the parser; `.json` files are read as an
        already-parsed tree.
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            text = f.read()

        if Path(filepath).suffix == '.json':
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                raise FlowParseError(f'Invalid AST JSON in {filepath}: {e}') from e
        return self.parser.parse_raw(text)

    def load_program(self, data: Dict[str, Any]) -> Program:
        """Convert a raw tree to a Program, rejecting trees with syntax errors."""
        try:
            program = AstLoader().load_program(data)
        except ValueError as e:
            raise FlowParseError(str(e)) from e
        return check_parse_errors(program)

    # =========================================================================
    # TRANSPILING
    # =========================================================================

    def transpile_program(self, program: Program, file_path: str = '') -> str:
        """Generate the declaration document for a loaded Program."""
        generator = DeclarationGenerator(self._make_context(file_path))
        return generator.generate(program)

    def transpile_ast(self, data: Dict[str, Any], file_path: str = '') -> str:
        """Generate the declaration document for a raw parser tree."""
        return self.transpile_program(self.load_program(data), file_path)

    def transpile_source(self, source: str, file_path: str = '') -> str:
        """Parse Flow source text and generate its declaration document."""
        return self.transpile_ast(self.parser.parse_raw(source), file_path)

    def transpile_file(self, filepath: str) -> str:
        """Transpile a single Flow file (or `.json` tree) to declaration text."""
        return self.transpile_ast(self.load_tree(filepath), filepath)

    def dump_file(self, filepath: str) -> str:
        """Return the raw parser tree of a file serialized as one line of JSON."""
        return json.dumps(self.load_tree(filepath)) + '\n'

    def write_output(self, content: str, output_path: str) -> None:
        """Write generated text to disk."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        print(f"Written: {path}", file=sys.stderr)


def transform(source: str, parser: Optional[FlowParser] = None) -> str:
    """Parse Flow source text and render its TypeScript declarations."""
    transpiler = FlowToDeclarationTranspiler()
    if parser is not None:
        transpiler.parser = parser
    return transpiler.transpile_source(source)


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description='Flow to TypeScript Declaration Transpiler')
    parser.add_argument('input', help='Input Flow file (or .json parser output)')
    parser.add_argument('--dump', action='store_true',
                        help='Print the raw parser tree as JSON instead of transpiling')
    parser.add_argument('-o', '--output', help='Write to this file instead of stdout')
    parser.add_argument('--flow-bin', default=DEFAULT_FLOW_BIN,
                        help='Flow executable used for parsing')
    parser.add_argument('--indent', type=int, default=2, metavar='N',
                        help='Spaces per nesting level inside declare module bodies')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print every diagnostic instead of a summary')

    args = parser.parse_args(argv)

    transpiler = FlowToDeclarationTranspiler(
        flow_bin=args.flow_bin,
        indent_str=' ' * args.indent,
        verbose=args.verbose,
    )

    try:
        if args.dump:
            content = transpiler.dump_file(args.input)
        else:
            content = transpiler.transpile_file(args.input)
    except (UnhandledConstructError, FlowParseError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        transpiler.write_output(content, args.output)
    else:
        sys.stdout.write(content)

    transpiler.diagnostics.print_summary()


if __name__ == '__main__':
    main()
