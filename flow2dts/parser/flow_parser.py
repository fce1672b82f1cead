"""
Bridge to the external Flow parser.

Tokenizing and parsing Flow source is delegated to the `flow` command-line
tool, which prints the ESTree JSON for source read on stdin. This module
runs that tool and turns its output into the node model.
"""

import json
import subprocess
from typing import Any, Dict, List, Optional

from .ast_nodes import ParseError, Program
from .loader import AstLoader


DEFAULT_FLOW_BIN = 'flow'


class FlowParseError(Exception):
    """The parser rejected the source (or produced no usable tree)."""

    def __init__(self, message: str, errors: Optional[List[ParseError]] = None):
        self.errors = list(errors or [])
        super().__init__(message)


class FlowParserUnavailableError(FlowParseError):
    """The parser executable could not be started."""
    pass


def format_parse_error(error: ParseError) -> str:
    """Format a parser error as `message (line:column)`."""
    if error.loc:
        return f'{error.message} ({error.loc.start.line}:{error.loc.start.column + 1})'
    return error.message


def check_parse_errors(program: Program) -> Program:
    """Raise FlowParseError if the parser reported syntax errors for the program."""
    if program.errors:
        first = format_parse_error(program.errors[0])
        extra = len(program.errors) - 1
        suffix = f' (and {extra} more)' if extra else ''
        raise FlowParseError(f'Parse error: {first}{suffix}', program.errors)
    return program


class FlowParser:
    """
    Runs `flow ast` to parse Flow source text.

    Usage:
        parser = FlowParser()
        program = parser.parse(source)
    """

    def __init__(self, flow_bin: str = DEFAULT_FLOW_BIN):
        self.flow_bin = flow_bin

    def parse_raw(self, source: str) -> Dict[str, Any]:
        """Parse source and return the raw ESTree dictionary."""
        cmd = [self.flow_bin, 'ast']
        try:
            result = subprocess.run(
                cmd,
                input=source,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise FlowParserUnavailableError(f'Flow parser not found: {self.flow_bin}') from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f'exit status {result.returncode}'
            raise FlowParseError(f'Flow parser failed: {detail}')

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise FlowParseError(f'Flow parser produced invalid JSON: {e}') from e

        if not isinstance(data, dict):
            raise FlowParseError('Flow parser produced no Program node')
        return data

    def parse(self, source: str) -> Program:
        """Parse source into a Program, raising FlowParseError on syntax errors."""
        return check_parse_errors(AstLoader().load_program(self.parse_raw(source)))
