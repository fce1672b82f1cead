"""
Fatal error reporting for the declaration generator.

Any node the generator does not model aborts the whole run with an
UnhandledConstructError; there is no partial output.
"""

from typing import NoReturn, Optional

from ..parser.ast_nodes import ASTNode, SourceLocation, UnknownNode


class UnhandledConstructError(Exception):
    """Raised when a node (or node in a given context) has no rendering."""

    def __init__(self, detail: str, loc: Optional[SourceLocation] = None):
        self.detail = detail
        self.loc = loc
        message = f'Never reach here: {detail}'
        if loc is not None:
            message = f'{message} {position(loc)}'
        super().__init__(message)


def position(loc: SourceLocation) -> str:
    """Format a location as `(line:column)`, both 1-based."""
    return f'({loc.start.line}:{loc.start.column + 1})'


def node_kind(node: object) -> str:
    """The parser's type tag for a node (the class name for modelled nodes)."""
    if isinstance(node, UnknownNode):
        return node.type
    return type(node).__name__


def never_reach_here(detail: str, node: Optional[ASTNode] = None) -> NoReturn:
    """Abort generation, attaching the node's location when it has one."""
    loc = node.loc if isinstance(node, ASTNode) else None
    raise UnhandledConstructError(detail, loc)
