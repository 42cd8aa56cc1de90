"""
Text rendering of expression trees.

Each node is printed on its own line in pre-order (node, then left, then
right), indented one step per level of depth.
"""

import sys
from typing import Any, Iterator, List, Optional, TextIO

from ..config import DEFAULT_INDENT
from .ast_nodes import ASTNode, ASTVisitor, walk


def iter_ast_lines(node: ASTNode, depth: int = 0, indent: str = DEFAULT_INDENT) -> Iterator[str]:
    """Lazily yield the indented lines for a tree."""
    for level, current in walk(node, depth):
        yield f"{indent * level}{current.value}"


def format_ast(node: ASTNode, depth: int = 0, indent: str = DEFAULT_INDENT) -> str:
    return "\n".join(iter_ast_lines(node, depth, indent))


def print_ast(node: ASTNode, depth: int = 0, indent: str = DEFAULT_INDENT,
              file: Optional[TextIO] = None):
    """Write the tree to `file` (stdout by default), one node per line."""
    out = file if file is not None else sys.stdout
    for line in iter_ast_lines(node, depth, indent):
        print(line, file=out)


class ASTPrinter(ASTVisitor):
    """Visitor that collects the rendered lines of a tree."""

    def __init__(self, indent: str = DEFAULT_INDENT):
        self.indent = indent
        self.lines: List[str] = []

    def visit(self, node: ASTNode) -> Any:
        self.lines.extend(iter_ast_lines(node, indent=self.indent))
        return self.lines

    def render(self, node: ASTNode) -> str:
        self.lines = []
        node.accept(self)
        return "\n".join(self.lines)
