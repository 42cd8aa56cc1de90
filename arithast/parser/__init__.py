"""
arithast Parser Package

Recursive descent parser for arithmetic expressions over pre-tokenized
input, producing binary expression trees.

Key Features:
- Three-level grammar: expression, term, factor
- Left-associative + - * / with parenthesized sub-expressions
- Diagnostics with token file locations
- Pre-order tree printing
"""

from .ast_nodes import ASTNode, ASTNodeType, ASTVisitor, BinaryOp, IntegerLiteral, SourceSpan, walk
from .parser import Parser, parse_tokens, parse_file
from .printer import ASTPrinter, iter_ast_lines, format_ast, print_ast
from .errors import (
    ParseError, ParseWarning, UnexpectedEndError, ExpressionSyntaxError,
    TrailingTokensError
)

__all__ = [
    # Core parser
    "Parser", "parse_tokens", "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "BinaryOp", "IntegerLiteral", "SourceSpan",

    # Printing
    "ASTPrinter", "walk", "iter_ast_lines", "format_ast", "print_ast",

    # Error handling
    "ParseError", "ParseWarning", "UnexpectedEndError", "ExpressionSyntaxError",
    "TrailingTokensError",
]
