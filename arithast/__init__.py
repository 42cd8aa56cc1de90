"""
arithast Package

Builds abstract syntax trees for arithmetic expressions supplied as
pre-tokenized input, and prints them for inspection.

Architecture:
    arithast/
    ├── loader/          # Token files, tokens and the token stream
    ├── parser/          # Recursive descent parser, AST nodes, printer
    ├── config.py        # Loader, parser and printer options
    └── cli.py           # Command line entry point
"""

from .version import __version__

from .config import LoaderConfig, ParserConfig, PrinterConfig
from .loader import Token, TokenKind, TokenStream, TokenFileError, load_tokens, tokens_from_pairs
from .parser import (
    Parser, parse_tokens, parse_file, ASTNode, BinaryOp, IntegerLiteral,
    format_ast, print_ast, ParseError, UnexpectedEndError, ExpressionSyntaxError,
    TrailingTokensError
)

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    "TokenStream",
    "load_tokens",
    "tokens_from_pairs",

    # Parsing
    "Parser",
    "parse_tokens",
    "parse_file",
    "ASTNode",
    "BinaryOp",
    "IntegerLiteral",
    "format_ast",
    "print_ast",

    # Configuration
    "LoaderConfig",
    "ParserConfig",
    "PrinterConfig",

    # Errors
    "TokenFileError",
    "ParseError",
    "UnexpectedEndError",
    "ExpressionSyntaxError",
    "TrailingTokensError",

    # Version info
    "__version__",
]
