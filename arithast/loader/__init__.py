"""
arithast Loader Package

Reads pre-tokenized expressions from token files and exposes them to the
parser as a cursor-based token stream.

Key Features:
- Closed set of token kinds with literal text payloads
- Lenient (skip and warn) or strict handling of malformed lines
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenKind, SourceLocation
from .stream import TokenStream
from .loader import TokenLoader, load_string, load_tokens, tokens_from_pairs
from .errors import Diagnostic, TokenFileError, LoaderWarning

__all__ = [
    "Token",
    "TokenKind",
    "SourceLocation",
    "TokenStream",
    "TokenLoader",
    "load_string",
    "load_tokens",
    "tokens_from_pairs",
    "Diagnostic",
    "TokenFileError",
    "LoaderWarning",
]
