"""
Token definitions for arithast.

Tokens arrive pre-split from a token file, so there is no lexer here: each
token already carries its kind and its literal text. This module defines
the closed set of token kinds, source locations for diagnostics and the
token value itself.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenKind(Enum):
    """Kinds of tokens the expression grammar understands."""

    INTEGER = auto()                # 42
    OPERATOR = auto()               # + - * /
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in a token file.

    Used for error reporting and debugging output.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset of the line in the file

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A single classified lexical unit.

    Contains the token kind, the literal text and, when the token was read
    from a file, where it came from.
    """
    kind: TokenKind
    text: str
    location: Optional[SourceLocation] = None

    def __str__(self) -> str:
        return f"{self.kind.name}({self.text!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.location!r})"


# Type labels accepted in token files
TYPE_LABELS = {
    "integer": TokenKind.INTEGER,
    "operator": TokenKind.OPERATOR,
}

# Punctuation is recognised by its literal text whatever label it was given
PUNCTUATION = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

# Operators consumed by the grammar, by precedence level
ADDITIVE_OPERATORS = ("+", "-")
MULTIPLICATIVE_OPERATORS = ("*", "/")
