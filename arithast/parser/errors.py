"""
Error handling for the arithast parser.

Parsing does not recover: the first error stops the parse and propagates to
the caller with a diagnostic describing where and why.

Author: arithast contributors
"""

import sys
from typing import Optional, List

from ..loader.tokens import Token, SourceLocation
from ..loader.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser cannot build a tree.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            category=PARSER_ERROR_CODES.get(code)
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedEndError(ParseError):
    """The token stream ran out while a grammar rule still needed a token."""


class ExpressionSyntaxError(ParseError):
    """A token was present but does not fit the grammar at this position."""


class TrailingTokensError(ExpressionSyntaxError):
    """Tokens are left over after a complete expression (strict mode only)."""


class ParseWarning:
    """
    Represents a parser warning that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            category=PARSER_ERROR_CODES.get(code)
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P004": "Unclosed parenthesis",
    "P010": "Unexpected end of input",
    "P013": "Unconsumed tokens after expression",
    "P014": "Expression nested too deeply",
}


# Helper functions for creating common parser errors

def create_unexpected_eof_error(location: Optional[SourceLocation] = None) -> UnexpectedEndError:
    """Create an error for running out of tokens."""
    return UnexpectedEndError(
        message="Unexpected end of input.",
        location=location,
        code="P010",
        help_text="The token stream ended where an integer or '(' was expected.",
        suggestions=["Check for a missing operand after the last operator"]
    )


def create_unexpected_token_error(found: Token) -> ExpressionSyntaxError:
    """Create an error for a token that cannot start a factor."""
    return ExpressionSyntaxError(
        message="Expected integer or '('.",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"Found {found} where an operand was expected.",
    )


def create_unclosed_paren_error(open_token: Token, found: Optional[Token]) -> ExpressionSyntaxError:
    """Create an error for a '(' without its matching ')'."""
    if found is None:
        help_text = "The token stream ended before the parenthesis was closed."
    else:
        help_text = f"Found {found} instead."
    if open_token.location is not None:
        help_text += f" The '(' at {open_token.location} was never closed."

    return ExpressionSyntaxError(
        message="Expected ')'",
        location=found.location if found is not None else open_token.location,
        token=found,
        code="P004",
        help_text=help_text,
        suggestions=["Add a closing parenthesis ')'"]
    )


def create_trailing_tokens_error(remaining: List[Token]) -> TrailingTokensError:
    """Create an error for tokens left after the top-level expression."""
    first = remaining[0]
    return TrailingTokensError(
        message=f"Unexpected token '{first.text}' after expression",
        location=first.location,
        token=first,
        code="P013",
        help_text=f"{len(remaining)} token(s) were not consumed by the grammar.",
        suggestions=["Only + - * / operators are recognised", "Check for an unmatched ')'"]
    )


def create_trailing_tokens_warning(remaining: List[Token]) -> ParseWarning:
    """Create a warning for tokens left after the top-level expression."""
    first = remaining[0]
    return ParseWarning(
        message=f"{len(remaining)} token(s) left unparsed, starting at '{first.text}'",
        location=first.location,
        token=first,
        code="P013",
    )


def create_nesting_error(token: Optional[Token]) -> ExpressionSyntaxError:
    """Create an error for parentheses nested beyond the interpreter stack."""
    return ExpressionSyntaxError(
        message="expression nested too deeply",
        location=token.location if token is not None else None,
        token=token,
        code="P014",
        help_text=f"Nesting is limited by the Python recursion limit ({sys.getrecursionlimit()}).",
        suggestions=["Remove redundant parentheses"]
    )
