"""
arithast Recursive Descent Parser

Builds an expression tree from a token stream with three mutually recursive
rules, lowest precedence first:

    expression := term ( ('+' | '-') term )*
    term       := factor ( ('*' | '/') factor )*
    factor     := INTEGER | '(' expression ')'

Precedence comes from the call hierarchy, and each loop folds its operands
to the left, so `6 / 3 / 2` becomes `(6 / 3) / 2`.
"""

import logging
from typing import Iterable, List, Optional, Union

from ..config import LoaderConfig, ParserConfig
from ..loader.tokens import (
    Token, TokenKind, ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS
)
from ..loader.stream import TokenStream
from ..loader.loader import load_tokens
from .ast_nodes import ASTNode, BinaryOp, IntegerLiteral, SourceSpan
from .errors import (
    ParseWarning, create_unexpected_eof_error, create_unexpected_token_error,
    create_unclosed_paren_error, create_trailing_tokens_error,
    create_trailing_tokens_warning, create_nesting_error
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Arithmetic expression parser.

    Owns one token stream and its cursor for the duration of a parse; build
    a new parser (or a fresh stream) to parse the same tokens again.
    """

    def __init__(self, tokens: Union[TokenStream, Iterable[Token]],
                 config: Optional[ParserConfig] = None):
        """
        Initialize parser with tokens.

        Args:
            tokens: A TokenStream, or any iterable of tokens to wrap in one
            config: Parser options, defaults to the lenient mode
        """
        self.stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)
        self.config = config or ParserConfig()
        self.warnings: List[ParseWarning] = []

    def parse(self) -> ASTNode:
        """
        Parse one expression from the stream.

        Returns:
            Root node of the expression tree

        Raises:
            UnexpectedEndError: If the stream ends where a token is required
            ExpressionSyntaxError: If a token does not fit the grammar, if
                parentheses nest deeper than the interpreter stack allows, or
                in strict mode if tokens are left after the expression
        """
        try:
            root = self.parse_expression()
        except RecursionError:
            raise create_nesting_error(self.stream.peek()) from None

        if not self.stream.at_end():
            remaining = list(self.stream.remaining())
            if self.config.strict:
                raise create_trailing_tokens_error(remaining)
            warning = create_trailing_tokens_warning(remaining)
            logger.warning(warning.message)
            self.warnings.append(warning)

        return root

    def parse_expression(self) -> ASTNode:
        """Parse a sum or difference of terms."""
        node = self.parse_term()
        while self.stream.check(TokenKind.OPERATOR, *ADDITIVE_OPERATORS):
            operator = self.stream.advance()
            right = self.parse_term()
            node = self._combine(node, operator, right)
        return node

    def parse_term(self) -> ASTNode:
        """Parse a product or quotient of factors."""
        node = self.parse_factor()
        while self.stream.check(TokenKind.OPERATOR, *MULTIPLICATIVE_OPERATORS):
            operator = self.stream.advance()
            right = self.parse_factor()
            node = self._combine(node, operator, right)
        return node

    def parse_factor(self) -> ASTNode:
        """Parse an integer literal or a parenthesized expression."""
        token = self.stream.peek()
        if token is None:
            raise create_unexpected_eof_error(self._last_location())

        logger.debug("Parsing token: type=%s, value=%s", token.kind.name.lower(), token.text)

        if token.kind == TokenKind.INTEGER:
            self.stream.advance()
            return IntegerLiteral(token.text, SourceSpan(token.location, token.location))

        if token.kind == TokenKind.LEFT_PAREN:
            self.stream.advance()
            node = self.parse_expression()
            if not self.stream.check(TokenKind.RIGHT_PAREN):
                raise create_unclosed_paren_error(token, self.stream.peek())
            self.stream.advance()
            return node

        raise create_unexpected_token_error(token)

    def _combine(self, left: ASTNode, operator: Token, right: ASTNode) -> BinaryOp:
        start = left.span.start if left.span else operator.location
        end = right.span.end if right.span else operator.location
        return BinaryOp(left, operator.text, right, SourceSpan(start, end))

    def _last_location(self):
        tokens = self.stream.tokens
        return tokens[-1].location if tokens else None


def parse_tokens(tokens: Union[TokenStream, Iterable[Token]],
                 config: Optional[ParserConfig] = None) -> ASTNode:
    """
    Convenience function to parse a sequence of tokens.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens, config).parse()


def parse_file(filepath: str, config: Optional[ParserConfig] = None,
               loader_config: Optional[LoaderConfig] = None) -> ASTNode:
    """
    Convenience function to load and parse a token file.

    Args:
        filepath: Path to the token file
        config: Parser options
        loader_config: Token loading options

    Returns:
        Root of the expression tree

    Raises:
        TokenFileError: If the file cannot be read
        ParseError: If parsing fails
    """
    tokens = load_tokens(filepath, loader_config)
    return Parser(tokens, config).parse()
