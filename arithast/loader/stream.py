"""
Cursor-based token stream consumed by the parser.

Author: arithast contributors
"""

from typing import Iterable, Optional, Tuple

from .tokens import Token, TokenKind


class TokenStream:
    """
    Ordered, read-only sequence of tokens with a single forward cursor.

    One stream feeds exactly one parse. The cursor only moves forward and
    is bounds-checked before every read.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Tuple[Token, ...] = tuple(tokens)
        self._position = 0

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream({len(self._tokens)} tokens, position={self._position})"

    @property
    def position(self) -> int:
        """Index of the next unconsumed token."""
        return self._position

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def at_end(self) -> bool:
        """Check if every token has been consumed."""
        return self._position >= len(self._tokens)

    def peek(self) -> Optional[Token]:
        """Return the token at the cursor without consuming it."""
        if self.at_end():
            return None
        return self._tokens[self._position]

    def advance(self) -> Token:
        """
        Consume and return the token at the cursor.

        Raises:
            IndexError: If the stream is already exhausted. Callers check
                with peek() first.
        """
        if self.at_end():
            raise IndexError(
                f"advance() past end of token stream (length {len(self._tokens)})"
            )
        token = self._tokens[self._position]
        self._position += 1
        return token

    def check(self, kind: TokenKind, *texts: str) -> bool:
        """Check if the current token has the given kind and, if any texts are given, one of them."""
        token = self.peek()
        if token is None or token.kind != kind:
            return False
        return not texts or token.text in texts

    def remaining(self) -> Tuple[Token, ...]:
        """Tokens not consumed yet."""
        return self._tokens[self._position:]

    def fresh(self) -> "TokenStream":
        """A new stream over the same tokens with the cursor at the start."""
        return TokenStream(self._tokens)
