"""
Token file loader.

Token files hold one token per line as `<value>,<type>`, for example:

    (,paren
    2,integer
    +,operator
    3,integer
    ),paren

The value is everything before the first comma and the type everything after
it. Parentheses are recognised by their text whatever type label they carry.
Malformed lines are skipped with a warning unless strict loading is on.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..config import LoaderConfig
from .tokens import Token, TokenKind, SourceLocation, TYPE_LABELS, PUNCTUATION
from .errors import (
    TokenFileError, LoaderWarning, invalid_format_warning, unknown_kind_warning,
    create_too_many_tokens_error, create_open_error, create_empty_file_error
)

logger = logging.getLogger(__name__)


def classify(value: str, label: str) -> Optional[TokenKind]:
    """
    Work out the kind of a token from its text and type label.

    Returns None when the label is not one the grammar knows about.
    """
    if label == "integer":
        return TokenKind.INTEGER
    if value in PUNCTUATION:
        return PUNCTUATION[value]
    return TYPE_LABELS.get(label)


class TokenLoader:
    """
    Reads `<value>,<type>` lines into tokens.

    Collects a warning for every line it skips; in strict mode the first
    such line raises TokenFileError instead.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 config: Optional[LoaderConfig] = None):
        """
        Initialize the loader with the contents of a token file.

        Args:
            source: Token file text
            filename: Name of the token file for error reporting
            config: Loading policy, defaults to lenient with the standard token limit
        """
        self.source = source
        self.filename = filename
        self.config = config or LoaderConfig()
        self.tokens: List[Token] = []
        self.warnings: List[LoaderWarning] = []

    def load(self) -> List[Token]:
        """
        Read every line of the source.

        Returns:
            List of tokens in file order

        Raises:
            TokenFileError: On the token limit, on a malformed line in strict
                mode, or when no token could be read at all
        """
        self.tokens = []
        self.warnings = []
        offset = 0

        for line_number, raw_line in enumerate(self.source.splitlines(keepends=True), start=1):
            location = SourceLocation(self.filename, line_number, 1, offset)
            offset += len(raw_line)

            line = raw_line.strip()
            if not line:
                continue

            token = self._read_line(line, location)
            if token is None:
                continue

            limit = self.config.max_tokens
            if limit is not None and len(self.tokens) >= limit:
                raise create_too_many_tokens_error(limit, location)

            logger.debug("Read token: type=%s, value=%s", token.kind.name.lower(), token.text)
            self.tokens.append(token)

        if not self.tokens:
            raise create_empty_file_error(self.filename, len(self.warnings))

        return self.tokens

    def _read_line(self, line: str, location: SourceLocation) -> Optional[Token]:
        value, separator, label = line.partition(",")
        value = value.strip()
        label = label.strip()

        if not separator or not value or not label:
            self._skip(invalid_format_warning(line, location))
            return None

        kind = classify(value, label)
        if kind is None:
            self._skip(unknown_kind_warning(value, label, location))
            return None

        return Token(kind, value, location)

    def _skip(self, warning: LoaderWarning):
        if self.config.strict:
            raise warning.to_error()
        logger.warning("%s (line skipped)", warning.message)
        self.warnings.append(warning)

    def has_warnings(self) -> bool:
        """Check if any line was skipped."""
        return len(self.warnings) > 0


def load_string(source: str, filename: str = "<string>",
                config: Optional[LoaderConfig] = None) -> List[Token]:
    """
    Convenience function to load tokens from a string.

    Raises:
        TokenFileError: If loading fails
    """
    return TokenLoader(source, filename, config).load()


def load_tokens(filepath: str, config: Optional[LoaderConfig] = None) -> List[Token]:
    """
    Convenience function to load tokens from a token file.

    Args:
        filepath: Path to the token file
        config: Loading policy

    Returns:
        List of tokens

    Raises:
        TokenFileError: If the file cannot be opened or holds no usable tokens
    """
    config = config or LoaderConfig()
    try:
        with open(filepath, 'r', encoding=config.encoding) as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise create_open_error(str(filepath), getattr(e, "strerror", None) or str(e)) from e

    return TokenLoader(source, str(filepath), config).load()


def tokens_from_pairs(pairs: Iterable[Union[Tuple[str, str], str]]) -> List[Token]:
    """
    Build tokens in memory from `(value, type)` pairs or `"value,type"` strings.

    Uses the same classification as the file loader but without locations,
    and raises on anything it cannot classify.
    """
    tokens = []
    for pair in pairs:
        if isinstance(pair, str):
            value, _, label = pair.partition(",")
        else:
            value, label = pair
        kind = classify(value, label)
        if kind is None:
            raise TokenFileError(f"Unknown token type {label!r} for value {value!r}", code="T002")
        tokens.append(Token(kind, value))
    return tokens
