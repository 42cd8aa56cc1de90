"""
Configuration for the arithast loader, parser and printer.

Defaults reproduce the behaviour of the plain `arithast <file>` command.
"""

from dataclasses import dataclass
from typing import Optional

# Upper bound on tokens read from one file
MAX_TOKENS = 100

# One indentation step per tree level when printing
DEFAULT_INDENT = "    "

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoaderConfig:
    """Configuration for reading token files"""
    strict: bool = False  # Abort on the first malformed line instead of skipping it
    max_tokens: Optional[int] = MAX_TOKENS  # None disables the limit
    encoding: str = "utf-8"


@dataclass
class ParserConfig:
    """Configuration for the expression parser"""
    strict: bool = False  # Reject tokens left over after the top-level expression


@dataclass
class PrinterConfig:
    """Configuration for tree rendering"""
    indent: str = DEFAULT_INDENT

    @classmethod
    def with_width(cls, width: int) -> "PrinterConfig":
        if width < 0:
            raise ValueError("indent width must not be negative")
        return cls(indent=" " * width)
