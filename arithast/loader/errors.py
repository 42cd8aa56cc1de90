"""
Error handling for the arithast token loader.

Provides diagnostics with source location information for token files
that cannot be read or contain lines the loader does not understand.

Author: arithast contributors
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, TYPE_LABELS


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    category: Optional[str] = None  # Description of the code, from the error code tables

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.code:
            result += f"  = {self.code}"
            if self.category:
                result += f": {self.category}"
            result += "\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class TokenFileError(Exception):
    """
    Exception raised when a token file cannot be turned into tokens.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
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
            category=ERROR_CODES.get(code)
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class LoaderWarning:
    """
    Represents a skipped token line that doesn't stop loading.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
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
            category=ERROR_CODES.get(code)
        )

    def __str__(self) -> str:
        return str(self.diagnostic)

    def to_error(self) -> TokenFileError:
        """Promote this warning to a fatal error (strict loading)."""
        diagnostic = self.diagnostic
        return TokenFileError(
            message=diagnostic.message,
            location=diagnostic.location,
            code=diagnostic.code,
            help_text=diagnostic.help_text,
            suggestions=diagnostic.suggestions
        )


# Common error codes for categorization
ERROR_CODES = {
    "T001": "Invalid token format",
    "T002": "Unknown token kind",
    "T003": "Too many tokens",
    "T004": "Token file cannot be opened",
    "T005": "No tokens in file",
}


# Helper functions for creating common diagnostics

def invalid_format_warning(line: str, location: SourceLocation) -> LoaderWarning:
    """Create a diagnostic for a line that is not `<value>,<type>`."""
    return LoaderWarning(
        message=f"Invalid token format: {line!r}",
        location=location,
        code="T001",
        help_text="Each line must hold a value and a type separated by a comma.",
        suggestions=["Write the token as '<value>,<type>', e.g. '42,integer'"]
    )


def unknown_kind_warning(value: str, label: str, location: SourceLocation) -> LoaderWarning:
    """Create a diagnostic for a token whose type label is not recognised."""
    return LoaderWarning(
        message=f"Unknown token type {label!r} for value {value!r}",
        location=location,
        code="T002",
        help_text=f"Known types are: {', '.join(sorted(TYPE_LABELS))}.",
    )


def create_too_many_tokens_error(limit: int, location: SourceLocation) -> TokenFileError:
    """Create an error for a file that exceeds the token limit."""
    return TokenFileError(
        message=f"Too many tokens (limit is {limit})",
        location=location,
        code="T003",
        help_text="Raise the limit with --max-tokens, or pass 0 to disable it.",
    )


def create_open_error(filename: str, reason: str) -> TokenFileError:
    """Create an error for a token file that cannot be opened."""
    return TokenFileError(
        message=f"Could not open token file: {filename} ({reason})",
        code="T004",
    )


def create_empty_file_error(filename: str, skipped: int) -> TokenFileError:
    """Create an error for a token file without a single usable token."""
    help_text = None
    if skipped:
        help_text = f"{skipped} line(s) were skipped as malformed."
    return TokenFileError(
        message=f"No tokens found in {filename}",
        code="T005",
        help_text=help_text,
    )
