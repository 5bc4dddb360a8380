"""
Error handling for the tinylisp scanner.

Provides error reporting with source location information and
diagnostics that the REPL can print verbatim.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single reader diagnostic (error, warning, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class TinyLispError(Exception):
    """
    Base class for every scanner and reader error.

    Carries a Diagnostic with the error code and source location. The
    scanner and reader hand these back to the caller as values; they are
    only raised by explicit request (``ReadResult.unwrap``).
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ScanError(TinyLispError):
    """Error raised while turning characters into tokens."""


class UnterminatedString(ScanError):
    """String literal not closed before the end of input."""


class InvalidNumericLiteral(ScanError):
    """Digit run that does not fit the selected numeric type."""


class InvalidCharacter(ScanError):
    """Character outside every token class (strict mode only)."""


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> InvalidCharacter:
    """Create an error for a character no token can start with."""
    if char.isprintable():
        help_text = f"The character '{char}' cannot start a token."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return InvalidCharacter(
        message=f"Invalid character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=["Wrap the text in double quotes to make it a string"]
    )


def create_unterminated_string_error(location: SourceLocation) -> UnterminatedString:
    """Create an error for an unterminated string literal."""
    return UnterminatedString(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote', "Check for a trailing backslash escaping the closing quote"]
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> InvalidNumericLiteral:
    """Create an error for an invalid numeric literal."""
    return InvalidNumericLiteral(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
        suggestions=["Integers must fit in a signed 64-bit value"]
    )
