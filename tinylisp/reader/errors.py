"""
Error handling for the tinylisp reader.

Structural errors found while building the expression tree, with the
same diagnostic format as the scanner's errors.
"""

from typing import Optional, List

from ..scanner.tokens import Token, TokenType, SourceLocation
from ..scanner.errors import TinyLispError


class ParseError(TinyLispError):
    """
    Error for a grammar violation in the token stream.

    Keeps the offending token, if there was one.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message, location, code, help_text, suggestions)
        self.token = token


class UnexpectedToken(ParseError):
    """A token appeared where the grammar expects something else."""


class UnexpectedEndOfInput(ParseError):
    """The token stream ran out while an expression was still expected."""


class NestingTooDeep(ParseError):
    """Lists or quotes nested beyond the reader's depth limit."""


# Common reader error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P010": "Unexpected end of input",
    "P013": "Nesting too deep",
}

_TOKEN_DESCRIPTIONS = {
    TokenType.OPEN_PAREN: "'('",
    TokenType.CLOSE_PAREN: "')'",
    TokenType.QUOTE: "quote",
}


def describe_token(token: Token) -> str:
    """Human-readable token name for messages."""
    if token.type in _TOKEN_DESCRIPTIONS:
        return _TOKEN_DESCRIPTIONS[token.type]
    return f"{token.type.name.lower()} {token.lexeme!r}"


def create_unexpected_token_error(expected: str, found: Token) -> UnexpectedToken:
    """Create an error for an unexpected token."""
    found_str = describe_token(found)
    suggestions = []
    if found.type == TokenType.CLOSE_PAREN:
        suggestions = ["Remove the unmatched ')'", "Check for a missing '('"]

    return UnexpectedToken(
        message=f"Unexpected token: expected {expected}, found {found_str}",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"The reader expected to see {expected} at this position, but found {found_str} instead.",
        suggestions=suggestions
    )


def create_unexpected_eof_error(expected: str, location: SourceLocation) -> UnexpectedEndOfInput:
    """Create an error for unexpected end of input."""
    return UnexpectedEndOfInput(
        message=f"Unexpected end of input, expected {expected}",
        location=location,
        code="P010",
        help_text=f"The reader reached the end of the input while expecting {expected}.",
        suggestions=[f"Add the missing {expected}", "Check for an unclosed '('"]
    )


def create_nesting_too_deep_error(max_depth: int, location: SourceLocation) -> NestingTooDeep:
    """Create an error for nesting beyond the reader's limit."""
    return NestingTooDeep(
        message=f"Expression nested more than {max_depth} levels deep",
        location=location,
        code="P013",
        help_text="Deeply nested lists and quotes exhaust the reader's recursion budget.",
        suggestions=["Split the expression into smaller forms"]
    )
