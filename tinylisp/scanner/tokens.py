"""
Token definitions for the tinylisp scanner.

This module defines the token types produced by the scanner:
- Delimiters (parentheses)
- Literals (integers, floats, strings, keywords)
- Symbols (identifiers and operators)
- The quote marker

It also holds the character classes the scanner dispatches on.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """Enumeration of all token types in tinylisp."""

    # Delimiters
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )

    # Literals
    INTEGER = auto()                # 42
    FLOAT = auto()                  # 3.14, 2.
    STRING = auto()                 # "hello", "a\"b"
    KEYWORD = auto()                # :keyword

    # Identifiers and operators
    SYMBOL = auto()                 # foo, +, set!, list->vector

    # Reader macros
    QUOTE = auto()                  # '


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value,
    and source location for error reporting.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Parsed value (int for INTEGER, str for SYMBOL, ...)
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_atom(self) -> bool:
        """Check if this token maps directly to a leaf expression."""
        return self.type in ATOM_TYPES


ATOM_TYPES = frozenset({
    TokenType.INTEGER,
    TokenType.FLOAT,
    TokenType.STRING,
    TokenType.KEYWORD,
    TokenType.SYMBOL,
})

# Single-character tokens
DELIMITERS = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "'": TokenType.QUOTE,
}

# Punctuation allowed in symbols in addition to letters and digits
SYMBOL_PUNCTUATION = frozenset("-_+*/<>=!?&:.")

NUMBER_START_CHARS = frozenset("123456789")
DIGIT_CHARS = frozenset("0123456789")

COMMENT_CHAR = ";"
STRING_DELIMITER = '"'
ESCAPE_CHAR = "\\"
KEYWORD_PREFIX = ":"

# Largest signed 64-bit integer; literals carry no sign so only the top bound applies
INTEGER_MAX = 2 ** 63 - 1
