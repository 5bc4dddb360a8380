"""
tinylisp Scanner Package

Implements the lexical scanner for tinylisp source text.

Key Features:
- Lazy, pull-based token production
- Backslash escapes in string literals
- Integer and float literals with 64-bit range checks
- Keywords (:name) and free-form symbols
- ';' line comments
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation
from .scanner import Scanner, ScanResult, tokenize_string
from .errors import (
    Diagnostic, TinyLispError, ScanError, UnterminatedString,
    InvalidNumericLiteral, InvalidCharacter
)

__all__ = [
    "Scanner",
    "ScanResult",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "TinyLispError",
    "ScanError",
    "UnterminatedString",
    "InvalidNumericLiteral",
    "InvalidCharacter",
]
