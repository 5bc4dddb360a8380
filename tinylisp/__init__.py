"""
tinylisp Reader Front End

Turns tinylisp source text into expression trees: a lazy scanner feeds a
recursive descent reader, one top-level form at a time.

Architecture:
    tinylisp/
    ├── scanner/         # Tokens, character classes, scan errors
    ├── reader/          # AST nodes, recursive descent reader, printer
    └── repl.py          # Line-oriented front end
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .scanner import Scanner, Token, TokenType, tokenize_string
from .reader import Reader, ReadResult, read_string, format_expr

__all__ = [
    # Core classes
    "Scanner",
    "Reader",
    "ReadResult",
    "Token",
    "TokenType",

    # Convenience functions
    "tokenize_string",
    "read_string",
    "format_expr",

    # Version info
    "__version__",
    "__license__",
]
