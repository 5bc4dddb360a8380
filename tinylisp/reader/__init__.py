"""
tinylisp Reader Package

Implements the recursive descent reader that turns the scanner's tokens
into expression trees.

Key Features:
- One top-level form per read, tokens pulled on demand
- Structurally comparable AST nodes with source spans
- Errors returned as values with diagnostics
- Printer that renders trees back to S-expression text
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, SourceSpan, Expression, Atom,
    Integer, Float, String, Keyword, Symbol, ListExpr, Quote, walk
)
from .reader import Reader, ReadResult, read_string, DEFAULT_MAX_DEPTH
from .printer import ExprPrinter, format_expr
from .errors import ParseError, UnexpectedToken, UnexpectedEndOfInput, NestingTooDeep

__all__ = [
    # Core reader
    "Reader", "ReadResult", "read_string", "DEFAULT_MAX_DEPTH",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "SourceSpan", "Expression", "Atom",
    "Integer", "Float", "String", "Keyword", "Symbol", "ListExpr", "Quote",
    "walk",

    # Printing
    "ExprPrinter", "format_expr",

    # Error handling
    "ParseError", "UnexpectedToken", "UnexpectedEndOfInput", "NestingTooDeep",
]
