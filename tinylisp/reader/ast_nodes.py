"""
Abstract Syntax Tree node definitions for tinylisp.

Every node owns its children outright: the tree has no parent pointers
and no sharing. Nodes compare structurally; the source span rides along
for diagnostics but never takes part in equality.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional

from ..scanner.tokens import SourceLocation


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Atoms
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String"
    KEYWORD = "Keyword"
    SYMBOL = "Symbol"

    # Compound forms
    LIST = "List"
    QUOTE = "Quote"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source text (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor:
    """
    Visitor over expression trees.

    ``visit`` dispatches to ``visit_<kind>`` (``visit_integer``,
    ``visit_list``, ...). Kinds without a handler fall back to
    ``generic_visit``, which visits the children and returns None.
    """

    def visit(self, node: 'Expression') -> Any:
        method = getattr(self, f"visit_{node.node_type.name.lower()}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: 'Expression') -> Any:
        for child in node.children():
            self.visit(child)
        return None


class Expression(ABC):
    """Base class for all expression nodes."""

    node_type: ASTNodeType
    span: Optional[SourceSpan]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def children(self) -> List['Expression']:
        """Get all direct child nodes."""
        return []

    def __str__(self) -> str:
        if self.span is None:
            return self.node_type.value
        return f"{self.node_type.value}@{self.span}"


class Atom(Expression):
    """Base class for leaf expressions."""
    value: Any


# ============================================================================
# Atoms
# ============================================================================

@dataclass
class Integer(Atom):
    """64-bit integer literal."""
    value: int
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.INTEGER


@dataclass
class Float(Atom):
    """64-bit floating point literal."""
    value: float
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.FLOAT


@dataclass
class String(Atom):
    """String literal (escapes already applied)."""
    value: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.STRING


@dataclass
class Keyword(Atom):
    """Keyword literal, stored without its leading ':'."""
    value: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.KEYWORD


@dataclass
class Symbol(Atom):
    """Identifier or operator name."""
    value: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.SYMBOL


# ============================================================================
# Compound forms
# ============================================================================

@dataclass
class ListExpr(Expression):
    """Parenthesized form; element order is source order."""
    elements: List[Expression] = field(default_factory=list)
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.LIST

    def children(self) -> List[Expression]:
        return list(self.elements)


@dataclass
class Quote(Expression):
    """Quoted form: exactly one sub-expression."""
    expr: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.QUOTE

    def children(self) -> List[Expression]:
        return [self.expr]


def walk(node: Expression) -> Iterator[Expression]:
    """Yield ``node`` and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))
