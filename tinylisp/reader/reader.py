"""
tinylisp reader - recursive descent over the scanner's token stream.

Grammar:

    expr  := atom | '(' expr* ')' | "'" expr
    atom  := Integer | Float | String | Keyword | Symbol

Each ``read()`` call consumes exactly one top-level expression. Tokens are
pulled one at a time, so reading from a Scanner never scans past the end
of the form being read.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from ..scanner.tokens import Token, TokenType, SourceLocation
from ..scanner.errors import TinyLispError
from ..scanner.scanner import Scanner
from .ast_nodes import (
    Expression, Integer, Float, String, Keyword, Symbol, ListExpr, Quote, SourceSpan
)
from .errors import (
    create_unexpected_token_error, create_unexpected_eof_error,
    create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

# Two Python frames per nesting level stay well inside the default recursion limit
DEFAULT_MAX_DEPTH = 256

ATOM_NODES: Dict[TokenType, Callable[..., Expression]] = {
    TokenType.INTEGER: Integer,
    TokenType.FLOAT: Float,
    TokenType.STRING: String,
    TokenType.KEYWORD: Keyword,
    TokenType.SYMBOL: Symbol,
}


@dataclass
class ReadResult:
    """Outcome of reading one expression: the tree or the error, never both."""
    expr: Optional[Expression] = None
    error: Optional[TinyLispError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Expression:
        """Return the expression, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.expr


class Reader:
    """
    tinylisp reader.

    Builds one expression tree per ``read()`` call from any iterable of
    tokens. Malformed input is reported through the returned ReadResult
    and recorded in ``errors``; nothing is raised to the caller.
    """

    def __init__(self, tokens: Iterable[Token], filename: str = "<input>",
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the reader with a token stream.

        Args:
            tokens: Tokens to read, typically a Scanner
            filename: Name used for end-of-input diagnostics when the
                stream is empty
            max_depth: Maximum nesting of lists and quotes
        """
        self._tokens = iter(tokens)
        self.filename = filename
        self.max_depth = max_depth
        self.errors: List[TinyLispError] = []
        self._last_location: Optional[SourceLocation] = None

    def read(self) -> ReadResult:
        """
        Read the next top-level expression.

        Returns:
            ReadResult with the expression, or with the scan or parse error
            that stopped the read. No partial tree is returned.
        """
        try:
            token = self._next_token()
            if token is None:
                raise create_unexpected_eof_error("an expression", self._eof_location())
            expr = self._parse_expr(token, 0)
        except TinyLispError as e:
            logger.debug("read of %s failed: %s", self.filename, e.message)
            self.errors.append(e)
            return ReadResult(error=e)

        return ReadResult(expr=expr)

    def has_errors(self) -> bool:
        """Check if any read failed."""
        return len(self.errors) > 0

    def _parse_expr(self, token: Token, depth: int) -> Expression:
        """Parse the expression that starts with ``token``."""
        if token.type == TokenType.OPEN_PAREN:
            return self._parse_list(token, depth + 1)

        if token.type == TokenType.QUOTE:
            return self._parse_quote(token, depth + 1)

        if token.is_atom:
            node_class = ATOM_NODES[token.type]
            return node_class(token.value, span=SourceSpan(token.location, token.location))

        raise create_unexpected_token_error("an expression", token)

    def _parse_list(self, open_token: Token, depth: int) -> ListExpr:
        """Parse list elements up to and including the closing ')'."""
        self._check_depth(depth, open_token)

        elements: List[Expression] = []
        while True:
            token = self._next_token()
            if token is None:
                raise create_unexpected_eof_error("')'", self._eof_location())
            if token.type == TokenType.CLOSE_PAREN:
                return ListExpr(elements, span=SourceSpan(open_token.location, token.location))
            elements.append(self._parse_expr(token, depth))

    def _parse_quote(self, quote_token: Token, depth: int) -> Quote:
        """Parse the single expression following a quote marker."""
        self._check_depth(depth, quote_token)

        token = self._next_token()
        if token is None:
            raise create_unexpected_eof_error("an expression after quote", self._eof_location())

        operand = self._parse_expr(token, depth)
        end = operand.span.end if operand.span is not None else token.location
        return Quote(operand, span=SourceSpan(quote_token.location, end))

    def _check_depth(self, depth: int, token: Token):
        if depth > self.max_depth:
            raise create_nesting_too_deep_error(self.max_depth, token.location)

    def _next_token(self) -> Optional[Token]:
        """Pull one token; scan errors propagate from here."""
        token = next(self._tokens, None)
        if token is not None:
            self._last_location = token.location
        return token

    def _eof_location(self) -> SourceLocation:
        if self._last_location is not None:
            return self._last_location
        return SourceLocation(self.filename, 1, 1, 0)


def read_string(source: str, filename: str = "<string>", strict: bool = False,
                max_depth: int = DEFAULT_MAX_DEPTH) -> ReadResult:
    """
    Convenience function to read one expression from source text.

    Args:
        source: Source text
        filename: Filename for error reporting
        strict: Reject unrecognized characters while scanning
        max_depth: Maximum nesting of lists and quotes

    Returns:
        ReadResult holding the expression or the first error
    """
    scanner = Scanner(source, filename, strict=strict)
    reader = Reader(scanner, filename, max_depth=max_depth)
    return reader.read()
