"""
tinylisp scanner - turns source text into tokens, one at a time.

The scanner is pull-based: the reader asks for the next token and the
scanner advances its cursor just far enough to produce it. Nothing is
materialized up front, and once the stream ends (or fails) it stays ended.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, DELIMITERS, SYMBOL_PUNCTUATION,
    NUMBER_START_CHARS, DIGIT_CHARS, COMMENT_CHAR, STRING_DELIMITER,
    ESCAPE_CHAR, KEYWORD_PREFIX, INTEGER_MAX
)
from .errors import (
    ScanError, create_invalid_character_error,
    create_unterminated_string_error, create_invalid_number_error
)

logger = logging.getLogger(__name__)


class Scanner:
    """
    tinylisp lexical scanner.

    Iterating a scanner yields tokens lazily. Iteration is the low-level
    pull interface and is the only place a malformed literal surfaces as a
    raised ScanError; ``tokenize()``, ``tokenize_string()`` and the reader
    catch it and hand it back as data.
    """

    def __init__(self, source: str, filename: str = "<input>", strict: bool = False):
        """
        Initialize the scanner with source text.

        Args:
            source: Source text (one line or a whole buffer)
            filename: Name used in diagnostics
            strict: Treat unrecognized characters as errors instead of
                silently ending the token stream
        """
        self.source = source
        self.filename = filename
        self.strict = strict
        self.pos = 0
        self.line = 1
        self.column = 1
        self.errors: List[ScanError] = []
        self._exhausted = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        """
        Scan the next token.

        Returns:
            The next token, or None once the stream has ended

        Raises:
            ScanError: If the literal at the cursor is malformed
        """
        if self._exhausted:
            return None

        try:
            token = self._scan_token()
        except ScanError:
            self._exhausted = True
            raise

        if token is None:
            self._exhausted = True
        return token

    def tokenize(self) -> List[Token]:
        """
        Drain the scanner.

        Returns:
            The tokens produced before the stream ended. A scan error stops
            the scan and is recorded in ``errors``; there is no recovery.
        """
        tokens: List[Token] = []
        try:
            for token in self:
                tokens.append(token)
        except ScanError as e:
            logger.debug("scan of %s failed: %s", self.filename, e.message)
            self.errors.append(e)
        return tokens

    def has_errors(self) -> bool:
        """Check if the scanner encountered an error."""
        return len(self.errors) > 0

    def _scan_token(self) -> Optional[Token]:
        self._skip_whitespace_and_comments()

        if self.pos >= len(self.source):
            return None

        location = self._location()
        current_char = self.source[self.pos]

        if current_char in ("(", ")"):
            self._advance()
            return Token(DELIMITERS[current_char], current_char, None, location)

        if current_char == STRING_DELIMITER:
            return self._scan_string(location)

        # A bare leading 0 is not a number start; it scans as a symbol
        if current_char in NUMBER_START_CHARS:
            return self._scan_number(location)

        if self._is_symbol_char(current_char):
            return self._scan_symbol(location)

        if current_char == "'":
            self._advance()
            return Token(DELIMITERS[current_char], current_char, None, location)

        if self.strict:
            raise create_invalid_character_error(current_char, location)

        logger.debug("token stream ends at unrecognized character %r (%s)", current_char, location)
        return None

    def _scan_string(self, location: SourceLocation) -> Token:
        """Scan a string literal; a backslash inserts the next character verbatim."""
        start_pos = self.pos
        self._advance()  # Skip opening quote

        value_parts = []

        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == ESCAPE_CHAR:
                self._advance()
                if self.pos >= len(self.source):
                    break
                value_parts.append(self.source[self.pos])
                self._advance()
            elif char == STRING_DELIMITER:
                self._advance()  # Skip closing quote
                lexeme = self.source[start_pos:self.pos]
                return Token(TokenType.STRING, lexeme, "".join(value_parts), location)
            else:
                value_parts.append(char)
                self._advance()

        raise create_unterminated_string_error(location)

    def _scan_number(self, location: SourceLocation) -> Token:
        """Scan digits with at most one '.'; the dot selects a float."""
        start_pos = self.pos
        self._advance()

        seen_dot = False
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char in DIGIT_CHARS:
                self._advance()
            elif char == "." and not seen_dot:
                seen_dot = True
                self._advance()
            else:
                break

        lexeme = self.source[start_pos:self.pos]

        if seen_dot:
            try:
                value = float(lexeme)
            except ValueError:
                raise create_invalid_number_error(
                    lexeme, location, "Cannot parse floating-point number"
                )
            return Token(TokenType.FLOAT, lexeme, value, location)

        # int() refuses very long digit runs; those are out of range regardless
        try:
            integer = int(lexeme)
        except ValueError:
            integer = INTEGER_MAX + 1
        if integer > INTEGER_MAX:
            raise create_invalid_number_error(
                lexeme, location, "Integer literal does not fit in 64 bits"
            )
        return Token(TokenType.INTEGER, lexeme, integer, location)

    def _scan_symbol(self, location: SourceLocation) -> Token:
        """Scan a maximal run of symbol characters; ':' marks a keyword."""
        start_pos = self.pos
        while self.pos < len(self.source) and self._is_symbol_char(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        if lexeme.startswith(KEYWORD_PREFIX):
            return Token(TokenType.KEYWORD, lexeme, lexeme[len(KEYWORD_PREFIX):], location)
        return Token(TokenType.SYMBOL, lexeme, lexeme, location)

    @staticmethod
    def _is_symbol_char(char: str) -> bool:
        return char.isalnum() or char in SYMBOL_PUNCTUATION

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and ';' line comments."""
        while self.pos < len(self.source):
            char = self.source[self.pos]

            if char.isspace():
                self._advance()
                continue

            if char == COMMENT_CHAR:
                while self.pos < len(self.source) and self.source[self.pos] != "\n":
                    self._advance()
                self._advance()  # Newline belongs to the comment
                continue

            break

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1


@dataclass
class ScanResult:
    """Tokens from a complete scan, plus the error that stopped it, if any."""
    tokens: List[Token] = field(default_factory=list)
    error: Optional[ScanError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def tokenize_string(source: str, filename: str = "<string>", strict: bool = False) -> ScanResult:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting
        strict: Reject unrecognized characters

    Returns:
        ScanResult holding the tokens and the first error, if any
    """
    scanner = Scanner(source, filename, strict=strict)
    tokens = scanner.tokenize()
    error = scanner.errors[0] if scanner.has_errors() else None
    return ScanResult(tokens, error)
