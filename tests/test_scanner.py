"""
Test suite for the tinylisp scanner.

Tests cover:
- Delimiters, atoms and the quote marker
- String escapes and unterminated strings
- Number classification and 64-bit range checks
- Comments, whitespace and unrecognized characters
- Lazy, non-restartable token production
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tinylisp.scanner import (
    Scanner, TokenType, tokenize_string, UnterminatedString,
    InvalidNumericLiteral, InvalidCharacter, ScanError
)


def kinds(source: str):
    """(type, value) pairs for every token in ``source``."""
    result = tokenize_string(source)
    assert result.ok, result.error
    return [(token.type, token.value) for token in result.tokens]


class TestScannerTokens(unittest.TestCase):
    """Token classification."""

    def test_nested_arithmetic(self):
        """Test the token stream of a nested list with mixed numbers."""
        self.assertEqual(kinds("(+ 1 2.0 (- 3 4))"), [
            (TokenType.OPEN_PAREN, None),
            (TokenType.SYMBOL, "+"),
            (TokenType.INTEGER, 1),
            (TokenType.FLOAT, 2.0),
            (TokenType.OPEN_PAREN, None),
            (TokenType.SYMBOL, "-"),
            (TokenType.INTEGER, 3),
            (TokenType.INTEGER, 4),
            (TokenType.CLOSE_PAREN, None),
            (TokenType.CLOSE_PAREN, None),
        ])

    def test_quote_marker(self):
        self.assertEqual(kinds("'foo"), [
            (TokenType.QUOTE, None),
            (TokenType.SYMBOL, "foo"),
        ])

    def test_keyword_strips_colon(self):
        """Test that keywords keep their lexeme but drop ':' from the value."""
        tokens = tokenize_string(":keyword").tokens
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.KEYWORD)
        self.assertEqual(tokens[0].value, "keyword")
        self.assertEqual(tokens[0].lexeme, ":keyword")

    def test_bare_colon_is_empty_keyword(self):
        self.assertEqual(kinds(":"), [(TokenType.KEYWORD, "")])

    def test_symbol_punctuation(self):
        """Test that operator characters form symbols."""
        self.assertEqual(kinds("set! <= a->b empty? x_y &rest a.b"), [
            (TokenType.SYMBOL, "set!"),
            (TokenType.SYMBOL, "<="),
            (TokenType.SYMBOL, "a->b"),
            (TokenType.SYMBOL, "empty?"),
            (TokenType.SYMBOL, "x_y"),
            (TokenType.SYMBOL, "&rest"),
            (TokenType.SYMBOL, "a.b"),
        ])

    def test_colon_inside_symbol(self):
        self.assertEqual(kinds("a:b"), [(TokenType.SYMBOL, "a:b")])

    def test_adjacent_parens(self):
        self.assertEqual(kinds("(())"), [
            (TokenType.OPEN_PAREN, None),
            (TokenType.OPEN_PAREN, None),
            (TokenType.CLOSE_PAREN, None),
            (TokenType.CLOSE_PAREN, None),
        ])

    def test_whitespace_only(self):
        self.assertEqual(kinds("   \n\t  "), [])

    def test_token_str(self):
        token = tokenize_string("42").tokens[0]
        self.assertEqual(str(token), "INTEGER('42' -> 42)")
        symbol = tokenize_string("foo").tokens[0]
        self.assertEqual(str(symbol), "SYMBOL('foo')")


class TestScannerStrings(unittest.TestCase):
    """String literals."""

    def test_escaped_quote(self):
        """Test a backslash-escaped quote inside a string."""
        self.assertEqual(kinds('"a\\"b"'), [(TokenType.STRING, 'a"b')])

    def test_escape_is_literal(self):
        """Test that escapes insert the next character verbatim."""
        self.assertEqual(kinds('"a\\nb"'), [(TokenType.STRING, "anb")])
        self.assertEqual(kinds('"a\\\\b"'), [(TokenType.STRING, "a\\b")])

    def test_string_keeps_whitespace_and_semicolons(self):
        self.assertEqual(kinds('"a ; b\nc"'), [(TokenType.STRING, "a ; b\nc")])

    def test_empty_string(self):
        self.assertEqual(kinds('""'), [(TokenType.STRING, "")])

    def test_string_lexeme_is_raw(self):
        token = tokenize_string('"a\\"b"').tokens[0]
        self.assertEqual(token.lexeme, '"a\\"b"')

    def test_unterminated_string(self):
        result = tokenize_string('"abc')
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, UnterminatedString)
        self.assertEqual(result.error.code, "L002")
        self.assertEqual(result.tokens, [])

    def test_trailing_backslash_is_unterminated(self):
        result = tokenize_string('"abc\\')
        self.assertIsInstance(result.error, UnterminatedString)

    def test_escaped_closing_quote_is_unterminated(self):
        result = tokenize_string('"abc\\"')
        self.assertIsInstance(result.error, UnterminatedString)

    def test_tokens_before_error_are_kept(self):
        result = tokenize_string('(a "bc')
        self.assertIsInstance(result.error, UnterminatedString)
        self.assertEqual([t.type for t in result.tokens], [TokenType.OPEN_PAREN, TokenType.SYMBOL])


class TestScannerNumbers(unittest.TestCase):
    """Integer and float literals."""

    def test_integer(self):
        self.assertEqual(kinds("128"), [(TokenType.INTEGER, 128)])

    def test_integer_with_inner_zero(self):
        self.assertEqual(kinds("10 105"), [(TokenType.INTEGER, 10), (TokenType.INTEGER, 105)])

    def test_float(self):
        self.assertEqual(kinds("3.25"), [(TokenType.FLOAT, 3.25)])

    def test_trailing_dot_float(self):
        self.assertEqual(kinds("1."), [(TokenType.FLOAT, 1.0)])

    def test_second_dot_ends_number(self):
        """Test that a second '.' starts a new symbol token."""
        self.assertEqual(kinds("1.2.3"), [
            (TokenType.FLOAT, 1.2),
            (TokenType.SYMBOL, ".3"),
        ])

    def test_number_followed_by_letters(self):
        self.assertEqual(kinds("12abc"), [
            (TokenType.INTEGER, 12),
            (TokenType.SYMBOL, "abc"),
        ])

    def test_leading_zero_is_symbol(self):
        """Test that a bare leading 0 does not start a number."""
        self.assertEqual(kinds("0"), [(TokenType.SYMBOL, "0")])
        self.assertEqual(kinds("0.5"), [(TokenType.SYMBOL, "0.5")])

    def test_negative_number_is_symbol(self):
        self.assertEqual(kinds("-5"), [(TokenType.SYMBOL, "-5")])

    def test_largest_integer(self):
        self.assertEqual(kinds("9223372036854775807"), [(TokenType.INTEGER, 2 ** 63 - 1)])

    def test_integer_overflow(self):
        result = tokenize_string("(+ 9223372036854775808 1)")
        self.assertIsInstance(result.error, InvalidNumericLiteral)
        self.assertEqual(result.error.code, "L003")
        self.assertEqual([t.type for t in result.tokens], [TokenType.OPEN_PAREN, TokenType.SYMBOL])

    def test_huge_digit_run_is_invalid_literal(self):
        """Test that digit runs too long for int() are reported, not raised."""
        result = tokenize_string("(a " + "1" * 5000 + ")")
        self.assertIsInstance(result.error, InvalidNumericLiteral)
        self.assertEqual(result.error.location.column, 4)
        self.assertEqual([t.type for t in result.tokens], [TokenType.OPEN_PAREN, TokenType.SYMBOL])


class TestScannerComments(unittest.TestCase):
    """Comments and skipped input."""

    def test_comment_inside_list(self):
        """Test that a line comment contributes no tokens."""
        self.assertEqual(kinds("(a ; c\n b)"), kinds("(a b)"))

    def test_comment_at_end_of_input(self):
        self.assertEqual(kinds("a ; trailing"), [(TokenType.SYMBOL, "a")])

    def test_consecutive_comments(self):
        self.assertEqual(kinds("; one\n; two\n42"), [(TokenType.INTEGER, 42)])

    def test_comment_only(self):
        self.assertEqual(kinds("; nothing here"), [])


class TestScannerUnrecognized(unittest.TestCase):
    """Characters outside every token class."""

    def test_unrecognized_character_truncates(self):
        """Test that an unrecognized character silently ends the stream."""
        result = tokenize_string("(a # b)")
        self.assertTrue(result.ok)
        self.assertEqual([(t.type, t.value) for t in result.tokens], [
            (TokenType.OPEN_PAREN, None),
            (TokenType.SYMBOL, "a"),
        ])

    def test_strict_mode_rejects_character(self):
        result = tokenize_string("(a # b)", strict=True)
        self.assertIsInstance(result.error, InvalidCharacter)
        self.assertEqual(result.error.code, "L001")
        self.assertEqual(len(result.tokens), 2)


class TestScannerIteration(unittest.TestCase):
    """Lazy, pull-based behaviour."""

    def test_tokens_are_produced_on_demand(self):
        """Test that tokens before a malformed literal are delivered first."""
        scanner = Scanner('(a "unterminated')
        self.assertEqual(scanner.next_token().type, TokenType.OPEN_PAREN)
        self.assertEqual(scanner.next_token().value, "a")
        with self.assertRaises(UnterminatedString):
            scanner.next_token()

    def test_scanner_stays_exhausted(self):
        scanner = Scanner("a")
        self.assertEqual([t.value for t in scanner], ["a"])
        self.assertIsNone(scanner.next_token())
        self.assertEqual(list(scanner), [])

    def test_scanner_stays_exhausted_after_error(self):
        scanner = Scanner('"abc')
        with self.assertRaises(ScanError):
            scanner.next_token()
        self.assertIsNone(scanner.next_token())

    def test_tokenize_records_error(self):
        scanner = Scanner("1 2 99999999999999999999")
        tokens = scanner.tokenize()
        self.assertEqual([t.value for t in tokens], [1, 2])
        self.assertTrue(scanner.has_errors())
        self.assertIsInstance(scanner.errors[0], InvalidNumericLiteral)

    def test_source_locations(self):
        tokens = Scanner("(a\n  b)", "example.lisp").tokenize()
        b = tokens[2]
        self.assertEqual(b.value, "b")
        self.assertEqual((b.location.line, b.location.column, b.location.offset), (2, 3, 5))
        self.assertEqual(str(b.location), "example.lisp:2:3")

    def test_error_location(self):
        result = tokenize_string('(a\n "bc', "example.lisp")
        self.assertEqual(str(result.error.location), "example.lisp:2:2")
        self.assertIn("--> example.lisp:2:2", str(result.error))


if __name__ == "__main__":
    unittest.main()
