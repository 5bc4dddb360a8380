#!/usr/bin/env python3
"""
tinylisp REPL

Line-oriented front end for the reader: each input line is scanned and
read as one expression, and the tree (or the diagnostic) is printed.
Nothing is evaluated.

Usage:
    tinylisp-repl                         # Interactive session
    tinylisp-repl -e "(+ 1 2)"            # Read one expression and exit
    tinylisp-repl --tokens -e "'foo"      # Print tokens instead of the tree
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .scanner import tokenize_string
from .reader import read_string, format_expr

logger = logging.getLogger(__name__)

PROMPT = "tinylisp> "


class Repl:
    """Reads lines from ``stdin`` and prints what the reader makes of them."""

    def __init__(self, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 show_tokens: bool = False, strict: bool = False):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.show_tokens = show_tokens
        self.strict = strict

    def process_line(self, line: str, filename: str = "<stdin>") -> bool:
        """
        Read and print one line of input.

        Returns:
            False if the line was malformed and discarded, True otherwise
        """
        if self.show_tokens:
            result = tokenize_string(line, filename, strict=self.strict)
            for token in result.tokens:
                self._write(str(token))
            if not result.ok:
                self._write(str(result.error).rstrip())
            return result.ok

        result = read_string(line, filename, strict=self.strict)
        if not result.ok:
            self._write(str(result.error).rstrip())
            return False

        self._write(format_expr(result.expr))
        return True

    def run(self) -> int:
        """Run until end of input. Returns the number of discarded lines."""
        failures = 0
        line_number = 0
        interactive = self.stdin.isatty()

        while True:
            if interactive:
                self.stdout.write(PROMPT)
                self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            line_number += 1

            if self._is_blank(line):
                continue

            if not self.process_line(line.rstrip("\n"), f"<stdin:{line_number}>"):
                failures += 1

        logger.debug("session ended after %d lines, %d discarded", line_number, failures)
        return failures

    def _is_blank(self, line: str) -> bool:
        stripped = line.strip()
        return not stripped or stripped.startswith(";")

    def _write(self, text: str):
        self.stdout.write(text + "\n")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylisp-repl",
        description="Read tinylisp expressions and print their syntax trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tinylisp-repl                          # Interactive session
    tinylisp-repl -e "(+ 1 2.0)"           # Read one expression
    tinylisp-repl --tokens -e ":kw 'x"     # Dump tokens
        """
    )
    parser.add_argument('-e', '--eval', metavar='TEXT',
                        help='Read a single expression from TEXT and exit')
    parser.add_argument('--tokens', action='store_true',
                        help='Print tokens instead of the expression tree')
    parser.add_argument('--strict', action='store_true',
                        help='Treat unrecognized characters as errors')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s"
    )

    repl = Repl(show_tokens=args.tokens, strict=args.strict)

    if args.eval is not None:
        return 0 if repl.process_line(args.eval, "<eval>") else 1

    try:
        repl.run()
    except KeyboardInterrupt:
        repl.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
