"""Interactive token REPL: reads a line, prints the tokens it scans to."""

from __future__ import annotations

import sys
from typing import TextIO

from monkey.lexer.lexer import Lexer, LexerError
from monkey.lexer.tokens import TokenType

PROMPT = ">> "


def repl(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the read-print loop until end of input.

    Each line gets a fresh `Lexer`; tokens are printed up to and including
    the first EOF. A lexer error is reported and the loop moves on to the
    next line.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            print(file=stdout)
            return 0
        except UnicodeDecodeError as e:
            print(f"Lexer error: <stdin>: cannot decode input: {e}", file=stdout)
            continue
        if not line:
            print(file=stdout)
            return 0

        _print_tokens(line, stdout)


def _print_tokens(line: str, stdout: TextIO) -> None:
    lexer = Lexer(line, filename="<stdin>")
    try:
        for token in lexer:
            print(repr(token), file=stdout)
    except LexerError as e:
        print(f"Lexer error: {e}", file=stdout)
