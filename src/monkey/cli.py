"""Monkey CLI entry point.

Usage:
    monkey [repl]                   Start the interactive token REPL
    monkey tokenize <file.mk>       Display the token stream of a file
"""

from __future__ import annotations

import sys
from pathlib import Path

from monkey.lexer.lexer import Lexer, LexerError
from monkey.lexer.tokens import TokenType
from monkey.repl import repl


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if not args or args[0] == "repl":
        return repl()

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from monkey import __version__
        print(f"monkey {__version__}")
        return 0

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    filepath = Path(args[1])
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return 1

    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {filepath}: {e}")
        return 1

    return _cmd_tokenize(source, str(filepath))


def _cmd_tokenize(source: str, filename: str) -> int:
    """Display the token stream, then flag any ILLEGAL characters.

    Illegal characters do not change the exit status; only a lexer error
    (an out-of-range integer literal) does.
    """
    try:
        tokens = Lexer(source, filename).tokenize()
    except LexerError as e:
        print(f"Lexer error: {e}")
        return 1

    for tok in tokens:
        print(tok)

    illegal = [tok for tok in tokens if tok.type is TokenType.ILLEGAL]
    if illegal:
        print()
        for tok in illegal:
            print(f"  WARN  {tok.file}:{tok.line}:{tok.column}: illegal character {tok.literal!r}")
        print(f"{filename}: {len(tokens)} token(s), {len(illegal)} illegal")
    return 0


if __name__ == "__main__":
    sys.exit(main())
