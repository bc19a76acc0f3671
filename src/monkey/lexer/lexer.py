"""Monkey lexer — hand-written, pull-based scanner.

Design decisions:
- One token per `next_token()` call; EOF is returned again on every call
  once the input is exhausted.
- End of input is an explicit cursor state, never a sentinel character.
- Unrecognized characters become ILLEGAL tokens rather than errors, so a
  caller can keep scanning past them.
- Integer literals outside the signed 64-bit range raise
  `IntegerOverflowError`; nothing else the lexer sees is fatal.
"""

from __future__ import annotations

from collections.abc import Iterator

from monkey.lexer.tokens import (
    EQUALS_PAIRS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
)

INT_MAX = 2**63 - 1
_INT_MAX_DIGITS = len(str(INT_MAX))


class LexerError(Exception):
    """Raised on lexical errors with source location."""

    def __init__(self, message: str, line: int, column: int, file: str = "<unknown>"):
        self.line = line
        self.column = column
        self.file = file
        super().__init__(f"{file}:{line}:{column}: {message}")


class IntegerOverflowError(LexerError):
    """An integer literal does not fit in a signed 64-bit integer."""

    def __init__(self, literal: str, line: int, column: int, file: str = "<unknown>"):
        self.literal = literal
        super().__init__(
            f"Integer literal {literal} exceeds the 64-bit signed range",
            line, column, file,
        )


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Scans Monkey source code into `Token` objects, one per call.

    Usage::

        lexer = Lexer("let five = 5;")
        token = lexer.next_token()
        while token.type is not TokenType.EOF:
            ...
            token = lexer.next_token()

    The lexer never copies or mutates `source`; token positions are offsets
    into it.
    """

    def __init__(self, source: str, filename: str = "<unknown>") -> None:
        self.source = source
        self.filename = filename
        self.pos = 0
        self.read_pos = 0
        self.ch: str | None = None
        self.line = 1
        self.line_start = 0
        self._read_char()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Skip whitespace and return the next token.

        Raises `IntegerOverflowError` for an out-of-range integer literal;
        the cursor is left after the offending digits.
        """
        self._skip_whitespace()

        start = self.pos
        line = self.line
        column = self.column
        ch = self.ch

        if ch is None:
            return self._make_token(TokenType.EOF, start, line, column)

        if ch in SINGLE_CHAR_TOKENS:
            self._read_char()
            return self._make_token(SINGLE_CHAR_TOKENS[ch], start, line, column)

        if ch in EQUALS_PAIRS:
            single, double = EQUALS_PAIRS[ch]
            token_type = single
            if self._peek() == "=":
                self._read_char()
                token_type = double
            self._read_char()
            return self._make_token(token_type, start, line, column)

        if ch.isalpha():
            return self._scan_word(start, line, column)

        if _is_digit(ch):
            return self._scan_int(start, line, column)

        self._read_char()
        return self._make_token(TokenType.ILLEGAL, start, line, column)

    def tokenize(self) -> list[Token]:
        """Return every remaining token, ending with a single EOF."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    @property
    def column(self) -> int:
        """1-based column of the character under the cursor."""
        return self.pos - self.line_start + 1

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_word(self, start: int, line: int, column: int) -> Token:
        """Scan a keyword or identifier: a letter, then letters or underscores."""
        while self.ch is not None and (self.ch.isalpha() or self.ch == "_"):
            self._read_char()

        word = self.source[start:self.pos]
        token_type = KEYWORDS.get(word)
        if token_type is not None:
            return self._make_token(token_type, start, line, column)
        return self._make_token(TokenType.IDENT, start, line, column, word)

    def _scan_int(self, start: int, line: int, column: int) -> Token:
        """Scan a run of decimal digits as a non-negative 64-bit integer."""
        while self.ch is not None and _is_digit(self.ch):
            self._read_char()

        digits = self.source[start:self.pos]
        # Bound the length first so huge literals never reach int()
        significant = digits.lstrip("0") or "0"
        if len(significant) > _INT_MAX_DIGITS:
            raise IntegerOverflowError(digits, line, column, self.filename)
        value = int(significant)
        if value > INT_MAX:
            raise IntegerOverflowError(digits, line, column, self.filename)
        return self._make_token(TokenType.INT, start, line, column, value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        """Move the cursor one character forward; sticks at end of input."""
        if self.ch == "\n":
            self.line += 1
            self.line_start = self.read_pos

        if self.read_pos >= len(self.source):
            self.ch = None
            self.pos = len(self.source)
        else:
            self.ch = self.source[self.read_pos]
            self.pos = self.read_pos
        self.read_pos = self.pos + 1

    def _peek(self) -> str | None:
        """Return the character after the cursor without consuming it."""
        if self.read_pos >= len(self.source):
            return None
        return self.source[self.read_pos]

    def _skip_whitespace(self) -> None:
        while self.ch is not None and self.ch.isspace():
            self._read_char()

    def _make_token(
        self,
        token_type: TokenType,
        start: int,
        line: int,
        column: int,
        value: str | int | None = None,
    ) -> Token:
        return Token(
            token_type, self.source[start:self.pos], value,
            start, line, column, self.filename,
        )
