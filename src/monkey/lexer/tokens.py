"""Token types and Token dataclass for the Monkey lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the Monkey lexer can produce."""

    # Structure
    ASSIGN = auto()         # =
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Arithmetic
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()

    # Comparison
    LT = auto()
    GT = auto()
    BANG = auto()
    LTE = auto()            # <=
    GTE = auto()            # >=
    EQ = auto()             # ==
    NOT_EQ = auto()         # !=

    # Literals
    IDENT = auto()
    INT = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()

    # Special
    ILLEGAL = auto()
    EOF = auto()


# Map keyword strings to token types
KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

# Characters that always stand alone as a token
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
}

# Characters that form a two-character token when followed by "="
# (one-character type, two-character type)
EQUALS_PAIRS: dict[str, tuple[TokenType, TokenType]] = {
    "<": (TokenType.LT, TokenType.LTE),
    ">": (TokenType.GT, TokenType.GTE),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
    "=": (TokenType.ASSIGN, TokenType.EQ),
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    ``literal`` is the exact source text the token covers (empty for EOF).
    ``value`` is the decoded payload: the identifier name for IDENT, the
    integer for INT, and None for everything else.

    ``position`` is the absolute character offset of the token in the
    source it was scanned from; ``literal`` is always
    ``source[position:end]``.
    """

    type: TokenType
    literal: str
    value: str | int | None
    position: int
    line: int
    column: int
    file: str = "<unknown>"

    @property
    def end(self) -> int:
        return self.position + len(self.literal)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
