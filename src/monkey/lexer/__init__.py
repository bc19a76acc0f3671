"""Monkey lexer — pull-based scanner producing one token per call."""

from monkey.lexer.tokens import KEYWORDS, Token, TokenType
from monkey.lexer.lexer import IntegerOverflowError, Lexer, LexerError

__all__ = ["KEYWORDS", "Token", "TokenType", "Lexer", "LexerError", "IntegerOverflowError"]
