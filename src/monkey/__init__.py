"""Monkey — lexer and token REPL for a small C-like scripting language."""

__version__ = "0.1.0"
