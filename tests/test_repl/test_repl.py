"""Tests for the interactive token REPL."""

import io

from monkey.repl import PROMPT, repl


def run_repl(inp: str) -> tuple[int, str]:
    stdout = io.StringIO()
    code = repl(io.StringIO(inp), stdout)
    return code, stdout.getvalue()


class TestRepl:
    def test_exits_cleanly_on_end_of_input(self):
        code, out = run_repl("")
        assert code == 0
        assert out == PROMPT + "\n"

    def test_prints_tokens_for_line(self):
        code, out = run_repl("let x = 1;\n")
        assert code == 0
        lines = out.split("\n")
        assert lines[:6] == [
            PROMPT + "Token(LET, 1:1)",
            "Token(IDENT, 'x', 1:5)",
            "Token(ASSIGN, 1:7)",
            "Token(INT, 1, 1:9)",
            "Token(SEMICOLON, 1:10)",
            "Token(EOF, 2:1)",
        ]

    def test_stops_after_exactly_one_eof_per_line(self):
        _, out = run_repl("a\nb\n")
        assert out.count("Token(EOF") == 2
        assert out.count(PROMPT) == 3

    def test_fresh_lexer_per_line(self):
        _, out = run_repl("a\nb\n")
        # Every line starts back at line 1
        assert "Token(IDENT, 'a', 1:1)" in out
        assert "Token(IDENT, 'b', 1:1)" in out

    def test_last_line_without_newline(self):
        _, out = run_repl("5")
        assert "Token(INT, 5, 1:1)" in out
        assert "Token(EOF, 1:2)" in out

    def test_illegal_tokens_are_printed(self):
        _, out = run_repl("@\n")
        assert "Token(ILLEGAL, 1:1)" in out

    def test_overflow_reported_and_loop_continues(self):
        code, out = run_repl("99999999999999999999\nok\n")
        assert code == 0
        assert "Lexer error: <stdin>:1:1:" in out
        assert "Token(IDENT, 'ok', 1:1)" in out

    def test_undecodable_line_reported_and_loop_continues(self):
        class BadThenGood:
            def __init__(self):
                self.lines = [None, "x\n"]

            def readline(self):
                if not self.lines:
                    return ""
                line = self.lines.pop(0)
                if line is None:
                    raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
                return line

        stdout = io.StringIO()
        assert repl(BadThenGood(), stdout) == 0
        out = stdout.getvalue()
        assert "Lexer error: <stdin>: cannot decode input:" in out
        assert "Token(IDENT, 'x', 1:1)" in out
