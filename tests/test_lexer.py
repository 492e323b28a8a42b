"""Tests for the lexer.

Covers token classification, line counting, the number terminator rule,
strings, comments and the lexical error cases.
"""

from __future__ import annotations

import logging

import pytest

from logo_toolchain.errors import ErrorKind, LexicalError
from logo_toolchain.lang.lexer import Lexer, tokenize
from logo_toolchain.lang.tokens import MAX_NUMBER, Token, TokenKind


def kinds(source: str, comment_symbol: str = "#") -> list[TokenKind]:
    return [t.kind for t in tokenize(source, comment_symbol)]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassification:
    def test_identifier_and_number(self) -> None:
        tokens = tokenize("FORWARD 100")
        assert tokens == [
            Token(TokenKind.IDENT, 1, "FORWARD"),
            Token(TokenKind.NUMBER, 1, number=100),
        ]

    def test_identifier_stops_at_literal(self) -> None:
        tokens = tokenize("abc;def")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENT,
            TokenKind.LITERAL,
            TokenKind.IDENT,
        ]
        assert tokens[0].text == "abc"
        assert tokens[1].text == ";"
        assert tokens[2].text == "def"

    def test_identifier_keeps_digits_and_underscores(self) -> None:
        tokens = tokenize("a1_b2")
        assert tokens == [Token(TokenKind.IDENT, 1, "a1_b2")]

    def test_every_literal_character(self) -> None:
        for ch in "!@$%^&*()[]{}:;.,<>/?+-":
            tokens = tokenize(ch)
            assert tokens == [Token(TokenKind.LITERAL, 1, ch)], ch

    def test_hash_is_a_literal_when_not_the_comment_symbol(self) -> None:
        assert kinds("#", comment_symbol=";") == [TokenKind.LITERAL]

    def test_minus_is_a_separate_literal(self) -> None:
        assert kinds("-5") == [TokenKind.LITERAL, TokenKind.NUMBER]

    def test_blanks_are_skipped(self) -> None:
        assert kinds("  \t FORWARD \t 10  ") == [TokenKind.IDENT, TokenKind.NUMBER]

    def test_carriage_return_is_blank(self) -> None:
        assert kinds("HOME\r\nPEN UP\r\n") == [
            TokenKind.IDENT,
            TokenKind.EOL,
            TokenKind.IDENT,
            TokenKind.IDENT,
            TokenKind.EOL,
        ]

    def test_empty_source_yields_only_eof(self) -> None:
        lexer = Lexer("")
        assert lexer.next_token() == Token(TokenKind.EOF, 1)


# ---------------------------------------------------------------------------
# Lines and end of file
# ---------------------------------------------------------------------------


class TestLines:
    def test_eol_carries_the_line_it_ends(self) -> None:
        tokens = tokenize("HOME\nHOME\n")
        assert [(t.kind, t.line) for t in tokens] == [
            (TokenKind.IDENT, 1),
            (TokenKind.EOL, 1),
            (TokenKind.IDENT, 2),
            (TokenKind.EOL, 2),
        ]

    def test_blank_lines_advance_the_counter(self) -> None:
        tokens = tokenize("\n\n\nHOME")
        assert tokens[-1] == Token(TokenKind.IDENT, 4, "HOME")

    def test_eof_is_returned_once(self) -> None:
        lexer = Lexer("HOME")
        assert lexer.next_token().kind is TokenKind.IDENT
        eof = lexer.next_token()
        assert eof.kind is TokenKind.EOF
        with pytest.raises(RuntimeError):
            lexer.next_token()

    def test_iteration_excludes_eof(self) -> None:
        assert all(t.kind is not TokenKind.EOF for t in Lexer("HOME\n"))

    def test_trailing_blanks_before_newline(self) -> None:
        assert kinds("FORWARD 10   \n") == [
            TokenKind.IDENT,
            TokenKind.NUMBER,
            TokenKind.EOL,
        ]


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestNumbers:
    def test_number_value(self) -> None:
        assert tokenize("0042")[0].number == 42

    def test_number_before_newline(self) -> None:
        assert kinds("10\n") == [TokenKind.NUMBER, TokenKind.EOL]

    def test_number_at_end_of_input(self) -> None:
        assert tokenize("65535") == [Token(TokenKind.NUMBER, 1, number=65535)]

    def test_number_followed_by_letter_is_an_error(self) -> None:
        with pytest.raises(LexicalError) as excinfo:
            tokenize("12a")
        assert excinfo.value.line == 1
        assert "0x61" in excinfo.value.detail

    def test_number_followed_by_literal_is_an_error(self) -> None:
        with pytest.raises(LexicalError):
            tokenize("FORWARD 10;")

    def test_largest_number(self) -> None:
        assert tokenize(str(MAX_NUMBER)) == [Token(TokenKind.NUMBER, 1, number=MAX_NUMBER)]

    def test_number_too_large(self) -> None:
        with pytest.raises(LexicalError) as excinfo:
            tokenize(f"HOME\nFORWARD {MAX_NUMBER + 1}\n")
        assert excinfo.value.line == 2
        assert "too large" in excinfo.value.detail

    def test_very_long_digit_run(self) -> None:
        with pytest.raises(LexicalError, match="too large"):
            tokenize("9" * 400)

    def test_number_error_reports_its_line(self) -> None:
        with pytest.raises(LexicalError) as excinfo:
            tokenize("HOME\nHOME\nFORWARD 3x\n")
        assert excinfo.value.line == 3


# ---------------------------------------------------------------------------
# Strings and comments
# ---------------------------------------------------------------------------


class TestStringsAndComments:
    def test_double_quoted_string(self) -> None:
        assert tokenize('"hello world"') == [Token(TokenKind.STRING, 1, "hello world")]

    def test_string_closes_on_either_quote(self) -> None:
        tokens = tokenize("'mixed\" HOME")
        assert tokens[0] == Token(TokenKind.STRING, 1, "mixed")
        assert tokens[1] == Token(TokenKind.IDENT, 1, "HOME")

    def test_multiline_string_advances_line(self) -> None:
        tokens = tokenize('"a\nb" HOME')
        assert tokens[0].kind is TokenKind.STRING
        assert tokens[0].line == 1
        assert tokens[1] == Token(TokenKind.IDENT, 2, "HOME")

    def test_unterminated_string(self) -> None:
        with pytest.raises(LexicalError) as excinfo:
            tokenize('HOME\n"never closed\nFORWARD 10\n')
        assert excinfo.value.line == 2
        assert "unterminated string" in str(excinfo.value)

    def test_comment_runs_to_end_of_line(self) -> None:
        tokens = tokenize("# draw it\nHOME")
        assert tokens[0] == Token(TokenKind.COMMENT, 1, "# draw it")
        assert tokens[1].kind is TokenKind.EOL
        assert tokens[2] == Token(TokenKind.IDENT, 2, "HOME")

    def test_comment_after_command(self) -> None:
        assert kinds("HOME # go home") == [TokenKind.IDENT, TokenKind.COMMENT]

    def test_custom_comment_symbol(self) -> None:
        tokens = tokenize("; note\nHOME", comment_symbol=";")
        assert tokens[0] == Token(TokenKind.COMMENT, 1, "; note")

    def test_comment_symbol_must_be_one_character(self) -> None:
        with pytest.raises(ValueError):
            Lexer("HOME", comment_symbol="//")


# ---------------------------------------------------------------------------
# Errors and debug output
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unknown_character(self) -> None:
        with pytest.raises(LexicalError) as excinfo:
            tokenize("HOME\n~")
        err = excinfo.value
        assert err.kind is ErrorKind.LEXICAL
        assert err.line == 2
        assert str(err) == "lexical error: unknown character 0x7e in line 2"

    def test_non_ascii_letter_is_unknown(self) -> None:
        with pytest.raises(LexicalError):
            tokenize("é")


class TestDebugLogging:
    def test_debug_logs_tokens(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="logo_toolchain.lang.lexer")
        tokenize("HOME")
        assert not caplog.records

        caplog.clear()
        list(Lexer("HOME 10", debug=True))
        messages = [r.getMessage() for r in caplog.records]
        assert "Found identifier at position 0" in messages
        assert "Found number at position 5" in messages
