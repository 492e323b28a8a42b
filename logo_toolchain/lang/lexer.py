"""Lexer -- source text to a stream of classified tokens.

Classification order for each step, after skipping blanks:

    end of line  → ``EOL`` (advances the line counter)
    end of input → ``EOF`` (returned exactly once)
    comment char → ``COMMENT`` up to, not including, the newline
    literal char → ``LITERAL``
    quote        → ``STRING`` up to the next quote of either kind
    digit        → ``NUMBER``, must be followed by a blank, newline or EOF
                   and must not exceed ``MAX_NUMBER``
    letter       → ``IDENT`` up to a blank, literal, newline or EOF

Anything else is a :class:`~logo_toolchain.errors.LexicalError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from logo_toolchain.errors import LexicalError
from logo_toolchain.lang.tokens import LITERALS, MAX_NUMBER, QUOTES, Token, TokenKind

logger = logging.getLogger(__name__)

# Carriage returns are blanks so CRLF sources lex like LF sources
_BLANKS = frozenset(" \t\r")


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


class Lexer:
    """Incremental lexer over an in-memory source buffer.

    Parameters
    ----------
    source : str
        Complete program text.
    comment_symbol : str
        Single character that starts a comment, default ``"#"``.
    debug : bool
        Log every classified token at DEBUG level.

    Attributes
    ----------
    position : int
        Index of the next unread character.
    line : int
        1-based current line.
    """

    def __init__(self, source: str, comment_symbol: str = "#", debug: bool = False) -> None:
        if len(comment_symbol) != 1:
            raise ValueError(
                f"comment_symbol must be a single character, got {comment_symbol!r}"
            )
        self.source = source
        self.comment_symbol = comment_symbol
        self.debug = debug
        self.position = 0
        self.line = 1
        self._done = False

    # ------------------------------------------------------------------
    # Character classes at the current position
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        return "" if self._at_eof() else self.source[self.position]

    def _at_eof(self) -> bool:
        return self.position >= len(self.source)

    def _at_blank(self) -> bool:
        return self._peek() in _BLANKS

    def _at_eol(self) -> bool:
        return self._peek() == "\n"

    def _at_literal(self) -> bool:
        return self._peek() in LITERALS

    def _at_quote(self) -> bool:
        return self._peek() in QUOTES

    def _at_digit(self) -> bool:
        return "0" <= self._peek() <= "9"

    def _dbg(self, msg: str, *args: object) -> None:
        if self.debug:
            logger.debug(msg, *args)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Classify and consume the next token.

        Returns
        -------
        Token
            The next token.  ``EOF`` is returned once; asking again after
            that is a caller error.

        Raises
        ------
        LexicalError
            On a malformed or oversized number, an unterminated string
            or an unrecognised character.
        RuntimeError
            If called again after ``EOF`` was returned.
        """
        if self._done:
            raise RuntimeError("next_token() called after end of file")

        while self._at_blank():
            self.position += 1

        if self._at_eol():
            self._dbg("End of line at position %d", self.position)
            token = Token(TokenKind.EOL, self.line, "\n")
            self.position += 1
            self.line += 1
            return token

        if self._at_eof():
            self._done = True
            return Token(TokenKind.EOF, self.line)

        ch = self._peek()
        start = self.position

        if ch == self.comment_symbol:
            self._dbg("Found comment at position %d", start)
            while not self._at_eof() and not self._at_eol():
                self.position += 1
            return Token(TokenKind.COMMENT, self.line, self.source[start:self.position])

        if self._at_literal():
            self._dbg("Literal 0x%02x at position %d", ord(ch), start)
            self.position += 1
            return Token(TokenKind.LITERAL, self.line, ch)

        if self._at_quote():
            return self._lex_string()

        if self._at_digit():
            return self._lex_number()

        if _is_alpha(ch):
            self._dbg("Found identifier at position %d", start)
            while not (self._at_blank() or self._at_literal() or self._at_eol() or self._at_eof()):
                self.position += 1
            return Token(TokenKind.IDENT, self.line, self.source[start:self.position])

        raise LexicalError(f"unknown character 0x{ord(ch):02x}", self.line)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, not including, ``EOF``."""
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token

    # ------------------------------------------------------------------
    # Multi-character tokens
    # ------------------------------------------------------------------

    def _lex_string(self) -> Token:
        self._dbg("Found string literal at position %d", self.position)
        opened_on = self.line
        self.position += 1
        start = self.position
        while not self._at_eof() and not self._at_quote():
            if self._at_eol():
                self.line += 1
            self.position += 1
        if self._at_eof():
            raise LexicalError("unterminated string", opened_on)
        text = self.source[start:self.position]
        self.position += 1
        return Token(TokenKind.STRING, opened_on, text)

    def _lex_number(self) -> Token:
        self._dbg("Found number at position %d", self.position)
        number = 0
        while self._at_digit():
            number = number * 10 + (ord(self._peek()) - ord("0"))
            self.position += 1
        if not (self._at_blank() or self._at_eol() or self._at_eof()):
            raise LexicalError(
                f"unexpected character 0x{ord(self._peek()):02x} after number", self.line
            )
        if number > MAX_NUMBER:
            raise LexicalError(f"number too large (maximum {MAX_NUMBER})", self.line)
        return Token(TokenKind.NUMBER, self.line, number=number)


def tokenize(source: str, comment_symbol: str = "#") -> list[Token]:
    """Lex *source* completely and return every token except ``EOF``."""
    return list(Lexer(source, comment_symbol=comment_symbol))
