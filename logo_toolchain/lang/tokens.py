"""Token and program-step vocabulary.

The lexer produces :class:`Token` values; the program builder keeps only
identifier and number tokens and turns them into :class:`ProgramStep`
values.  Both are immutable, slotted dataclasses.

Program
-------
A *Program* is the flat, indexable tuple of steps an engine walks with its
program counter.  It is never modified after it has been built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Token kinds
# ---------------------------------------------------------------------------


class TokenKind(Enum):
    """Closed set of token classes produced by the lexer."""

    EOF = "end of file"
    LITERAL = "literal"
    IDENT = "identifier"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    EOL = "end of line"

    def __str__(self) -> str:
        return self.value


#: Single characters that lex as ``TokenKind.LITERAL``.
LITERALS = frozenset("!@#$%^&*()[]{}:;.,<>/?+-")

#: Characters that open and close a quoted string.
QUOTES = frozenset("\"'")

#: Largest value a ``NUMBER`` token may carry (signed 32-bit maximum).
MAX_NUMBER = 2**31 - 1

# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Token:
    """One lexer step.

    Parameters
    ----------
    kind : TokenKind
        Token class.
    line : int
        1-based source line the token starts on.
    text : str
        Identifier, string or comment text; the character for literals.
    number : int
        Value of a ``NUMBER`` token, 0 otherwise.
    """

    kind: TokenKind
    line: int
    text: str = ""
    number: int = 0


@dataclass(frozen=True, slots=True)
class ProgramStep:
    """One retained instruction: an identifier or an unsigned integer."""

    kind: TokenKind
    line: int
    text: str = ""
    number: int = 0

    def __post_init__(self) -> None:
        if self.kind not in (TokenKind.IDENT, TokenKind.NUMBER):
            raise ValueError(
                f"program steps hold identifiers or numbers, got {self.kind}"
            )

    @classmethod
    def from_token(cls, token: Token) -> ProgramStep:
        return cls(kind=token.kind, line=token.line, text=token.text, number=token.number)


Program = tuple[ProgramStep, ...]
"""Immutable instruction sequence walked by the engines."""
