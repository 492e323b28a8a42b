"""Error types shared by the lexer, the program builder and both engines.

Every error is fatal: the build, compile or run that raised it is abandoned
and no partial result is returned.  Each error carries its ``kind`` and the
originating source ``line`` (``None`` when no line is known) so callers can
report it without parsing the message.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a fatal toolchain error."""

    LEXICAL = "lexical"
    SYNTAX = "syntax"
    STACK = "stack"
    EMIT = "emit"


class LogoError(Exception):
    """Base class for all toolchain errors.

    Parameters
    ----------
    kind : ErrorKind
        Error category.
    detail : str
        Human-readable description without the line suffix.
    line : int | None
        1-based source line, ``None`` when unknown.
    """

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, detail: str, line: int | None = None) -> None:
        self.detail = detail
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        msg = f"{self.kind.value} error: {self.detail}"
        if self.line is not None:
            msg += f" in line {self.line}"
        return msg


class LexicalError(LogoError):
    """Malformed number, unterminated string or unrecognised character."""

    kind = ErrorKind.LEXICAL


class LogoSyntaxError(LogoError):
    """Unknown command, bad parameter, or unexpected end of program."""

    kind = ErrorKind.SYNTAX


class StackError(LogoError):
    """Auxiliary loop stack overflow or underflow."""

    kind = ErrorKind.STACK


class EmitError(LogoError):
    """The compiler's output sink rejected a write."""

    kind = ErrorKind.EMIT
