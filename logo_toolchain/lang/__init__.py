"""
Language front end.

Lexer, token vocabulary, and the program builder that turns source text into
the flat instruction sequence both engines execute.
"""

from logo_toolchain.lang.lexer import Lexer, tokenize
from logo_toolchain.lang.program import build_program
from logo_toolchain.lang.tokens import (
    LITERALS,
    MAX_NUMBER,
    Program,
    ProgramStep,
    Token,
    TokenKind,
)

__all__ = [
    "LITERALS",
    "Lexer",
    "MAX_NUMBER",
    "Program",
    "ProgramStep",
    "Token",
    "TokenKind",
    "build_program",
    "tokenize",
]
