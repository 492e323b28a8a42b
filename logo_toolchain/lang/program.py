"""Program builder -- the front-end pass shared by both engines.

Drives the :class:`~logo_toolchain.lang.lexer.Lexer` to end of input and
keeps identifier and number tokens as program steps.  Literal, string,
comment and end-of-line tokens carry no instruction meaning and are
dropped.  A lexical error aborts the build; no partial program is ever
returned.
"""

from __future__ import annotations

import logging

from logo_toolchain.lang.lexer import Lexer
from logo_toolchain.lang.tokens import Program, ProgramStep, TokenKind

logger = logging.getLogger(__name__)

_KEPT = (TokenKind.IDENT, TokenKind.NUMBER)


def build_program(source: str, comment_symbol: str = "#", debug: bool = False) -> Program:
    """Lex *source* and return its immutable instruction sequence.

    Parameters
    ----------
    source : str
        Complete program text.
    comment_symbol : str
        Comment introducer passed to the lexer.
    debug : bool
        Enable lexer token logging.

    Returns
    -------
    Program
        Tuple of identifier and number steps in source order.

    Raises
    ------
    LexicalError
        Propagated from the lexer.
    """
    lexer = Lexer(source, comment_symbol=comment_symbol, debug=debug)
    steps = [ProgramStep.from_token(token) for token in lexer if token.kind in _KEPT]
    logger.debug("Built program of %d steps from %d lines", len(steps), lexer.line)
    return tuple(steps)
