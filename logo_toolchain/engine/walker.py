"""Program walker -- the dispatch loop both engines share.

A walker reads the program one step at a time through an explicit program
counter.  Each dispatched command consumes its own parameters with
:meth:`ProgramWalker._param`, so after a handler returns ``pc`` already
points at the next command.  Subclasses supply :meth:`_dispatch`, which
decides what a command *does* (emit text or change turtle state).

Parameter fetch rules:
    - Reading past the last step is an "unexpected end of program".
    - A step of the wrong kind is a syntax error naming both kinds.
    - A number outside ``-MAX_NUMBER..MAX_NUMBER`` is a syntax error, also
      for programs built without the lexer.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from logo_toolchain.colors import Color
from logo_toolchain.configs.loader import LogoConfig
from logo_toolchain.engine.commands import PEN_STATES, Command
from logo_toolchain.errors import LogoSyntaxError, StackError
from logo_toolchain.lang.program import build_program
from logo_toolchain.lang.tokens import MAX_NUMBER, Program, ProgramStep, TokenKind

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Loop stack
# ---------------------------------------------------------------------------


class LoopStack:
    """Fixed-capacity integer stack used by ``REPEAT``/``LOOP``.

    Each active loop occupies two slots: the body start address, then the
    remaining count on top.

    Parameters
    ----------
    capacity : int
        Maximum number of slots.
    """

    def __init__(self, capacity: int = 256) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self.capacity = capacity
        self._slots = [0] * capacity
        self._sp = 0

    def __len__(self) -> int:
        return self._sp

    def push(self, value: int, line: int | None = None) -> None:
        if self._sp == self.capacity:
            raise StackError("stack overflow", line)
        self._slots[self._sp] = value
        self._sp += 1

    def pop(self, line: int | None = None) -> int:
        if self._sp == 0:
            raise StackError("stack empty", line)
        self._sp -= 1
        return self._slots[self._sp]

    def clear(self) -> None:
        self._sp = 0


# ---------------------------------------------------------------------------
# Walker
# ---------------------------------------------------------------------------


class ProgramWalker(ABC):
    """Base class for the compiler and interpreter engines.

    Parameters
    ----------
    config : LogoConfig | None
        Toolchain configuration; built-in defaults when ``None``.
    trace : bool | None
        Log every dispatched command.  ``None`` takes ``engine.trace``
        from the configuration.

    Attributes
    ----------
    program : Program
        Instruction sequence of the current (or last) run.
    pc : int
        Index of the next step to read; ``pc == len(program)`` is the end.
    commands_executed : int
        Commands dispatched during the current (or last) run.
    """

    def __init__(self, config: LogoConfig | None = None, trace: bool | None = None) -> None:
        self._cfg = config if config is not None else LogoConfig()
        self.trace = self._cfg.engine.trace if trace is None else trace
        self.program: Program = ()
        self.pc = 0
        self.commands_executed = 0

    # ------------------------------------------------------------------
    # Front end
    # ------------------------------------------------------------------

    def build(self, source: str) -> Program:
        """Lex *source* with the configured lexer settings."""
        return build_program(
            source,
            comment_symbol=self._cfg.lexer.comment_symbol,
            debug=self._cfg.lexer.debug,
        )

    # ------------------------------------------------------------------
    # Dispatch loop
    # ------------------------------------------------------------------

    def _execute(self, program: Program) -> None:
        """Dispatch every command of *program* in order."""
        self.program = tuple(program)
        self.pc = 0
        self.commands_executed = 0

        while not self._at_end():
            step = self._next()
            if step.kind is not TokenKind.IDENT:
                raise LogoSyntaxError(f"unexpected token {step.kind}", step.line)

            command = Command.lookup(step.text)
            if command is None:
                raise LogoSyntaxError(f"unknown keyword {step.text!r}", step.line)

            if self.trace:
                logger.info("TRACE: %s", command.value)
            self._dispatch(command, step)
            self.commands_executed += 1

    @abstractmethod
    def _dispatch(self, command: Command, step: ProgramStep) -> None:
        """Carry out *command*; *step* is the command's own program step."""

    # ------------------------------------------------------------------
    # Parameter fetch
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self.pc == len(self.program)

    def _next(self) -> ProgramStep:
        if self._at_end():
            line = self.program[-1].line if self.program else None
            raise LogoSyntaxError("unexpected end of program", line)
        step = self.program[self.pc]
        self.pc += 1
        return step

    def _param(self, expected: TokenKind) -> ProgramStep:
        param = self._next()
        if param.kind is not expected:
            raise LogoSyntaxError(
                f"invalid parameter type, expected {expected} got {param.kind}",
                param.line,
            )
        return param

    def _number_param(self) -> int:
        param = self._param(TokenKind.NUMBER)
        if abs(param.number) > MAX_NUMBER:
            raise LogoSyntaxError(f"number {param.number} is out of range", param.line)
        return param.number

    def _color_param(self) -> Color:
        param = self._param(TokenKind.IDENT)
        color = Color.from_name(param.text)
        if color is None:
            raise LogoSyntaxError(f"unrecognized color {param.text!r}", param.line)
        return color

    def _pen_param(self) -> bool:
        param = self._param(TokenKind.IDENT)
        value = param.text.upper()
        if value not in PEN_STATES:
            raise LogoSyntaxError(f"invalid pen state {param.text!r}", param.line)
        return PEN_STATES[value]

    def _count_param(self) -> ProgramStep:
        """Fetch a ``REPEAT`` count; it must lie in ``1..max_repeat``."""
        param = self._param(TokenKind.NUMBER)
        if not 0 < param.number <= self._cfg.engine.max_repeat:
            raise LogoSyntaxError(
                f"repeat count {param.number} is out of range "
                f"1..{self._cfg.engine.max_repeat}",
                param.line,
            )
        return param
