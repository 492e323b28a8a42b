"""Compiler -- Logo programs to host script statements.

The compiler walks the program exactly like the interpreter but, instead of
moving a turtle, writes one JavaScript statement per command.  The emitted
text assumes a host page (see :mod:`logo_toolchain.host.page`) that defines
``home``, ``forward``, ``back``, ``left``, ``right`` and the mutable
``paper``, ``ink`` and ``pendown`` bindings.

Loops:
    ``REPEAT n`` opens a ``for`` block with a fresh counter variable
    (``v1``, ``v2``, ...), ``LOOP`` closes it.  Counter numbering restarts on
    every compile, so identical input always yields identical text.
    Block balance is left to the host's parser.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import TextIO

from logo_toolchain.configs.loader import LogoConfig
from logo_toolchain.engine.commands import Command
from logo_toolchain.engine.walker import ProgramWalker
from logo_toolchain.errors import EmitError
from logo_toolchain.lang.tokens import Program, ProgramStep

logger = logging.getLogger(__name__)


class Compiler(ProgramWalker):
    """Emit host script statements for a Logo program.

    Parameters
    ----------
    config : LogoConfig | None
        Toolchain configuration.
    trace : bool | None
        Log each compiled command.

    Attributes
    ----------
    statements : int
        Statements emitted by the current (or last) compile.
    """

    def __init__(self, config: LogoConfig | None = None, trace: bool | None = None) -> None:
        super().__init__(config, trace)
        self._sink: TextIO = StringIO()
        self._vidx = 0
        self.statements = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, source: str) -> str:
        """Compile *source* and return the emitted statements.

        Raises
        ------
        LexicalError, LogoSyntaxError
            On malformed input; nothing is returned.
        """
        buf = StringIO()
        self.compile_to(source, buf)
        return buf.getvalue()

    def compile_to(self, source: str, sink: TextIO) -> int:
        """Compile *source*, appending statements to *sink*.

        Returns
        -------
        int
            Number of statements written.

        Raises
        ------
        EmitError
            If *sink* rejects a write.
        """
        return self.compile_program(self.build(source), sink)

    def compile_program(self, program: Program, sink: TextIO) -> int:
        """Compile an already built program into *sink*."""
        self._sink = sink
        self._vidx = 0
        self.statements = 0

        self._execute(program)

        logger.debug(
            "Compiled %d commands into %d statements",
            self.commands_executed,
            self.statements,
        )
        return self.statements

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, command: Command, step: ProgramStep) -> None:
        if command is Command.HOME:
            self._emit("home();")
        elif command is Command.PAPER:
            self._emit(f"paper = '{self._color_param().css}';")
        elif command is Command.INK:
            self._emit(f"ink = '{self._color_param().css}';")
        elif command is Command.PEN:
            self._emit(f"pendown = {'true' if self._pen_param() else 'false'};")
        elif command is Command.FORWARD:
            self._emit(f"forward({self._number_param()});")
        elif command is Command.BACK:
            self._emit(f"back({self._number_param()});")
        elif command is Command.LEFT:
            self._emit(f"left({self._number_param()});")
        elif command is Command.RIGHT:
            self._emit(f"right({self._number_param()});")
        elif command is Command.REPEAT:
            count = self._count_param().number
            v = self._next_var()
            self._emit(f"for (let {v} = 0; {v} < {count}; ++{v}) {{")
        elif command is Command.LOOP:
            self._emit("}")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _next_var(self) -> str:
        self._vidx += 1
        return f"v{self._vidx}"

    def _emit(self, statement: str) -> None:
        try:
            self._sink.write(statement + "\n")
        except (OSError, ValueError) as exc:
            line = self.program[self.pc - 1].line if self.pc else None
            raise EmitError(f"cannot write output: {exc}", line) from exc
        self.statements += 1


def compile_source(source: str, config: LogoConfig | None = None) -> str:
    """Compile *source* with a fresh :class:`Compiler`."""
    return Compiler(config).compile(source)
