"""Interpreter -- executes Logo programs against a drawing surface.

Tracks turtle state (position, heading, pen, colors) and turns every pen-down
move into one ``draw_line`` call on the surface.  Loops jump by rewriting the
program counter from a bounded :class:`~logo_toolchain.engine.walker.LoopStack`:

    REPEAT n   push(body_start), push(n)
    LOOP       n = pop() - 1
               n > 0  → start = pop(); push(start); push(n); pc = start
               n == 0 → pop()   (drop body_start, fall through)

Public API:
    interp = Interpreter(surface, config)
    state = interp.run(source)
"""

from __future__ import annotations

import logging
import math

from logo_toolchain.configs.loader import LogoConfig
from logo_toolchain.engine.commands import Command
from logo_toolchain.engine.state import TurtleState
from logo_toolchain.engine.walker import LoopStack, ProgramWalker
from logo_toolchain.lang.tokens import Program, ProgramStep
from logo_toolchain.surfaces.base import DrawingSurface, NullSurface

logger = logging.getLogger(__name__)


class Interpreter(ProgramWalker):
    """Direct-execution engine.

    Parameters
    ----------
    surface : DrawingSurface | None
        Where lines go; a :class:`NullSurface` when ``None``.
    config : LogoConfig | None
        Toolchain configuration (home position, initial colors, stack size).
    trace : bool | None
        Log each executed command.

    Attributes
    ----------
    state : TurtleState
        Turtle state; created once per interpreter and kept across runs.
    stack : LoopStack
        Loop stack, emptied at the start of every run.
    lines_drawn : int
        ``draw_line`` calls issued by the current (or last) run.
    """

    def __init__(
        self,
        surface: DrawingSurface | None = None,
        config: LogoConfig | None = None,
        trace: bool | None = None,
    ) -> None:
        super().__init__(config, trace)
        self.surface = surface if surface is not None else NullSurface()
        self.state = TurtleState.initial(self._cfg.turtle)
        self.stack = LoopStack(self._cfg.engine.stack_capacity)
        self.lines_drawn = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, source: str) -> TurtleState:
        """Lex and execute *source*.

        Returns
        -------
        TurtleState
            The turtle state after the last command.

        Raises
        ------
        LexicalError, LogoSyntaxError, StackError
            On the first error; later commands are not executed.
        """
        return self.run_program(self.build(source))

    def run_program(self, program: Program) -> TurtleState:
        """Execute an already built program."""
        self.stack.clear()
        self.lines_drawn = 0

        self._execute(program)

        logger.debug(
            "Run complete: %d commands, %d lines drawn",
            self.commands_executed,
            self.lines_drawn,
        )
        return self.state

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, command: Command, step: ProgramStep) -> None:
        if command is Command.HOME:
            self.state.home(self._cfg.turtle)
            self.surface.clear(self.state.paper)
        elif command is Command.PAPER:
            self.state.paper = self._color_param()
        elif command is Command.INK:
            self.state.ink = self._color_param()
        elif command is Command.PEN:
            self.state.pen_down = self._pen_param()
        elif command is Command.FORWARD:
            self._move(self._number_param())
        elif command is Command.BACK:
            self._move(-self._number_param())
        elif command is Command.LEFT:
            self._turn(self._number_param())
        elif command is Command.RIGHT:
            self._turn(-self._number_param())
        elif command is Command.REPEAT:
            count = self._count_param().number
            self.stack.push(self.pc, step.line)
            self.stack.push(count, step.line)
        elif command is Command.LOOP:
            self._loop(step)

    def _move(self, step: int) -> None:
        s = self.state
        dx, dy = s.displacement(step)

        if s.pen_down:
            self.surface.draw_line(s.x, s.y, s.x + dx, s.y + dy, s.ink)
            self.lines_drawn += 1

        s.x += dx
        s.y += dy

    def _turn(self, degrees: int) -> None:
        angle = self.state.angle + degrees
        if self._cfg.engine.normalize_angle:
            self.state.angle = angle % 360
        else:
            self.state.angle = int(math.fmod(angle, 360))

    def _loop(self, step: ProgramStep) -> None:
        count = self.stack.pop(step.line) - 1
        if count > 0:
            body_start = self.stack.pop(step.line)
            self.stack.push(body_start, step.line)
            self.stack.push(count, step.line)
            self.pc = body_start
        else:
            self.stack.pop(step.line)


def run_source(
    source: str,
    surface: DrawingSurface | None = None,
    config: LogoConfig | None = None,
) -> TurtleState:
    """Run *source* on a fresh :class:`Interpreter` and return its final state."""
    return Interpreter(surface, config).run(source)
