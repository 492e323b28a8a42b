"""
Execution engines.

Both engines walk the same program with an explicit program counter:
    Compiler: emits host script statements
    Interpreter: moves a turtle and draws on a surface
"""

from logo_toolchain.engine.commands import PEN_STATES, Command
from logo_toolchain.engine.walker import LoopStack, ProgramWalker
from logo_toolchain.engine.state import TurtleState
from logo_toolchain.engine.compiler import Compiler, compile_source
from logo_toolchain.engine.interpreter import Interpreter, run_source

__all__ = [
    "Command",
    "Compiler",
    "Interpreter",
    "LoopStack",
    "PEN_STATES",
    "ProgramWalker",
    "TurtleState",
    "compile_source",
    "run_source",
]
