"""Tests for the compiler.

Checks the exact statement text per command, loop variable numbering and
the error behaviour shared with the interpreter.
"""

from __future__ import annotations

import io

import pytest

from logo_toolchain.engine.compiler import Compiler, compile_source
from logo_toolchain.errors import EmitError, LexicalError, LogoSyntaxError


@pytest.fixture()
def compiler() -> Compiler:
    return Compiler()


# ---------------------------------------------------------------------------
# Statement text
# ---------------------------------------------------------------------------


class TestStatements:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("HOME", "home();\n"),
            ("PAPER blue", "paper = 'blue';\n"),
            ("INK GRAY", "ink = 'gray';\n"),
            ("PEN DOWN", "pendown = true;\n"),
            ("PEN up", "pendown = false;\n"),
            ("FORWARD 50", "forward(50);\n"),
            ("BACK 7", "back(7);\n"),
            ("LEFT 90", "left(90);\n"),
            ("RIGHT 45", "right(45);\n"),
            ("LOOP", "}\n"),
        ],
    )
    def test_single_command(self, compiler: Compiler, source: str, expected: str) -> None:
        assert compiler.compile(source) == expected

    def test_home_then_forward(self, compiler: Compiler) -> None:
        assert compiler.compile("HOME\nFORWARD 50") == "home();\nforward(50);\n"

    def test_empty_program(self, compiler: Compiler) -> None:
        assert compiler.compile("# nothing\n") == ""
        assert compiler.statements == 0

    def test_square(self, compiler: Compiler, square_source: str) -> None:
        assert compiler.compile(square_source) == (
            "home();\n"
            "pendown = true;\n"
            "for (let v1 = 0; v1 < 4; ++v1) {\n"
            "forward(100);\n"
            "right(90);\n"
            "}\n"
        )
        assert compiler.statements == 6


# ---------------------------------------------------------------------------
# Loops
# ---------------------------------------------------------------------------


class TestLoops:
    def test_loop_variables_are_numbered_in_order(self, compiler: Compiler) -> None:
        out = compiler.compile("REPEAT 2 REPEAT 3 LOOP LOOP REPEAT 4 LOOP")
        assert out.splitlines() == [
            "for (let v1 = 0; v1 < 2; ++v1) {",
            "for (let v2 = 0; v2 < 3; ++v2) {",
            "}",
            "}",
            "for (let v3 = 0; v3 < 4; ++v3) {",
            "}",
        ]

    def test_numbering_restarts_per_compile(self, compiler: Compiler) -> None:
        first = compiler.compile("REPEAT 2 LOOP")
        second = compiler.compile("REPEAT 2 LOOP")
        assert first == second

    def test_body_is_emitted_once(self, compiler: Compiler) -> None:
        out = compiler.compile("REPEAT 100 FORWARD 1 LOOP")
        assert out.count("forward(1);") == 1
        assert compiler.commands_executed == 3

    def test_unbalanced_loops_compile(self, compiler: Compiler) -> None:
        assert compiler.compile("REPEAT 2 FORWARD 1") == (
            "for (let v1 = 0; v1 < 2; ++v1) {\nforward(1);\n"
        )

    def test_repeat_count_range(self, compiler: Compiler) -> None:
        with pytest.raises(LogoSyntaxError, match="out of range"):
            compiler.compile("REPEAT 0 LOOP")
        with pytest.raises(LogoSyntaxError, match="out of range"):
            compiler.compile("REPEAT 65536 LOOP")

    def test_repeat_at_maximum(self, compiler: Compiler) -> None:
        assert compiler.compile("REPEAT 65535\nFORWARD 1\nLOOP") == (
            "for (let v1 = 0; v1 < 65535; ++v1) {\nforward(1);\n}\n"
        )


# ---------------------------------------------------------------------------
# Errors and sinks
# ---------------------------------------------------------------------------


class _ClosedSink(io.StringIO):
    def write(self, s: str) -> int:
        raise OSError("disk full")


class TestErrors:
    def test_unknown_keyword(self, compiler: Compiler) -> None:
        with pytest.raises(LogoSyntaxError) as excinfo:
            compiler.compile("HOME\nFLY 3")
        assert excinfo.value.line == 2

    def test_bad_color(self, compiler: Compiler) -> None:
        with pytest.raises(LogoSyntaxError, match="unrecognized color"):
            compiler.compile("PAPER purple")

    def test_missing_parameter(self, compiler: Compiler) -> None:
        with pytest.raises(LogoSyntaxError, match="unexpected end of program"):
            compiler.compile("LEFT")

    def test_lexical_error(self, compiler: Compiler) -> None:
        with pytest.raises(LexicalError):
            compiler.compile("FORWARD 1x")

    def test_oversized_number(self, compiler: Compiler) -> None:
        with pytest.raises(LexicalError, match="too large"):
            compiler.compile("LEFT " + "9" * 400)

    def test_color_error_reports_line(self, compiler: Compiler) -> None:
        with pytest.raises(LogoSyntaxError) as excinfo:
            compiler.compile("HOME\nPAPER PURPLE")
        assert excinfo.value.line == 2

    def test_pen_error_reports_line(self, compiler: Compiler) -> None:
        with pytest.raises(LogoSyntaxError) as excinfo:
            compiler.compile("HOME\n\nPEN SIDEWAYS")
        assert excinfo.value.line == 3

    def test_sink_failure_is_emit_error(self, compiler: Compiler) -> None:
        with pytest.raises(EmitError) as excinfo:
            compiler.compile_to("HOME\nFORWARD 1", _ClosedSink())
        assert excinfo.value.line == 1
        assert "disk full" in excinfo.value.detail

    def test_compile_to_appends(self, compiler: Compiler) -> None:
        sink = io.StringIO("// header\n")
        sink.seek(0, io.SEEK_END)
        count = compiler.compile_to("HOME", sink)
        assert count == 1
        assert sink.getvalue() == "// header\nhome();\n"


def test_compile_source() -> None:
    assert compile_source("PEN DOWN") == "pendown = true;\n"
