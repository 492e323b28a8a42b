"""Tests for the HTML host page."""

from __future__ import annotations

from logo_toolchain.colors import Color
from logo_toolchain.configs.loader import CanvasConfig, LogoConfig, TurtleConfig
from logo_toolchain.engine.compiler import compile_source
from logo_toolchain.host.page import CODE_MARKER, render_page


class TestRenderPage:
    def test_embeds_compiled_code(self, square_source: str) -> None:
        page = render_page(compile_source(square_source))
        assert CODE_MARKER not in page
        assert "        for (let v1 = 0; v1 < 4; ++v1) {\n" in page
        assert "        forward(100);\n" in page
        assert page.rstrip().endswith("</html>")

    def test_defines_every_called_function(self) -> None:
        page = render_page("")
        for name in ("home", "forward", "back", "left", "right", "clear"):
            assert f"const {name} = " in page
        for binding in ("paper", "ink", "pendown"):
            assert f"var {binding} = " in page

    def test_home_lifts_the_pen(self) -> None:
        page = render_page("")
        home = page[page.index("const home = "):]
        home = home[:home.index("}\n")]
        assert "pendown = false;" in home

    def test_uses_configured_canvas_and_colors(self) -> None:
        cfg = LogoConfig(
            canvas=CanvasConfig(width_px=200, height_px=100),
            turtle=TurtleConfig(home_x=50, home_y=60, paper=Color.WHITE, ink=Color.BLUE),
        )
        page = render_page("", cfg, title="Demo")
        assert '<canvas width="200" height="100"' in page
        assert "width: 200px;" in page
        assert "var paper = 'white';" in page
        assert "var ink = 'blue';" in page
        assert "head = {x: 50, y: 60, angle: 0};" in page
        assert "<title>Demo</title>" in page

    def test_default_title(self) -> None:
        assert "<title>Logo</title>" in render_page("")

    def test_compiled_code_runs_after_initial_clear(self) -> None:
        page = render_page("home();\n")
        assert page.index("\n        clear();\n\n") < page.index("\n        home();\n")
