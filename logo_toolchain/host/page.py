"""HTML host page for compiled Logo programs.

The compiler's statements call ``home``, ``forward``, ``back``, ``left`` and
``right`` and assign ``paper``, ``ink`` and ``pendown``.  This module
provides a self-contained HTML document defining all of them on a
``<canvas>`` and substitutes the compiled text at the
``// {{compiled-code}}`` marker.

``home()`` here resets position, heading *and* pen, matching the
interpreter's ``HOME``.
"""

from __future__ import annotations

from string import Template

from logo_toolchain.configs.loader import LogoConfig

CODE_MARKER = "// {{compiled-code}}"

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$title</title>
    <style>
    canvas {
        padding-left: 0;
        padding-right: 0;
        margin-left: auto;
        margin-right: auto;
        display: block;
        width: ${width}px;
    }
    </style>
</head>
<body>
    <canvas width="$width" height="$height" id="canvas"></canvas>
    <script>
        const canvas = document.getElementById('canvas');
        const ctx = canvas.getContext("2d");
        // crisp one-pixel lines
        ctx.translate(0.5, 0.5);

        var paper = '$paper';
        var ink = '$ink';
        var head = {x: $home_x, y: $home_y, angle: 0};
        var pendown = false;

        const clear = () => {
            ctx.fillStyle = paper;
            ctx.fillRect(0, 0, canvas.width, canvas.height);
        }

        const home = () => {
            head = {x: $home_x, y: $home_y, angle: 0};
            pendown = false;
            clear();
        }

        const drawLine = (x1, y1, x2, y2) => {
            ctx.strokeStyle = ink;
            ctx.beginPath();
            ctx.moveTo(x1, y1);
            ctx.lineTo(x2, y2);
            ctx.stroke();
        }

        const degToRad = (deg) => deg * (Math.PI / 180);

        const calcOffset = (step) => {
            const dx = Math.round(step * Math.cos(degToRad(head.angle)));
            const dy = Math.round(step * Math.sin(degToRad(head.angle)));
            return {dx: dx, dy: dy};
        }

        const forward = (step) => {
            const {dx, dy} = calcOffset(step);
            if (pendown) {
                drawLine(head.x, head.y, head.x + dx, head.y + dy);
            }
            head.x += dx;
            head.y += dy;
        }

        const back = (step) => forward(-step);

        const turn = (value) => {
            head.angle = (((head.angle + value) % 360) + 360) % 360;
        }

        const left = (value) => turn(value);

        const right = (value) => turn(-value);

        clear();

$marker
    </script>
</body>
</html>
""")


def _indent(code: str, prefix: str = "        ") -> str:
    return "".join(prefix + line if line.strip() else line for line in code.splitlines(True))


def render_page(compiled: str, config: LogoConfig | None = None, title: str = "Logo") -> str:
    """Embed *compiled* statements into a complete HTML document.

    Parameters
    ----------
    compiled : str
        Output of :meth:`Compiler.compile`.
    config : LogoConfig | None
        Supplies canvas size, home position and initial colors.
    title : str
        Document title.

    Returns
    -------
    str
        The HTML page.
    """
    cfg = config if config is not None else LogoConfig()
    shell = PAGE_TEMPLATE.substitute(
        title=title,
        width=cfg.canvas.width_px,
        height=cfg.canvas.height_px,
        home_x=cfg.turtle.home_x,
        home_y=cfg.turtle.home_y,
        paper=cfg.turtle.paper.css,
        ink=cfg.turtle.ink.css,
        marker="        " + CODE_MARKER,
    )
    return shell.replace("        " + CODE_MARKER, _indent(compiled.rstrip("\n")))
