"""HTML presentation wrapper for compiled programs."""

from logo_toolchain.host.page import CODE_MARKER, render_page

__all__ = ["CODE_MARKER", "render_page"]
