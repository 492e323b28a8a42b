"""Command-line entry points: logo-compile, logo-trace, logo-render."""
