"""CLI for Ponto.

This package provides the command-line entry point and the interactive
clock-in menu.
"""

from ponto.cli.main import cli, main

__all__ = ["cli", "main"]
