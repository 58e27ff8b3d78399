"""
CLI package for gedcom_reader.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_reader.cli.app import app, main

__all__ = [
    "app",
    "main",
]
