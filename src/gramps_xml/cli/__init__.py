"""
CLI package for gramps_xml.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gramps_xml.cli.app import app, main

__all__ = [
    "app",
    "main",
]
