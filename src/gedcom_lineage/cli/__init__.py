
"""
CLI package for gedcom_lineage.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_lineage.cli.app import app, main

__all__ = [
    "app",
    "main",
]
