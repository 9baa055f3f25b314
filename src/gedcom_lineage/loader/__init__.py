# src/gedcom_lineage/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_lineage.loader import (
        Token,
        GedcomSyntaxError,
        load_source,
        tokenize_line,
        tokenize_text,
    )
"""

from __future__ import annotations

from .file_loader import load_source
from .tokenizer import (
    GedcomSyntaxError,
    Token,
    iter_lines,
    tokenize_line,
    tokenize_lines,
    tokenize_text,
)

__all__ = [
    "GedcomSyntaxError",
    "Token",
    "iter_lines",
    "load_source",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_text",
]
