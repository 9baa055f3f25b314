"""
Exporter package.

Re-exports the JSON helpers used by the pipeline and CLI.
"""

from __future__ import annotations

from .json_exporter import (
    build_export_dict,
    dumps,
    layout_to_dict,
    to_json_compatible,
    write_json,
)

__all__ = [
    "build_export_dict",
    "dumps",
    "layout_to_dict",
    "to_json_compatible",
    "write_json",
]
