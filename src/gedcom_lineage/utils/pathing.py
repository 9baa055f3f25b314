"""
Project-relative paths: config, logs and the sample files in mock_files/.

This module sits at <root>/src/gedcom_lineage/utils/pathing.py, so the
project root is three parents up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    return _PROJECT_ROOT


def resolve_project_path(relative: PathLike) -> Path:
    """Absolute paths come back unchanged; relative ones hang off the project root."""
    path = Path(relative)
    return path if path.is_absolute() else _PROJECT_ROOT / path


def mock_file_path(filename: PathLike) -> Path:
    return resolve_project_path(Path("mock_files") / filename)
