"""
Source loading: the only I/O step in front of the parser.

Every failure is surfaced as ``SourceLoadError`` with a readable message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_lineage.core.exceptions import SourceLoadError
from gedcom_lineage.logging import get_logger

log = get_logger("file_loader")


def load_source(path: Union[str, Path]) -> str:
    """Read GEDCOM text from ``path`` (UTF-8, undecodable bytes replaced)."""
    file_path = Path(path)

    if not file_path.exists():
        raise SourceLoadError(f"Failed to load: file not found: {file_path}")
    if not file_path.is_file():
        raise SourceLoadError(f"Failed to load: not a file: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceLoadError(f"Failed to load: {exc}") from exc

    log.info("Loaded source: %s (%d chars)", file_path, len(text))
    return text
