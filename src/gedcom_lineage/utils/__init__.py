# src/gedcom_lineage/utils/__init__.py

from .pathing import (
    mock_file_path,
    project_root,
    resolve_project_path,
)
from .search import (
    SearchMatch,
    format_life_dates,
    matches_search,
    normalize_for_search,
    search_individuals,
)

__all__ = [
    "SearchMatch",
    "format_life_dates",
    "matches_search",
    "mock_file_path",
    "normalize_for_search",
    "project_root",
    "resolve_project_path",
    "search_individuals",
]
