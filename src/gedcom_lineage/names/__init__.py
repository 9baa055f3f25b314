from .display import (
    DEFAULT_NASAB_DEPTH,
    UNKNOWN_NAME,
    get_display_name,
    get_display_name_with_nasab,
    get_father,
)

__all__ = [
    "DEFAULT_NASAB_DEPTH",
    "UNKNOWN_NAME",
    "get_display_name",
    "get_display_name_with_nasab",
    "get_father",
]
