"""
Logging package for ``gedcom_lineage``.

Modules call ``get_logger("<short name>")`` and inherit the shared console
and file handlers.
"""

from .logger import (
    BASE_LOGGER_NAME,
    LogSettings,
    configure_logging,
    get_logger,
    list_active_loggers,
)

__all__ = [
    "BASE_LOGGER_NAME",
    "LogSettings",
    "configure_logging",
    "get_logger",
    "list_active_loggers",
]
