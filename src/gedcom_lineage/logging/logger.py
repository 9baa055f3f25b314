"""
Logging setup for gedcom-lineage.

Every module asks ``get_logger`` for a child of the ``gedcom_lineage``
logger. The parent is configured once, from the ``logging`` section of
``config/gedcom_lineage.yml``:

    level       threshold for file output (``debug: true`` forces DEBUG)
    to_file     write ``<logs_dir>/<file>``
    rotate      rotate that file at 5 MB, keeping 5 backups
    per_module  also give each module logger its own ``<name>.log``

Console output goes through rich on stderr and stays at WARNING unless
debugging, so JSON written to stdout is never mixed with log lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from gedcom_lineage.config import get_config
from gedcom_lineage.utils.pathing import resolve_project_path

BASE_LOGGER_NAME = "gedcom_lineage"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(frozen=True)
class LogSettings:
    level: int = logging.INFO
    debug: bool = False
    to_file: bool = False
    rotate: bool = False
    per_module: bool = False
    log_dir: Path = resolve_project_path("logs")
    master_file: str = "gedcom_lineage.log"

    @classmethod
    def from_config(cls, cfg=None) -> "LogSettings":
        cfg = cfg if cfg is not None else get_config()
        section = cfg.logging
        debug = bool(cfg.debug)

        level = logging.getLevelName(str(section.get("level", "INFO")).upper())
        if not isinstance(level, int):
            # getLevelName echoes unknown names back as "Level X"
            level = logging.INFO

        log_dir = section.get("dir") or cfg.paths.get("logs_dir") or "logs"

        return cls(
            level=logging.DEBUG if debug else level,
            debug=debug,
            to_file=bool(section.get("to_file", False)),
            rotate=bool(section.get("rotate", False)),
            per_module=bool(section.get("per_module", False)),
            log_dir=resolve_project_path(log_dir),
            master_file=section.get("file", "gedcom_lineage.log"),
        )

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else logging.WARNING


_settings: Optional[LogSettings] = None
_loggers: Dict[str, Logger] = {}


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=ROTATE_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _drop_module_files() -> None:
    for logger in _loggers.values():
        for handler in [h for h in logger.handlers if getattr(h, "is_module_file", False)]:
            logger.removeHandler(handler)
            handler.close()


def configure_logging(settings: Optional[LogSettings] = None) -> LogSettings:
    """
    (Re)build the handlers of the base logger.

    Calling it again replaces the previous handlers, so tests can point
    output at a temporary directory and restore the configured one after.
    """
    global _settings
    settings = settings or LogSettings.from_config()

    base = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(base.handlers):
        base.removeHandler(handler)
        handler.close()
    _drop_module_files()

    base.setLevel(settings.level)
    base.propagate = False

    console = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=settings.debug,
    )
    console.setLevel(settings.console_level)
    base.addHandler(console)

    if settings.to_file:
        base.addHandler(_file_handler(settings, settings.master_file))

    _settings = settings
    return settings


def _qualified_name(name: str) -> str:
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Logger for ``name``, nested under ``gedcom_lineage``.

    Short names ("parser_core") and dotted module names both work; the
    child inherits the base handlers through propagation.
    """
    settings = _settings or configure_logging()
    qualified = _qualified_name(name or BASE_LOGGER_NAME)
    logger = logging.getLogger(qualified)

    wants_file = settings.to_file and settings.per_module and qualified != BASE_LOGGER_NAME
    if wants_file and not any(getattr(h, "is_module_file", False) for h in logger.handlers):
        handler = _file_handler(settings, f"{qualified.replace('.', '_')}.log")
        handler.is_module_file = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    _loggers[qualified] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out by ``get_logger`` so far."""
    return sorted(_loggers)
