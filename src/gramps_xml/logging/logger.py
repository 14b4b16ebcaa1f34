"""
Logging setup shared by every gramps_xml module.

All loggers hang off the ``gramps_xml`` logger, which owns two handlers:
the master log file (``logging.file`` in ``config/gramps_xml.yml``) and the
console. Each module logger also writes its own ``logs/<module>.log``.
Settings are read from config the first time a logger is requested.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gramps_xml.config import get_config
from gramps_xml.utils.pathing import resolve_project_path

BASE_LOGGER_NAME = "gramps_xml"

FORMATTER = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(slots=True)
class LogSettings:
    level: int
    console_level: int
    log_dir: Path
    master_file: str
    rotate: bool

    @classmethod
    def from_config(cls) -> "LogSettings":
        cfg = get_config()
        section = cfg.logging

        configured = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        debug = bool(cfg.debug)

        log_dir = resolve_project_path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")

        return cls(
            level=logging.DEBUG if debug else configured,
            console_level=logging.DEBUG if debug else logging.WARNING,
            log_dir=log_dir,
            master_file=section.get("file", "gramps_xml.log"),
            rotate=bool(section.get("rotate", False)),
        )


class ModuleFileHandler(logging.FileHandler):
    """Marks the per-module file so it is attached only once."""


class RotatingModuleFileHandler(RotatingFileHandler):
    """Rotating variant of ``ModuleFileHandler``."""


_settings: Optional[LogSettings] = None
_loggers: Dict[str, logging.Logger] = {}


def _file_handler(path: Path, *, per_module: bool = False) -> logging.Handler:
    settings = _load_settings()
    path.parent.mkdir(parents=True, exist_ok=True)

    if settings.rotate:
        cls = RotatingModuleFileHandler if per_module else RotatingFileHandler
        handler = cls(path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8")
    else:
        cls = ModuleFileHandler if per_module else logging.FileHandler
        handler = cls(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(FORMATTER)
    return handler


def _is_module_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, (ModuleFileHandler, RotatingModuleFileHandler))


def _load_settings() -> LogSettings:
    global _settings
    if _settings is None:
        _settings = LogSettings.from_config()
    return _settings


def _base_logger() -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if BASE_LOGGER_NAME in _loggers:
        return base

    settings = _load_settings()
    base.setLevel(settings.level)
    base.propagate = False
    base.addHandler(_file_handler(settings.log_dir / settings.master_file))

    console = logging.StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(FORMATTER)
    base.addHandler(console)

    _loggers[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the logger for ``name`` (placed under ``gramps_xml.``).

    Records reach the master file and console through the base logger and
    the module's own file directly.
    """
    base = _base_logger()
    if not name or name == BASE_LOGGER_NAME:
        return base

    full_name = name if name.startswith(BASE_LOGGER_NAME + ".") else f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(full_name)
    logger.setLevel(_load_settings().level)
    logger.propagate = True

    if not any(_is_module_handler(h) for h in logger.handlers):
        path = _load_settings().log_dir / f"{full_name.replace('.', '_')}.log"
        logger.addHandler(_file_handler(path, per_module=True))

    _loggers[full_name] = logger
    return logger


def set_debug(enabled: bool = True) -> None:
    """Raise or restore verbosity of every known logger and its handlers."""
    base = _base_logger()
    settings = _load_settings()
    settings.level = logging.DEBUG if enabled else logging.INFO
    settings.console_level = logging.DEBUG if enabled else logging.WARNING

    for logger in {base, *_loggers.values()}:
        logger.setLevel(settings.level)
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.setLevel(settings.level)
            else:
                handler.setLevel(settings.console_level)


def list_active_loggers() -> List[str]:
    """Names of the loggers handed out so far, base logger included."""
    return list(_loggers)
