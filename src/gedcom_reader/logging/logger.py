"""
Centralized logging for the GEDCOM Reader.

* ``get_logger`` is the single entry point; every module logger hangs off the
  ``gedcom_reader`` base logger and shares its handlers.
* The base logger writes a master file (``logs/gedcom_reader.log`` by default,
  under the project root in a checkout and the working directory otherwise)
  and renders console output to stderr through Rich.
* Per-module files (``logs/gedcom_reader_<module>.log``) are opt-in through
  ``logging.per_module_files`` in ``config/gedcom_reader.yml``.
* ``configure_logging(debug=True)`` re-applies levels after startup, which is
  how the CLI ``--debug`` switch takes effect.
"""

from __future__ import annotations

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from gedcom_reader import config as gr_config
from gedcom_reader.config import get_config

BASE_LOGGER_NAME = "gedcom_reader"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_per_module_files: bool = False


def _log_root() -> Path:
    """Project root in a source checkout, else the working directory."""
    if gr_config.CONFIG_PATH.exists():
        return PROJECT_ROOT
    return Path.cwd()


def _resolve_log_dir() -> Path:
    cfg = get_config()
    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = _log_root() / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    if rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _level_from_config(debug: Optional[bool] = None) -> int:
    cfg = get_config()
    if debug is None:
        debug = bool(getattr(cfg, "debug", False))
    if debug:
        return logging.DEBUG
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def _base_logger() -> Logger:
    """Attach the master file and console handlers exactly once."""
    global _base_configured, _effective_level, _per_module_files

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base

    cfg = get_config()
    rotate = bool(cfg.logging.get("rotate", False))
    _per_module_files = bool(cfg.logging.get("per_module_files", False))
    _effective_level = _level_from_config()

    base.setLevel(_effective_level)
    base.propagate = False

    master = _resolve_log_dir() / cfg.logging.get("file", "gedcom_reader.log")
    base.addHandler(_file_handler(master, _effective_level, rotate))

    console = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console.setLevel(_effective_level)
    base.addHandler(console)

    _base_configured = True
    return base


def _qualified(name: Optional[str]) -> str:
    if not name or name == BASE_LOGGER_NAME:
        return BASE_LOGGER_NAME
    if name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: str | None = None) -> Logger:
    """Return a project logger.

    ``get_logger("splitter")`` and ``get_logger("gedcom_reader.splitter")``
    name the same logger. Child loggers propagate to the base logger, so
    console and master-file output are shared.
    """
    base = _base_logger()
    qualified = _qualified(name)
    if qualified == BASE_LOGGER_NAME:
        _logger_cache[qualified] = base
        return base

    logger = logging.getLogger(qualified)
    logger.setLevel(_effective_level)
    logger.propagate = True

    if _per_module_files and not any(
        getattr(h, "is_module_handler", False) for h in logger.handlers
    ):
        filename = qualified.replace(".", "_") + ".log"
        handler = _file_handler(
            _resolve_log_dir() / filename,
            _effective_level,
            bool(get_config().logging.get("rotate", False)),
        )
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    _logger_cache[qualified] = logger
    return logger


def configure_logging(debug: bool = False) -> None:
    """Re-apply the effective level to every logger handed out so far."""
    global _effective_level

    base = _base_logger()
    _effective_level = _level_from_config(debug or None)

    for logger in [base, *_logger_cache.values()]:
        logger.setLevel(_effective_level)
        for handler in logger.handlers:
            handler.setLevel(_effective_level)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
