"""
Centralized logging configuration for gedcom_import.

Key behaviors
-------------
* Single entry point via ``get_logger`` so handlers and formatters match.
* Master log file (default: ``logs/gedcom_import.log``) plus per-module logs.
* Console output that follows the configured debug flag.
* Optional log rotation and file logging toggled from ``config/gedcom_import.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedcom_import.config import get_config

BASE_LOGGER_NAME = "gedcom_import"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Optional[Path] = None
_rotate_logs: bool = False
_to_file: bool = True
_console: Optional[StreamHandler] = None


def _ensure_log_dir() -> Path:
    """Resolve and create the log directory (relative paths use the cwd)."""
    global _log_dir
    if _log_dir is not None:
        return _log_dir

    cfg = get_config()
    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = Path.cwd() / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    if _rotate_logs:
        handler = RotatingFileHandler(
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


def _configure_base_logger() -> Logger:
    global _base_configured, _effective_level, _rotate_logs, _to_file, _console

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _to_file = bool(cfg.logging.get("to_file", True))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    _effective_level = logging.DEBUG if cfg.debug else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    if _to_file:
        master_path = _ensure_log_dir() / cfg.logging.get("file", "gedcom_import.log")
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    _console = StreamHandler()
    _console.setLevel(logging.DEBUG if cfg.debug else logging.INFO)
    _console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(_console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    path = _ensure_log_dir() / f"{module_name.replace('.', '_')}.log"
    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project handlers.

    * Module loggers propagate to the base console + master log handlers.
    * Each module also gets ``logs/<module>.log`` when file logging is on.
    * ``debug: true`` in the config forces DEBUG output.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if _to_file and not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        # Loggers outside the package namespace (e.g. "__main__") need the
        # base handlers explicitly.
        if not logger_name.startswith(BASE_LOGGER_NAME + "."):
            for h in base_logger.handlers:
                if h not in logger.handlers:
                    logger.addHandler(h)
            logger.propagate = False
        else:
            logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_console_level(level: int) -> None:
    """
    Raise or lower console verbosity (used by ``--verbose``).

    Loggers are opened down to `level` too, otherwise records below the
    configured level never reach the console handler. File handlers keep
    their configured level.
    """
    global _effective_level

    base_logger = _configure_base_logger()
    if _console is not None:
        _console.setLevel(level)

    if level < _effective_level:
        _effective_level = level
        base_logger.setLevel(level)
        for logger in _logger_cache.values():
            logger.setLevel(level)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
