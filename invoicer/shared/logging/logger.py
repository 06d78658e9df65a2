"""loguru sinks for the API process, stamped with the request correlation id."""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

from loguru import logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_DEFAULT_LOG_FILE = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "../../../instance/invoicer.log")
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")


def _stamp_correlation_id(record: dict[str, Any]) -> None:
    # an explicit logger.bind(correlation_id=...) wins
    record["extra"].setdefault("correlation_id", _CORRELATION_ID.get())


class _InterceptHandler(logging.Handler):
    """Routes werkzeug and SQLAlchemy stdlib records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def _sink(target: Any, level: str, **options: Any) -> dict[str, Any]:
    return {
        "sink": target,
        "level": level,
        "format": _FMT,
        "backtrace": False,
        "diagnose": False,
        "filter": sanitize_record,
        **options,
    }


def setup_logging(
    level: str | None = None,
    *,
    log_file: str | None = None,
    debug_mode: bool = False,
) -> str:
    """Replace every loguru sink with stderr plus ``log_file`` and return its path.

    ``level`` falls back to DEBUG when ``debug_mode`` is set and INFO otherwise.
    """
    level = (level or ("DEBUG" if debug_mode else "INFO")).upper()
    log_file = log_file or _DEFAULT_LOG_FILE
    os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)

    logger.configure(
        handlers=[
            _sink(sys.stderr, level, colorize=True),
            _sink(log_file, level, colorize=False, enqueue=True, mode="w", encoding="utf-8"),
        ],
        patcher=_stamp_correlation_id,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return log_file


__all__ = [
    "logger",
    "setup_logging",
    "set_correlation_id",
    "clear_correlation_id",
    "get_correlation_id",
]
