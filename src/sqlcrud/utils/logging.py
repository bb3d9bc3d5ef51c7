"""Structured logging for sqlcrud.

structlog is configured once, on import, to render JSON events with an
ISO-8601 timestamp, the level and the logger name. Events are dotted names
such as ``table_repository.insert.completed``.

Bound statement values must never reach a log line. The sanitizer redacts
credential keys and parameter collections (``params`` / ``parameters``), and
strips the ``[parameters: ...]`` block SQLAlchemy appends to statement
errors from any string value.

Environment:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
- LOG_TO_FILE: 1 / true / yes also writes to a daily rotating file
- LOG_FILE_DIR: directory for that file (default logs/)

Usage:
    >>> from sqlcrud.utils.logging import bind_context
    >>> log = bind_context("sqlcrud.io.repository.core", operation="insert", table="users")
    >>> log.info("table_repository.insert.completed", param_count=2)
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from sqlcrud.config.settings import get_settings

SENSITIVE_KEY_RE = re.compile(
    r"password|token|secret|connection_string|^database_url$|^params$|^parameters$",
    re.IGNORECASE,
)
PARAMETERS_BLOCK_RE = re.compile(r"\[parameters: [^\n]*\]")

REDACTED_VALUE = "[REDACTED]"
TRUTHY = ("1", "true", "yes")


def _redact_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return sanitize_for_logging(value)
    if isinstance(value, str):
        return PARAMETERS_BLOCK_RE.sub(f"[parameters: {REDACTED_VALUE}]", value)
    if isinstance(value, list):
        return [_redact_value(item) for item in value]
    return value


def sanitize_for_logging(data: Mapping[Any, Any]) -> Dict[Any, Any]:
    """Return a copy of ``data`` that is safe to log.

    Values under credential or parameter keys are replaced with
    ``[REDACTED]``; nested mappings and lists are sanitized recursively.

    Example:
        >>> sanitize_for_logging({"params": {"where_0": "ann@example.com"}, "param_count": 1})
        {'params': '[REDACTED]', 'param_count': 1}
    """
    return {
        key: REDACTED_VALUE if SENSITIVE_KEY_RE.search(str(key)) else _redact_value(value)
        for key, value in data.items()
    }


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    return sanitize_for_logging(event_dict)


def _get_log_level() -> int:
    try:
        level_name = get_settings().LOG_LEVEL
    except ValidationError:
        # settings invalid; fall back to the raw environment variable
        level_name = os.getenv("LOG_LEVEL", "INFO")
    return getattr(logging, level_name.upper(), logging.INFO)


def _should_log_to_file() -> bool:
    return os.getenv("LOG_TO_FILE", "").lower() in TRUTHY


def _get_log_file_path() -> Path:
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"sqlcrud-{datetime.now():%Y%m%d}.log"


def _build_handlers() -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if _should_log_to_file():
        handlers.append(
            TimedRotatingFileHandler(
                filename=str(_get_log_file_path()),
                when="midnight",
                backupCount=30,
                encoding="utf-8",
            )
        )
    return handlers


def configure_logging() -> None:
    """Attach handlers to the root logger and configure structlog."""
    level = _get_log_level()
    root = logging.getLogger()
    root.setLevel(level)
    for handler in _build_handlers():
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


def get_logger(name: str) -> Any:
    """Get a structlog logger for a module (pass ``__name__``)."""
    return structlog.get_logger(name)


def bind_context(name: Optional[str] = None, **kwargs: Any) -> Any:
    """Get a logger with ``kwargs`` bound to every event it emits."""
    return structlog.get_logger(name).bind(**kwargs)
