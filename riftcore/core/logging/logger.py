"""
Rift Core Logging Subsystem

Purpose
-------
Provide the single logging stack for Rift Core, offering:

- Structured JSON logs for aggregation and analysis.
- LogContext-based propagation of run context via ContextVars.
- Correlation IDs for tracing one run or one generation call end to end.
- Component-aware metadata derived from logger names and explicit context.
- Non-blocking logging via a QueueHandler + QueueListener architecture.
- Bounded log queue with drop accounting on overload.
- Console handler (JSON in production, colored human text on a TTY) plus an
  optional daily rotating JSON file.

Responsibilities
----------------
- Initialize and configure the global logging stack.
- Enrich all log records with contextual fields:
  - run_id, seed, zone_level
  - correlation_id
  - component, operation
- Provide simple helper APIs:
  - get_logger()
  - LogContext (sync context manager)
  - set_log_context() / clear_log_context()
  - get_logging_health() for health inspection.

Design Decisions
----------------
- JSONFormatter is the canonical representation.
- ContextFilter is attached to the queue handler so records propagated from
  child loggers are enriched too.
- JSON nests run context under "run" and other `extra={...}` fields under "extra".

Dependencies
------------
- riftcore.core.config.config.Config
"""

from __future__ import annotations

import atexit
import json
import logging
import queue
import sys
import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import (
    QueueHandler,
    QueueListener,
    TimedRotatingFileHandler,
)
from pathlib import Path
from typing import Any, Dict, List, Optional

from riftcore.core.config.config import Config


# ============================================================================
# Run / Operation Context (ContextVars)
# ============================================================================

_run_context: ContextVar[Dict[str, Any]] = ContextVar(
    "run_context",
    default={},
)


# ============================================================================
# Config / Environment
# ============================================================================


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    """Configuration for the logging subsystem."""

    CONSOLE_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)-32s | %(message)s"
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    DAILY_BASENAME: str = "riftcore_daily.json.log"
    DAILY_BACKUP_COUNT: int = 1

    QUEUE_MAX_SIZE: int = 10_000

    @property
    def environment(self) -> str:
        return str(Config.ENVIRONMENT).lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def logs_dir(self) -> Path:
        return Path(Config.LOGS_DIR).resolve()

    @property
    def log_level(self) -> int:
        return getattr(logging, str(Config.LOG_LEVEL).upper(), logging.INFO)

    @property
    def use_json(self) -> bool:
        if Config.LOG_JSON is None:
            return self.is_production
        return bool(Config.LOG_JSON)

    @property
    def use_colors(self) -> bool:
        if self.is_production or self.use_json:
            return False
        return bool(Config.LOG_COLORS) and sys.stdout.isatty()

    @property
    def to_file(self) -> bool:
        return bool(Config.LOG_TO_FILE)


LOGGER_CONFIG = LoggerConfig()


# ============================================================================
# Logging Metrics / Health
# ============================================================================


@dataclass(slots=True)
class LoggingMetrics:
    records_enqueued: int = 0
    records_dropped: int = 0
    listener_errors: int = 0


@dataclass(frozen=True, slots=True)
class LoggingHealth:
    initialized: bool
    queue_size: int
    queue_max_size: int
    records_enqueued: int
    records_dropped: int
    listener_errors: int


_logging_metrics: LoggingMetrics = LoggingMetrics()
_log_queue: Optional["queue.Queue[logging.LogRecord]"] = None


# ============================================================================
# Filters & Formatters
# ============================================================================


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        context: Dict[str, Any] = _run_context.get({})

        # riftcore.modules.<component>.* -> <component>
        parts = record.name.split(".")
        default_component = parts[2] if len(parts) > 2 and parts[1] == "modules" else parts[0]

        enriched = {
            "run_id": context.get("run_id", "N/A"),
            "seed": context.get("seed", "N/A"),
            "zone_level": context.get("zone_level", "N/A"),
            "correlation_id": context.get("correlation_id") or "N/A",
            "component": context.get("component") or default_component,
            "operation": context.get("operation") or "N/A",
        }
        for key, value in context.items():
            enriched.setdefault(key, value)

        # Explicit extra={...} on the call wins over ambient context.
        for key, value in enriched.items():
            if not hasattr(record, key):
                setattr(record, key, value)

        return True


class ColoredFormatter(logging.Formatter):
    """Human console format: colored level name plus a short run tag."""

    LEVEL_COLORS: Dict[int, str] = {
        logging.DEBUG: "\033[90m",
        logging.INFO: "\033[36m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        line = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color:
            line = line.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)

        seed = getattr(record, "seed", "N/A")
        if seed != "N/A":
            line = f"{line} [seed={seed}]"
        return line


# Attributes every LogRecord carries; anything else arrived through extra={...}
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Run context lands under ``"run"``; other ``extra={...}`` fields land
    under ``"extra"``. Context values still at ``"N/A"`` are omitted.
    """

    CONTEXT_ATTRS = (
        "run_id",
        "seed",
        "zone_level",
        "correlation_id",
        "component",
        "operation",
    )

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        run = {
            attr: getattr(record, attr)
            for attr in self.CONTEXT_ATTRS
            if getattr(record, attr, "N/A") not in (None, "N/A")
        }
        if run:
            payload["run"] = run

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
            and key not in self.CONTEXT_ATTRS
            and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


# ============================================================================
# Custom Queue Handler & Listener
# ============================================================================


class RiftQueueHandler(QueueHandler):
    """Non-blocking enqueue; a full queue drops the record and counts it."""

    def enqueue(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        try:
            self.queue.put_nowait(record)
        except queue.Full:
            _logging_metrics.records_dropped += 1
            sys.stderr.write("riftcore: log queue full, record dropped\n")
        else:
            _logging_metrics.records_enqueued += 1


class RiftQueueListener(QueueListener):
    def handleError(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        _logging_metrics.listener_errors += 1
        sys.stderr.write(f"riftcore: log handler failed on record from {record.name}\n")


# ============================================================================
# Global Setup
# ============================================================================

_queue_listener: Optional[QueueListener] = None


def _console_formatter() -> logging.Formatter:
    if LOGGER_CONFIG.use_json:
        return JSONFormatter()
    formatter_cls = ColoredFormatter if LOGGER_CONFIG.use_colors else logging.Formatter
    return formatter_cls(fmt=LOGGER_CONFIG.CONSOLE_FORMAT, datefmt=LOGGER_CONFIG.DATE_FORMAT)


def _build_handlers() -> List[logging.Handler]:
    """Console handler, plus the rotating JSON file when RIFT_LOG_TO_FILE is set."""
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_console_formatter())
    handlers: List[logging.Handler] = [console]

    if LOGGER_CONFIG.to_file:
        LOGGER_CONFIG.logs_dir.mkdir(parents=True, exist_ok=True)
        daily = TimedRotatingFileHandler(
            filename=str(LOGGER_CONFIG.logs_dir / LOGGER_CONFIG.DAILY_BASENAME),
            when="midnight",
            backupCount=LOGGER_CONFIG.DAILY_BACKUP_COUNT,
            encoding="utf-8",
            utc=True,
        )
        daily.setFormatter(JSONFormatter())
        handlers.append(daily)

    for handler in handlers:
        handler.setLevel(LOGGER_CONFIG.log_level)
    return handlers


def _package_logger() -> Logger:
    return logging.getLogger("riftcore")


def _is_initialized() -> bool:
    return bool(getattr(_package_logger(), "_rift_logging_initialized", False))


def setup_logging() -> None:
    """
    Install the queue-based handler on the ``riftcore`` logger (idempotent).

    The package logger is configured instead of the root logger so that
    embedding applications keep control over their own root handlers.
    """
    global _queue_listener, _logging_metrics, _log_queue

    if _is_initialized():
        return

    package_logger = _package_logger()
    package_logger.setLevel(LOGGER_CONFIG.log_level)

    _logging_metrics = LoggingMetrics()
    _log_queue = queue.Queue(LOGGER_CONFIG.QUEUE_MAX_SIZE)
    _queue_listener = RiftQueueListener(_log_queue, *_build_handlers(), respect_handler_level=True)
    _queue_listener.start()

    queue_handler = RiftQueueHandler(_log_queue)
    queue_handler.setLevel(LOGGER_CONFIG.log_level)
    queue_handler.addFilter(ContextFilter())
    package_logger.addHandler(queue_handler)
    package_logger._rift_logging_initialized = True  # type: ignore[attr-defined]

    get_logger(__name__).debug(
        "Logging initialized",
        extra={
            "environment": LOGGER_CONFIG.environment,
            "log_level": logging.getLevelName(LOGGER_CONFIG.log_level),
            "json": LOGGER_CONFIG.use_json,
            "to_file": LOGGER_CONFIG.to_file,
        },
    )


def shutdown_logging() -> None:
    """Flush and stop the listener, then detach the queue handler."""
    global _queue_listener, _log_queue

    if not _is_initialized():
        return

    package_logger = _package_logger()
    for handler in [h for h in package_logger.handlers if isinstance(h, RiftQueueHandler)]:
        package_logger.removeHandler(handler)
        handler.close()

    if _queue_listener is not None:
        _queue_listener.stop()
        for handler in _queue_listener.handlers:
            handler.close()
        _queue_listener = None

    _log_queue = None
    package_logger._rift_logging_initialized = False  # type: ignore[attr-defined]


def get_logging_health() -> LoggingHealth:
    """Snapshot of queue depth and record counters."""
    return LoggingHealth(
        initialized=_is_initialized(),
        queue_size=_log_queue.qsize() if _log_queue is not None else 0,
        queue_max_size=_log_queue.maxsize if _log_queue is not None else 0,
        records_enqueued=_logging_metrics.records_enqueued,
        records_dropped=_logging_metrics.records_dropped,
        listener_errors=_logging_metrics.listener_errors,
    )


# ============================================================================
# Public API
# ============================================================================


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)


class LogContext:
    """
    Bind run context to every record logged inside the ``with`` block.

    Example
    -------
    >>> with LogContext(run_id="r-1", seed="abc", operation="advance"):
    ...     logger.info("Stage changed")
    """

    def __init__(
        self,
        run_id: Optional[str] = None,
        seed: Optional[str] = None,
        zone_level: Optional[int] = None,
        component: Optional[str] = None,
        operation: Optional[str] = None,
        correlation_id: Optional[str] = None,
        **extra: Any,
    ) -> None:
        self.context: Dict[str, Any] = {
            "run_id": run_id or "N/A",
            "seed": seed if seed is not None else "N/A",
            "zone_level": zone_level if zone_level is not None else "N/A",
            "component": component,
            "operation": operation,
            "correlation_id": correlation_id or self._generate_correlation_id(),
            **extra,
        }

        self._token: Optional[Token[Dict[str, Any]]] = None

    @staticmethod
    def _generate_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    def __enter__(self) -> "LogContext":
        self._token = _run_context.set(self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _run_context.reset(self._token)


def set_log_context(
    run_id: Optional[str] = None,
    seed: Optional[str] = None,
    zone_level: Optional[int] = None,
    component: Optional[str] = None,
    operation: Optional[str] = None,
    correlation_id: Optional[str] = None,
    **extra: Any,
) -> None:
    current = _run_context.get({}).copy()

    if run_id is not None:
        current["run_id"] = run_id
    if seed is not None:
        current["seed"] = seed
    if zone_level is not None:
        current["zone_level"] = zone_level
    if component is not None:
        current["component"] = component
    if operation is not None:
        current["operation"] = operation
    if correlation_id:
        current["correlation_id"] = correlation_id

    current.update(extra)
    _run_context.set(current)


def get_log_context() -> Dict[str, Any]:
    return dict(_run_context.get({}))


def clear_log_context() -> None:
    _run_context.set({})


# Initialize logging automatically
setup_logging()
atexit.register(shutdown_logging)
