# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Structured logging with context
# PURPOSE: Consistent, queryable logging across generator components
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging

Log lines carry where in a generation run they were emitted:

    run_id   one build() call
    phase    enum_phase / table_phase / assembled
    entity   enum or table being staged
    builder  builder class producing a node

The context lives in a ContextVar, so it follows the generator's
coroutines. Formatters read it at emit time; the adapter only adds the
component and whatever the caller passed in `extra`.

Usage:
    from core.logging import get_logger, log_context

    logger = get_logger(__name__, ComponentType.GENERATOR)

    with log_context(phase="table_phase", entity="users"):
        logger.debug("Staged table", extra={"columns": 4})
"""

import json
import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Union


class ComponentType(str, Enum):
    """Which part of the generator a logger belongs to."""
    GENERATOR = "generator"
    SCHEMA = "schema"
    CLI = "cli"


# ============================================================================
# CONTEXT
# ============================================================================

@dataclass(frozen=True)
class LogContext:
    """Position within a generation run; unset fields are None."""
    run_id: Optional[str] = None
    phase: Optional[str] = None
    entity: Optional[str] = None
    builder: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def merged(self, **overrides: Any) -> "LogContext":
        extra = {**self.extra, **overrides.pop("extra", {})}
        return replace(self, extra=extra, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "extra" and getattr(self, f.name) is not None
        }
        result.update(self.extra)
        return result


_current_context: ContextVar[LogContext] = ContextVar("log_context", default=LogContext())


def get_current_context() -> LogContext:
    return _current_context.get()


@contextmanager
def log_context(**kwargs: Any) -> Iterator[LogContext]:
    """
    Layer fields over the enclosing context for the duration of the block.

    Example:
        with log_context(run_id=run_id):
            with log_context(phase="enum_phase"):
                ...
    """
    context = get_current_context().merged(**kwargs)
    token = _current_context.set(context)
    try:
        yield context
    finally:
        _current_context.reset(token)


# ============================================================================
# FORMATTERS
# ============================================================================

def _caller_data(record: logging.LogRecord) -> Dict[str, Any]:
    """The `extra` dict attached by ContextLogger, if any."""
    return dict(getattr(record, "extra", None) or {})


class StructuredFormatter(logging.Formatter):
    """
    One JSON object per line.

    Keys: timestamp, level, logger, message, context (run position),
    data (caller extras plus component), exception, source.
    """

    def __init__(self, include_context: bool = True):
        super().__init__()
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            context = get_current_context().to_dict()
            if context:
                log_data["context"] = context

        data = _caller_data(record)
        if data:
            log_data["data"] = data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }
        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """
    Single-line terminal output:

        2026-10-19 09:12:03 DEBUG    core.schema.generator [phase=table_phase, entity=users]: Staged table {'columns': 4}
    """

    CONTEXT_FIELDS = ("phase", "entity", "builder")

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        context = get_current_context()

        parts = [
            f"{name}={getattr(context, name)}"
            for name in self.CONTEXT_FIELDS
            if getattr(context, name)
        ]
        context_str = f" [{', '.join(parts)}]" if parts else ""

        data = _caller_data(record)
        data.pop("component", None)
        data_str = f" {data}" if data else ""

        line = (
            f"{timestamp} {record.levelname.ljust(8)} {record.name}"
            f"{context_str}: {record.getMessage()}{data_str}"
        )
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


# ============================================================================
# LOGGERS
# ============================================================================

class ContextLogger(logging.LoggerAdapter):
    """Adapter that tags records with the component and caller extras."""

    def process(self, msg, kwargs):
        data = dict(kwargs.get("extra") or {})
        component = (self.extra or {}).get("component")
        if component:
            data.setdefault("component", component)

        # Nested under one attribute so caller keys never clash with LogRecord's
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(name: str, component: Optional[ComponentType] = None) -> ContextLogger:
    return ContextLogger(
        logging.getLogger(name),
        {"component": component.value if component else None},
    )


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
    stream=None,
) -> None:
    """
    Install a single root handler.

    Args:
        level: Log level name or number
        json_output: JSON lines instead of human format (also via LOG_FORMAT=json)
        stream: Defaults to stderr so generated code can go to stdout
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_output or os.getenv("LOG_FORMAT", "").lower() == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = HumanFormatter()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
]
