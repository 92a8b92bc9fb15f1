"""Structured logging configuration for the grocerylist application."""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# Verbosity 0-5 from the command line
VERBOSITY_LEVELS: dict[int, int] = {
    0: logging.CRITICAL,
    1: logging.ERROR,
    2: logging.WARNING,
    3: logging.INFO,
    4: logging.DEBUG,
    5: TRACE,
}

# Context variables for run/file tracking
seed_ctx: ContextVar[int | None] = ContextVar("seed", default=None)
source_ctx: ContextVar[str | None] = ContextVar("source", default=None)


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add context from context variables
        if (seed := seed_ctx.get()) is not None:
            log_data["seed"] = seed
        if source := source_ctx.get():
            log_data["source"] = source

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data)


class ContextualFormatter(logging.Formatter):
    """Human-readable formatter with context."""

    def format(self, record: logging.LogRecord) -> str:
        context_parts = []
        if (seed := seed_ctx.get()) is not None:
            context_parts.append(f"seed={seed}")
        if source := source_ctx.get():
            context_parts.append(f"file={os.path.basename(source)}")

        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        level = record.levelname.ljust(8)
        message = record.getMessage()

        formatted = f"{level} | {record.name}{context_str} | {message}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context variables."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})

        if (seed := seed_ctx.get()) is not None:
            extra["seed"] = seed
        if source := source_ctx.get():
            extra["source"] = source

        kwargs["extra"] = extra
        return msg, kwargs

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(TRACE, msg, *args, **kwargs)


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    logger = logging.getLogger(name)
    return ContextLogger(logger, {})


def level_for_verbosity(verbosity: int) -> int:
    """Map a 0-5 verbosity to a logging level, clamping out-of-range values."""
    verbosity = min(max(verbosity, 0), max(VERBOSITY_LEVELS))
    return VERBOSITY_LEVELS[verbosity]


def configure_logging(
    verbosity: int = 1,
    json_format: bool | None = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        verbosity: 0 (critical only) to 5 (trace). LOG_LEVEL overrides it.
        json_format: Use JSON format for logs. If None, read LOG_FORMAT.
    """
    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "").lower() == "json"

    level = level_for_verbosity(verbosity)
    if level_str := os.getenv("LOG_LEVEL", "").upper():
        level = logging.getLevelName(level_str)
        if not isinstance(level, int):
            level = logging.WARNING

    if json_format:
        formatter: logging.Formatter = StructuredJsonFormatter()
    else:
        formatter = ContextualFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries the shopping list
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger("grocerylist").setLevel(level)

    logger = get_logger(__name__)
    logger.debug(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"format={'json' if json_format else 'text'}"
    )


class LoggingContext:
    """Context manager for setting logging context."""

    def __init__(self, seed: int | None = None, source: str | None = None):
        self.seed = seed
        self.source = source
        self._tokens: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContext":
        if self.seed is not None:
            self._tokens["seed"] = seed_ctx.set(self.seed)
        if self.source is not None:
            self._tokens["source"] = source_ctx.set(self.source)
        return self

    def __exit__(self, *args: Any) -> None:
        for name, token in self._tokens.items():
            ctx_var = {
                "seed": seed_ctx,
                "source": source_ctx,
            }[name]
            ctx_var.reset(token)
