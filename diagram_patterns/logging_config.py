"""
Structured logging configuration for the diagram_patterns package.

Provides:
- JSON formatter for machine-readable log output
- Console formatter for human-readable output
- Timing context manager
- Scoped context fields

Diagram output goes to stdout; log records go to stderr (and an
optional JSON file), so the two never interleave on one stream.

Usage:
    from diagram_patterns.logging_config import setup_logging, get_logger

    setup_logging(level=logging.DEBUG, json_file="diagrams.log.json")

    logger = get_logger(__name__)
    logger.debug("Flyweight created", extra={"shade": "colored"})
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

PACKAGE_LOGGER = "diagram_patterns"

# LogRecord attributes that are not user-supplied extras
_RESERVED_KEYS = frozenset({
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
    'taskName', 'message', 'asctime',
})


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_KEYS}


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Fields: timestamp, level, logger, message, plus location for
    WARNING and above, exception text if any, and every extra field.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.levelno >= logging.WARNING:
            entry["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in _extra_fields(record).items():
            try:
                json.dumps(value)
                entry[key] = value
            except (TypeError, ValueError):
                entry[key] = str(value)

        return json.dumps(entry, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter.

    Format: [TIME] LEVEL logger: message [key=value, ...]
    """

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m',
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        time_str = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_str = f"{self.COLORS[level]}{level:8}{self.COLORS['RESET']}"
        else:
            level_str = f"{level:8}"

        name = record.name
        prefix = PACKAGE_LOGGER + "."
        if name.startswith(prefix):
            name = name[len(prefix):]

        extras = ", ".join(f"{k}={v}" for k, v in _extra_fields(record).items())
        extra_str = f" [{extras}]" if extras else ""

        result = f"[{time_str}] {level_str} {name}: {record.getMessage()}{extra_str}"
        if record.exc_info:
            result += "\n" + self.formatException(record.exc_info)
        return result


def setup_logging(
    level: int = logging.INFO,
    json_file: Optional[Union[str, Path]] = None,
    console: bool = True,
    use_colors: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Existing handlers on the package logger are replaced; records
    do not propagate to the root logger.

    Args:
        level: Minimum log level (default INFO)
        json_file: Optional path for JSON log file
        console: Enable stderr output (default True)
        use_colors: Use ANSI colors in console (default True)

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ConsoleFormatter(use_colors=use_colors))
        logger.addHandler(console_handler)

    if json_file:
        json_handler = logging.FileHandler(Path(json_file), encoding='utf-8')
        json_handler.setLevel(level)
        json_handler.setFormatter(JSONFormatter())
        logger.addHandler(json_handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (typically ``__name__``)."""
    return logging.getLogger(name)


@contextmanager
def log_timing(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
    **extra_fields: Any
) -> Iterator[Dict[str, Any]]:
    """Log start, completion and duration of an operation.

    Failures are logged at ERROR and re-raised.

    Example:
        with log_timing(logger, "demo sequence", requests=4):
            run_requests(factory, requests)

    Yields:
        dict receiving ``elapsed_seconds`` on completion
    """
    timing_info: Dict[str, Any] = {}
    start = time.perf_counter()
    logger.log(level, "Starting: %s", operation, extra={"event": "start", **extra_fields})

    try:
        yield timing_info
    except Exception as e:
        elapsed = time.perf_counter() - start
        logger.error(
            "Failed: %s (%.3fs) - %s", operation, elapsed, e,
            extra={"event": "error", "elapsed_seconds": elapsed, **extra_fields},
        )
        raise

    elapsed = time.perf_counter() - start
    timing_info['elapsed_seconds'] = elapsed
    logger.log(
        level, "Completed: %s (%.3fs)", operation, elapsed,
        extra={"event": "complete", "elapsed_seconds": elapsed, **extra_fields},
    )


class LogContext:
    """Adds fields to every package log record within a scope.

    Example:
        with LogContext(request=2, element="Figure"):
            factory.get_diagram("Figure", "SquareBW", "(2,3)")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._filter: Optional[logging.Filter] = None

    def __enter__(self) -> 'LogContext':
        fields = self.fields

        class ContextFilter(logging.Filter):
            def filter(self, record: logging.LogRecord) -> bool:
                for key, value in fields.items():
                    setattr(record, key, value)
                return True

        self._filter = ContextFilter()
        # Handler-level filter: logger filters do not see records
        # emitted by child loggers.
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.addFilter(self._filter)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._filter:
            for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
                handler.removeFilter(self._filter)
            self._filter = None


def configure_default_logging(verbose: bool = False) -> logging.Logger:
    """DEBUG if verbose, INFO otherwise, console only."""
    level = logging.DEBUG if verbose else logging.INFO
    return setup_logging(level=level, console=True, use_colors=True)
