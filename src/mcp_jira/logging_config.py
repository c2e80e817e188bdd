"""Contextual logging configuration for MCP Jira."""

import logging
import os
import sys
import time
import types
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

# Default logger configuration
DEFAULT_LOGGER_NAME = "mcp-jira"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
NO_CONTEXT = "no-context"

# Per-task context; tool calls run concurrently on one event loop
_log_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "mcp_jira_log_context", default=None
)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the context attached to the current task."""
    return dict(_log_context.get() or {})


def format_log_context(context: dict[str, Any]) -> str:
    if not context:
        return NO_CONTEXT
    # Format context as: operation=X,trace_id=Y,...
    return ",".join(f"{k}={v}" for k, v in context.items())


class ContextFilter(logging.Filter):
    """Fills ``record.context`` so the default format works for any logger."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = format_log_context(get_log_context())
        return True


class ContextualLogger(logging.Logger):
    """Logger that stamps the current operation context onto every record."""

    def _log(
        self,
        level: int,
        msg: object,
        args: Any,
        exc_info: Any = None,
        extra: Any = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        extra = dict(extra or {})
        extra.setdefault("context", format_log_context(get_log_context()))
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def set_context(self, **kwargs: Any) -> None:
        """
        Adds key-value pairs to the context of the current task.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        context = get_log_context()
        context.update(kwargs)
        _log_context.set(context)

    def clear_context(self) -> None:
        """Removes all context data for the current task."""
        _log_context.set(None)


class LoggingContextManager:
    """Context manager that logs start, duration and failure of an operation."""

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Logger receiving the start/end records
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = dict(context)
        self.trace_id = self.context.pop("trace_id", None) or str(uuid.uuid4())[:8]
        self.start_time = 0.0
        self._token = None

    def __enter__(self) -> "LoggingContextManager":
        self.start_time = time.monotonic()
        context = get_log_context()
        context.update(self.context)
        context["operation"] = self.operation
        context["trace_id"] = self.trace_id
        self._token = _log_context.set(context)

        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.monotonic() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return a logger, created as a ContextualLogger when it does not exist yet."""
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(ContextualLogger)
    try:
        return logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Calling it again for the same name replaces the previous handlers.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logger = get_logger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = ContextFilter()

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stderr keeps stdout free for the stdio transport
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        log_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_directory / f"{name}.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    # Prevents propagation to the root logger
    logger.propagate = False

    return cast(ContextualLogger, logger)


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger receiving the records
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret for logging, keeping only its last few characters.

    Args:
        value: The secret to mask
        keep_chars: Number of trailing characters left visible

    Returns:
        The masked value, or '<empty>' when there is nothing to mask
    """
    if not value:
        return "<empty>"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return "*" * (len(value) - keep_chars) + value[-keep_chars:]
