"""
Logging configuration and utilities for Complexity CLI.
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from complexity_cli.core.formatting import format_time

# Global console instance for rich output
console = Console(stderr=True)

# Logger name
LOGGER_NAME = "complexity_cli"

# Log format for file output
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Context fields rendered by the file formatter
CONTEXT_FIELDS = ("command", "source")

# Global logger instance
_logger: Optional[logging.Logger] = None

# Whether the latest configuration asked for debug output
_debug_enabled = False


class ContextFilter(logging.Filter):
    """Filter to add context information to log records."""

    def __init__(self):
        super().__init__()
        self.context: Dict[str, Any] = {}

    def set_context(self, **kwargs):
        """Set context values that will be added to all log records."""
        self.context.update(kwargs)

    def filter(self, record):
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


class AnalyzerLogFormatter(logging.Formatter):
    """Custom formatter that includes context information."""

    def format(self, record):
        context_parts = []

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value:
                context_parts.append(f"{name}={value}")

        message = super().format(record)

        if context_parts:
            return f"[{', '.join(context_parts)}] {message}"

        return message


def setup_logger(
    debug: bool = False, log_file: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """
    Set up the logger with appropriate handlers and formatting.

    Calling this again reconfigures the existing logger in place, so the
    level flags of the latest command always win.

    Args:
        debug: Enable debug logging
        log_file: Optional file path to write logs
        verbose: Enable verbose output (info level)

    Returns:
        Configured logger instance
    """
    global _logger, _debug_enabled

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not any(isinstance(f, ContextFilter) for f in logger.filters):
        logger.addFilter(ContextFilter())

    # Console handler with Rich
    console_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
    )

    if debug:
        console_handler.setLevel(logging.DEBUG)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(AnalyzerLogFormatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        # File output always receives debug records
        logger.setLevel(logging.DEBUG)

    _logger = logger
    _debug_enabled = debug
    return logger


def get_logger() -> logging.Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logger()
    return _logger


def is_debug_enabled() -> bool:
    """Check whether debug output is on for the current command."""
    return _debug_enabled


@contextmanager
def log_context(**kwargs):
    """
    Context manager to temporarily set logging context.

    Example:
        with log_context(command='analyze', source='main.cpp'):
            logger.info("Scanning lines")
    """
    logger = get_logger()
    context_filter = None

    for filter_ in logger.filters:
        if isinstance(filter_, ContextFilter):
            context_filter = filter_
            break

    if context_filter:
        old_context = context_filter.context.copy()
        context_filter.set_context(**kwargs)
        try:
            yield
        finally:
            context_filter.context = old_context
    else:
        yield


def log_debug(message: str, **kwargs):
    """Log a debug message with optional context."""
    logger = get_logger()
    with log_context(**kwargs):
        logger.debug(message)


def log_info(message: str, **kwargs):
    """Log an info message with optional context."""
    logger = get_logger()
    with log_context(**kwargs):
        logger.info(message)


def log_warning(message: str, **kwargs):
    """Log a warning message with optional context."""
    logger = get_logger()
    with log_context(**kwargs):
        logger.warning(message)


def log_error(message: str, exc_info=None, **kwargs):
    """Log an error message with optional exception info and context."""
    logger = get_logger()
    with log_context(**kwargs):
        logger.error(message, exc_info=exc_info)


def log_performance(operation: str, duration: float, **kwargs):
    """Log performance information."""
    logger = get_logger()
    with log_context(**kwargs):
        logger.info(f"Performance: {operation} took {format_time(duration)}")


def log_file_operation(operation: str, path: Path, **kwargs):
    """Log file operations."""
    logger = get_logger()
    with log_context(**kwargs):
        logger.debug(f"File {operation}: {path}")


def logged_operation(operation_name: str):
    """
    Decorator to log function entry/exit and duration.

    Example:
        @logged_operation("analyze_command")
        def handle_analyze(options, source):
            ...
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()

            with log_context(command=operation_name):
                logger.debug(f"Starting {operation_name}")
                start_time = time.perf_counter()

                try:
                    result = func(*args, **kwargs)
                    duration = time.perf_counter() - start_time
                    logger.debug(
                        f"Completed {operation_name} in {format_time(duration)}"
                    )
                    return result
                except Exception as e:
                    duration = time.perf_counter() - start_time
                    log_error(
                        f"Failed {operation_name} after {format_time(duration)}: {e}"
                    )
                    raise

        return wrapper

    return decorator


# Convenience function to set up logging from CLI
def configure_logging(
    debug: bool = False, verbose: bool = False, log_file: Optional[str] = None
):
    """
    Configure logging based on CLI options.

    Args:
        debug: Enable debug logging
        verbose: Enable verbose output
        log_file: Optional log file path
    """
    log_path = Path(log_file) if log_file else None
    setup_logger(debug=debug, log_file=log_path, verbose=verbose)
