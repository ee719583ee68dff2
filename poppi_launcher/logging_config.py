"""Logging configuration for Poppi Launcher.

Provides:
- Configurable log levels (WARNING, INFO, DEBUG)
- Colored output on terminals
- Subprocess call logging for the resource probes
- Performance timing logs (application catalog loading)
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Sequence


LOGGER_NAME = "poppi_launcher"

# Default log format
DEFAULT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        """Format log record with colors.

        The record is copied so other handlers keep the plain level name.
        """
        colored = logging.makeLogRecord(record.__dict__)
        if colored.levelname in self.COLORS:
            colored.levelname = f"{self.COLORS[colored.levelname]}{colored.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Configure logging for the launcher package.

    Args:
        verbose: Enable verbose logging (INFO level)
        debug: Enable debug logging (DEBUG level)

    Returns:
        Configured package logger

    Examples:
        >>> logger = setup_logging(verbose=True)
        >>> logger.info("Loading applications")
        2026-01-10 10:30:45 [INFO] poppi_launcher: Loading applications
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Calling twice must not duplicate output
    logger.handlers.clear()

    if debug:
        logger.setLevel(logging.DEBUG)
        log_format = DEBUG_FORMAT
    elif verbose:
        logger.setLevel(logging.INFO)
        log_format = VERBOSE_FORMAT
    else:
        logger.setLevel(logging.WARNING)
        log_format = DEFAULT_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)

    if sys.stderr.isatty():
        formatter = ColoredFormatter(log_format)
    else:
        formatter = logging.Formatter(log_format)

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def log_subprocess_call(cmd: Sequence[str], result: Any, logger: logging.Logger) -> None:
    """Log a finished subprocess call.

    Args:
        cmd: Command argument list
        result: Object with returncode/stdout/stderr attributes
        logger: Logger instance
    """
    logger.debug(f"Subprocess call: {' '.join(cmd)}")
    logger.debug(f"  Return code: {result.returncode}")

    stdout = getattr(result, 'stdout', None)
    if stdout:
        stdout = stdout if isinstance(stdout, str) else stdout.decode(errors='replace')
        logger.debug(f"  stdout: {stdout[:200]}")

    stderr = getattr(result, 'stderr', None)
    if stderr:
        stderr = stderr if isinstance(stderr, str) else stderr.decode(errors='replace')
        logger.debug(f"  stderr: {stderr[:200]}")


@contextmanager
def log_timing(operation: str, logger: logging.Logger):
    """Context manager for logging operation timing.

    Args:
        operation: Operation description
        logger: Logger instance

    Examples:
        >>> with log_timing("Discover applications", logger):
        ...     discovery.discover_all()
        INFO: Discover applications completed in 41.07ms
    """
    start = time.perf_counter()
    logger.debug(f"Starting: {operation}")

    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{operation} completed in {elapsed_ms:.2f}ms")
