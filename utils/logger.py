"""
Centralized logging configuration and error types for the feed builder.
"""

import copy
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

APP_LOGGER_NAME = 'mangacross_rss'


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        # Other handlers share the record
        record = copy.copy(record)
        record.levelname = f"{log_color}{record.levelname}{reset_color}"

        return super().format(record)


def setup_logging(
    name: Optional[str] = None,
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_console: bool = True,
    log_file: Optional[Union[str, Path]] = None,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up the application logger.

    Calling it again replaces the handlers, so the CLI can reconfigure
    the level after modules have already fetched their loggers.

    Args:
        name: Logger name (defaults to the application logger)
        level: Logging level
        log_to_file: Whether to log to a rotating file
        log_to_console: Whether to log to stdout
        log_file: Path of the log file when logging to file
        max_file_size: Maximum log file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or APP_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_formatter = ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_to_file:
        log_path = Path(log_file) if log_file else Path.cwd() / "logs" / "mangacross_rss.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    return logger


def configure_root_logger() -> logging.Logger:
    """Configure the application logger once with default settings."""
    root_logger = logging.getLogger(APP_LOGGER_NAME)

    if not root_logger.handlers:
        setup_logging(APP_LOGGER_NAME, level=logging.INFO)

    return root_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger that reports through the application logger.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    configure_root_logger()

    if not name or name == APP_LOGGER_NAME:
        return logging.getLogger(APP_LOGGER_NAME)
    if name.startswith(APP_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


class FeedBuildError(Exception):
    """Base exception for feed building errors."""
    pass


class NetworkError(FeedBuildError):
    """Transport failure or non-success HTTP status."""
    pass


class DecodeError(FeedBuildError):
    """Response body does not match the expected structure."""
    pass


class FilesystemError(FeedBuildError):
    """Directory creation or file write failure."""
    pass


class FeedError(FeedBuildError):
    """The feed serializer rejected the document."""
    pass


class ConfigError(FeedBuildError):
    """Configuration file is missing or malformed."""
    pass


class PipelineError(FeedBuildError):
    """One or more targets failed."""
    pass


def log_exception(logger: logging.Logger, e: Exception, context: str = "") -> None:
    """
    Log an exception with context information.

    Args:
        logger: Logger instance
        e: Exception to log
        context: Additional context information
    """
    if context:
        logger.error(f"{context}: {type(e).__name__}: {e}", exc_info=True)
    else:
        logger.error(f"{type(e).__name__}: {e}", exc_info=True)
