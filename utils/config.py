"""
Configuration management for the feed builder.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import timedelta, timezone
from pathlib import Path
from typing import List, Optional, Union

from utils.logger import ConfigError


class Config:
    """Configuration settings for the feed builder."""

    # Application info
    APP_NAME = "mangacross-rss"
    VERSION = "0.1.0"

    # Catalog API
    MANGACROSS_HOST = "https://mangacross.jp"
    COMIC_API_PATH = "/api/comics/{target}.json?type=public"
    COMIC_PAGE_PATH = "/comics/{dir_name}/"
    PUBLIC_STATUS = "public"

    # HTTP
    USER_AGENT = f"{APP_NAME}/{VERSION}"
    HTTP_HEADERS = {
        'User-Agent': USER_AGENT,
        'Accept': 'application/json, */*;q=0.8',
    }
    # No socket timeout unless one is given on the command line
    DEFAULT_TIMEOUT: Optional[float] = None

    # Catalog timestamps without an offset are Japan time
    FEED_TIMEZONE = timezone(timedelta(hours=9), 'JST')

    # Output
    FEED_FILENAME = "feed.xml"

    # Logging configuration
    LOGGING_CONFIG = {
        'level': logging.INFO,
        'max_file_size': 10 * 1024 * 1024,  # 10MB
        'backup_count': 5,
        'log_to_file': False,
        'log_to_console': True
    }

    @classmethod
    def setup_logging(cls, level: Optional[int] = None,
                      log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
        """Set up application-wide logging configuration."""
        from utils.logger import setup_logging
        return setup_logging(
            level=level if level is not None else cls.LOGGING_CONFIG['level'],
            log_to_file=bool(log_file) or cls.LOGGING_CONFIG['log_to_file'],
            log_to_console=cls.LOGGING_CONFIG['log_to_console'],
            log_file=log_file,
            max_file_size=cls.LOGGING_CONFIG['max_file_size'],
            backup_count=cls.LOGGING_CONFIG['backup_count']
        )


@dataclass(frozen=True)
class FeedConfig:
    """Targets to build feeds for."""

    targets: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data) -> 'FeedConfig':
        """Create a FeedConfig from decoded JSON."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        targets = data.get('targets')
        if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
            raise ConfigError("'targets' must be a list of strings")

        return cls(targets=list(targets))


def load_config(path: Union[str, Path]) -> FeedConfig:
    """Load the target list from a JSON configuration file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config {path}: {e}") from e

    return FeedConfig.from_dict(data)
