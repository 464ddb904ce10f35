"""
Utility modules for the feed builder.

This package contains configuration, logging and the error types.
"""

from .config import Config, FeedConfig, load_config

__all__ = ['Config', 'FeedConfig', 'load_config']
