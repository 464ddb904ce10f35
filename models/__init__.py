"""
Data models for the feed builder.

This package contains the catalog records (comics and episodes) and the
feed document they are turned into.
"""

from .comic import Comic, Episode
from .feed import Enclosure, FeedDocument, FeedImage, FeedItem, parse_timestamp

__all__ = [
    'Comic', 'Episode', 'Enclosure', 'FeedDocument', 'FeedImage', 'FeedItem',
    'parse_timestamp',
]
