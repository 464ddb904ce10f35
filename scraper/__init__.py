"""
Scraper package for the comic catalog.

This package handles catalog requests, feed construction and feed output.
"""

from .catalog_client import CatalogClient, ImageHeaders
from .feed_builder import comic_to_feed_document, episode_to_item
from .feed_writer import feed_path, write_feed

__all__ = [
    'CatalogClient',
    'ImageHeaders',
    'comic_to_feed_document',
    'episode_to_item',
    'feed_path',
    'write_feed'
]
