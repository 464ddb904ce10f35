"""
CatalogClient handles all network requests to the MangaCross catalog.

This module is responsible for making HTTP requests and providing a clean
interface for the comic API and the episode image servers.
"""

from dataclasses import dataclass
from typing import Optional

import requests

from models.comic import Comic
from utils.config import Config
from utils.logger import get_logger, NetworkError, log_exception

logger = get_logger(__name__)


@dataclass(frozen=True)
class ImageHeaders:
    """Headers reported for an episode image. Empty when absent."""

    mime_type: str = ""
    length: str = ""


class CatalogClient:
    """Client for making requests to the comic catalog."""

    def __init__(self, host: str = Config.MANGACROSS_HOST,
                 timeout: Optional[float] = Config.DEFAULT_TIMEOUT):
        """Initialize the client."""
        self.host = host.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(Config.HTTP_HEADERS)

    def comic_url(self, target: str) -> str:
        """Build the API URL for a target."""
        return self.host + Config.COMIC_API_PATH.format(target=target)

    def fetch_comic_json(self, target: str) -> str:
        """Get the raw JSON body for a target."""
        url = self.comic_url(target)
        try:
            logger.debug(f"Fetching comic: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            logger.debug(f"Successfully fetched comic: {url}")
            return response.text
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e

    def fetch_comic_metadata(self, target: str) -> Comic:
        """Get and decode the comic record for a target."""
        return Comic.from_json(self.fetch_comic_json(target))

    def fetch_image_headers(self, url: str) -> ImageHeaders:
        """Get the content type and length of an image without reading it."""
        try:
            logger.debug(f"Fetching image headers: {url}")
            response = self.session.get(url, stream=True, timeout=self.timeout)
            try:
                response.raise_for_status()
                headers = ImageHeaders(
                    mime_type=response.headers.get('Content-Type', ''),
                    length=response.headers.get('Content-Length', ''),
                )
            finally:
                response.close()
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch image headers for {url}: {e}") from e

        logger.debug(f"Image headers: {url} ({headers.mime_type or '-'}, {headers.length or '-'} bytes)")
        return headers

    def close(self) -> None:
        """Close the client and clean up resources."""
        try:
            self.session.close()
            logger.debug("HTTP session closed")
        except Exception as e:
            log_exception(logger, e, "Error closing CatalogClient")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
