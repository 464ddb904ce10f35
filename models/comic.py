"""
Comic data model decoded from the catalog API.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from utils.config import Config
from utils.logger import DecodeError


def _require_str(data: Dict[str, Any], key: str, context: str) -> str:
    if key not in data or data[key] is None:
        raise DecodeError(f"{context}: missing field '{key}'")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise DecodeError(f"{context}: field '{key}' is not a string")
    return str(value)


@dataclass(frozen=True)
class Episode:
    """Data model for one comic episode."""

    status: str
    sort_volume: str
    volume: str
    title: str
    page_url: str
    list_image_double_url: str
    publish_start: str

    @property
    def is_public(self) -> bool:
        """Only exactly "public" episodes go into the feed."""
        return self.status == Config.PUBLIC_STATUS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Episode':
        """Create an Episode from a decoded JSON object."""
        if not isinstance(data, dict):
            raise DecodeError("episode: expected an object")

        context = f"episode {data.get('sort_volume', '?')}"
        return cls(
            status=_require_str(data, 'status', context),
            sort_volume=_require_str(data, 'sort_volume', context),
            volume=_require_str(data, 'volume', context),
            title=_require_str(data, 'title', context),
            page_url=_require_str(data, 'page_url', context),
            list_image_double_url=_require_str(data, 'list_image_double_url', context),
            publish_start=_require_str(data, 'publish_start', context),
        )


@dataclass(frozen=True)
class Comic:
    """Data model for a comic title and its episodes."""

    title: str
    author: str
    dir_name: str
    image_url: str
    caption_for_search: str
    latest_episode_publish_start: str
    episodes: List[Episode] = field(default_factory=list)

    @property
    def public_episodes(self) -> List[Episode]:
        """Episodes eligible for the feed, in source order."""
        return [episode for episode in self.episodes if episode.is_public]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Comic':
        """Create a Comic from the ``comic`` object of an API response."""
        if not isinstance(data, dict):
            raise DecodeError("comic: expected an object")

        episodes = data.get('episodes')
        if not isinstance(episodes, list):
            raise DecodeError("comic: 'episodes' must be a list")

        return cls(
            title=_require_str(data, 'title', 'comic'),
            author=_require_str(data, 'author', 'comic'),
            dir_name=_require_str(data, 'dir_name', 'comic'),
            image_url=_require_str(data, 'image_url', 'comic'),
            caption_for_search=_require_str(data, 'caption_for_search', 'comic'),
            latest_episode_publish_start=_require_str(data, 'latest_episode_publish_start', 'comic'),
            episodes=[Episode.from_dict(episode) for episode in episodes],
        )

    @classmethod
    def from_json(cls, body: str) -> 'Comic':
        """Decode an API response body of the form ``{"comic": {...}}``."""
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError) as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        if not isinstance(data, dict) or 'comic' not in data:
            raise DecodeError("Response has no 'comic' object")

        return cls.from_dict(data['comic'])
