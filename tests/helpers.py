"""
Sample catalog data and fake HTTP responses shared by the tests.
"""

import json
from unittest.mock import Mock

import requests

HOST = "https://mangacross.jp"


def make_episode(sort_volume, status="public", publish_start="2023-05-12T12:00:00+09:00"):
    """Episode JSON object as the catalog returns it."""
    return {
        "status": status,
        "sort_volume": sort_volume,
        "volume": f"第{sort_volume}話",
        "title": f"Episode title {sort_volume}",
        "page_url": f"/comics/one-piece/{sort_volume}",
        "list_image_double_url": f"https://images.example.com/one-piece/{sort_volume}@2x.jpg",
        "publish_start": publish_start,
    }


def make_comic(dir_name="one-piece", title="One Piece", episodes=None):
    """Comic JSON object as the catalog returns it."""
    if episodes is None:
        episodes = [make_episode(1), make_episode(2, status="draft")]
    return {
        "title": title,
        "author": "Eiichiro Oda",
        "dir_name": dir_name,
        "image_url": f"https://images.example.com/{dir_name}/cover.jpg",
        "caption_for_search": f"{title} caption",
        "latest_episode_publish_start": "2023-05-12T12:00:00+09:00",
        "episodes": episodes,
    }


def comic_body(**kwargs):
    """Full API response body."""
    return json.dumps({"comic": make_comic(**kwargs)})


def api_url(target):
    return f"{HOST}/api/comics/{target}.json?type=public"


def mock_response(text="", headers=None, status_code=200):
    """A requests response stand-in."""
    response = Mock()
    response.text = text
    response.status_code = status_code
    response.headers = headers if headers is not None else {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Server Error for url")
    else:
        response.raise_for_status.return_value = None
    return response


def image_response(mime_type="image/jpeg", length="12345"):
    headers = {}
    if mime_type is not None:
        headers['Content-Type'] = mime_type
    if length is not None:
        headers['Content-Length'] = length
    return mock_response(headers=headers)


def catalog_router(comics, failing=()):
    """
    Build a ``requests.Session.get`` side effect.

    Args:
        comics: Mapping of target -> response body
        failing: Targets whose API request returns HTTP 500

    Any other URL is treated as an episode image.
    """
    def get(url, **kwargs):
        for target, body in comics.items():
            if url == api_url(target):
                if target in failing:
                    return mock_response(status_code=500)
                return mock_response(text=body)
        for target in failing:
            if url == api_url(target):
                return mock_response(status_code=500)
        return image_response()
    return get
