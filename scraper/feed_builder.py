"""
Conversion of catalog records into feed documents.

Channel fields come straight from the comic record. Each public episode
becomes one item; building an item costs one request to the episode image,
so the items of a comic are built in parallel and put back in episode order.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional

from models.comic import Comic, Episode
from models.feed import Enclosure, FeedDocument, FeedImage, FeedItem
from scraper.catalog_client import CatalogClient
from utils.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


def episode_to_item(episode: Episode, comic: Comic, client: CatalogClient) -> FeedItem:
    """Build the feed item for one episode, reading its image headers."""
    logger.debug(f"episode_to_item {episode.sort_volume} start")
    page_url = f"{client.host}{episode.page_url}"

    logger.debug(f"episode_to_item {episode.sort_volume} download image start")
    headers = client.fetch_image_headers(episode.list_image_double_url)
    logger.debug(f"episode_to_item {episode.sort_volume} download image done")

    item = FeedItem(
        title=f"{episode.volume} | {episode.title}",
        link=page_url,
        guid=page_url,
        guid_is_permalink=True,
        pub_date=episode.publish_start,
        author=comic.author,
        enclosure=Enclosure(
            url=episode.list_image_double_url,
            mime_type=headers.mime_type,
            length=headers.length,
        ),
    )
    logger.debug(f"episode_to_item {episode.sort_volume} done")
    return item


def comic_to_feed_document(comic: Comic, client: CatalogClient,
                           max_workers: Optional[int] = None) -> FeedDocument:
    """
    Build the feed document for a comic.

    Only episodes whose status is exactly "public" are included. The first
    item that fails to build fails the whole document.

    Args:
        comic: Decoded comic record
        client: Client used to request episode images
        max_workers: Thread count for the image requests (defaults to one per episode)

    Returns:
        FeedDocument with items in episode order
    """
    logger.debug(f"to_channel {comic.title} start")
    episodes = comic.public_episodes

    items = []
    if episodes:
        with ThreadPoolExecutor(max_workers=max_workers or len(episodes)) as executor:
            futures = [
                executor.submit(episode_to_item, episode, comic, client)
                for episode in episodes
            ]

            for future in as_completed(futures):
                if future.exception() is not None:
                    for pending in futures:
                        pending.cancel()
                    raise future.exception()

            items = [future.result() for future in futures]

    document = FeedDocument(
        title=comic.title,
        link=client.host + Config.COMIC_PAGE_PATH.format(dir_name=comic.dir_name),
        description=comic.caption_for_search,
        image=FeedImage(
            url=comic.image_url,
            link=comic.image_url,
            title=f"{comic.title} {comic.author}",
        ),
        pub_date=comic.latest_episode_publish_start,
        last_build_date=comic.latest_episode_publish_start,
        items=tuple(items),
    )
    logger.debug(f"to_channel {comic.title} done")
    return document
