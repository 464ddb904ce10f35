"""
Feed Controller - Runs the fetch, build and write pipeline for every target.

Targets are independent: each one runs on its own worker, a failure is
logged and recorded for that target only, and the run as a whole fails when
any target failed.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from scraper.catalog_client import CatalogClient
from scraper.feed_builder import comic_to_feed_document
from scraper.feed_writer import write_feed
from utils.config import FeedConfig
from utils.logger import get_logger, log_exception, PipelineError

logger = get_logger(__name__)


@dataclass(frozen=True)
class TargetResult:
    """Outcome of one target's pipeline."""

    target: str
    path: Optional[Path] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_feed_for_target(target: str, output_root: Union[str, Path],
                          client: CatalogClient) -> Path:
    """Fetch, build, serialize and write the feed of one target."""
    logger.info(f"[{target}] Get {target}.json")
    comic = client.fetch_comic_metadata(target)

    logger.info(f"[{target}] Create feed start")
    document = comic_to_feed_document(comic, client)
    feed = document.to_rss()

    return write_feed(output_root, target, feed)


def run_target(target: str, output_root: Union[str, Path],
               client: CatalogClient) -> TargetResult:
    """Run one target and capture its failure instead of raising."""
    try:
        path = build_feed_for_target(target, output_root, client)
    except Exception as e:
        log_exception(logger, e, f"[{target}] Failed to build feed")
        return TargetResult(target=target, error=e)
    return TargetResult(target=target, path=path)


def run_targets(config: FeedConfig, output_root: Union[str, Path],
                client: CatalogClient) -> List[TargetResult]:
    """Run every target concurrently and return results in target order."""
    targets = config.targets
    if not targets:
        return []

    with ThreadPoolExecutor(max_workers=len(targets)) as executor:
        futures = [
            executor.submit(run_target, target, output_root, client)
            for target in targets
        ]
        return [future.result() for future in futures]


def build_feeds(config: FeedConfig, output_root: Union[str, Path],
                client: Optional[CatalogClient] = None) -> None:
    """
    Build the feed of every configured target.

    Args:
        config: Targets to build
        output_root: Directory that receives one sub-directory per target
        client: Catalog client to use (a new one is created and closed if omitted)

    Raises:
        PipelineError: if any target failed; details are only logged
    """
    logger.info(f"targets: {config.targets}")

    if client is None:
        with CatalogClient() as own_client:
            results = run_targets(config, output_root, own_client)
    else:
        results = run_targets(config, output_root, client)

    failed = [result for result in results if not result.ok]
    if failed:
        logger.error(f"{len(failed)} of {len(results)} target(s) failed: "
                     f"{', '.join(result.target for result in failed)}")
        raise PipelineError("Fail build RSS")

    logger.info(f"Built {len(results)} feed(s)")
