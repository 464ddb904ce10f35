"""
Writes serialized feeds to the output tree.
"""

from pathlib import Path
from typing import Union

from utils.config import Config
from utils.logger import get_logger, FilesystemError

logger = get_logger(__name__)


def feed_path(output_root: Union[str, Path], target: str) -> Path:
    """Path of the feed file for a target."""
    return Path(output_root) / target / Config.FEED_FILENAME


def write_feed(output_root: Union[str, Path], target: str, content: str) -> Path:
    """Write a feed to ``<output_root>/<target>/feed.xml``, replacing any old one."""
    path = feed_path(output_root, target)
    directory = path.parent

    try:
        logger.info(f"[{target}] Create {directory} dir")
        directory.mkdir(parents=True, exist_ok=True)

        logger.info(f"[{target}] Write to {path}")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise FilesystemError(f"Cannot write feed {path}: {e}") from e

    return path
