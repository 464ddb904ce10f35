#!/usr/bin/env python3
"""
Command-line interface for the feed builder.

Reads the target list from a JSON config file and writes one RSS feed per
target under the output directory.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from controllers.feed_controller import build_feeds
from scraper.catalog_client import CatalogClient
from utils.config import Config, load_config
from utils.logger import FeedBuildError, log_exception

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog=Config.APP_NAME,
        description='Build RSS feeds for MangaCross comics',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mangacross-rss -c config.json -o public          # Build all configured feeds
  mangacross-rss -c config.json -o public --log-level DEBUG

The config file is a JSON object: {"targets": ["one-piece", ...]}
        """
    )
    parser.add_argument('--config', '-c', required=True,
                        help='Path to the JSON config file')
    parser.add_argument('--output', '-o', required=True,
                        help='Output directory (one sub-directory per target)')
    parser.add_argument('--log-level', default='INFO', choices=LOG_LEVELS,
                        type=str.upper, help='Logging level (default: INFO)')
    parser.add_argument('--log-file',
                        help='Also write the log to this file')
    parser.add_argument('--timeout', type=float, default=Config.DEFAULT_TIMEOUT,
                        help='Socket timeout in seconds for each request (default: none)')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {Config.VERSION}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)
    logger = Config.setup_logging(level=getattr(logging, args.log_level),
                                  log_file=args.log_file)

    start = time.perf_counter()
    exit_code = 0
    try:
        config = load_config(args.config)
        with CatalogClient(timeout=args.timeout) as client:
            build_feeds(config, args.output, client)
    except FeedBuildError as e:
        if logger.isEnabledFor(logging.DEBUG):
            log_exception(logger, e)
        else:
            logger.error(str(e))
        exit_code = 1
    finally:
        elapsed = time.perf_counter() - start
        logger.info(f"Done. {int(elapsed)}.{int(elapsed * 1000) % 1000:03d} secs elapsed.")

    return exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
