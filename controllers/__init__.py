"""
Controllers package for the feed builder.

This package contains the pipeline that turns the configured targets into
feed files, kept apart from the command-line front end.
"""

from .feed_controller import TargetResult, build_feeds, build_feed_for_target, run_target

__all__ = ['TargetResult', 'build_feeds', 'build_feed_for_target', 'run_target']
