"""
Services package.
"""

from .rss import FeedConfig, FeedDispatcher, FeedType

__all__ = ["FeedConfig", "FeedDispatcher", "FeedType"]
