"""RSS feeds of saved articles."""

from .config import FeedConfig
from .dispatcher import FeedDispatcher
from .exceptions import FeedError, NoEntriesFound, PageOutOfRange, UnsupportedFeedType
from .feed_types import FeedType

__all__ = [
    "FeedConfig",
    "FeedDispatcher",
    "FeedError",
    "FeedType",
    "NoEntriesFound",
    "PageOutOfRange",
    "UnsupportedFeedType",
]
