"""Reading application views."""

from .rss import all_feed, archive_feed, starred_feed, tag_feed, unread_feed

__all__ = [
    "all_feed",
    "archive_feed",
    "starred_feed",
    "tag_feed",
    "unread_feed",
]
