"""Feed types served by the RSS endpoints."""

from enum import Enum

from .exceptions import UnsupportedFeedType


class FeedType(str, Enum):
    """Which articles a feed lists."""

    UNREAD = "unread"
    ARCHIVE = "archive"
    STARRED = "starred"
    ALL = "all"
    TAG = "tag"

    @classmethod
    def parse(cls, value) -> "FeedType":
        """Return the feed type for ``value``.

        Raises:
            UnsupportedFeedType: If ``value`` names no feed type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedFeedType(f'Type "{value}" is not implemented.') from e
