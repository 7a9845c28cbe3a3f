"""
Feed exceptions.

Raised by the feed dispatcher and its pagers. Only ``PageOutOfRange`` is
recovered locally (as a redirect); the others propagate to the view layer.
"""


class FeedError(Exception):
    """Base exception for all feed errors."""

    pass


class UnsupportedFeedType(FeedError):
    """The requested feed type has no article selector."""

    pass


class NoEntriesFound(FeedError):
    """There is nothing to paginate for the requested feed."""

    pass


class PageOutOfRange(FeedError):
    """
    The requested page lies beyond the last page of the feed.

    Attributes:
        page: Requested page number
        last_page: Last page that holds articles
    """

    def __init__(self, page: int, last_page: int):
        self.page = page
        self.last_page = last_page
        super().__init__(f"Page {page} is out of range (last page is {last_page})")
