"""Pagers for feed pages.

Two strategies share one interface: ``QuerySetPager`` counts and slices a
lazy QuerySet in the database, ``ListPager`` pages over articles that were
already fetched.
"""

from django.core.paginator import EmptyPage, Page, PageNotAnInteger, Paginator
from django.db.models import QuerySet

from .exceptions import PageOutOfRange


class FeedPager(Paginator):
    """Paginator raising feed errors instead of Django's EmptyPage."""

    def get_feed_page(self, number: int) -> Page:
        """Return page ``number``.

        Raises:
            PageOutOfRange: If the page lies outside 1..num_pages
        """
        try:
            return self.page(number)
        except (EmptyPage, PageNotAnInteger) as e:
            raise PageOutOfRange(number, self.num_pages) from e

    @property
    def is_empty(self) -> bool:
        return self.count == 0


class QuerySetPager(FeedPager):
    """Pages over a lazy QuerySet, fetching one page per request."""

    def __init__(self, queryset: QuerySet, per_page: int, **kwargs):
        if not isinstance(queryset, QuerySet):
            raise TypeError(f"QuerySetPager needs a QuerySet, got {type(queryset).__name__}")
        super().__init__(queryset, per_page, **kwargs)


class ListPager(FeedPager):
    """Pages over an in-memory sequence of articles."""

    def __init__(self, items, per_page: int, **kwargs):
        super().__init__(list(items), per_page, **kwargs)
