"""Feed dispatcher.

Picks the article selector for a feed type, paginates the result and
either renders the requested page or redirects to the last valid one.
"""

import logging

from django.contrib.auth.models import User
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.urls import reverse

from reading.models import Tag

from .config import FeedConfig
from .exceptions import NoEntriesFound, PageOutOfRange, UnsupportedFeedType
from .feed_types import FeedType
from .pagination import FeedPager, ListPager, QuerySetPager
from .renderer import render_feed
from .selectors import QUERY_SELECTORS, articles_for_tag

logger = logging.getLogger(__name__)


class FeedDispatcher:
    """Renders paginated RSS feeds of a user's articles."""

    def __init__(self, config: FeedConfig | None = None):
        self.config = config or FeedConfig.from_settings()

    def render_feed(
        self,
        request: HttpRequest,
        feed_type: FeedType | str,
        user: User,
        page: int = 1,
        tag: Tag | None = None,
    ) -> HttpResponse:
        """Render one page of a feed.

        Args:
            request: Incoming request, used to build absolute URLs
            feed_type: Feed type or its string value
            user: Feed owner, already authenticated by the caller
            page: 1-based page number
            tag: Tag to list, required for tag feeds

        Returns:
            RSS response, or a 302 redirect to the last page when ``page``
            lies beyond it

        Raises:
            UnsupportedFeedType: If the feed type is unknown or a tag feed has no tag
            NoEntriesFound: If a tag feed is empty, or the page is out of range at page 1
        """
        feed_type = FeedType.parse(feed_type)
        pager = self.build_pager(feed_type, user, tag)
        feed_url = self.feed_url(request, feed_type, user, tag)

        # Tag feeds have nothing to render without articles
        if feed_type is FeedType.TAG and pager.is_empty:
            raise NoEntriesFound(f"No entries found for tag '{tag.slug}'")

        try:
            entries = pager.get_feed_page(page)
        except PageOutOfRange as e:
            if page > 1:
                location = self.page_url(feed_type, feed_url, e.last_page)
                logger.info(
                    f"Page {page} of {feed_type.value} feed out of range, redirecting to {location}"
                )
                return HttpResponseRedirect(location)
            raise NoEntriesFound(str(e)) from e

        logger.info(
            f"Serving {feed_type.value} feed page {entries.number}/{pager.num_pages} "
            f"({len(entries)} articles) for {user.username}"
        )

        return render_feed(
            entries,
            feed_url=feed_url,
            page_url=lambda number: self.page_url(feed_type, feed_url, number),
            type_label=self.type_label(feed_type, tag),
            username=user.username,
            config=self.config,
        )

    def page_size(self, user: User) -> int:
        """Articles per page: the user's own limit if set, else the site default."""
        settings = getattr(user, "user_settings", None)
        rss_limit = settings.rss_limit if settings else None
        return rss_limit or self.config.default_rss_limit

    def build_pager(self, feed_type: FeedType, user: User, tag: Tag | None = None) -> FeedPager:
        """Return the pager over the articles of ``feed_type``."""
        per_page = self.page_size(user)

        if feed_type is FeedType.TAG:
            if tag is None:
                raise UnsupportedFeedType("Tag feeds need a tag.")
            return ListPager(articles_for_tag(user.id, tag.id), per_page)

        try:
            selector = QUERY_SELECTORS[feed_type]
        except KeyError as e:
            raise UnsupportedFeedType(f'Type "{feed_type.value}" is not implemented.') from e

        logger.debug(f"Selector '{selector.__name__}' used for {feed_type.value} feed")
        return QuerySetPager(selector(user.id), per_page)

    @staticmethod
    def feed_url(
        request: HttpRequest, feed_type: FeedType, user: User, tag: Tag | None = None
    ) -> str:
        """Canonical absolute URL of the feed, without page."""
        kwargs = {
            "username": user.username,
            "token": user.user_settings.feed_token,
        }
        if feed_type is FeedType.TAG:
            kwargs["slug"] = tag.slug
        return request.build_absolute_uri(reverse(f"reading:{feed_type.value}_rss", kwargs=kwargs))

    @staticmethod
    def page_url(feed_type: FeedType, feed_url: str, number: int) -> str:
        """URL of page ``number``: query parameter for tag feeds, path segment otherwise."""
        if feed_type is FeedType.TAG:
            return f"{feed_url}?page={number}"
        return f"{feed_url}/{number}"

    @staticmethod
    def type_label(feed_type: FeedType, tag: Tag | None = None) -> str:
        if feed_type is FeedType.TAG:
            return f"tag ({tag.label})"
        return feed_type.value
