"""RSS feed views.

Feed readers authenticate with the username and feed token embedded in the
URL instead of a session.
"""

import logging

from django.http import Http404
from django.views.decorators.http import require_GET

from reading.services.rss import FeedDispatcher, FeedType, NoEntriesFound
from reading.services.rss.access import feed_token_required, get_user_tag_or_404

logger = logging.getLogger(__name__)


def _page_number(value) -> int:
    """Parse a page number, falling back to 1 for missing or invalid values."""
    try:
        page = int(value)
    except (TypeError, ValueError):
        return 1
    return max(page, 1)


def _show_entries(request, feed_type: FeedType, page, tag=None):
    try:
        return FeedDispatcher().render_feed(
            request, feed_type, request.feed_user, _page_number(page), tag=tag
        )
    except NoEntriesFound as e:
        logger.warning(
            f"No entries for {feed_type.value} feed of {request.feed_user.username}: {e}"
        )
        raise Http404("No entries found?") from e


@require_GET
@feed_token_required
def unread_feed(request, page=1):
    """Unread articles of the feed owner."""
    return _show_entries(request, FeedType.UNREAD, page)


@require_GET
@feed_token_required
def archive_feed(request, page=1):
    """Archived articles of the feed owner."""
    return _show_entries(request, FeedType.ARCHIVE, page)


@require_GET
@feed_token_required
def starred_feed(request, page=1):
    """Starred articles of the feed owner."""
    return _show_entries(request, FeedType.STARRED, page)


@require_GET
@feed_token_required
def all_feed(request, page=None):
    """All articles of the feed owner.

    The page comes from the URL path on ``/feed/...`` routes and from the
    ``page`` query parameter on ``all.xml``.
    """
    if page is None:
        page = request.GET.get("page", 1)
    return _show_entries(request, FeedType.ALL, page)


@require_GET
@feed_token_required
def tag_feed(request, slug):
    """Articles of the feed owner carrying the tag ``slug``.

    Query parameters:
    - page: Page number (default 1)
    """
    tag = get_user_tag_or_404(request.feed_user, slug)
    return _show_entries(request, FeedType.TAG, request.GET.get("page", 1), tag=tag)
