"""Article selectors for each feed type.

Query selectors return lazy, ordered QuerySets. The tag selector returns a
materialised list.
"""

import logging
from typing import Callable

from django.db.models import QuerySet

from reading.models import Article

from .feed_types import FeedType

logger = logging.getLogger(__name__)


def _articles_for_user(user_id: int) -> QuerySet:
    return (
        Article.objects.filter(user_id=user_id)
        .select_related("user")
        .prefetch_related("tags")
        .order_by("-date", "-id")
    )


def unread_articles(user_id: int) -> QuerySet:
    """Articles not yet archived."""
    return _articles_for_user(user_id).filter(read=False)


def archived_articles(user_id: int) -> QuerySet:
    """Archived (read) articles."""
    return _articles_for_user(user_id).filter(read=True)


def starred_articles(user_id: int) -> QuerySet:
    """Starred articles, archived or not."""
    return _articles_for_user(user_id).filter(starred=True)


def all_articles(user_id: int) -> QuerySet:
    """Every article of the user regardless of status."""
    return _articles_for_user(user_id)


def articles_for_tag(user_id: int, tag_id: int) -> list[Article]:
    """Fetch every article of the user carrying the tag.

    Args:
        user_id: Django user ID
        tag_id: Tag ID (must belong to the user)

    Returns:
        List of articles, newest first
    """
    articles = list(_articles_for_user(user_id).filter(tags__id=tag_id).distinct())
    logger.debug(f"Fetched {len(articles)} articles for tag {tag_id} of user {user_id}")
    return articles


QUERY_SELECTORS: dict[FeedType, Callable[[int], QuerySet]] = {
    FeedType.UNREAD: unread_articles,
    FeedType.ARCHIVE: archived_articles,
    FeedType.STARRED: starred_articles,
    FeedType.ALL: all_articles,
}
