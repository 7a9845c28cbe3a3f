"""RSS rendering for feed pages.

Serializes one page of articles into an RSS 2.0 document with Django's
feed generator.
"""

import logging
import re
from typing import Callable

from django.conf import settings
from django.core.paginator import Page
from django.http import HttpResponse
from django.utils.feedgenerator import Rss201rev2Feed

from .config import FeedConfig

logger = logging.getLogger(__name__)

RSS_CONTENT_TYPE = "application/rss+xml; charset=utf-8"

PAGINATION_RELS = ("first", "previous", "next", "last")

# Characters XML 1.0 does not allow, tab, LF and CR excepted
XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")


class PagedRssFeed(Rss201rev2Feed):
    """RSS 2.0 feed with atom pagination links, generator and webMaster."""

    content_type = RSS_CONTENT_TYPE

    def add_root_elements(self, handler):
        super().add_root_elements(handler)
        for rel in PAGINATION_RELS:
            href = self.feed.get(f"{rel}_url")
            if href:
                handler.addQuickElement("atom:link", None, {"rel": rel, "href": href})
        if self.feed.get("generator"):
            handler.addQuickElement("generator", self.feed["generator"])
        if self.feed.get("webmaster"):
            handler.addQuickElement("webMaster", self.feed["webmaster"])


def xml_safe(text: str) -> str:
    """Drop characters that cannot appear in an XML 1.0 document."""
    return XML_INVALID_CHARS.sub("", text or "")


def _pagination_urls(page: Page, page_url: Callable[[int], str]) -> dict[str, str]:
    urls = {
        "first_url": page_url(1),
        "last_url": page_url(page.paginator.num_pages),
    }
    if page.has_previous():
        urls["previous_url"] = page_url(page.previous_page_number())
    if page.has_next():
        urls["next_url"] = page_url(page.next_page_number())
    return urls


def build_feed(
    page: Page,
    *,
    feed_url: str,
    page_url: Callable[[int], str],
    type_label: str,
    username: str,
    config: FeedConfig,
) -> PagedRssFeed:
    """Build the feed document for one page.

    Args:
        page: Django page of articles
        feed_url: Canonical absolute URL of the feed
        page_url: Returns the absolute URL of a given page of this feed
        type_label: Feed type shown in the title (e.g. "unread", "tag (rust)")
        username: Owner of the articles
        config: Process-wide feed configuration

    Returns:
        Feed generator ready to be written
    """
    generator = config.site_name
    if config.version:
        generator = f"{generator} {config.version}"

    webmaster = None
    if config.domain_name:
        webmaster = f"{username}@{config.domain_name}"

    feed = PagedRssFeed(
        title=xml_safe(f"{config.site_name} - {type_label} feed"),
        link=feed_url,
        description=xml_safe(f"{config.site_name} {type_label} elements for {username}"),
        language=settings.LANGUAGE_CODE,
        feed_url=feed_url,
        generator=generator,
        webmaster=webmaster,
        **_pagination_urls(page, page_url),
    )

    for article in page.object_list:
        feed.add_item(
            title=xml_safe(article.name),
            link=article.identifier,
            description=xml_safe(article.content),
            author_name=xml_safe(article.author) or None,
            pubdate=article.date,
            updateddate=article.updated_at,
            unique_id=article.identifier,
            unique_id_is_permalink=True,
            categories=[xml_safe(tag.label) for tag in article.tags.all()],
        )

    return feed


def render_feed(page: Page, **kwargs) -> HttpResponse:
    """Render one page of articles as an RSS response.

    Takes the same keyword arguments as ``build_feed``.
    """
    feed = build_feed(page, **kwargs)
    response = HttpResponse(content_type=RSS_CONTENT_TYPE)
    feed.write(response, "utf-8")
    logger.debug(f"Rendered {feed.num_items()} items for {kwargs.get('feed_url')}")
    return response
