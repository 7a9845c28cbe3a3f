"""RSS feed URL configuration.

Maps feed URLs to the feed views. Every route carries the owner's username
and feed token.
"""

from django.urls import path

from reading.views import all_feed, archive_feed, starred_feed, tag_feed, unread_feed

app_name = "reading"

urlpatterns = [
    # Paged feeds (page as path segment)
    path("feed/<str:username>/<str:token>/unread", unread_feed, name="unread_rss"),
    path("feed/<str:username>/<str:token>/unread/<int:page>", unread_feed, name="unread_rss_page"),
    path("feed/<str:username>/<str:token>/archive", archive_feed, name="archive_rss"),
    path(
        "feed/<str:username>/<str:token>/archive/<int:page>", archive_feed, name="archive_rss_page"
    ),
    path("feed/<str:username>/<str:token>/starred", starred_feed, name="starred_rss"),
    path(
        "feed/<str:username>/<str:token>/starred/<int:page>", starred_feed, name="starred_rss_page"
    ),
    path("feed/<str:username>/<str:token>/all", all_feed, name="all_rss"),
    path("feed/<str:username>/<str:token>/all/<int:page>", all_feed, name="all_rss_page"),
    # XML feeds (first page, or page as query parameter)
    path("<str:username>/<str:token>/unread.xml", unread_feed, name="unread_xml"),
    path("<str:username>/<str:token>/archive.xml", archive_feed, name="archive_xml"),
    path("<str:username>/<str:token>/starred.xml", starred_feed, name="starred_xml"),
    path("<str:username>/<str:token>/all.xml", all_feed, name="all_xml"),
    path("<str:username>/<str:token>/tags/<slug:slug>.xml", tag_feed, name="tag_rss"),
]
