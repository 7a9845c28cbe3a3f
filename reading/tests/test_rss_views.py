import xml.etree.ElementTree as ET

from django.urls import reverse

import pytest

from reading.models import Tag, UserSettings

ATOM = "{http://www.w3.org/2005/Atom}"


def parse_items(response):
    channel = ET.fromstring(response.content).find("channel")
    return channel, channel.findall("item")


@pytest.mark.django_db
class TestUnreadFeed:
    """alice has 7 unread articles and a page size of 5."""

    @pytest.fixture(autouse=True)
    def setup(self, user_settings, make_articles):
        user_settings.rss_limit = 5
        user_settings.save()
        self.articles = make_articles(7)
        make_articles(3, read=True)

    def test_first_page(self, client, feed_kwargs):
        response = client.get(reverse("reading:unread_rss", kwargs=feed_kwargs))

        assert response.status_code == 200
        assert response["Content-Type"] == "application/rss+xml; charset=utf-8"
        channel, items = parse_items(response)
        assert channel.findtext("title") == "shelf - unread feed"
        assert [item.findtext("title") for item in items] == [a.name for a in self.articles[:5]]

    def test_second_page(self, client, feed_kwargs):
        response = client.get(reverse("reading:unread_rss_page", kwargs={**feed_kwargs, "page": 2}))

        assert response.status_code == 200
        _, items = parse_items(response)
        assert [item.findtext("link") for item in items] == [
            a.identifier for a in self.articles[5:]
        ]

    def test_overflow_redirects_to_last_page(self, client, feed_kwargs):
        response = client.get(reverse("reading:unread_rss_page", kwargs={**feed_kwargs, "page": 3}))

        assert response.status_code == 302
        assert response["Location"] == "http://testserver/feed/alice/s3cr3t-feed-token/unread/2"

    def test_xml_route_serves_first_page(self, client, feed_kwargs):
        response = client.get(reverse("reading:unread_xml", kwargs=feed_kwargs))

        assert response.status_code == 200
        _, items = parse_items(response)
        assert len(items) == 5

    def test_page_zero_served_as_first_page(self, client, feed_kwargs):
        response = client.get(reverse("reading:unread_rss_page", kwargs={**feed_kwargs, "page": 0}))

        assert response.status_code == 200
        _, items = parse_items(response)
        assert len(items) == 5

    def test_self_and_pagination_links(self, client, feed_kwargs):
        response = client.get(reverse("reading:unread_rss", kwargs=feed_kwargs))

        channel, _ = parse_items(response)
        links = {link.get("rel"): link.get("href") for link in channel.findall(f"{ATOM}link")}
        base = "http://testserver/feed/alice/s3cr3t-feed-token/unread"
        assert links["self"] == base
        assert links["first"] == f"{base}/1"
        assert links["last"] == f"{base}/2"
        assert links["next"] == f"{base}/2"
        assert "previous" not in links

    def test_post_not_allowed(self, client, feed_kwargs):
        response = client.post(reverse("reading:unread_rss", kwargs=feed_kwargs))
        assert response.status_code == 405


@pytest.mark.django_db
class TestStatusFeeds:
    @pytest.fixture(autouse=True)
    def setup(self, user_settings, make_articles):
        self.unread = make_articles(2)
        self.archived = make_articles(3, read=True)
        self.starred = make_articles(1, starred=True)

    def test_archive(self, client, feed_kwargs):
        response = client.get(reverse("reading:archive_rss", kwargs=feed_kwargs))

        channel, items = parse_items(response)
        assert channel.findtext("title") == "shelf - archive feed"
        assert len(items) == 3

    def test_starred(self, client, feed_kwargs):
        response = client.get(reverse("reading:starred_xml", kwargs=feed_kwargs))

        channel, items = parse_items(response)
        assert channel.findtext("title") == "shelf - starred feed"
        assert len(items) == 1

    def test_all(self, client, feed_kwargs):
        response = client.get(reverse("reading:all_xml", kwargs=feed_kwargs))

        channel, items = parse_items(response)
        assert channel.findtext("title") == "shelf - all feed"
        assert len(items) == 6

    def test_all_xml_self_link(self, client, user_settings, feed_kwargs):
        user_settings.rss_limit = 4
        user_settings.save()

        response = client.get(reverse("reading:all_xml", kwargs=feed_kwargs))

        channel, _ = parse_items(response)
        links = {link.get("rel"): link.get("href") for link in channel.findall(f"{ATOM}link")}
        assert channel.findtext("link") == "http://testserver/feed/alice/s3cr3t-feed-token/all"
        assert links["self"] == "http://testserver/feed/alice/s3cr3t-feed-token/all"
        assert links["next"] == "http://testserver/feed/alice/s3cr3t-feed-token/all/2"

    def test_control_characters_in_content(self, client, feed_kwargs):
        self.unread[0].content = "<p>form\x0cfeed</p>"
        self.unread[0].save()

        response = client.get(reverse("reading:unread_rss", kwargs=feed_kwargs))

        assert response.status_code == 200
        _, items = parse_items(response)
        assert "<p>formfeed</p>" in [item.findtext("description") for item in items]

    def test_all_xml_page_query_parameter(self, client, user_settings, feed_kwargs):
        user_settings.rss_limit = 4
        user_settings.save()

        response = client.get(reverse("reading:all_xml", kwargs=feed_kwargs), {"page": 2})

        _, items = parse_items(response)
        assert len(items) == 2

    def test_all_xml_overflow_redirects_to_path_segment(self, client, user_settings, feed_kwargs):
        user_settings.rss_limit = 4
        user_settings.save()

        response = client.get(reverse("reading:all_xml", kwargs=feed_kwargs), {"page": 9})

        assert response.status_code == 302
        assert response["Location"] == "http://testserver/feed/alice/s3cr3t-feed-token/all/2"
        assert client.get(response["Location"]).status_code == 200

    def test_invalid_page_parameter_served_as_first_page(self, client, feed_kwargs):
        response = client.get(reverse("reading:all_xml", kwargs=feed_kwargs), {"page": "abc"})
        assert response.status_code == 200

    def test_other_users_articles_not_listed(self, client, other_user, make_articles, feed_kwargs):
        make_articles(4, owner=other_user)

        response = client.get(reverse("reading:all_xml", kwargs=feed_kwargs))

        _, items = parse_items(response)
        assert len(items) == 6


@pytest.mark.django_db
class TestEmptyFeeds:
    def test_empty_unread_feed_is_served(self, client, feed_kwargs):
        response = client.get(reverse("reading:unread_rss", kwargs=feed_kwargs))

        assert response.status_code == 200
        _, items = parse_items(response)
        assert items == []

    def test_empty_tag_feed_is_not_found(self, client, rust_tag, feed_kwargs):
        url = reverse("reading:tag_rss", kwargs={**feed_kwargs, "slug": rust_tag.slug})

        assert client.get(url).status_code == 404
        assert client.get(url, {"page": 3}).status_code == 404


@pytest.mark.django_db
class TestTagFeed:
    """Tag "rust" holds 12 articles and the page size is 10."""

    @pytest.fixture(autouse=True)
    def setup(self, user_settings, rust_tag, make_articles):
        user_settings.rss_limit = 10
        user_settings.save()
        self.tagged = make_articles(12, tags=[rust_tag])
        make_articles(5)

    @pytest.fixture
    def url(self, feed_kwargs, rust_tag):
        return reverse("reading:tag_rss", kwargs={**feed_kwargs, "slug": rust_tag.slug})

    def test_first_page(self, client, url):
        response = client.get(url)

        assert response.status_code == 200
        channel, items = parse_items(response)
        assert channel.findtext("title") == "shelf - tag (Rust) feed"
        assert len(items) == 10
        assert items[0].findtext("category") == "Rust"

    def test_second_page(self, client, url):
        response = client.get(url, {"page": 2})

        _, items = parse_items(response)
        assert [item.findtext("title") for item in items] == [a.name for a in self.tagged[10:]]

    def test_overflow_redirects_with_query_parameter(self, client, url):
        response = client.get(url, {"page": 5})

        assert response.status_code == 302
        assert (
            response["Location"] == "http://testserver/alice/s3cr3t-feed-token/tags/rust.xml?page=2"
        )

    def test_pagination_links_use_query_parameter(self, client, url):
        response = client.get(url, {"page": 2})

        channel, _ = parse_items(response)
        links = {link.get("rel"): link.get("href") for link in channel.findall(f"{ATOM}link")}
        assert links["previous"] == f"http://testserver{url}?page=1"
        assert "next" not in links

    def test_unknown_tag(self, client, feed_kwargs):
        url = reverse("reading:tag_rss", kwargs={**feed_kwargs, "slug": "python"})
        assert client.get(url).status_code == 404

    def test_other_users_tag(self, client, other_user, feed_kwargs):
        Tag.objects.create(user=other_user, label="Go")
        url = reverse("reading:tag_rss", kwargs={**feed_kwargs, "slug": "go"})
        assert client.get(url).status_code == 404


@pytest.mark.django_db
class TestFeedToken:
    def test_wrong_token(self, client, user_settings, user):
        url = reverse("reading:unread_rss", kwargs={"username": user.username, "token": "nope"})
        assert client.get(url).status_code == 404

    def test_unknown_user(self, client, user_settings):
        url = reverse(
            "reading:unread_rss", kwargs={"username": "mallory", "token": user_settings.feed_token}
        )
        assert client.get(url).status_code == 404

    def test_token_of_another_user(self, client, user_settings, other_user):
        url = reverse(
            "reading:unread_rss",
            kwargs={"username": other_user.username, "token": user_settings.feed_token},
        )
        assert client.get(url).status_code == 404

    def test_user_without_token(self, client, user):
        UserSettings.objects.create(user=user)
        url = reverse("reading:unread_rss", kwargs={"username": user.username, "token": "x"})
        assert client.get(url).status_code == 404

    def test_user_without_settings(self, client, user):
        url = reverse("reading:unread_rss", kwargs={"username": user.username, "token": "x"})
        assert client.get(url).status_code == 404

    def test_inactive_user(self, client, user, user_settings, feed_kwargs):
        user.is_active = False
        user.save()
        assert client.get(reverse("reading:unread_rss", kwargs=feed_kwargs)).status_code == 404

    def test_rotated_token_invalidates_old_urls(self, client, user_settings, feed_kwargs):
        old_url = reverse("reading:unread_rss", kwargs=feed_kwargs)
        new_token = user_settings.generate_feed_token()

        assert client.get(old_url).status_code == 404
        new_url = reverse("reading:unread_rss", kwargs={**feed_kwargs, "token": new_token})
        assert client.get(new_url).status_code == 200
