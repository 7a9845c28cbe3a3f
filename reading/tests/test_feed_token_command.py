from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError

import pytest

from reading.models import Tag, UserSettings


@pytest.mark.django_db
class TestFeedTokenCommand:
    def run(self, *args):
        out = StringIO()
        call_command("feed_token", *args, stdout=out)
        return out.getvalue()

    def test_creates_settings_and_token(self, user):
        output = self.run("alice")

        settings = UserSettings.objects.get(user=user)
        assert settings.feed_token
        assert f"Token: {settings.feed_token}" in output
        assert f"/feed/alice/{settings.feed_token}/unread" in output

    def test_keeps_existing_token(self, user_settings):
        self.run("alice")

        user_settings.refresh_from_db()
        assert user_settings.feed_token == "s3cr3t-feed-token"

    def test_rotate(self, user_settings):
        self.run("alice", "--rotate")

        user_settings.refresh_from_db()
        assert user_settings.feed_token != "s3cr3t-feed-token"

    def test_limit(self, user_settings):
        output = self.run("alice", "--limit", "15")

        user_settings.refresh_from_db()
        assert user_settings.rss_limit == 15
        assert "Page size: 15" in output

    def test_limit_zero_resets_to_default(self, user_settings, settings):
        settings.SHELF_RSS_LIMIT = 50
        user_settings.rss_limit = 15
        user_settings.save()

        output = self.run("alice", "--limit", "0")

        user_settings.refresh_from_db()
        assert user_settings.rss_limit is None
        assert "Page size: 50" in output

    def test_lists_tag_feeds(self, user_settings, rust_tag):
        output = self.run("alice")
        assert "/alice/s3cr3t-feed-token/tags/rust.xml" in output

    def test_lists_tag_without_ascii_label(self, user_settings, user):
        tag = Tag.objects.create(user=user, label="日本語")

        output = self.run("alice")

        assert f"/alice/s3cr3t-feed-token/tags/{tag.slug}.xml" in output

    def test_unknown_user(self, db):
        with pytest.raises(CommandError):
            self.run("mallory")
