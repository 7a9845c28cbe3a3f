"""Pytest fixtures for reading app tests."""

from datetime import timedelta

from django.contrib.auth.models import User
from django.utils import timezone

import pytest

from reading.models import Article, Tag, UserSettings

FEED_TOKEN = "s3cr3t-feed-token"


@pytest.fixture
def user(db):
    return User.objects.create_user(
        username="alice", email="alice@example.com", password="password"
    )


@pytest.fixture
def user_settings(user):
    return UserSettings.objects.create(user=user, feed_token=FEED_TOKEN)


@pytest.fixture
def other_user(db):
    other = User.objects.create_user(username="bob", email="bob@example.com", password="password")
    UserSettings.objects.create(user=other, feed_token="bobs-token")
    return other


@pytest.fixture
def make_articles(user):
    """Create ``count`` articles for a user, newest first in creation order."""

    def _make(count, owner=None, tags=(), **fields):
        owner = owner or user
        now = timezone.now()
        articles = []
        for i in range(count):
            article = Article.objects.create(
                user=owner,
                name=f"Article {i}",
                identifier=f"https://example.com/{owner.username}/article/{i}",
                content=f"<p>Content {i}</p>",
                date=now - timedelta(minutes=i),
                **fields,
            )
            if tags:
                article.tags.add(*tags)
            articles.append(article)
        return articles

    return _make


@pytest.fixture
def rust_tag(user):
    return Tag.objects.create(user=user, label="Rust")


@pytest.fixture
def feed_kwargs(user, user_settings):
    return {"username": user.username, "token": user_settings.feed_token}
