"""Feed access: resolve the owner of a feed URL from its username and token."""

import logging
import secrets
from functools import wraps

from django.contrib.auth.models import User
from django.http import Http404
from django.shortcuts import get_object_or_404

from reading.models import Tag

logger = logging.getLogger(__name__)


def resolve_feed_user(username: str, token: str) -> User:
    """Return the active user owning ``token``.

    Users without a feed token never match.

    Raises:
        Http404: If no active user matches both username and token
    """
    user = (
        User.objects.select_related("user_settings")
        .filter(username=username, is_active=True)
        .first()
    )
    settings = getattr(user, "user_settings", None) if user else None

    if not token or settings is None or not settings.feed_token:
        raise Http404("User not found.")

    if not secrets.compare_digest(settings.feed_token.encode(), token.encode()):
        raise Http404("User not found.")

    return user


def get_user_tag_or_404(user: User, slug: str) -> Tag:
    """Return the user's tag with ``slug``."""
    return get_object_or_404(Tag, user=user, slug=slug)


def feed_token_required(view_func):
    """Decorator resolving the feed owner from the ``username`` and ``token`` URL kwargs.

    Attaches the user to ``request.feed_user``. Unknown users and wrong
    tokens get a 404 so feed URLs do not reveal which usernames exist.
    """

    @wraps(view_func)
    def wrapper(request, username, token, *args, **kwargs):
        try:
            user = resolve_feed_user(username, token)
        except Http404:
            logger.warning(
                f"Rejected feed token for '{username}' on {request.path} "
                f"from {request.META.get('REMOTE_ADDR')}"
            )
            raise

        request.feed_user = user
        return view_func(request, *args, **kwargs)

    return wrapper
