"""Django command to show or rotate a user's feed token."""

from django.contrib.auth.models import User
from django.core.management.base import BaseCommand, CommandError
from django.urls import reverse

from reading.models import UserSettings
from reading.services.rss import FeedConfig, FeedType


class Command(BaseCommand):
    help = "Print the RSS feed URLs of a user, creating a feed token if needed"

    def add_arguments(self, parser):
        parser.add_argument("username", type=str, help="Owner of the feeds")
        parser.add_argument(
            "--rotate", action="store_true", help="Replace the feed token with a new one"
        )
        parser.add_argument(
            "--limit", type=int, help="Articles per feed page for this user (0 to use the default)"
        )

    def handle(self, *args, **options):
        username = options["username"]
        limit = options.get("limit")

        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist as e:
            raise CommandError(f"User '{username}' does not exist") from e

        if limit is not None and limit < 0:
            raise CommandError("--limit must not be negative")

        user_settings, _ = UserSettings.objects.get_or_create(user=user)

        if options["rotate"] or not user_settings.feed_token:
            user_settings.generate_feed_token()
            self.stdout.write(self.style.SUCCESS(f"Generated new feed token for {username}"))

        if limit is not None:
            user_settings.rss_limit = limit or None
            user_settings.save(update_fields=["rss_limit", "updated_at"])

        config = FeedConfig.from_settings()
        self.stdout.write(f"Token: {user_settings.feed_token}")
        self.stdout.write(f"Page size: {user_settings.rss_limit or config.default_rss_limit}")

        base = f"https://{config.domain_name}" if config.domain_name else ""
        kwargs = {"username": username, "token": user_settings.feed_token}
        for feed_type in (FeedType.UNREAD, FeedType.ARCHIVE, FeedType.STARRED, FeedType.ALL):
            url = reverse(f"reading:{feed_type.value}_rss", kwargs=kwargs)
            self.stdout.write(f"  {feed_type.value:<8} {base}{url}")

        for tag in user.tags.all():
            url = reverse("reading:tag_rss", kwargs={**kwargs, "slug": tag.slug})
            self.stdout.write(f"  {'tag':<8} {base}{url}  ({tag.label})")
