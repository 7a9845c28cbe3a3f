"""Database models for the application."""

import hashlib
import secrets

from django.db import models
from django.utils import timezone
from django.utils.text import slugify


class Tag(models.Model):
    """User-defined label attached to saved articles."""

    label = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, blank=True)
    user = models.ForeignKey("auth.User", on_delete=models.CASCADE, related_name="tags")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Tag"
        verbose_name_plural = "Tags"
        unique_together = [["slug", "user"]]
        ordering = ["label"]

    def __str__(self):
        return self.label

    def save(self, *args, **kwargs):
        """Derive a slug unique to the user from the label when none was given."""
        if not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def _unique_slug(self) -> str:
        # Labels without ASCII letters or digits slugify to ""
        base = slugify(self.label)[:240]
        if not base:
            base = "tag-" + hashlib.sha1(self.label.encode()).hexdigest()[:8]

        siblings = Tag.objects.filter(user_id=self.user_id).exclude(pk=self.pk)
        slug = base
        suffix = 2
        while siblings.filter(slug=slug).exists():
            slug = f"{base}-{suffix}"
            suffix += 1
        return slug


class Article(models.Model):
    """Article saved by a user."""

    name = models.CharField(max_length=500)  # Article title
    identifier = models.TextField()  # Original URL
    content = models.TextField(blank=True, default="", help_text="Processed content")
    author = models.CharField(max_length=255, blank=True, default="")
    date = models.DateTimeField(default=timezone.now)
    read = models.BooleanField(default=False, help_text="Archived")
    starred = models.BooleanField(default=False)
    user = models.ForeignKey("auth.User", on_delete=models.CASCADE, related_name="articles")
    tags = models.ManyToManyField(Tag, blank=True, related_name="articles")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Article"
        verbose_name_plural = "Articles"
        ordering = ["-date", "-id"]
        indexes = [
            models.Index(fields=["user", "date"], name="article_user_date_idx"),
            models.Index(fields=["user", "read", "date"], name="article_user_read_idx"),
            models.Index(fields=["user", "starred", "date"], name="article_user_starred_idx"),
        ]

    def __str__(self):
        return self.name


class UserSettings(models.Model):
    """Per-user feed settings."""

    user = models.OneToOneField(
        "auth.User", on_delete=models.CASCADE, related_name="user_settings", unique=True
    )
    feed_token = models.CharField(
        max_length=64,
        blank=True,
        default="",
        db_index=True,
        help_text="Secret embedded in feed URLs. Leave blank to disable feeds.",
    )
    rss_limit = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Articles per feed page. Leave blank to use the site default.",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "User Settings"
        verbose_name_plural = "User Settings"

    def __str__(self):
        return f"Settings for {self.user.username}"

    def generate_feed_token(self) -> str:
        """Replace the feed token with a fresh one and persist it."""
        self.feed_token = secrets.token_urlsafe(24)
        self.save(update_fields=["feed_token", "updated_at"])
        return self.feed_token
