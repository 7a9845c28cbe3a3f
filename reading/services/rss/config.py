"""Process-wide feed configuration."""

from dataclasses import dataclass

from django.conf import settings

DEFAULT_RSS_LIMIT = 50


@dataclass(frozen=True)
class FeedConfig:
    """Settings the dispatcher needs for every request.

    Attributes:
        default_rss_limit: Page size for users without their own limit
        domain_name: Public domain name shown in feed metadata
        version: Application version shown as feed generator
        site_name: Name used in feed titles
    """

    default_rss_limit: int = DEFAULT_RSS_LIMIT
    domain_name: str = ""
    version: str = ""
    site_name: str = "shelf"

    def __post_init__(self):
        if self.default_rss_limit < 1:
            raise ValueError(f"default_rss_limit must be positive, got {self.default_rss_limit}")

    @classmethod
    def from_settings(cls) -> "FeedConfig":
        """Build the config from Django settings."""
        return cls(
            default_rss_limit=getattr(settings, "SHELF_RSS_LIMIT", DEFAULT_RSS_LIMIT),
            domain_name=getattr(settings, "SHELF_DOMAIN_NAME", ""),
            version=getattr(settings, "SHELF_VERSION", ""),
            site_name=getattr(settings, "SHELF_SITE_NAME", "shelf"),
        )
