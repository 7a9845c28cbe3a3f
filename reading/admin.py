"""Admin configuration for the application."""

from django.contrib import admin, messages

from djangoql.admin import DjangoQLSearchMixin
from import_export.admin import ImportExportModelAdmin

from .models import Article, Tag, UserSettings

# Customize Admin Site
admin.site.site_header = "Shelf"
admin.site.site_title = "Shelf Admin"
admin.site.index_title = "Welcome to Shelf"


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    """Admin configuration for Tag model."""

    list_display = ["label", "slug", "user", "created_at"]
    list_filter = ["user", "created_at"]
    search_fields = ["label", "slug", "user__username"]
    readonly_fields = ["created_at", "updated_at"]
    list_select_related = ["user"]

    fieldsets = (
        (None, {"fields": ("label", "slug", "user")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )


@admin.register(Article)
class ArticleAdmin(ImportExportModelAdmin, DjangoQLSearchMixin):
    """Admin configuration for Article model."""

    list_display = ["name", "user", "author", "date", "read", "starred", "created_at"]
    list_filter = ["user", "read", "starred", "tags", "date", "created_at"]
    search_fields = ["name", "author", "identifier", "content"]
    readonly_fields = ["created_at", "updated_at"]
    filter_horizontal = ["tags"]
    save_as = True
    list_select_related = ["user"]

    fieldsets = (
        (None, {"fields": ("name", "identifier", "user")}),
        ("Content", {"fields": ("content",)}),
        ("Metadata", {"fields": ("author", "date", "tags")}),
        ("Status", {"fields": ("read", "starred")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )


@admin.register(UserSettings)
class UserSettingsAdmin(ImportExportModelAdmin, DjangoQLSearchMixin):
    """Admin configuration for UserSettings model."""

    list_display = ["user", "rss_limit", "has_feed_token", "updated_at"]
    list_filter = ["created_at", "updated_at"]
    search_fields = ["user__username", "user__email"]
    readonly_fields = ["created_at", "updated_at"]
    actions = ["rotate_feed_tokens"]
    list_select_related = ["user"]

    fieldsets = (
        (None, {"fields": ("user",)}),
        ("Feeds", {"fields": ("feed_token", "rss_limit")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )

    @admin.display(boolean=True, description="Feed token")
    def has_feed_token(self, obj):
        return bool(obj.feed_token)

    @admin.action(description="Generate new feed tokens")
    def rotate_feed_tokens(self, request, queryset):
        """Replace the feed token of each selected user; old feed URLs stop working."""
        count = 0
        for user_settings in queryset:
            user_settings.generate_feed_token()
            count += 1
        self.message_user(
            request, f"Generated new feed tokens for {count} users.", messages.SUCCESS
        )
