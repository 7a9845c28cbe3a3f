"""Project-level URL configuration."""

from typing import Any, List

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns: List[Any] = [
    path("admin/", admin.site.urls),
    path("", include("reading.urls")),
]

if settings.DEBUG:
    # In DEBUG, serve static files as well (Whitenoise handles this in prod)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
