"""
URL configuration for the Thompson Digital site.
"""

from django.urls import include, path

from apps.web.core import views as core_views

urlpatterns = [
    path("health", core_views.health, name="health"),
    # Public API endpoints
    path("api/contact", include("apps.web.contact.urls")),
    # Marketing pages
    path("", include("apps.web.pages.urls")),
]
