"""
Contact API URL routes.
"""

from django.urls import path

from . import views

app_name = "contact"

urlpatterns = [
    path("", views.submit_inquiry, name="submit"),
]
