"""
URL patterns for the hello_homer app, mounted under ``admin/hello-homer/``.

Version: 1.0
"""
from django.urls import path

from .views import CurrentQuoteAPIView, QuoteRefreshAPIView, settings_page

app_name = "hello_homer"

urlpatterns = [
    path("settings/", settings_page, name="settings"),
    path("refresh/", QuoteRefreshAPIView.as_view(), name="refresh"),
    path("quote/", CurrentQuoteAPIView.as_view(), name="quote"),
]
