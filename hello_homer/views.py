"""
Views for the Hello Homer admin surface.

This module defines the settings page, the manual refresh action used by its
"Get New Quote Now" button, and a JSON view of the current quote.

Version: 1.0
"""
import logging

from django.contrib import admin, messages
from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import redirect, render
from django.utils.translation import gettext as _
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .cache_utils import clear_cached_quote
from .forms import HomerSettingsForm
from .options import load_settings, save_settings
from .provider import get_quote
from .serializers import QuoteSerializer

logger = logging.getLogger(__name__)


@staff_member_required
def settings_page(request):
    """
    Show and save the three Hello Homer settings.

    GET renders the form with the stored values; a valid POST saves them and
    redirects back so a reload does not resubmit.
    """
    if request.method == "POST":
        form = HomerSettingsForm(request.POST)
        if form.is_valid():
            save_settings(form.to_settings())
            messages.success(request, _("Settings saved."))
            return redirect("hello_homer:settings")
    else:
        form = HomerSettingsForm.from_settings(load_settings())

    context = {
        **admin.site.each_context(request),
        "title": _("Hello Homer Settings"),
        "form": form,
    }
    return render(request, "hello_homer/settings.html", context)


class QuoteRefreshAPIView(APIView):
    """
    Drop the cached quote.

    The quote itself is not fetched here; the caller reloads the page and the
    next footer render fetches a new one (or shows the fallback).
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        summary="Clear the cached quote",
        request=None,
        responses={204: OpenApiResponse(description="Cached quote deleted")},
        tags=["Hello Homer"],
    )
    def post(self, request):
        clear_cached_quote()
        logger.info(f"Quote cache cleared by {request.user}")
        return Response(status=status.HTTP_204_NO_CONTENT)


class CurrentQuoteAPIView(APIView):
    """
    Return the quote the footer would show right now.

    Like every lookup this may fetch and cache a new quote on a cache miss.
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        summary="Get the current quote",
        responses={200: QuoteSerializer},
        tags=["Hello Homer"],
    )
    def get(self, request):
        quote = get_quote()
        serializer = QuoteSerializer(quote)
        return Response(serializer.data)
