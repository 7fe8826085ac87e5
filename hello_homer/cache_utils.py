"""
Cache utility functions for the hello_homer app.

This module provides the manual cache operations behind the refresh button,
the management command and the background prefetch task.
"""
import logging

from django.core.cache import cache

from .key_generators import get_quote_cache_key
from .provider import QuoteProvider
from .quote import Quote

logger = logging.getLogger(__name__)


def get_cached_quote():
    """
    Return the cached quote without fetching, or None when nothing is cached.
    """
    value = cache.get(get_quote_cache_key())
    if value is None:
        return None
    return Quote.from_dict(value)


def clear_cached_quote():
    """
    Delete the cached quote so the next render fetches a fresh one.
    """
    key = get_quote_cache_key()
    cache.delete(key)
    logger.info(f"Invalidated quote cache: {key}")


def warm_quote_cache(force=False):
    """
    Make sure a quote is cached.

    Args:
        force: Drop any cached quote first so a new one is always fetched

    Returns:
        The QuoteResult of the lookup; a fallback result means nothing was cached
    """
    provider = QuoteProvider(cache=cache)
    if force:
        provider.clear()
    result = provider.get_quote_result()
    if result.is_fallback:
        logger.warning(f"Could not warm quote cache: {result.reason}")
    else:
        logger.info(f"Quote cache warm ({result.source})")
    return result
