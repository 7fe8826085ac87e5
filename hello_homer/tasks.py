"""
Celery tasks for the hello_homer app.

Version: 1.0
"""
import logging

from celery import shared_task

from .cache_utils import get_cached_quote, warm_quote_cache
from .exceptions import HomerParsingError

logger = logging.getLogger(__name__)


@shared_task
def prefetch_quote():
    """
    Fetch and cache a quote when none is cached.

    Keeps admin page loads off the Frinkiac API most of the time. A failed
    fetch leaves the cache empty, exactly as a failed render would.

    Schedule: Runs every 30 minutes

    Returns:
        The source of the quote: "cache", "remote" or "fallback"
    """
    try:
        if get_cached_quote() is not None:
            logger.info("Quote already cached, skipping prefetch")
            return "cache"
    except HomerParsingError as e:
        logger.warning(f"Replacing unreadable cached quote: {e.message}")

    result = warm_quote_cache(force=False)
    return result.source
