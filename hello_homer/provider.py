"""
Quote provider: cache-or-fetch with fallback.

This is the one piece of real logic in Hello Homer. Every admin render asks the
provider for the current quote; the provider answers from the cache when it can
and otherwise fetches a fresh frame from Frinkiac, caching it for the
configured duration. Failures never propagate: they produce the fallback quote,
which is never cached so the next render tries again.

Version: 1.0
"""
import logging

from django.conf import settings
from django.core.cache import cache as default_cache

from .client import FrinkiacClient
from .exceptions import HomerError, HomerParsingError
from .key_generators import get_quote_cache_key
from .options import OptionStore, load_settings
from .quote import (
    SOURCE_CACHE,
    SOURCE_FALLBACK,
    SOURCE_REMOTE,
    Quote,
    QuoteResult,
    fallback_quote,
    parse_quote_payload,
)

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_URL_TEMPLATE = "https://frinkiac.com/img/{key}/{timestamp}.jpg"


class QuoteProvider:
    """
    Serve the current quote from the cache or the Frinkiac API.

    Collaborators are injected so the provider can run without Django's cache,
    database or network:

    - ``cache``: any object with Django's ``get``/``set``/``delete`` cache API
    - ``options``: any object with ``get(name, default)``, read for the TTL
    - ``client``: an object with ``get_random()`` returning the decoded payload;
      when omitted a ``FrinkiacClient`` is opened for each fetch
    """

    def __init__(self, cache=None, options=None, client=None, image_url_template=None):
        self.cache = cache if cache is not None else default_cache
        self.options = options if options is not None else OptionStore()
        self.client = client
        self.image_url_template = image_url_template or getattr(
            settings, "HOMER_IMAGE_URL_TEMPLATE", DEFAULT_IMAGE_URL_TEMPLATE
        )
        self.cache_key = get_quote_cache_key()

    def get_quote(self) -> Quote:
        """
        Return the current quote. Never raises.

        Note that this read can write: on a cache miss a successfully fetched
        quote is stored in the shared cache.
        """
        return self.get_quote_result().quote

    def get_quote_result(self) -> QuoteResult:
        """
        Same lookup as ``get_quote`` but tagged with where the quote came from.

        Returns:
            QuoteResult with source ``cache``, ``remote`` or ``fallback``
        """
        cached = self._get_cached()
        if cached is not None:
            return QuoteResult(quote=cached, source=SOURCE_CACHE)

        try:
            payload = self._fetch()
            quote = parse_quote_payload(payload, self.image_url_template)
        except HomerParsingError as e:
            logger.warning(f"Hello Homer received a malformed payload: {e.message}")
            return QuoteResult(quote=fallback_quote(), source=SOURCE_FALLBACK, reason=e.message)
        except HomerError as e:
            logger.error(f"Hello Homer API Error: {e.message}")
            return QuoteResult(quote=fallback_quote(), source=SOURCE_FALLBACK, reason=e.message)

        timeout = load_settings(self.options).cache_duration_seconds
        self.cache.set(self.cache_key, quote.to_dict(), timeout=timeout)
        logger.info(f"Cached new quote from '{quote.episode_title}' for {timeout}s")

        return QuoteResult(quote=quote, source=SOURCE_REMOTE)

    def clear(self) -> None:
        """Delete the cached quote so the next lookup fetches a new one."""
        self.cache.delete(self.cache_key)

    def _fetch(self):
        if self.client is not None:
            return self.client.get_random()
        with FrinkiacClient() as client:
            return client.get_random()

    def _get_cached(self):
        value = self.cache.get(self.cache_key)
        if value is None:
            return None
        try:
            quote = Quote.from_dict(value)
        except HomerParsingError as e:
            logger.warning(f"Discarding unreadable cached quote: {e.message}")
            return None
        logger.debug(f"Quote cache hit for key: {self.cache_key}")
        return quote


def get_quote() -> Quote:
    """Return the current quote using the Django-configured collaborators."""
    return QuoteProvider().get_quote()
