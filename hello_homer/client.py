"""
Frinkiac (https://frinkiac.com) API client.

Fetches a random frame with its subtitles and episode details. Transport and
decoding failures are raised as Hello Homer exceptions; the caller decides what
to show instead.
"""
import logging
from typing import Any, Dict, Optional

import requests
from django.conf import settings

from .exceptions import HomerConnectionError, HomerParsingError, HomerResponseError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://frinkiac.com/api/random"
DEFAULT_TIMEOUT = 5


class FrinkiacClient:
    """Thin wrapper around a ``requests.Session`` for the Frinkiac API."""

    def __init__(self, api_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.api_url = api_url or getattr(settings, "HOMER_API_URL", DEFAULT_API_URL)
        self.timeout = timeout if timeout is not None else getattr(
            settings, "HOMER_REQUEST_TIMEOUT", DEFAULT_TIMEOUT
        )
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "HelloHomer/1.0 (+https://frinkiac.com)",
                "Accept": "application/json",
            }
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.session.close()

    def get_random(self) -> Dict[str, Any]:
        """
        Fetch one random frame.

        Returns:
            The decoded JSON body

        Raises:
            HomerConnectionError: On network errors and timeouts
            HomerResponseError: On a non-2xx status
            HomerParsingError: If the body is not JSON
        """
        logger.debug(f"Requesting random quote from {self.api_url}")
        try:
            response = self.session.get(self.api_url, timeout=self.timeout)
        except requests.Timeout as e:
            raise HomerConnectionError(
                f"Timed out after {self.timeout}s", details={"url": self.api_url}
            ) from e
        except requests.RequestException as e:
            raise HomerConnectionError(str(e), details={"url": self.api_url}) from e

        if not 200 <= response.status_code < 300:
            raise HomerResponseError(
                f"HTTP {response.status_code} from {self.api_url}",
                status_code=response.status_code,
                details={"body": response.text[:200]},
            )

        try:
            return response.json()
        except ValueError as e:
            raise HomerParsingError(
                f"Response is not valid JSON: {str(e)}",
                details={"body": response.text[:200]},
            ) from e
