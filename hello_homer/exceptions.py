"""
Exceptions for the Frinkiac integration.

The client and payload parser raise these; the quote provider catches them and
turns them into the fallback quote, so they never reach a template.
"""

from typing import Any, Dict, Optional


class HomerError(Exception):
    """Base exception for all Hello Homer errors."""

    def __init__(
        self,
        message: str = "An error occurred while fetching a quote",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class HomerConnectionError(HomerError):
    """Raised when the Frinkiac API cannot be reached or times out."""

    def __init__(
        self,
        message: str = "Could not connect to the Frinkiac API",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class HomerResponseError(HomerError):
    """Raised when the Frinkiac API answers with a non-2xx status."""

    def __init__(
        self,
        message: str = "Unexpected response from the Frinkiac API",
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        super().__init__(message, details)


class HomerParsingError(HomerError):
    """Raised when the response body is not JSON or lacks the quote fields."""

    def __init__(
        self,
        message: str = "Malformed quote payload",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
