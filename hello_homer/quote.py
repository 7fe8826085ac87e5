"""
Quote value objects and Frinkiac payload parsing.

A Quote is either a real quote, with every field taken from the Frinkiac API,
or the fallback quote, which carries the fixed error text and nothing else.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote as url_quote

from django.utils.translation import gettext_lazy as _

from .exceptions import HomerParsingError
from .sanitization import sanitize_text

FALLBACK_TEXT = _("D'oh! We couldn't connect to the API!")

SOURCE_CACHE = "cache"
SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class Quote:
    """A displayable Simpsons quote."""

    text: str
    episode_title: str = ""
    season: Optional[int] = None
    image_url: str = ""

    @property
    def is_fallback(self) -> bool:
        return not self.episode_title

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quote":
        """
        Rebuild a Quote from its cached dict form.

        Raises:
            HomerParsingError: If the dict does not hold a real quote
        """
        if not isinstance(data, dict):
            raise HomerParsingError("Cached quote is not a dict", details={"cached": data})

        season = data.get("season")
        if (
            not data.get("text")
            or not data.get("episode_title")
            or not data.get("image_url")
            or not isinstance(season, int)
            or isinstance(season, bool)
        ):
            raise HomerParsingError("Cached quote is incomplete", details={"cached": data})
        return cls(
            text=data["text"],
            episode_title=data["episode_title"],
            season=season,
            image_url=data["image_url"],
        )


@dataclass(frozen=True)
class QuoteResult:
    """
    Tagged outcome of a quote lookup.

    ``source`` says where the quote came from; ``reason`` explains a fallback.
    """

    quote: Quote
    source: str
    reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == SOURCE_FALLBACK


def fallback_quote() -> Quote:
    return Quote(text=str(FALLBACK_TEXT))


def parse_quote_payload(payload: Any, image_url_template: str) -> Quote:
    """
    Build a real Quote from a decoded ``/api/random`` response.

    Only the first subtitle is used. The image URL is the template formatted
    with the episode key and the integer frame timestamp.

    Args:
        payload: Decoded JSON body
        image_url_template: Format string with ``{key}`` and ``{timestamp}`` fields

    Returns:
        The parsed Quote

    Raises:
        HomerParsingError: If any required field is missing or malformed
    """
    if not isinstance(payload, dict):
        raise HomerParsingError("Payload is not a JSON object")

    episode = payload.get("Episode")
    subtitles = payload.get("Subtitles")
    frame = payload.get("Frame")

    if not isinstance(episode, dict) or not episode.get("Title"):
        raise HomerParsingError("Payload has no episode title")
    if not isinstance(subtitles, list) or not subtitles:
        raise HomerParsingError("Payload has no subtitles")
    first = subtitles[0]
    if not isinstance(first, dict) or not first.get("Content"):
        raise HomerParsingError("First subtitle has no content")
    if not episode.get("Key"):
        raise HomerParsingError("Payload has no episode key")
    if not isinstance(frame, dict) or frame.get("Timestamp") is None:
        raise HomerParsingError("Payload has no frame timestamp")

    try:
        season = int(episode.get("Season"))
        timestamp = int(float(frame["Timestamp"]))
    except (TypeError, ValueError, OverflowError) as e:
        raise HomerParsingError(
            f"Non-numeric or out-of-range season or timestamp: {str(e)}",
            details={"season": episode.get("Season"), "timestamp": frame.get("Timestamp")},
        ) from e

    image_url = image_url_template.format(
        key=url_quote(str(episode["Key"]), safe=""),
        timestamp=timestamp,
    )

    text = sanitize_text(first["Content"])
    episode_title = sanitize_text(episode["Title"])
    if not text or not episode_title:
        raise HomerParsingError("Quote text or episode title is empty after sanitizing")

    return Quote(
        text=text,
        episode_title=episode_title,
        season=season,
        image_url=image_url,
    )
