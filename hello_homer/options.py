"""
Typed access to the Hello Homer options.

The three options are stored as strings in the ``Option`` table. ``OptionStore``
is the key/value reader and writer; ``load_settings`` turns its raw strings into
a ``HomerSettings`` value, falling back to the defaults for anything missing or
invalid.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.utils.translation import gettext_lazy as _

from .models import Option

logger = logging.getLogger(__name__)

SHOW_IMAGE_OPTION = "hello_homer_show_image"
SHOW_EPISODE_OPTION = "hello_homer_show_episode"
CACHE_TIME_OPTION = "hello_homer_cache_time"

YES = "yes"
NO = "no"

HOUR_IN_SECONDS = 60 * 60
DAY_IN_SECONDS = 24 * HOUR_IN_SECONDS
WEEK_IN_SECONDS = 7 * DAY_IN_SECONDS

CACHE_DURATION_CHOICES = [
    (HOUR_IN_SECONDS, _("1 Hour")),
    (DAY_IN_SECONDS, _("1 Day")),
    (WEEK_IN_SECONDS, _("1 Week")),
]
ALLOWED_CACHE_DURATIONS = {seconds for seconds, _label in CACHE_DURATION_CHOICES}


class OptionStore:
    """Key/value access to the ``Option`` table."""

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        option = Option.objects.filter(name=name).only("value").first()
        if option is None:
            return default
        return option.value

    def set(self, name: str, value) -> None:
        Option.objects.update_or_create(name=name, defaults={"value": str(value)})

    def delete(self, name: str) -> None:
        Option.objects.filter(name=name).delete()


@dataclass(frozen=True)
class HomerSettings:
    """Display settings, read on every render."""

    show_image: bool = True
    show_episode: bool = True
    cache_duration_seconds: int = HOUR_IN_SECONDS


def default_cache_duration() -> int:
    return getattr(settings, "HOMER_DEFAULT_CACHE_TTL", HOUR_IN_SECONDS)


def _as_flag(raw: Optional[str]) -> bool:
    # Anything other than an explicit "no" keeps the default of showing
    return (raw or YES).strip().lower() != NO


def _as_duration(raw: Optional[str]) -> int:
    default = default_cache_duration()
    if raw in (None, ""):
        return default
    try:
        seconds = int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric cache duration option: {raw!r}")
        return default
    if seconds not in ALLOWED_CACHE_DURATIONS:
        logger.warning(f"Ignoring unsupported cache duration option: {seconds}")
        return default
    return seconds


def load_settings(store=None) -> HomerSettings:
    """
    Read the current settings from the option store.

    Args:
        store: Any object with ``get(name, default)``; defaults to ``OptionStore()``

    Returns:
        The settings, with defaults filled in
    """
    store = store or OptionStore()
    return HomerSettings(
        show_image=_as_flag(store.get(SHOW_IMAGE_OPTION, YES)),
        show_episode=_as_flag(store.get(SHOW_EPISODE_OPTION, YES)),
        cache_duration_seconds=_as_duration(store.get(CACHE_TIME_OPTION)),
    )


def save_settings(homer_settings: HomerSettings, store=None) -> None:
    """Write all three settings back to the option store."""
    store = store or OptionStore()
    store.set(SHOW_IMAGE_OPTION, YES if homer_settings.show_image else NO)
    store.set(SHOW_EPISODE_OPTION, YES if homer_settings.show_episode else NO)
    store.set(CACHE_TIME_OPTION, homer_settings.cache_duration_seconds)
    logger.info(f"Saved Hello Homer settings: {homer_settings}")
