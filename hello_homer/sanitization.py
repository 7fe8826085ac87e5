"""
Utilities for sanitizing text received from the Frinkiac API.

Subtitle content and episode titles are stored already escaped, so every
consumer of a Quote can drop the text into markup as-is.
"""
import html
import re
from typing import Any


def sanitize_text(value: Any) -> str:
    """
    Escape a remote string for safe display in HTML element content.

    Only ``&``, ``<`` and ``>`` are escaped; quotes are left intact so that
    "D'oh!" survives unchanged. A script element in the input is then removed
    along with its body. Escaping alone already makes it inert; the removal
    keeps the markup from showing up as visible text in the footer.

    Args:
        value: The value to sanitize; non-strings are converted first

    Returns:
        The sanitized string
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)

    sanitized = html.escape(value.strip(), quote=False)

    # Drop script elements, matched in their escaped form
    sanitized = re.sub(r"&lt;script.*?&gt;.*?&lt;/script&gt;", "", sanitized, flags=re.DOTALL)

    return sanitized


def escape_attribute(value: str) -> str:
    """
    Make already-escaped text safe for a double-quoted HTML attribute.

    ``&``, ``<`` and ``>`` are already entities in sanitized text, so only the
    quote characters are left to encode.
    """
    return value.replace('"', "&quot;").replace("'", "&#x27;")
