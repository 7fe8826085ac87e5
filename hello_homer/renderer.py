"""
Footer fragment for the admin.

Quote text and episode titles arrive already escaped from ``sanitize_text``,
so they are marked safe here rather than escaped a second time.
"""
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from .sanitization import escape_attribute


def render_quote(quote, homer_settings):
    """
    Render a quote as the ``#homer`` footer block.

    The screenshot is shown only when ``show_image`` is set and the quote has
    an image; the episode line only when ``show_episode`` is set and the quote
    has an episode title.

    Args:
        quote: The Quote to show
        homer_settings: A HomerSettings instance

    Returns:
        SafeString with the markup
    """
    parts = []

    if homer_settings.show_image and quote.image_url:
        parts.append(
            format_html(
                '<img src="{}" alt="{}" /><br>',
                quote.image_url,
                mark_safe(escape_attribute(quote.text)),
            )
        )

    parts.append(format_html('<p class="homer-quote">{}</p>', mark_safe(quote.text)))

    if homer_settings.show_episode and quote.episode_title:
        parts.append(
            format_html(
                '<p class="homer-episode">Season {} - {}</p>',
                quote.season or 0,
                mark_safe(quote.episode_title),
            )
        )

    return format_html('<div id="homer">{}</div>', mark_safe("".join(parts)))
