"""
Template tags that put the quote into admin pages.
"""
from django import template

from ..options import load_settings
from ..provider import get_quote
from ..renderer import render_quote

register = template.Library()


@register.simple_tag
def homer_footer():
    """Render the current quote for the admin footer."""
    return render_quote(get_quote(), load_settings())
