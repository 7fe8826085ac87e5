"""
Cache key generator functions for the hello_homer app.

Version: 1.0
"""

QUOTE_CACHE_KEY = "hello_homer_quote"


def get_quote_cache_key():
    """Return the single fixed key the current quote is cached under."""
    return QUOTE_CACHE_KEY
