"""Feed API."""

from web.api.feed.views import get_feed

__all__ = [
    "get_feed",
]
