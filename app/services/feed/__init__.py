"""Feed services."""

from app.services.feed.params import FeedConfig, FeedParams, months_ago
from app.services.feed.service import FeedService, content_type

__all__ = [
    "FeedConfig",
    "FeedParams",
    "FeedService",
    "content_type",
    "months_ago",
]
