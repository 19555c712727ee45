"""Feed domain models."""

from app.models.feed.entities import Feed, FeedCategory, FeedEntry, FeedLink, FeedPerson

__all__ = [
    "Feed",
    "FeedCategory",
    "FeedEntry",
    "FeedLink",
    "FeedPerson",
]
