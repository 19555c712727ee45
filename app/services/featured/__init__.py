"""Featured article services."""

from app.services.featured.service import FeaturedArticleService

__all__ = [
    "FeaturedArticleService",
]
