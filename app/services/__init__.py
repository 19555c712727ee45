"""Services package - service class exports."""

from app.services.featured import FeaturedArticleService
from app.services.feed import FeedConfig, FeedParams, FeedService
from app.services.taxonomy import FlagService, TaxonomyService

__all__ = [
    "FeaturedArticleService",
    "FeedConfig",
    "FeedParams",
    "FeedService",
    "FlagService",
    "TaxonomyService",
]
