"""Taxonomy repositories - featured article overrides and flags."""

from app.repositories.taxonomy.featured import FeaturedArticleRepository
from app.repositories.taxonomy.flag import FlagRepository

__all__ = [
    "FeaturedArticleRepository",
    "FlagRepository",
]
