"""Taxonomy domain models - overrides, flags and category entities."""

from app.models.taxonomy.entities import (
    ROOT_NODE_NAME,
    CategoryView,
    FeaturedArticle,
    FeaturedArticleType,
    SearchHit,
    SubjectCounts,
)
from app.models.taxonomy.featured import CATEGORY_FEATURED_ARTICLE_DDL
from app.models.taxonomy.flag import ARTICLE_CATEGORY_FLAGGED_DDL

__all__ = [
    "CATEGORY_FEATURED_ARTICLE_DDL",
    "ARTICLE_CATEGORY_FLAGGED_DDL",
    "ROOT_NODE_NAME",
    "CategoryView",
    "FeaturedArticle",
    "FeaturedArticleType",
    "SearchHit",
    "SubjectCounts",
]
