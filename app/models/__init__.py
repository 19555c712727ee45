"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.core import (
    ARTICLE_AUTHOR_DDL,
    ARTICLE_CATEGORY_DDL,
    ARTICLE_DDL,
    ARTICLE_JOURNAL_DDL,
    ARTICLE_REPRESENTATION_DDL,
    JOURNAL_DDL,
    STATE_ACTIVE,
    USER_PROFILE_DDL,
    USER_PROFILE_ROLE_DDL,
    USER_ROLE_DDL,
    USER_ROLE_PERMISSION_DDL,
    Permission,
)
from app.models.feed import Feed, FeedCategory, FeedEntry, FeedLink, FeedPerson
from app.models.taxonomy import (
    ARTICLE_CATEGORY_FLAGGED_DDL,
    CATEGORY_FEATURED_ARTICLE_DDL,
    ROOT_NODE_NAME,
    CategoryView,
    FeaturedArticle,
    FeaturedArticleType,
    SearchHit,
    SubjectCounts,
)

ALL_DDL = [
    # Core
    JOURNAL_DDL,
    ARTICLE_DDL,
    ARTICLE_JOURNAL_DDL,
    ARTICLE_AUTHOR_DDL,
    ARTICLE_CATEGORY_DDL,
    ARTICLE_REPRESENTATION_DDL,
    USER_PROFILE_DDL,
    USER_ROLE_DDL,
    USER_ROLE_PERMISSION_DDL,
    USER_PROFILE_ROLE_DDL,
    # Taxonomy
    CATEGORY_FEATURED_ARTICLE_DDL,
    ARTICLE_CATEGORY_FLAGGED_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Core
    "JOURNAL_DDL",
    "ARTICLE_DDL",
    "ARTICLE_JOURNAL_DDL",
    "ARTICLE_AUTHOR_DDL",
    "ARTICLE_CATEGORY_DDL",
    "ARTICLE_REPRESENTATION_DDL",
    "STATE_ACTIVE",
    "USER_PROFILE_DDL",
    "USER_ROLE_DDL",
    "USER_ROLE_PERMISSION_DDL",
    "USER_PROFILE_ROLE_DDL",
    "Permission",
    # Taxonomy
    "CATEGORY_FEATURED_ARTICLE_DDL",
    "ARTICLE_CATEGORY_FLAGGED_DDL",
    "ROOT_NODE_NAME",
    "CategoryView",
    "FeaturedArticle",
    "FeaturedArticleType",
    "SearchHit",
    "SubjectCounts",
    # Feed
    "Feed",
    "FeedCategory",
    "FeedEntry",
    "FeedLink",
    "FeedPerson",
    # All DDL
    "ALL_DDL",
]
