"""Core domain models - journals, articles, users."""

from app.models.core.article import (
    ARTICLE_AUTHOR_DDL,
    ARTICLE_CATEGORY_DDL,
    ARTICLE_DDL,
    ARTICLE_JOURNAL_DDL,
    ARTICLE_REPRESENTATION_DDL,
    STATE_ACTIVE,
)
from app.models.core.journal import JOURNAL_DDL
from app.models.core.user import (
    USER_PROFILE_DDL,
    USER_PROFILE_ROLE_DDL,
    USER_ROLE_DDL,
    USER_ROLE_PERMISSION_DDL,
    Permission,
)

__all__ = [
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
]
