"""Core repositories - articles and users."""

from app.repositories.core.article import ArticleRepository
from app.repositories.core.user import PermissionRepository

__all__ = [
    "ArticleRepository",
    "PermissionRepository",
]
