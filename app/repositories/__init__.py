"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository
from app.repositories.core import ArticleRepository, PermissionRepository
from app.repositories.db import (
    close_db,
    connect,
    get_db,
    init_tables,
    reconnect_db,
)
from app.repositories.taxonomy import FeaturedArticleRepository, FlagRepository

__all__ = [
    # DB
    "connect",
    "get_db",
    "close_db",
    "reconnect_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    # Core
    "ArticleRepository",
    "PermissionRepository",
    # Taxonomy
    "FeaturedArticleRepository",
    "FlagRepository",
]
