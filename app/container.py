"""Dependency Injection container - initialized at app startup."""

from app.repositories.common.cache import CacheRepository
from app.repositories.core import ArticleRepository, PermissionRepository
from app.repositories.db import get_db
from app.repositories.taxonomy import FeaturedArticleRepository, FlagRepository
from app.services.featured import FeaturedArticleService
from app.services.feed import FeedConfig, FeedService
from app.services.taxonomy import FlagService, TaxonomyService
from settings import CACHE_TTL, DB_PATH, SOLR_TIMEOUT, SOLR_URL
from solr_client import SearchClient


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, db_path: str = DB_PATH, solr_url: str = SOLR_URL) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        db = get_db(db_path)

        # Collaborators (singletons)
        self._search = SearchClient(solr_url, timeout=SOLR_TIMEOUT)
        self._cache = CacheRepository()
        self._permissions = PermissionRepository(db)
        self._featured_repo = FeaturedArticleRepository(db)
        self._flag_repo = FlagRepository(db)
        self._article_repo = ArticleRepository(db)

        # Services (with injected collaborators)
        self.taxonomy = TaxonomyService(
            search=self._search,
            permissions=self._permissions,
            cache=self._cache,
            cache_ttl=CACHE_TTL,
        )

        self.featured = FeaturedArticleService(
            repo=self._featured_repo,
            search=self._search,
            permissions=self._permissions,
        )

        self.flags = FlagService(repo=self._flag_repo)

        self.feed = FeedService(
            repo=self._article_repo,
            cache=self._cache,
            config=FeedConfig(),
        )

        self._initialized = True

    def close(self) -> None:
        """Release the search client. The container can be initialized again afterwards."""
        if self._initialized:
            self._search.close()
            self._initialized = False


# Global container instance
container = Container()
