"""Taxonomy service - category trees and per-category article counts."""

import copy
from collections.abc import Callable
from typing import TypeVar

from loguru import logger

from app.errors import ApplicationError
from app.models.core import Permission
from app.models.taxonomy import ROOT_NODE_NAME, CategoryView
from app.services import cache_keys
from app.services.interfaces import Cache, PermissionChecker, SearchService
from app.services.taxonomy.categories import build_category_view, build_top_and_second_level
from settings import CACHE_TTL
from solr_client import SearchError

T = TypeVar("T")


class TaxonomyService:
    """Category trees and counts built from the search index, cached per journal."""

    def __init__(
        self,
        search: SearchService,
        permissions: PermissionChecker,
        cache: Cache | None = None,
        cache_ttl: int = CACHE_TTL,
    ):
        self._search = search
        self._permissions = permissions
        self._cache = cache
        self._cache_ttl = cache_ttl
        logger.debug("TaxonomyService initialized (cache={})", cache is not None)

    def _get_cached_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Go through the cache when one is configured, otherwise compute directly."""
        if self._cache is None:
            return compute_fn()
        return self._cache.get(key, self._cache_ttl, compute_fn)

    def parse_top_and_second_level_categories(self, journal: str | None) -> dict[str, list[str]]:
        """Top-level categories mapped to their sorted second-level categories.

        Callers get their own copy; the cached map is never handed out.
        """

        def compute() -> dict[str, list[str]]:
            try:
                subjects = self._search.get_all_subjects(journal)
            except SearchError as e:
                raise ApplicationError(f"Failed to fetch subjects for journal {journal!r}: {e.message}") from e
            result = build_top_and_second_level(subjects)
            logger.info("Parsed {} top-level categories for journal {}", len(result), journal)
            return result

        cached = self._get_cached_or_compute(cache_keys.top_and_second_level_key(journal), compute)
        return {top: list(subs) for top, subs in cached.items()}

    def parse_categories(self, journal: str | None) -> CategoryView:
        """Full category tree under ROOT. Callers get their own copy of the cached tree."""

        def compute() -> CategoryView:
            try:
                subjects = self._search.get_all_subjects(journal)
            except SearchError as e:
                raise ApplicationError(f"Failed to fetch subjects for journal {journal!r}: {e.message}") from e
            root = build_category_view(subjects)
            logger.info("Parsed category tree for journal {}: {} top-level", journal, len(root.children))
            return root

        return copy.deepcopy(self._get_cached_or_compute(cache_keys.categories_key(journal), compute))

    def get_counts(self, taxonomy: CategoryView, journal: str | None) -> dict[str, int | None]:
        """Article counts for a node and its immediate children.

        Names missing from the counts (the index changed since the tree was
        built) map to None.
        """
        counts = self._get_all_counts(journal)
        result = {child.name: counts.get(child.name) for child in taxonomy.children.values()}
        result[taxonomy.name] = counts.get(taxonomy.name)
        return result

    def _get_all_counts(self, journal: str | None) -> dict[str, int]:
        """Counts for every subject term, with ROOT holding the journal's article total."""

        def compute() -> dict[str, int]:
            try:
                subject_counts = self._search.get_all_subject_counts(journal)
            except SearchError as e:
                raise ApplicationError(f"Failed to fetch subject counts for journal {journal!r}: {e.message}") from e
            counts = dict(subject_counts.subject_counts)
            counts[ROOT_NODE_NAME] = subject_counts.total_articles
            logger.info("Fetched {} subject counts for journal {}", len(counts), journal)
            return counts

        return self._get_cached_or_compute(cache_keys.category_count_key(journal), compute)

    def invalidate(self, journal: str | None, auth_id: str | None) -> None:
        """Drop cached trees and counts for a journal."""
        self._permissions.check_permission(Permission.MANAGE_CACHES, auth_id)
        if self._cache is None:
            return
        for key in cache_keys.journal_keys(journal):
            self._cache.invalidate(key)
        logger.info("Taxonomy cache invalidated for journal {} by {}", journal, auth_id)
