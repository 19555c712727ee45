"""Featured article service - selects and manages the featured article of a subject area."""

from collections.abc import Callable

from loguru import logger

from app.errors import ApplicationError, InvalidFeaturedArticleError
from app.models.core import Permission
from app.models.taxonomy import FeaturedArticle, FeaturedArticleType, SearchHit
from app.repositories.taxonomy import FeaturedArticleRepository
from app.services.interfaces import PermissionChecker, SearchService
from solr_client import SearchError


class FeaturedArticleService:
    """Featured article per (journal, subject area).

    Selection order, first match wins:
      1. manual override stored for the journal and category
      2. most shared article over the last 7 days
      3. most viewed article over the last 7 days
      4. most viewed article of all time
    """

    def __init__(
        self,
        repo: FeaturedArticleRepository,
        search: SearchService,
        permissions: PermissionChecker,
    ):
        self._repo = repo
        self._search = search
        self._permissions = permissions

    def get_featured_article_for_subject_area(self, journal: str, subject_area: str) -> FeaturedArticle | None:
        """Featured article for a subject area, or None when nothing qualifies."""
        row = self._repo.find(journal, subject_area)
        if row is not None:
            logger.debug("Featured override for {}/{}: {}", journal, subject_area, row["doi"])
            return FeaturedArticle(
                doi=row["doi"],
                title=row["title"],
                striking_image_uri=row["striking_image_uri"],
                type=FeaturedArticleType.FEATURED,
            )
        return self._select_from_search(journal, subject_area)

    def _select_from_search(self, journal: str, subject_area: str) -> FeaturedArticle | None:
        tiers: list[tuple[Callable[[str, str], SearchHit | None], FeaturedArticleType]] = [
            (self._search.get_most_shared_for_journal_category, FeaturedArticleType.MOST_SHARED),
            (self._search.get_most_viewed_for_journal_category, FeaturedArticleType.MOST_VIEWED),
            (self._search.get_most_viewed_all_time_for_journal_category, FeaturedArticleType.MOST_VIEWED),
        ]
        for lookup, article_type in tiers:
            try:
                hit = lookup(journal, subject_area)
            except SearchError as e:
                raise ApplicationError(
                    f"Failed to select featured article for {journal}/{subject_area}: {e.message}"
                ) from e
            if hit is not None:
                logger.debug("{} for {}/{}: {}", article_type, journal, subject_area, hit.uri)
                return FeaturedArticle(
                    doi=hit.uri,
                    title=hit.title,
                    striking_image_uri=hit.striking_image,
                    type=article_type,
                )

        logger.info("No featured article for {}/{}", journal, subject_area)
        return None

    def get_featured_articles(self, journal: str) -> dict[str, str]:
        """Manual overrides for a journal: {category: doi}."""
        return self._repo.get_all(journal)

    def create_featured_article(self, journal: str, subject_area: str, doi: str, auth_id: str | None) -> None:
        """Store a manual override; the journal key and DOI must both exist."""
        self._permissions.check_permission(Permission.MANAGE_FEATURED_ARTICLES, auth_id)

        if self._repo.create(journal, subject_area, doi) == 0:
            raise InvalidFeaturedArticleError()
        logger.info("Featured article {} set for {}/{} by {}", doi, journal, subject_area, auth_id)

    def delete_featured_article(self, journal: str, subject_area: str, auth_id: str | None) -> None:
        """Remove the manual override; removing a missing override does nothing."""
        self._permissions.check_permission(Permission.MANAGE_FEATURED_ARTICLES, auth_id)

        removed = self._repo.delete(journal, subject_area)
        logger.info("Featured article removed for {}/{} by {} ({} rows)", journal, subject_area, auth_id, removed)
