"""Featured article repository - manual featured article overrides per category."""

from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository


class FeaturedArticleRepository(BaseRepository):
    """Repository for category featured article overrides.

    Categories are matched case-insensitively on lookup and delete, and stored
    as given on insert.
    """

    def find(self, journal_key: str, category: str) -> dict | None:
        """Get the override for a journal category, if any."""
        row = self.fetchone(
            """
            SELECT a.doi, a.title, a.striking_image_uri
            FROM category_featured_article cfa
            JOIN article a ON a.article_id = cfa.article_id
            JOIN journal j ON j.journal_id = cfa.journal_id
            WHERE j.journal_key = ? AND lower(cfa.category) = ?
            LIMIT 1
            """,
            [journal_key, category.lower()],
        )
        if row is None:
            return None
        return {"doi": row[0], "title": row[1], "striking_image_uri": row[2]}

    def get_all(self, journal_key: str) -> dict[str, str]:
        """Get all overrides for a journal: {category: doi}."""
        rows = self.fetchall(
            """
            SELECT cfa.category, a.doi
            FROM category_featured_article cfa
            JOIN article a ON a.article_id = cfa.article_id
            JOIN journal j ON j.journal_id = cfa.journal_id
            WHERE j.journal_key = ?
            ORDER BY cfa.category
            """,
            [journal_key],
        )
        return {r[0]: r[1] for r in rows}

    def create(self, journal_key: str, category: str, doi: str) -> int:
        """Insert an override resolving journal key and DOI. Returns rows inserted."""
        now = datetime.now()
        count = self.execute_update(
            """
            INSERT INTO category_featured_article (journal_id, article_id, category, created, last_modified)
            SELECT j.journal_id, a.article_id, ?, ?, ?
            FROM article a, journal j
            WHERE j.journal_key = ? AND a.doi = ?
            """,
            [category, now, now, journal_key, doi],
        )
        logger.debug("create({}, {}, {}): {} rows", journal_key, category, doi, count)
        return count

    def delete(self, journal_key: str, category: str) -> int:
        """Delete overrides for a journal category. Returns rows deleted."""
        count = self.execute_update(
            """
            DELETE FROM category_featured_article
            WHERE lower(category) = ?
              AND journal_id IN (SELECT journal_id FROM journal WHERE journal_key = ?)
            """,
            [category.lower(), journal_key],
        )
        logger.debug("delete({}, {}): {} rows", journal_key, category, count)
        return count
