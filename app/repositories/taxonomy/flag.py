"""Flag repository - user flags on article category assignments."""

from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository


class FlagRepository(BaseRepository):
    """Repository for article category flags.

    Statement shape depends on whether the flagging user is known: known users
    own at most one flag per (article, category), anonymous flags accumulate.
    """

    def upsert(self, article_id: int, category_id: int, auth_id: str) -> int:
        """Insert a flag for a known user, or refresh its last_modified."""
        now = datetime.now()
        return self.execute_update(
            """
            INSERT INTO article_category_flagged
                (article_id, category_id, user_profile_id, created, last_modified)
            SELECT ?, ?, up.user_profile_id, ?, ?
            FROM user_profile up
            WHERE up.auth_id = ?
            ON CONFLICT (article_id, category_id, user_profile_id)
            DO UPDATE SET last_modified = excluded.last_modified
            """,
            [article_id, category_id, now, now, auth_id],
        )

    def insert_anonymous(self, article_id: int, category_id: int) -> int:
        """Insert an anonymous flag (NULL user)."""
        now = datetime.now()
        return self.execute_update(
            """
            INSERT INTO article_category_flagged
                (article_id, category_id, user_profile_id, created, last_modified)
            VALUES (?, ?, NULL, ?, ?)
            """,
            [article_id, category_id, now, now],
        )

    def delete(self, article_id: int, category_id: int, auth_id: str) -> int:
        """Delete the flag a known user placed on (article, category)."""
        return self.execute_update(
            """
            DELETE FROM article_category_flagged
            WHERE article_id = ? AND category_id = ?
              AND user_profile_id IN (SELECT user_profile_id FROM user_profile WHERE auth_id = ?)
            """,
            [article_id, category_id, auth_id],
        )

    def delete_one_anonymous(self, article_id: int, category_id: int) -> int:
        """Delete one anonymous flag on (article, category); which one is unspecified."""
        return self.execute_update(
            """
            DELETE FROM article_category_flagged
            WHERE rowid = (
                SELECT rowid FROM article_category_flagged
                WHERE article_id = ? AND category_id = ? AND user_profile_id IS NULL
                LIMIT 1
            )
            """,
            [article_id, category_id],
        )

    def count(self, article_id: int, category_id: int, auth_id: str | None = None) -> int:
        """Count flags on (article, category), optionally only those of one user."""
        if auth_id:
            row = self.fetchone(
                """
                SELECT COUNT(*) FROM article_category_flagged acf
                JOIN user_profile up ON up.user_profile_id = acf.user_profile_id
                WHERE acf.article_id = ? AND acf.category_id = ? AND up.auth_id = ?
                """,
                [article_id, category_id, auth_id],
            )
        else:
            row = self.fetchone(
                "SELECT COUNT(*) FROM article_category_flagged WHERE article_id = ? AND category_id = ?",
                [article_id, category_id],
            )
        logger.debug("count({}, {}): {}", article_id, category_id, row[0])
        return int(row[0])

    def get_last_modified(self, article_id: int, category_id: int, auth_id: str) -> datetime | None:
        """Get when a known user last flagged (article, category)."""
        row = self.fetchone(
            """
            SELECT acf.last_modified FROM article_category_flagged acf
            JOIN user_profile up ON up.user_profile_id = acf.user_profile_id
            WHERE acf.article_id = ? AND acf.category_id = ? AND up.auth_id = ?
            """,
            [article_id, category_id, auth_id],
        )
        return row[0] if row else None
