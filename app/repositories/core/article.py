"""Article repository - article listings for feeds."""

from collections import defaultdict
from datetime import date

from loguru import logger

from app.models.core import STATE_ACTIVE
from app.repositories.base import BaseRepository


class ArticleRepository(BaseRepository):
    """Repository for article data access."""

    def get_articles(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        category: str | None = None,
        author: str | None = None,
        limit: int = 30,
    ) -> list[dict]:
        """Get active articles by date ascending, with authors, categories and representations."""
        query = """
            SELECT a.article_id, a.doi, a.title, a.description, a.rights,
                   a.date, a.volume, a.issue
            FROM article a
            WHERE a.state = ?
        """
        params: list = [STATE_ACTIVE]

        if start_date is not None:
            query += " AND a.date >= ?"
            params.append(start_date)
        if end_date is not None:
            query += " AND a.date <= ?"
            params.append(end_date)
        if category:
            query += """
                AND EXISTS (
                    SELECT 1 FROM article_category ac
                    WHERE ac.article_id = a.article_id
                      AND (ac.main_category = ? OR ac.sub_category = ?)
                )
            """
            params.extend([category, category])
        if author:
            query += """
                AND EXISTS (
                    SELECT 1 FROM article_author au
                    WHERE au.article_id = a.article_id AND au.full_name = ?
                )
            """
            params.append(author)

        query += " ORDER BY a.date ASC, a.article_id ASC LIMIT ?"
        params.append(limit)

        rows = self.fetchall(query, params)
        articles = [
            {
                "article_id": r[0],
                "doi": r[1],
                "title": r[2],
                "description": r[3],
                "rights": r[4],
                "date": r[5],
                "volume": r[6],
                "issue": r[7],
                "authors": [],
                "categories": [],
                "representations": [],
            }
            for r in rows
        ]
        if not articles:
            return articles

        ids = [a["article_id"] for a in articles]
        authors = self._get_authors(ids)
        categories = self._get_categories(ids)
        representations = self._get_representations(ids)
        for a in articles:
            a["authors"] = authors.get(a["article_id"], [])
            a["categories"] = categories.get(a["article_id"], [])
            a["representations"] = representations.get(a["article_id"], [])

        logger.debug("get_articles: {} articles", len(articles))
        return articles

    def _get_authors(self, ids: list[int]) -> dict[int, list[str]]:
        rows = self.fetchall(
            """
            SELECT article_id, full_name FROM article_author
            WHERE list_contains(?, article_id)
            ORDER BY article_id, position
            """,
            [ids],
        )
        result = defaultdict(list)
        for article_id, name in rows:
            result[article_id].append(name)
        return dict(result)

    def _get_categories(self, ids: list[int]) -> dict[int, list[tuple[str, str | None]]]:
        rows = self.fetchall(
            """
            SELECT article_id, main_category, sub_category FROM article_category
            WHERE list_contains(?, article_id)
            ORDER BY article_id, main_category, sub_category
            """,
            [ids],
        )
        result = defaultdict(list)
        for article_id, main, sub in rows:
            result[article_id].append((main, sub))
        return dict(result)

    def _get_representations(self, ids: list[int]) -> dict[int, list[str]]:
        rows = self.fetchall(
            """
            SELECT article_id, name FROM article_representation
            WHERE list_contains(?, article_id)
            ORDER BY article_id, name
            """,
            [ids],
        )
        result = defaultdict(list)
        for article_id, name in rows:
            result[article_id].append(name)
        return dict(result)
