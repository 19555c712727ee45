"""Flag service - user flags on article category assignments."""

from loguru import logger

from app.repositories.taxonomy import FlagRepository


class FlagService:
    """Flag and deflag (article, category) pairs.

    A non-empty auth_id identifies the user: their flag is kept once and only
    its timestamp moves. Without one the flag is anonymous; anonymous flags
    accumulate and deflagging removes one of them.
    """

    def __init__(self, repo: FlagRepository):
        self._repo = repo

    def flag_taxonomy_term(self, article_id: int, category_id: int, auth_id: str | None = None) -> None:
        if auth_id:
            self._repo.upsert(article_id, category_id, auth_id)
            logger.info("Article {} category {} flagged by {}", article_id, category_id, auth_id)
        else:
            self._repo.insert_anonymous(article_id, category_id)
            logger.info("Article {} category {} flagged anonymously", article_id, category_id)

    def deflag_taxonomy_term(self, article_id: int, category_id: int, auth_id: str | None = None) -> None:
        if auth_id:
            removed = self._repo.delete(article_id, category_id, auth_id)
            logger.info("Article {} category {} deflagged by {} ({} removed)", article_id, category_id, auth_id, removed)
        else:
            removed = self._repo.delete_one_anonymous(article_id, category_id)
            logger.info("Article {} category {} deflagged anonymously ({} removed)", article_id, category_id, removed)

    def count_flags(self, article_id: int, category_id: int) -> int:
        """Total flags on (article, category), anonymous ones included."""
        return self._repo.count(article_id, category_id)
