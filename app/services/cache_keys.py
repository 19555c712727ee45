"""Cache key derivation.

Keys are pure functions of their inputs. A None journal and an empty journal
both mean "all journals" and share a key.
"""

TOP_AND_SECOND_LEVEL_PREFIX = "topAndSecondLevelCategoriesCacheKey"
CATEGORIES_PREFIX = "categoriesCacheKey"
CATEGORY_COUNT_PREFIX = "categoryCountCacheKey"
FEED_PREFIX = "feedCacheKey"


def _journal(journal: str | None) -> str:
    return journal or ""


def top_and_second_level_key(journal: str | None) -> str:
    return TOP_AND_SECOND_LEVEL_PREFIX + _journal(journal)


def categories_key(journal: str | None) -> str:
    return CATEGORIES_PREFIX + _journal(journal)


def category_count_key(journal: str | None) -> str:
    return CATEGORY_COUNT_PREFIX + _journal(journal)


def journal_keys(journal: str | None) -> list[str]:
    """All taxonomy keys held for a journal."""
    return [
        top_and_second_level_key(journal),
        categories_key(journal),
        category_count_key(journal),
    ]


def feed_key(fields: dict[str, str]) -> str:
    """Key for a feed request: the present fields sorted by name, e.g. '{cat=Biology, cnt=10}'."""
    body = ", ".join(f"{k}={v}" for k, v in sorted(fields.items()))
    return FEED_PREFIX + "{" + body + "}"
