"""Category featured article (manual override) model."""

CATEGORY_FEATURED_ARTICLE_DDL = """
CREATE TABLE IF NOT EXISTS category_featured_article (
    journal_id BIGINT NOT NULL,
    article_id BIGINT NOT NULL,
    category VARCHAR NOT NULL,
    created TIMESTAMP NOT NULL,
    last_modified TIMESTAMP NOT NULL
)
"""
