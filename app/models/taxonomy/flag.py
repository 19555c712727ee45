"""Article category flag model.

Anonymous flags are stored with a NULL user_profile_id. NULLs never collide
in the unique constraint, so anonymous flags accumulate.
"""

ARTICLE_CATEGORY_FLAGGED_DDL = """
CREATE TABLE IF NOT EXISTS article_category_flagged (
    article_id BIGINT NOT NULL,
    category_id BIGINT NOT NULL,
    user_profile_id BIGINT,
    created TIMESTAMP NOT NULL,
    last_modified TIMESTAMP NOT NULL,
    UNIQUE (article_id, category_id, user_profile_id)
)
"""
