"""Article model and its per-article detail tables."""

# Article.state values; only active articles are listed in feeds
STATE_ACTIVE = 0
STATE_UNPUBLISHED = 1
STATE_DISABLED = 2

ARTICLE_DDL = """
CREATE TABLE IF NOT EXISTS article (
    article_id BIGINT PRIMARY KEY,
    doi VARCHAR NOT NULL UNIQUE,
    title VARCHAR,
    description VARCHAR,
    rights VARCHAR,
    striking_image_uri VARCHAR,
    date DATE,
    state INTEGER DEFAULT 0,
    volume VARCHAR,
    issue VARCHAR
)
"""

ARTICLE_JOURNAL_DDL = """
CREATE TABLE IF NOT EXISTS article_journal (
    article_id BIGINT NOT NULL,
    journal_id BIGINT NOT NULL,
    PRIMARY KEY (article_id, journal_id)
)
"""

ARTICLE_AUTHOR_DDL = """
CREATE TABLE IF NOT EXISTS article_author (
    article_id BIGINT NOT NULL,
    position INTEGER NOT NULL,
    full_name VARCHAR NOT NULL,
    PRIMARY KEY (article_id, position)
)
"""

ARTICLE_CATEGORY_DDL = """
CREATE TABLE IF NOT EXISTS article_category (
    article_id BIGINT NOT NULL,
    main_category VARCHAR NOT NULL,
    sub_category VARCHAR
)
"""

ARTICLE_REPRESENTATION_DDL = """
CREATE TABLE IF NOT EXISTS article_representation (
    article_id BIGINT NOT NULL,
    name VARCHAR NOT NULL,
    PRIMARY KEY (article_id, name)
)
"""
