"""Journal (publication venue) model."""

JOURNAL_DDL = """
CREATE TABLE IF NOT EXISTS journal (
    journal_id BIGINT PRIMARY KEY,
    journal_key VARCHAR NOT NULL UNIQUE,
    title VARCHAR
)
"""
