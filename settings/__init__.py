"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("TAXONOMY_DB_PATH", "taxonomy.duckdb")

# Logging
LOG_DIR = Path(os.getenv("TAXONOMY_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("TAXONOMY_LOG_LEVEL", "INFO")

# Search index
SOLR_URL = os.getenv("TAXONOMY_SOLR_URL", "http://localhost:8983/solr/journals_dev")
SOLR_TIMEOUT = 30

# Cache
CACHE_TTL = 3600 * 24  # one day
FEED_CACHE_TTL = 3600

# Feeds
WEBSERVER_URL = os.getenv("TAXONOMY_WEBSERVER_URL", "http://journals.example.org/")
PUBLISHER_NAME = "Public Library of Science"
PUBLISHER_EMAIL = "webmaster@example.org"
COPYRIGHT = (
    "This work is licensed under a Creative Commons Attribution-Share Alike 3.0 License, "
    "http://creativecommons.org/licenses/by-sa/3.0/"
)
FEED_TITLE = "Journal Articles"
FEED_TAGLINE = "Publishing science, accelerating research"
FEED_ID = "info:doi/10.1371/feed"
FEED_DEFAULT_DURATION = 3  # months
FEED_DEFAULT_MAX_RESULTS = 30
