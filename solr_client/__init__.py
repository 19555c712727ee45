"""Search index client package."""

from solr_client.base import BaseClient, SearchError
from solr_client.search import SearchClient

__all__ = [
    # Base
    "BaseClient",
    "SearchError",
    # Clients
    "SearchClient",
]
