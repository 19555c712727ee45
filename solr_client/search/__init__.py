"""Search index client."""

from solr_client.search.client import SearchClient, quote
from solr_client.search.schemas import (
    FacetCountsSchema,
    SolrDocSchema,
    SolrResponseSchema,
    SolrResultSchema,
)

__all__ = [
    "SearchClient",
    "quote",
    "SolrDocSchema",
    "SolrResultSchema",
    "FacetCountsSchema",
    "SolrResponseSchema",
]
