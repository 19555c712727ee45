"""Search index response schemas."""

from pydantic import BaseModel, Field


class SolrDocSchema(BaseModel):
    """Article document as returned by the search index."""

    id: str
    title_display: str | None = None
    striking_image: str | None = None


class SolrResultSchema(BaseModel):
    """Result block of a select response."""

    num_found: int = Field(alias="numFound")
    start: int = 0
    docs: list[SolrDocSchema] = []

    class Config:
        populate_by_name = True


class FacetCountsSchema(BaseModel):
    """Facet block; each field maps to a flat [term, count, term, count, ...] list."""

    facet_fields: dict[str, list[str | int]] = {}


class SolrResponseSchema(BaseModel):
    """Select response."""

    response: SolrResultSchema
    facet_counts: FacetCountsSchema | None = None

    def facet(self, field: str) -> dict[str, int]:
        """Decode a flat facet list into {term: count}, keeping index order."""
        if self.facet_counts is None:
            return {}
        flat = self.facet_counts.facet_fields.get(field, [])
        return {str(flat[i]): int(flat[i + 1]) for i in range(0, len(flat) - 1, 2)}
