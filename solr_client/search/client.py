"""Search client - subjects, subject counts and ranked articles."""

from loguru import logger
from pydantic import ValidationError

from app.models.taxonomy import SearchHit, SubjectCounts
from solr_client.base import BaseClient, SearchError
from solr_client.search.schemas import SolrResponseSchema

SUBJECT_HIERARCHY_FIELD = "subject_hierarchy"
SUBJECT_FACET_FIELD = "subject_facet"
SUBJECT_FIELD = "subject"
JOURNAL_FIELD = "cross_published_journal_key"

# Ranking fields maintained by the usage metrics indexer
SHARES_WEEK_FIELD = "alm_social_shares_week"
VIEWS_WEEK_FIELD = "counter_total_week"
VIEWS_ALL_TIME_FIELD = "counter_total_all"

HIT_FIELDS = "id,title_display,striking_image"


def quote(value: str) -> str:
    """Quote a value as a search phrase."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class SearchClient(BaseClient):
    """Client for the search index select endpoint."""

    def _select(self, params: list[tuple[str, str]]) -> SolrResponseSchema:
        data = self._get("select", params)
        try:
            return SolrResponseSchema.model_validate(data)
        except ValidationError as e:
            raise SearchError(f"Unexpected search response: {e}") from e

    def _base_params(self, journal: str | None) -> list[tuple[str, str]]:
        params = [("q", "*:*"), ("wt", "json"), ("fq", "doc_type:full")]
        if journal:
            params.append(("fq", f"{JOURNAL_FIELD}:{quote(journal)}"))
        return params

    def _facet(self, journal: str | None, field: str) -> SolrResponseSchema:
        params = self._base_params(journal) + [
            ("rows", "0"),
            ("facet", "true"),
            ("facet.field", field),
            ("facet.limit", "-1"),
            ("facet.mincount", "1"),
        ]
        return self._select(params)

    def get_all_subjects(self, journal: str | None) -> list[str]:
        """All subject paths in use, e.g. '/Biology/Genetics/Gene expression'."""
        subjects = list(self._facet(journal, SUBJECT_HIERARCHY_FIELD).facet(SUBJECT_HIERARCHY_FIELD))
        logger.debug("get_all_subjects({}): {} subjects", journal, len(subjects))
        return subjects

    def get_all_subject_counts(self, journal: str | None) -> SubjectCounts:
        """Article count per subject term plus the total article count."""
        resp = self._facet(journal, SUBJECT_FACET_FIELD)
        counts = resp.facet(SUBJECT_FACET_FIELD)
        logger.debug("get_all_subject_counts({}): {} terms, {} articles", journal, len(counts), resp.response.num_found)
        return SubjectCounts(subject_counts=counts, total_articles=resp.response.num_found)

    def _top_hit(self, journal: str, category: str, rank_field: str) -> SearchHit | None:
        params = self._base_params(journal) + [
            ("fq", f"{SUBJECT_FIELD}:{quote(category)}"),
            ("fq", f"{rank_field}:[1 TO *]"),
            ("sort", f"{rank_field} desc"),
            ("rows", "1"),
            ("fl", HIT_FIELDS),
        ]
        docs = self._select(params).response.docs
        if not docs:
            return None
        doc = docs[0]
        return SearchHit(uri=doc.id, title=doc.title_display, striking_image=doc.striking_image)

    def get_most_shared_for_journal_category(self, journal: str, category: str) -> SearchHit | None:
        """Most shared article over the last 7 days."""
        return self._top_hit(journal, category, SHARES_WEEK_FIELD)

    def get_most_viewed_for_journal_category(self, journal: str, category: str) -> SearchHit | None:
        """Most viewed article over the last 7 days."""
        return self._top_hit(journal, category, VIEWS_WEEK_FIELD)

    def get_most_viewed_all_time_for_journal_category(self, journal: str, category: str) -> SearchHit | None:
        """Most viewed article over all time."""
        return self._top_hit(journal, category, VIEWS_ALL_TIME_FIELD)
