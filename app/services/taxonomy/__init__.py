"""Taxonomy services."""

from app.services.taxonomy.categories import (
    build_category_view,
    build_top_and_second_level,
    is_full_subject_path,
    split_subject_path,
)
from app.services.taxonomy.flags import FlagService
from app.services.taxonomy.service import TaxonomyService

__all__ = [
    "TaxonomyService",
    "FlagService",
    "build_category_view",
    "build_top_and_second_level",
    "is_full_subject_path",
    "split_subject_path",
]
