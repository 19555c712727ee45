"""Taxonomy API."""

from web.api.taxonomy.views import (
    deflag_category,
    flag_category,
    get_category_counts,
    get_category_tree,
    get_top_level_categories,
)

__all__ = [
    "get_top_level_categories",
    "get_category_tree",
    "get_category_counts",
    "flag_category",
    "deflag_category",
]
