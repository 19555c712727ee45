"""Featured article API."""

from web.api.featured.views import (
    get_featured_article,
    get_featured_overrides,
    remove_featured_article,
    set_featured_article,
)

__all__ = [
    "get_featured_article",
    "get_featured_overrides",
    "set_featured_article",
    "remove_featured_article",
]
