"""Taxonomy domain entities - category trees, search hits, featured articles."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from app.models.common import BaseEntity

ROOT_NODE_NAME = "ROOT"


class FeaturedArticleType(StrEnum):
    """How a featured article was selected."""

    FEATURED = "Featured Article"
    MOST_SHARED = "Most Shared Article"
    MOST_VIEWED = "Most Viewed Article"


@dataclass(frozen=True)
class FeaturedArticle(BaseEntity):
    """Article shown at the top of a subject area page."""

    doi: str
    title: str | None
    striking_image_uri: str | None
    type: FeaturedArticleType


@dataclass(frozen=True)
class SearchHit(BaseEntity):
    """Single document returned by the search index."""

    uri: str
    title: str | None = None
    striking_image: str | None = None


@dataclass(frozen=True)
class SubjectCounts(BaseEntity):
    """Article counts per subject term plus the journal total."""

    subject_counts: dict[str, int]
    total_articles: int


@dataclass
class CategoryView:
    """Node in the subject area tree. The root is named ROOT."""

    name: str
    children: dict[str, "CategoryView"] = field(default_factory=dict)

    def get_child(self, name: str) -> "CategoryView | None":
        return self.children.get(name)

    def add_child(self, name: str) -> "CategoryView":
        """Return the child called name, creating it if needed."""
        child = self.children.get(name)
        if child is None:
            child = CategoryView(name)
            self.children[name] = child
        return child

    def find(self, path: list[str]) -> "CategoryView | None":
        """Walk down the tree by child names. An empty path is this node."""
        node = self
        for name in path:
            node = node.get_child(name)
            if node is None:
                return None
        return node

    def sort(self) -> None:
        """Order children by name, recursively."""
        self.children = dict(sorted(self.children.items()))
        for child in self.children.values():
            child.sort()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "children": [c.to_dict() for c in self.children.values()],
        }
