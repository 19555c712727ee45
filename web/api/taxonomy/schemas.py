"""Taxonomy API response schemas."""

from pydantic import BaseModel


class CategoriesResponse(BaseModel):
    """Top-level categories with their second-level categories."""

    journal: str | None
    categories: dict[str, list[str]]


class CategoryNode(BaseModel):
    """Node in the category tree."""

    name: str
    children: list["CategoryNode"] = []


class CategoryTreeResponse(BaseModel):
    """Full category tree."""

    journal: str | None
    root: CategoryNode


class CategoryCountItem(BaseModel):
    """Article count for a category. None when the index has no count for it."""

    name: str
    count: int | None


class CategoryCountsResponse(BaseModel):
    """Counts for a category and its children."""

    journal: str | None
    category: str
    count: int | None
    children: list[CategoryCountItem]


class FlagResponse(BaseModel):
    """Flag state of an article category after a flag/deflag."""

    article_id: int
    category_id: int
    flags: int
