"""Taxonomy API views - thin layer over services."""

from app.container import container
from web.api.errors import NotFoundError, validate_id, validate_journal_key

from .schemas import (
    CategoriesResponse,
    CategoryCountItem,
    CategoryCountsResponse,
    CategoryNode,
    CategoryTreeResponse,
    FlagResponse,
)


def _validate_optional_journal(journal: str | None) -> None:
    if journal:
        validate_journal_key(journal)


def get_top_level_categories(journal: str | None = None) -> CategoriesResponse:
    """Get top-level categories with their second-level categories."""
    _validate_optional_journal(journal)
    data = container.taxonomy.parse_top_and_second_level_categories(journal)
    return CategoriesResponse(journal=journal, categories=data)


def get_category_tree(journal: str | None = None) -> CategoryTreeResponse:
    """Get the full category tree."""
    _validate_optional_journal(journal)
    root = container.taxonomy.parse_categories(journal)
    return CategoryTreeResponse(journal=journal, root=CategoryNode.model_validate(root.to_dict()))


def get_category_counts(journal: str | None = None, path: list[str] | None = None) -> CategoryCountsResponse:
    """Get article counts for the category at path (the root when empty) and its children."""
    _validate_optional_journal(journal)
    root = container.taxonomy.parse_categories(journal)
    node = root.find(path or [])
    if node is None:
        raise NotFoundError(f"Category not found: /{'/'.join(path or [])}")

    counts = container.taxonomy.get_counts(node, journal)
    children = [CategoryCountItem(name=name, count=counts.get(name)) for name in node.children]

    return CategoryCountsResponse(
        journal=journal,
        category=node.name,
        count=counts.get(node.name),
        children=children,
    )


def flag_category(article_id: int, category_id: int, auth_id: str | None = None) -> FlagResponse:
    """Flag an article's category assignment as wrong."""
    validate_id("article_id", article_id)
    validate_id("category_id", category_id)
    container.flags.flag_taxonomy_term(article_id, category_id, auth_id)
    return FlagResponse(
        article_id=article_id,
        category_id=category_id,
        flags=container.flags.count_flags(article_id, category_id),
    )


def deflag_category(article_id: int, category_id: int, auth_id: str | None = None) -> FlagResponse:
    """Withdraw a flag on an article's category assignment."""
    validate_id("article_id", article_id)
    validate_id("category_id", category_id)
    container.flags.deflag_taxonomy_term(article_id, category_id, auth_id)
    return FlagResponse(
        article_id=article_id,
        category_id=category_id,
        flags=container.flags.count_flags(article_id, category_id),
    )
