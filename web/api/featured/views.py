"""Featured article API views - thin layer over services."""

from app.container import container
from web.api.errors import ValidationError, validate_journal_key, validate_subject_area

from .schemas import (
    FeaturedArticleItem,
    FeaturedArticleResponse,
    FeaturedOverrideItem,
    FeaturedOverridesResponse,
)


def get_featured_article(journal: str, subject_area: str) -> FeaturedArticleResponse:
    """Get the featured article of a subject area."""
    validate_journal_key(journal)
    validate_subject_area(subject_area)
    article = container.featured.get_featured_article_for_subject_area(journal, subject_area)

    item = None
    if article is not None:
        item = FeaturedArticleItem(
            doi=article.doi,
            title=article.title,
            striking_image_uri=article.striking_image_uri,
            type=str(article.type),
        )

    return FeaturedArticleResponse(journal=journal, subject_area=subject_area, article=item)


def get_featured_overrides(journal: str) -> FeaturedOverridesResponse:
    """Get manual featured article overrides of a journal."""
    validate_journal_key(journal)
    data = container.featured.get_featured_articles(journal)
    items = [FeaturedOverrideItem(category=c, doi=d) for c, d in data.items()]
    return FeaturedOverridesResponse(journal=journal, items=items)


def set_featured_article(journal: str, subject_area: str, doi: str, auth_id: str | None) -> FeaturedOverridesResponse:
    """Set the manual featured article of a subject area."""
    validate_journal_key(journal)
    validate_subject_area(subject_area)
    if not doi:
        raise ValidationError("DOI is required")
    container.featured.create_featured_article(journal, subject_area, doi, auth_id)
    return get_featured_overrides(journal)


def remove_featured_article(journal: str, subject_area: str, auth_id: str | None) -> FeaturedOverridesResponse:
    """Remove the manual featured article of a subject area."""
    validate_journal_key(journal)
    validate_subject_area(subject_area)
    container.featured.delete_featured_article(journal, subject_area, auth_id)
    return get_featured_overrides(journal)
