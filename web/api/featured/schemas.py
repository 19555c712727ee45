"""Featured article API response schemas."""

from pydantic import BaseModel


class FeaturedArticleItem(BaseModel):
    """Featured article and how it was chosen."""

    doi: str
    title: str | None
    striking_image_uri: str | None
    type: str


class FeaturedArticleResponse(BaseModel):
    """Featured article of a subject area; article is None when nothing qualifies."""

    journal: str
    subject_area: str
    article: FeaturedArticleItem | None


class FeaturedOverrideItem(BaseModel):
    """Manual featured article override."""

    category: str
    doi: str


class FeaturedOverridesResponse(BaseModel):
    """Manual overrides of a journal."""

    journal: str
    items: list[FeaturedOverrideItem]
