"""Feed API response schemas."""

from datetime import date, datetime

from pydantic import BaseModel


class FeedLinkItem(BaseModel):
    href: str
    rel: str
    title: str | None = None
    type: str | None = None


class FeedPersonItem(BaseModel):
    name: str
    email: str | None = None
    uri: str | None = None


class FeedCategoryItem(BaseModel):
    term: str
    sub_category: str | None = None


class FeedEntryItem(BaseModel):
    """Feed entry for one article."""

    id: str
    title: str | None
    rights: str
    published: date | None
    updated: date | None
    content: str
    links: list[FeedLinkItem]
    authors: list[FeedPersonItem]
    categories: list[FeedCategoryItem]
    volume: str | None = None
    issue: str | None = None


class FeedResponse(BaseModel):
    """Article feed."""

    id: str
    title: str
    tagline: str
    updated: datetime
    icon: str
    copyright: str
    xml_base: str
    self_link: FeedLinkItem
    author: FeedPersonItem
    entries: list[FeedEntryItem]
