"""Feed entities - the assembled article feed before wire rendering."""

from dataclasses import dataclass, field
from datetime import date, datetime

from app.models.common import BaseEntity


@dataclass(frozen=True)
class FeedLink(BaseEntity):
    href: str
    rel: str
    title: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class FeedPerson(BaseEntity):
    name: str
    email: str | None = None
    uri: str | None = None


@dataclass(frozen=True)
class FeedCategory(BaseEntity):
    """Main category with an optional nested sub-category."""

    term: str
    sub_category: str | None = None


@dataclass(frozen=True)
class FeedEntry(BaseEntity):
    """One article in a feed."""

    id: str
    title: str | None
    rights: str
    published: date | None
    updated: date | None
    content: str
    links: list[FeedLink] = field(default_factory=list)
    authors: list[FeedPerson] = field(default_factory=list)
    categories: list[FeedCategory] = field(default_factory=list)
    volume: str | None = None
    issue: str | None = None


@dataclass(frozen=True)
class Feed(BaseEntity):
    """Article feed."""

    id: str
    title: str
    tagline: str
    updated: datetime
    icon: str
    copyright: str
    xml_base: str
    self_link: FeedLink
    author: FeedPerson
    entries: list[FeedEntry] = field(default_factory=list)
