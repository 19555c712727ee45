"""Feed request parameters and feed configuration."""

import calendar
from dataclasses import dataclass, replace
from datetime import date
from urllib.parse import urlencode

from app.services import cache_keys
from settings import (
    COPYRIGHT,
    FEED_CACHE_TTL,
    FEED_DEFAULT_DURATION,
    FEED_DEFAULT_MAX_RESULTS,
    FEED_ID,
    FEED_TAGLINE,
    FEED_TITLE,
    PUBLISHER_EMAIL,
    PUBLISHER_NAME,
    WEBSERVER_URL,
)


@dataclass(frozen=True)
class FeedConfig:
    """Publisher metadata and defaults for feeds."""

    webserver_url: str = WEBSERVER_URL
    publisher_name: str = PUBLISHER_NAME
    publisher_email: str = PUBLISHER_EMAIL
    copyright: str = COPYRIGHT
    title: str = FEED_TITLE
    tagline: str = FEED_TAGLINE
    feed_id: str = FEED_ID
    default_duration: int = FEED_DEFAULT_DURATION
    default_max_results: int = FEED_DEFAULT_MAX_RESULTS
    cache_ttl: int = FEED_CACHE_TTL

    @property
    def icon(self) -> str:
        return self.webserver_url + "images/favicon.ico"


def months_ago(today: date, months: int) -> date:
    """Same day of month, months earlier, clamped to the length of the target month."""
    index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


@dataclass(frozen=True)
class FeedParams:
    """Feed request as given by the caller.

    start_date None means "use the default window"; an empty string means no
    lower bound. Dates are ISO formatted (YYYY-MM-DD).
    """

    start_date: str | None = None
    end_date: str | None = None
    category: str | None = None
    author: str | None = None
    max_results: int = -1
    relative_links: bool = False
    extended: bool = False
    title: str | None = None
    self_link: str | None = None
    path: str = "/"

    def resolve(self, today: date, default_duration: int) -> "FeedParams":
        """Fill in the default start date. Idempotent."""
        if self.start_date is not None:
            return self
        return replace(self, start_date=months_ago(today, default_duration).isoformat())

    def start(self) -> date | None:
        """Parsed start date; raises ValueError on a malformed date."""
        return date.fromisoformat(self.start_date) if self.start_date else None

    def end(self) -> date | None:
        """Parsed end date; raises ValueError on a malformed date."""
        return date.fromisoformat(self.end_date) if self.end_date else None

    def limit(self, default: int) -> int:
        return self.max_results if self.max_results > 0 else default

    def cache_key(self) -> str:
        """Canonical key over every field that changes the feed. Call on resolved params."""
        fields: dict[str, str] = {}
        if self.start_date:
            fields["sd"] = self.start_date
        if self.end_date:
            fields["ed"] = self.end_date
        if self.category:
            fields["cat"] = self.category
        if self.author:
            fields["aut"] = self.author
        if self.max_results != -1:
            fields["cnt"] = str(self.max_results)
        if not self.relative_links:
            fields["rel"] = "true"
        if not self.extended:
            fields["ext"] = "true"
        if self.title is not None:
            fields["tit"] = self.title
        if self.self_link is not None:
            fields["self"] = self.self_link
        elif self.path != "/":
            # path only shapes the default self link
            fields["path"] = self.path
        return cache_keys.feed_key(fields)

    def feed_id(self, base: str) -> str:
        query = {}
        if self.category:
            query["category"] = self.category
        if self.author:
            query["author"] = self.author
        return f"{base}?{urlencode(query)}" if query else base

    def feed_title(self, base: str) -> str:
        if self.title is not None:
            return self.title
        title = base
        if self.category:
            title += f" - Category {self.category}"
        if self.author:
            title += f" - Author {self.author}"
        return title
