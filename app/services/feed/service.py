"""Feed service - assembles article feeds and caches them per request parameters."""

from datetime import date, datetime
from urllib.parse import urlencode

from loguru import logger

from app.errors import ApplicationError
from app.models.feed import Feed, FeedCategory, FeedEntry, FeedLink, FeedPerson
from app.repositories.core import ArticleRepository
from app.services.feed.params import FeedConfig, FeedParams
from app.services.interfaces import Cache

FETCH_ARTICLE_ACTION = "article/fetchArticle.action"
FETCH_OBJECT_ATTACHMENT_ACTION = "article/fetchObjectAttachment.action"

# Marker left in descriptions by the article stylesheet
END_TITLE_MARKER = "END_TITLE"

CONTENT_TYPES = {
    "XML": "text/xml",
    "PDF": "application/pdf",
    "PNG": "image/png",
    "GIF": "image/gif",
    "JPG": "image/jpeg",
    "JPEG": "image/jpeg",
    "TIF": "image/tiff",
    "TIFF": "image/tiff",
    "ZIP": "application/zip",
}


def content_type(representation: str) -> str:
    return CONTENT_TYPES.get(representation.upper(), "application/octet-stream")


class FeedService:
    """Article feeds built from the article store."""

    def __init__(self, repo: ArticleRepository, cache: Cache | None = None, config: FeedConfig | None = None):
        self._repo = repo
        self._cache = cache
        self._config = config or FeedConfig()

    def get_feed(self, params: FeedParams, today: date | None = None) -> Feed:
        """Feed for params, served from cache when the same request was built recently."""
        resolved = params.resolve(today or date.today(), self._config.default_duration)
        logger.debug("Generating feed w/start_date={}", resolved.start_date)

        if self._cache is None:
            return self._build_feed(resolved)

        key = resolved.cache_key()
        return self._cache.get(key, self._config.cache_ttl, lambda: self._build_feed(resolved))

    def _build_feed(self, params: FeedParams) -> Feed:
        config = self._config
        try:
            start, end = params.start(), params.end()
        except ValueError as e:
            raise ApplicationError(f"Invalid feed date: {e}") from e

        articles = self._repo.get_articles(
            start_date=start,
            end_date=end,
            category=params.category,
            author=params.author,
            limit=params.limit(config.default_max_results),
        )
        logger.info("Feed query returned {} articles", len(articles))

        xml_base = "" if params.relative_links else config.webserver_url
        self_href = params.self_link or config.webserver_url.rstrip("/") + "/" + params.path.lstrip("/")

        return Feed(
            id=params.feed_id(config.feed_id),
            title=params.feed_title(config.title),
            tagline=config.tagline,
            updated=datetime.now(),
            icon=config.icon,
            copyright=config.copyright,
            xml_base=config.webserver_url,
            self_link=FeedLink(href=self_href, rel="self", title=config.title),
            author=FeedPerson(name=config.publisher_name, email=config.publisher_email, uri=config.webserver_url),
            entries=[self._build_entry(a, params.extended, xml_base) for a in articles],
        )

    def _build_entry(self, article: dict, extended: bool, xml_base: str) -> FeedEntry:
        doi = article["doi"]
        title = article["title"]
        names: list[str] = article["authors"]

        # Article page first so readers favor it
        links = [
            FeedLink(
                href=f"{xml_base}{FETCH_ARTICLE_ACTION}?{urlencode({'articleURI': doi}, safe=':/')}",
                rel="alternate",
                title=title,
            )
        ]
        for rep in article["representations"]:
            query = urlencode({"uri": doi, "representation": rep}, safe=":/")
            links.append(
                FeedLink(
                    href=f"{xml_base}{FETCH_OBJECT_ATTACHMENT_ACTION}?{query}",
                    rel="related",
                    title=f"({rep}) {title}",
                    type=content_type(rep),
                )
            )

        if extended:
            authors = [FeedPerson(name=n) for n in names]
        elif names:
            authors = [FeedPerson(name=names[0] + (" et al." if len(names) > 1 else ""))]
        else:
            authors = []

        content = ""
        if not extended and len(names) > 1:
            content = f"<p>by {', '.join(names)}</p>\n"
        content += (article["description"] or "").replace(END_TITLE_MARKER, "")

        return FeedEntry(
            id=doi,
            title=title,
            rights=article["rights"] or self._config.copyright,
            published=article["date"],
            updated=article["date"],
            content=content,
            links=links,
            authors=authors,
            categories=[FeedCategory(term=m, sub_category=s) for m, s in article["categories"]] if extended else [],
            volume=article["volume"] if extended else None,
            issue=article["issue"] if extended else None,
        )
