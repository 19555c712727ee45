"""Feed API views - thin layer over services."""

from app.container import container
from app.services.feed import FeedParams
from web.api.errors import validate_date

from .schemas import FeedResponse


def get_feed(
    start_date: str | None = None,
    end_date: str | None = None,
    category: str | None = None,
    author: str | None = None,
    max_results: int = -1,
    relative_links: bool = False,
    extended: bool = False,
    title: str | None = None,
    self_link: str | None = None,
    path: str = "/",
) -> FeedResponse:
    """Get an article feed."""
    validate_date("start_date", start_date)
    validate_date("end_date", end_date)

    params = FeedParams(
        start_date=start_date,
        end_date=end_date,
        category=category,
        author=author,
        max_results=max_results,
        relative_links=relative_links,
        extended=extended,
        title=title,
        self_link=self_link,
        path=path,
    )
    feed = container.feed.get_feed(params)
    return FeedResponse.model_validate(feed.to_dict())
