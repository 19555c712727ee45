"""Base HTTP client for the search index with retry logic."""

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

DEFAULT_TIMEOUT = 30


class SearchError(Exception):
    """Search index request failed or returned an unusable response."""

    def __init__(self, message: str = "Search request failed"):
        self.message = message
        super().__init__(self.message)


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


def _log_retry(state: RetryCallState) -> None:
    logger.warning("Search request failed (attempt {}): {}", state.attempt_number, state.outcome.exception())


class BaseClient:
    """Base blocking HTTP client for a Solr core with exponential backoff.

    Usable as a context manager, or kept open for the life of the application
    and closed with close().
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
        )
        self._request_count = 0
        logger.info("{}: base_url={}", self.__class__.__name__, self._base_url)

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def close(self) -> None:
        logger.info("Total search requests: {}", self._request_count)
        self._client.close()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        before_sleep=_log_retry,
        reraise=True,
    )
    def _get_with_retry(self, path: str, params: list[tuple[str, str]]) -> dict:
        self._request_count += 1
        resp = self._client.get(f"{self._base_url}/{path}", params=params)
        resp.raise_for_status()
        return resp.json()

    def _get(self, path: str, params: list[tuple[str, str]]) -> dict:
        """GET request with retry logic. Failures surface as SearchError."""
        try:
            return self._get_with_retry(path, params)
        except httpx.HTTPError as e:
            raise SearchError(f"Search request to {path} failed: {e}") from e
        except ValueError as e:
            raise SearchError(f"Search response from {path} is not JSON: {e}") from e
