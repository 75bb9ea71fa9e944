# ABOUTME: HTTP transport built on httpx.
# ABOUTME: Sends conditional GET requests and wraps the raw response.

from datetime import UTC, datetime
from email.utils import format_datetime

import httpx
import structlog

from feed_reader.config import Settings, get_settings
from feed_reader.exceptions import FeedUnreachable
from feed_reader.filters import as_utc
from feed_reader.models import HttpResponse
from feed_reader.transport.base import EPOCH

log = structlog.get_logger()


class HttpxTransport:
    """Fetches feeds over HTTP with If-Modified-Since support."""

    def __init__(self, settings: Settings | None = None, client: httpx.Client | None = None) -> None:
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.http_timeout,
                headers={"User-Agent": self.settings.http_user_agent},
                follow_redirects=self.settings.http_follow_redirects,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def fetch(self, url: str, modified_since: datetime) -> HttpResponse:
        """Perform a single GET request.

        The If-Modified-Since header is only sent for timestamps after the epoch.

        Raises:
            FeedUnreachable: when no HTTP response could be obtained.
        """
        headers = {}
        modified_since = as_utc(modified_since).astimezone(UTC)
        if modified_since > EPOCH:
            headers["If-Modified-Since"] = format_datetime(modified_since, usegmt=True)

        try:
            response = self.client.get(url, headers=headers)
        except httpx.RequestError as e:
            log.error("feed_unreachable", url=url, error=str(e))
            raise FeedUnreachable(str(e)) from e

        log.debug("http_response", url=url, status=response.status_code)
        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            message=response.reason_phrase,
        )
