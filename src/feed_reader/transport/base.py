# ABOUTME: Transport contract used by the reader to retrieve feeds.
# ABOUTME: A transport performs one conditional fetch and returns an HttpResponse.

from datetime import UTC, datetime
from typing import Protocol

from feed_reader.models import HttpResponse

EPOCH = datetime.fromtimestamp(0, UTC)


class Transport(Protocol):
    """Anything able to perform a conditional GET."""

    def fetch(self, url: str, modified_since: datetime) -> HttpResponse:
        """Fetch url, asking for 'not modified' when unchanged since modified_since."""
        ...
