# ABOUTME: Pydantic models for the normalized feed content and HTTP responses.
# ABOUTME: Defines FeedContent, Item, and HttpResponse schemas.

from datetime import datetime

from pydantic import BaseModel

REDIRECTION_CODES = frozenset({301, 302, 303, 307, 308})


class Item(BaseModel):
    """One entry within a feed."""

    public_id: str = ""
    title: str = ""
    link: str = ""
    summary: str = ""
    description: str = ""
    author: str = ""
    updated: datetime | None = None


class FeedContent(BaseModel):
    """Normalized feed: metadata plus items in document order.

    Instances are mutable so a caller can hand the same feed to several reads
    and collect new items into it.
    """

    public_id: str = ""
    title: str = ""
    link: str = ""
    description: str = ""
    last_modified: datetime | None = None
    items: list[Item] = []

    def add_item(self, item: Item) -> "FeedContent":
        self.items.append(item)
        return self

    @property
    def item_count(self) -> int:
        return len(self.items)


class HttpResponse(BaseModel):
    """Result of a single transport fetch."""

    status_code: int
    body: bytes = b""
    message: str = ""

    @property
    def is_ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirection(self) -> bool:
        return self.status_code in REDIRECTION_CODES

    @property
    def is_not_modified(self) -> bool:
        return self.status_code == 304

    @property
    def is_forbidden(self) -> bool:
        return self.status_code == 403

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600
