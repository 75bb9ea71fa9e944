# ABOUTME: Base class and shared helpers for feed dialect parsers.
# ABOUTME: Defines the can_handle/parse contract every parser follows.

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import datetime

import structlog
from dateutil import parser as dateutil_parser
from lxml import etree

from feed_reader.factory import FeedFactory
from feed_reader.filters import Filter, apply_filters
from feed_reader.models import FeedContent, Item

log = structlog.get_logger()


def parse_date(value: str) -> datetime | None:
    """Parse an RFC 822 or ISO 8601 date, returning None when unreadable."""
    if not value:
        return None
    try:
        return dateutil_parser.parse(value)
    except (ValueError, OverflowError):
        log.warning("feed_date_unparseable", value=value)
        return None


def find_text(element: etree._Element, path: str, namespaces: dict[str, str] | None = None) -> str:
    """Stripped text of the first match for path, or an empty string."""
    value = element.findtext(path, default="", namespaces=namespaces)
    return value.strip() if value else ""


class Parser(ABC):
    """Translates one feed dialect into FeedContent.

    The reader injects its factory on registration; subclasses only describe
    where metadata and items live in their dialect.
    """

    def __init__(self) -> None:
        self._factory: FeedFactory | None = None

    @property
    def factory(self) -> FeedFactory:
        if self._factory is None:
            raise RuntimeError(f"{type(self).__name__} has no factory, register it on a reader first")
        return self._factory

    def set_factory(self, factory: FeedFactory) -> "Parser":
        self._factory = factory
        return self

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def can_handle(self, document: etree._Element) -> bool:
        """Cheap structural check on the root element."""

    @abstractmethod
    def hydrate_feed(self, document: etree._Element, feed: FeedContent) -> None:
        """Copy feed-level metadata from the document into feed."""

    @abstractmethod
    def item_elements(self, document: etree._Element) -> Iterable[etree._Element]:
        """Item elements in document order."""

    @abstractmethod
    def hydrate_item(self, element: etree._Element, item: Item) -> None:
        """Copy one item element into item."""

    def parse(
        self,
        document: etree._Element,
        feed: FeedContent,
        filters: Sequence[Filter] = (),
    ) -> FeedContent:
        """Hydrate feed with the document's metadata and filtered items.

        Returns the same feed instance it was given.
        """
        factory = self.factory
        self.hydrate_feed(document, feed)

        items = []
        for element in self.item_elements(document):
            item = factory.new_item()
            self.hydrate_item(element, item)
            items.append(item)

        kept = apply_filters(items, filters)
        for item in kept:
            feed.add_item(item)

        log.debug("feed_items_filtered", parser=self.name, parsed=len(items), kept=len(kept))
        return feed
