# ABOUTME: Feed reader orchestrating fetch, parser selection and filtering.
# ABOUTME: Maps HTTP statuses to the FeedError taxonomy before any parsing.

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import structlog
from lxml import etree

from feed_reader.config import Settings
from feed_reader.exceptions import (
    FeedCannotBeRead,
    FeedForbidden,
    FeedMalformed,
    FeedNotFound,
    FeedNotModified,
    FeedServerError,
    ParserSelectionFailed,
)
from feed_reader.factory import FeedFactory
from feed_reader.filters import Filter, Limit, ModifiedSince
from feed_reader.models import FeedContent, HttpResponse
from feed_reader.parsers import AtomParser, Parser, RdfParser, RssParser
from feed_reader.transport import EPOCH, HttpxTransport, Transport

log = structlog.get_logger()

_XML_PARSER = etree.XMLParser(
    recover=False,
    resolve_entities=False,
    no_network=True,
    collect_ids=False,
)


class SelectorKind(str, Enum):
    """How a plain fetch narrows its result."""

    NONE = "none"
    LIMIT = "limit"
    SINCE = "since"


@dataclass(frozen=True)
class Selector:
    """Restriction requested by a caller of FeedReader.fetch."""

    kind: SelectorKind = SelectorKind.NONE
    limit: int | None = None
    since: datetime | None = None

    @classmethod
    def none(cls) -> "Selector":
        return cls()

    @classmethod
    def limit_to(cls, count: int) -> "Selector":
        if count < 0:
            raise ValueError(f"limit must be non-negative, got {count}")
        return cls(kind=SelectorKind.LIMIT, limit=count)

    @classmethod
    def since_moment(cls, moment: datetime) -> "Selector":
        return cls(kind=SelectorKind.SINCE, since=moment)


class FeedReader:
    """Reads any supported feed: RSS 2.0, RSS 1.0 and Atom, or more if registered.

    The reader pulls documents through a transport and hands each one to the
    first registered parser that recognizes it. Registration order matters
    when several parsers accept the same document.

        reader = FeedReader(HttpxTransport(), FeedFactory())
        reader.add_parser(AtomParser()).add_parser(RssParser())
        feed = reader.fetch(url, Selector.limit_to(10))
    """

    def __init__(self, transport: Transport, factory: FeedFactory) -> None:
        self._transport = transport
        self._factory = factory
        self._parsers: list[Parser] = []

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def factory(self) -> FeedFactory:
        return self._factory

    @property
    def parsers(self) -> tuple[Parser, ...]:
        return tuple(self._parsers)

    def add_parser(self, parser: Parser) -> "FeedReader":
        """Register a parser after the existing ones and share the factory with it."""
        parser.set_factory(self._factory)
        self._parsers.append(parser)
        return self

    def fetch(self, url: str, selector: Selector | None = None) -> FeedContent:
        """Read a feed, optionally limited to a number of items or to recent items."""
        selector = selector or Selector.none()

        if selector.kind is SelectorKind.LIMIT:
            return self.fetch_filtered(url, [Limit(selector.limit)])
        if selector.kind is SelectorKind.SINCE:
            return self.fetch_since(url, selector.since)
        return self.fetch_filtered(url, [])

    def fetch_filtered(
        self,
        url: str,
        filters: Sequence[Filter],
        modified_since: datetime | None = None,
    ) -> FeedContent:
        """Read a feed into a fresh FeedContent, keeping items accepted by every filter."""
        response = self.fetch_response(url, modified_since)
        return self.parse_body(response, self._factory.new_feed(), filters)

    def fetch_since(self, url: str, since: datetime) -> FeedContent:
        """Read items newer than since; the server is asked for changes since then too."""
        return self.fetch_filtered(url, [ModifiedSince(since)], since)

    def fetch_into(self, url: str, feed: FeedContent, since: datetime) -> FeedContent:
        """Like fetch_since, but append the new items to an existing feed.

        Returns the very instance that was passed in.
        """
        response = self.fetch_response(url, since)
        return self.parse_body(response, feed, [ModifiedSince(since)])

    def fetch_response(self, url: str, modified_since: datetime | None = None) -> HttpResponse:
        """Run the transport once; a missing timestamp means the epoch."""
        if modified_since is None:
            modified_since = EPOCH

        log.debug("feed_fetch_start", url=url, modified_since=modified_since.isoformat())
        response = self._transport.fetch(url, modified_since)
        log.info("feed_response_received", url=url, status=response.status_code)
        return response

    def parse_body(
        self,
        response: HttpResponse,
        feed: FeedContent,
        filters: Sequence[Filter] = (),
    ) -> FeedContent:
        """Parse the response body into feed.

        Raises:
            FeedNotFound, FeedNotModified, FeedServerError, FeedForbidden,
            FeedCannotBeRead: for responses that carry no feed.
            FeedMalformed: when the body is not well-formed XML.
            ParserSelectionFailed: when no parser recognizes the document.
        """
        if not (response.is_ok or response.is_redirection):
            self._raise_for_status(response)

        try:
            document = etree.fromstring(response.body, parser=_XML_PARSER)
        except (etree.XMLSyntaxError, ValueError) as e:
            log.warning("feed_malformed", status=response.status_code, error=str(e))
            raise FeedMalformed(str(e), response.status_code) from e

        parser = self.select_parser(document)
        log.debug("feed_parser_selected", parser=parser.name)

        feed = parser.parse(document, feed, filters)
        log.info("feed_parsed", parser=parser.name, items=feed.item_count)
        return feed

    def select_parser(self, document: etree._Element) -> Parser:
        """Return the first registered parser able to handle the document."""
        for parser in self._parsers:
            if parser.can_handle(document):
                return parser

        log.warning("feed_parser_missing", root=str(document.tag))
        raise ParserSelectionFailed("No parser can handle this stream")

    def _raise_for_status(self, response: HttpResponse) -> None:
        message = response.message
        log.warning("feed_read_failed", status=response.status_code, message=message)

        if response.is_not_found:
            raise FeedNotFound(message)
        if response.is_not_modified:
            raise FeedNotModified(message)
        if response.is_server_error:
            raise FeedServerError(message, response.status_code)
        if response.is_forbidden:
            raise FeedForbidden(message)
        raise FeedCannotBeRead(message, response.status_code)


def build_reader(settings: Settings | None = None) -> FeedReader:
    """Reader over HTTP with the Atom, RSS 2.0 and RSS 1.0 parsers registered."""
    reader = FeedReader(HttpxTransport(settings), FeedFactory())
    return reader.add_parser(AtomParser()).add_parser(RssParser()).add_parser(RdfParser())
