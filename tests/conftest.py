# ABOUTME: Pytest fixtures and configuration for feed reader tests.
# ABOUTME: Provides settings, sample feed documents, and a reader wired to a mock transport.

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from feed_reader.config import Settings
from feed_reader.factory import FeedFactory
from feed_reader.models import HttpResponse
from feed_reader.parsers import AtomParser, RdfParser, RssParser
from feed_reader.reader import FeedReader

FEED_URL = "https://example.com/feed.xml"

ATOM_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Feed</title>
  <subtitle>Atom subtitle</subtitle>
  <link href="http://example.org/"/>
  <link rel="self" href="http://example.org/feed.atom"/>
  <id>urn:uuid:60a76c80-d399-11d9-b93c-0003939e0af6</id>
  <updated>2024-01-02T18:30:02Z</updated>
  <entry>
    <title>Second post</title>
    <link rel="alternate" href="http://example.org/2024/01/02/second"/>
    <id>urn:uuid:entry-2</id>
    <updated>2024-01-02T18:30:02Z</updated>
    <summary>Newer entry.</summary>
    <content type="html">Full text of the newer entry.</content>
    <author><name>Jane Doe</name></author>
  </entry>
  <entry>
    <title>First post</title>
    <link href="http://example.org/2024/01/01/first"/>
    <id>urn:uuid:entry-1</id>
    <published>2024-01-01T10:00:00Z</published>
    <summary>Older entry.</summary>
  </entry>
</feed>
"""

RSS_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example RSS</title>
    <link>http://example.com/</link>
    <description>RSS description</description>
    <lastBuildDate>Tue, 02 Jan 2024 12:00:00 GMT</lastBuildDate>
    <item>
      <title>RSS item one</title>
      <link>http://example.com/one</link>
      <guid>urn:rss:one</guid>
      <description>One summary</description>
      <pubDate>Tue, 02 Jan 2024 12:00:00 GMT</pubDate>
      <author>editor@example.com</author>
    </item>
    <item>
      <title>RSS item two</title>
      <link>http://example.com/two</link>
      <description>Two summary</description>
      <dc:creator>John</dc:creator>
      <dc:date>2024-01-01T08:00:00Z</dc:date>
    </item>
  </channel>
</rss>
"""

RDF_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns="http://purl.org/rss/1.0/"
         xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel rdf:about="http://example.net/">
    <title>RDF feed</title>
    <link>http://example.net/</link>
    <description>RDF description</description>
    <dc:date>2024-01-03T00:00:00Z</dc:date>
  </channel>
  <item rdf:about="http://example.net/a">
    <title>RDF item</title>
    <link>http://example.net/a</link>
    <description>RDF summary</description>
    <dc:creator>Ann</dc:creator>
    <dc:date>2024-01-03T00:00:00Z</dc:date>
  </item>
</rdf:RDF>
"""

UNKNOWN_DOCUMENT = b"""<?xml version="1.0" encoding="utf-8"?>
<html><body><p>Not a feed</p></body></html>
"""


@pytest.fixture(autouse=True)
def captured_logs() -> Iterator[list[dict]]:
    """Capture structlog events instead of printing them."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def mock_settings() -> Settings:
    """Create mock settings for testing."""
    return Settings(
        http_timeout=5.0,
        http_follow_redirects=True,
        http_user_agent="feed-reader-tests/1.0",
        log_level="DEBUG",
        log_format="console",
    )


@pytest.fixture
def factory() -> FeedFactory:
    """Default content factory."""
    return FeedFactory()


@pytest.fixture
def transport() -> MagicMock:
    """Transport returning an OK Atom response unless reconfigured."""
    mock_transport = MagicMock()
    mock_transport.fetch.return_value = HttpResponse(status_code=200, body=ATOM_FEED, message="OK")
    return mock_transport


@pytest.fixture
def reader(transport: MagicMock, factory: FeedFactory) -> FeedReader:
    """Reader with the Atom, RSS and RDF parsers registered."""
    feed_reader = FeedReader(transport, factory)
    return feed_reader.add_parser(AtomParser()).add_parser(RssParser()).add_parser(RdfParser())


@pytest.fixture
def atom_feed() -> bytes:
    """Two-entry Atom document, newest entry first."""
    return ATOM_FEED


@pytest.fixture
def rss_feed() -> bytes:
    """Two-item RSS 2.0 document."""
    return RSS_FEED


@pytest.fixture
def rdf_feed() -> bytes:
    """One-item RSS 1.0 document."""
    return RDF_FEED


@pytest.fixture
def unknown_document() -> bytes:
    """Well-formed XML that no parser recognizes."""
    return UNKNOWN_DOCUMENT


@pytest.fixture
def feed_url() -> str:
    return FEED_URL
