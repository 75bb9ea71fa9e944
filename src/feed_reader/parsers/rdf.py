# ABOUTME: RSS 1.0 (RDF) parser.
# ABOUTME: Recognizes <rdf:RDF> documents with RSS 1.0 channel and items.

from collections.abc import Iterable

from lxml import etree

from feed_reader.models import FeedContent, Item
from feed_reader.parsers.base import Parser, find_text, parse_date

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
NS = {
    "rdf": RDF_NS,
    "rss": "http://purl.org/rss/1.0/",
    "dc": "http://purl.org/dc/elements/1.1/",
}


class RdfParser(Parser):
    """Parser for RSS 1.0 feeds."""

    def can_handle(self, document: etree._Element) -> bool:
        return document.tag == f"{{{RDF_NS}}}RDF"

    def hydrate_feed(self, document: etree._Element, feed: FeedContent) -> None:
        channel = document.find("rss:channel", NS)
        if channel is None:
            return
        feed.public_id = channel.get(f"{{{RDF_NS}}}about", "")
        feed.title = find_text(channel, "rss:title", NS)
        feed.link = find_text(channel, "rss:link", NS)
        feed.description = find_text(channel, "rss:description", NS)
        feed.last_modified = parse_date(find_text(channel, "dc:date", NS))

    def item_elements(self, document: etree._Element) -> Iterable[etree._Element]:
        return document.findall("rss:item", NS)

    def hydrate_item(self, element: etree._Element, item: Item) -> None:
        item.title = find_text(element, "rss:title", NS)
        item.link = find_text(element, "rss:link", NS)
        item.public_id = element.get(f"{{{RDF_NS}}}about", "") or item.link
        item.summary = find_text(element, "rss:description", NS)
        item.description = item.summary
        item.author = find_text(element, "dc:creator", NS)
        item.updated = parse_date(find_text(element, "dc:date", NS))
