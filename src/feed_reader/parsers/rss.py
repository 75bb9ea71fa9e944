# ABOUTME: RSS 2.0 parser.
# ABOUTME: Recognizes <rss><channel> documents and maps <item> elements to items.

from collections.abc import Iterable

from lxml import etree

from feed_reader.models import FeedContent, Item
from feed_reader.parsers.base import Parser, find_text, parse_date

NS = {
    "dc": "http://purl.org/dc/elements/1.1/",
    "content": "http://purl.org/rss/1.0/modules/content/",
}


class RssParser(Parser):
    """Parser for RSS 2.0 (and the 0.9x family sharing its layout)."""

    def can_handle(self, document: etree._Element) -> bool:
        return document.tag == "rss" and document.find("channel") is not None

    def hydrate_feed(self, document: etree._Element, feed: FeedContent) -> None:
        channel = document.find("channel")
        feed.title = find_text(channel, "title")
        feed.link = find_text(channel, "link")
        feed.public_id = feed.link
        feed.description = find_text(channel, "description")
        feed.last_modified = parse_date(
            find_text(channel, "lastBuildDate") or find_text(channel, "pubDate")
        )

    def item_elements(self, document: etree._Element) -> Iterable[etree._Element]:
        return document.find("channel").findall("item")

    def hydrate_item(self, element: etree._Element, item: Item) -> None:
        item.title = find_text(element, "title")
        item.link = find_text(element, "link")
        item.public_id = find_text(element, "guid") or item.link
        item.summary = find_text(element, "description")
        item.description = find_text(element, "content:encoded", NS) or item.summary
        item.author = find_text(element, "author") or find_text(element, "dc:creator", NS)
        item.updated = parse_date(
            find_text(element, "pubDate") or find_text(element, "dc:date", NS)
        )
