# ABOUTME: Atom 1.0 parser.
# ABOUTME: Recognizes <feed> in the Atom namespace and maps entries to items.

from collections.abc import Iterable

from lxml import etree

from feed_reader.models import FeedContent, Item
from feed_reader.parsers.base import Parser, find_text, parse_date

ATOM_NS = "http://www.w3.org/2005/Atom"
NS = {"atom": ATOM_NS}


def _alternate_link(element: etree._Element) -> str:
    links = element.findall("atom:link", NS)
    for link in links:
        if link.get("rel", "alternate") == "alternate":
            return link.get("href", "")
    return links[0].get("href", "") if links else ""


def _full_text(element: etree._Element | None) -> str:
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


class AtomParser(Parser):
    """Parser for Atom feeds."""

    def can_handle(self, document: etree._Element) -> bool:
        return document.tag == f"{{{ATOM_NS}}}feed"

    def hydrate_feed(self, document: etree._Element, feed: FeedContent) -> None:
        feed.public_id = find_text(document, "atom:id", NS)
        feed.title = find_text(document, "atom:title", NS)
        feed.link = _alternate_link(document)
        feed.description = find_text(document, "atom:subtitle", NS)
        feed.last_modified = parse_date(find_text(document, "atom:updated", NS))

    def item_elements(self, document: etree._Element) -> Iterable[etree._Element]:
        return document.findall("atom:entry", NS)

    def hydrate_item(self, element: etree._Element, item: Item) -> None:
        item.public_id = find_text(element, "atom:id", NS)
        item.title = find_text(element, "atom:title", NS)
        item.link = _alternate_link(element)
        item.summary = _full_text(element.find("atom:summary", NS))
        item.description = _full_text(element.find("atom:content", NS)) or item.summary
        item.author = find_text(element, "atom:author/atom:name", NS)
        item.updated = parse_date(
            find_text(element, "atom:updated", NS) or find_text(element, "atom:published", NS)
        )
