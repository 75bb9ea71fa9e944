# ABOUTME: Main package for the feed reader.
# ABOUTME: Exports the reader, content models, filters, and error taxonomy.

from feed_reader.config import get_settings
from feed_reader.exceptions import (
    FeedCannotBeRead,
    FeedError,
    FeedErrorKind,
    FeedForbidden,
    FeedMalformed,
    FeedNotFound,
    FeedNotModified,
    FeedServerError,
    FeedUnreachable,
    ParserSelectionFailed,
)
from feed_reader.factory import FeedFactory
from feed_reader.filters import Filter, Limit, ModifiedSince
from feed_reader.models import FeedContent, HttpResponse, Item
from feed_reader.reader import FeedReader, Selector, SelectorKind, build_reader

__all__ = [
    "get_settings",
    "FeedReader",
    "Selector",
    "SelectorKind",
    "build_reader",
    "FeedFactory",
    "FeedContent",
    "Item",
    "HttpResponse",
    "Filter",
    "Limit",
    "ModifiedSince",
    "FeedError",
    "FeedErrorKind",
    "FeedNotFound",
    "FeedNotModified",
    "FeedServerError",
    "FeedForbidden",
    "FeedCannotBeRead",
    "FeedUnreachable",
    "FeedMalformed",
    "ParserSelectionFailed",
]
