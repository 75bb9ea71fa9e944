# ABOUTME: Feed dialect parsers.
# ABOUTME: Exports the Parser contract and the Atom, RSS 2.0 and RSS 1.0 implementations.

from feed_reader.parsers.atom import AtomParser
from feed_reader.parsers.base import Parser
from feed_reader.parsers.rdf import RdfParser
from feed_reader.parsers.rss import RssParser

__all__ = ["Parser", "AtomParser", "RssParser", "RdfParser"]
