# ABOUTME: Transports retrieving raw feed documents.
# ABOUTME: Exports the Transport protocol, the httpx transport and the file transport.

from feed_reader.transport.base import EPOCH, Transport
from feed_reader.transport.file import FileTransport
from feed_reader.transport.http import HttpxTransport

__all__ = ["EPOCH", "Transport", "HttpxTransport", "FileTransport"]
