# ABOUTME: Error taxonomy for feed reading failures.
# ABOUTME: Every failure carries a kind, the original message, and the HTTP code when known.

from enum import Enum


class FeedErrorKind(str, Enum):
    """Category of a feed reading failure."""

    NOT_FOUND = "not_found"
    NOT_MODIFIED = "not_modified"
    SERVER_ERROR = "server_error"
    FORBIDDEN = "forbidden"
    CANNOT_BE_READ = "cannot_be_read"
    UNREACHABLE = "unreachable"
    MALFORMED = "malformed"
    NO_PARSER = "no_parser"


class FeedError(Exception):
    """Base class for all feed reading errors."""

    kind: FeedErrorKind = FeedErrorKind.CANNOT_BE_READ

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code!r})"


class FeedNotFound(FeedError):
    kind = FeedErrorKind.NOT_FOUND

    def __init__(self, message: str = "") -> None:
        super().__init__(message, 404)


class FeedNotModified(FeedError):
    kind = FeedErrorKind.NOT_MODIFIED

    def __init__(self, message: str = "") -> None:
        super().__init__(message, 304)


class FeedServerError(FeedError):
    kind = FeedErrorKind.SERVER_ERROR


class FeedForbidden(FeedError):
    kind = FeedErrorKind.FORBIDDEN

    def __init__(self, message: str = "") -> None:
        super().__init__(message, 403)


class FeedCannotBeRead(FeedError):
    """Response status outside the known categories."""

    kind = FeedErrorKind.CANNOT_BE_READ


class FeedUnreachable(FeedError):
    """The HTTP request never produced a response (DNS, connection, timeout)."""

    kind = FeedErrorKind.UNREACHABLE


class FeedMalformed(FeedError):
    """Response body is not well-formed XML.

    The underlying lxml error is kept as ``__cause__``.
    """

    kind = FeedErrorKind.MALFORMED


class ParserSelectionFailed(FeedError):
    """No registered parser accepts the document."""

    kind = FeedErrorKind.NO_PARSER
