# ABOUTME: Transport reading feeds from the local filesystem.
# ABOUTME: Emulates HTTP status codes for missing or unchanged files.

from datetime import UTC, datetime
from pathlib import Path
from urllib.parse import unquote, urlparse

from feed_reader.filters import as_utc
from feed_reader.models import HttpResponse


class FileTransport:
    """Serves feeds stored on disk, addressed by path or file:// URL."""

    def _path(self, url: str) -> Path:
        parsed = urlparse(url)
        if parsed.scheme == "file":
            return Path(unquote(parsed.path))
        return Path(url)

    def fetch(self, url: str, modified_since: datetime) -> HttpResponse:
        path = self._path(url)
        if not path.is_file():
            return HttpResponse(status_code=404, message="Not Found")

        mtime = datetime.fromtimestamp(path.stat().st_mtime, UTC)
        if mtime <= as_utc(modified_since):
            return HttpResponse(status_code=304, message="Not Modified")

        return HttpResponse(status_code=200, body=path.read_bytes(), message="OK")
