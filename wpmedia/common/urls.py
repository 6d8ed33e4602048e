from __future__ import annotations

from posixpath import basename
from urllib.parse import urlsplit


def url_basename(url: str | None) -> str:
    """
    Last path segment of `url`, ignoring query string and fragment.
    Percent-escapes are kept as-is, so an encoded "%2F" never becomes a "/".

        url_basename("https://example.com/a/photo.jpg?w=300") -> "photo.jpg"
    """
    if not url:
        return ""
    path = urlsplit(url).path.rstrip("/")
    return basename(path)
