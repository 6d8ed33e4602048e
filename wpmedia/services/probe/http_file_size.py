# wpmedia/services/probe/http_file_size.py
from __future__ import annotations

from typing import Mapping, Optional

import requests

from wpmedia.common.logging import get_logger
from wpmedia.common.settings import get_settings
from wpmedia.domain.ports.file_size import FileSizePort

logger = get_logger(__name__)


class HttpFileSizeProbe(FileSizePort):
    """
    Learns a remote file's byte length from a HEAD request, without
    downloading the body.

    Never raises: a failed request, a missing or malformed Content-Length
    all give 0, which callers must read as "unknown", not "empty file".
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout_sec: Optional[float] = None,
        follow_redirects: Optional[bool] = None,
        enabled: Optional[bool] = None,
    ):
        cfg = get_settings().probe
        self.session = session
        self.timeout_sec = float(timeout_sec if timeout_sec is not None else cfg.timeout_sec)
        self.follow_redirects = cfg.follow_redirects if follow_redirects is None else follow_redirects
        self.enabled = cfg.enabled if enabled is None else enabled
        self.headers = {"User-Agent": cfg.user_agent}

    # ---- Port API -------------------------------------------------------------
    def probe(self, url: str) -> int:
        if not self.enabled or not url:
            return 0

        requester = self.session or requests
        try:
            resp = requester.head(
                url,
                headers=self.headers,
                timeout=self.timeout_sec,
                allow_redirects=self.follow_redirects,
            )
        except requests.RequestException as e:
            logger.warning("File size probe failed for %s: %s", url, e)
            return 0

        size = content_length(resp.headers)
        if size is None:
            logger.debug("No usable Content-Length for %s (status %s)", url, resp.status_code)
            return 0
        return size


def content_length(headers: Optional[Mapping[str, str]]) -> Optional[int]:
    """
    Content-Length from a header mapping, matched case-insensitively.
    None when absent, non-numeric or negative.
    """
    if not headers:
        return None
    value = next((v for k, v in headers.items() if str(k).lower() == "content-length"), None)
    if value is None:
        return None
    try:
        size = int(str(value).strip())
    except ValueError:
        return None
    return size if size >= 0 else None
