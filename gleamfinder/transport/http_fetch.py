"""Blocking text fetch over HTTP.

The parsing core only needs `fetch_text(url) -> str`; HttpFetcher is the
default implementation. Failure policy:
- request could not complete (DNS, connect, read timeout, ...) -> Timeout
- body not decodable as text -> UndecodableBody (an InvalidResponse)

HTTP status codes are not failures here: the parser decides what a body means.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from urllib.parse import urlparse

import requests

from gleamfinder.errors import Timeout, UndecodableBody


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:78.0) Gecko/20100101 Firefox/78.0"

FetchText = Callable[[str], str]


def _host(url: str) -> Optional[str]:
    try:
        return (urlparse(url or "").netloc or "").lower().strip() or None
    except Exception:
        return None


def decode_body(content: bytes, encoding: Optional[str]) -> str:
    try:
        return content.decode(encoding or "utf-8")
    except (UnicodeDecodeError, LookupError) as e:
        raise UndecodableBody(f"cannot decode body as {encoding or 'utf-8'}: {e}") from e


@dataclass(frozen=True)
class HttpFetcher:
    timeout: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = "text/html,text/plain"

    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": self.accept}

    def __call__(self, url: str) -> str:
        try:
            resp = requests.get(url, headers=self.headers(), timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.debug(f"fetch failed host={_host(url)}: {e}")
            raise Timeout(f"could not fetch {url}: {e}") from e
        if resp.status_code >= 400:
            logger.warning(f"http_{resp.status_code} from host={_host(url)}")
        # requests falls back to ISO-8859-1 for text/* without a charset; pages here are utf-8
        declared = "charset" in (resp.headers.get("Content-Type") or "").lower()
        return decode_body(resp.content, resp.encoding if declared else None)
