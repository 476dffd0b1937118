"""
HTTP module for fetching the Unicode emoji sequence list.
"""

import sys
from typing import Optional
import requests

from emorand.config.settings import DEFAULT_HEADERS, DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT
from emorand.utils.errors import SourceListError

# requests falls back to ISO-8859-1 for text/* without a charset
DEFAULT_CHARSET = "utf-8"


def build_session(ua: Optional[str] = None) -> requests.Session:
    """Create session with an identifying user agent"""
    s = requests.Session()
    s.headers.update(DEFAULT_HEADERS)
    s.headers.update({"User-Agent": ua or DEFAULT_USER_AGENT})
    return s


def _is_text_response(response: requests.Response) -> bool:
    content_type = response.headers.get("Content-Type")
    if not content_type:
        return True
    return content_type.split(";", 1)[0].strip().lower().startswith("text/")


def _charset(response: requests.Response) -> str:
    """Charset named in the Content-Type header, UTF-8 when there is none"""
    content_type = response.headers.get("Content-Type") or ""
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip(" \"'"):
            return value.strip(" \"'")
    return DEFAULT_CHARSET


def fetch_sequence_list(session: requests.Session, url: str,
                        timeout: float = DEFAULT_REQUEST_TIMEOUT) -> str:
    """Download the emoji sequence list and return it as text"""
    print(f"Fetching {url} to build the emoji cache...", file=sys.stderr)

    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceListError(f"failed to fetch {url} to build the emoji cache: {e}") from e

    if not _is_text_response(response):
        raise SourceListError(
            f"failed to parse {url} when trying to build the emoji cache: "
            f"unexpected content type {response.headers.get('Content-Type')!r}"
        )

    encoding = _charset(response)
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise SourceListError(f"failed to parse {url} when trying to build the emoji cache: {e}") from e
