"""
Configuration settings and constants for emorand.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import load_dotenv

from emorand.utils.errors import ConfigError

# Load environment variables
load_dotenv()

# Application identifiers for the per-user cache directory
APP_NAME = "emorand"
APP_AUTHOR = "jjpk"
APP_BUNDLE_ID = "me.jjpk.emorand"  # macOS cache directory name

# Online plaintext list of emoji sequences
UNICODE_URL = "https://unicode.org/Public/emoji/13.1/emoji-sequences.txt"

# Cache file name (under the user's emorand cache directory)
CACHE_FILENAME = "cache.bin"

# Request settings
DEFAULT_REQUEST_TIMEOUT = 30.0

DEFAULT_USER_AGENT = "emorand/1.0 (+https://jjpk.me)"

DEFAULT_HEADERS = {
    "Accept": "text/plain",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "close",
}

# Environment variable names
ENV_SOURCE_URL = "EMORAND_SOURCE_URL"
ENV_CACHE_DIR = "EMORAND_CACHE_DIR"
ENV_REQUEST_TIMEOUT = "EMORAND_REQUEST_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    source_url: str = UNICODE_URL
    cache_dir: Optional[str] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"{ENV_REQUEST_TIMEOUT} must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ConfigError(f"{ENV_REQUEST_TIMEOUT} must be positive, got {raw!r}")
    return timeout


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the environment (defaults to os.environ)"""
    env = os.environ if environ is None else environ

    source_url = env.get(ENV_SOURCE_URL, "").strip() or UNICODE_URL
    cache_dir = env.get(ENV_CACHE_DIR, "").strip() or None

    raw_timeout = env.get(ENV_REQUEST_TIMEOUT, "").strip()
    timeout = _parse_timeout(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT

    return Settings(source_url=source_url, cache_dir=cache_dir, request_timeout=timeout)
