from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import user_cache_dir

from ..config.settings import APP_AUTHOR, APP_BUNDLE_ID, APP_NAME, CACHE_FILENAME, Settings
from .errors import CacheDirectoryError


def app_name_for_platform() -> str:
    """~/Library/Caches is keyed by bundle id on macOS, by plain app name elsewhere."""
    return APP_BUNDLE_ID if sys.platform == "darwin" else APP_NAME


def cache_dir_for(settings: Settings) -> Path:
    """Resolve the per-user cache directory, honouring EMORAND_CACHE_DIR."""
    if settings.cache_dir:
        return Path(settings.cache_dir).expanduser()
    try:
        return Path(user_cache_dir(app_name_for_platform(), APP_AUTHOR))
    except (KeyError, RuntimeError, OSError) as e:
        raise CacheDirectoryError(f"failed to determine standard directories on this system: {e}") from e


def ensure_cache_dir(settings: Settings) -> Path:
    """Create the cache directory (with parents) and return it."""
    cache_dir = cache_dir_for(settings)
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CacheDirectoryError(f"failed to create cache directory {cache_dir}: {e}") from e
    return cache_dir


def cache_path_for(settings: Settings) -> Path:
    return ensure_cache_dir(settings) / CACHE_FILENAME
