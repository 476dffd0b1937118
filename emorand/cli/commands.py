"""
Command-line interface for emorand.
"""

import argparse
import random
import sys
from typing import List, Optional

import requests

from emorand import __version__
from emorand.config.settings import load_settings
from emorand.utils.caching import decode_codepoint, emit, ensure_cache, pick_codepoint
from emorand.utils.errors import EmorandError
from emorand.utils.paths import cache_path_for


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="emorand",
        description="Print a random emoji to stdout",
        epilog="The emoji list is downloaded once and cached in the per-user cache directory "
               "(override with EMORAND_CACHE_DIR).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_random_emoji(session: Optional[requests.Session] = None,
                       rng: Optional[random.Random] = None,
                       stdout=None) -> str:
    """Build the cache if needed, then pick, decode and print one emoji"""
    settings = load_settings()
    cache_path = cache_path_for(settings)

    ensure_cache(cache_path, settings, session=session)

    emoji = decode_codepoint(pick_codepoint(cache_path, rng=rng))
    emit(emoji, stdout)
    return emoji


def run(argv: Optional[List[str]] = None, **kwargs) -> int:
    """Parse arguments and run; every emorand error ends up here"""
    parser = create_parser()
    parser.parse_args(argv)

    try:
        print_random_emoji(**kwargs)
    except EmorandError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1
    return 0
