"""
Binary emoji cache: building it from the online list and picking random records from it.

The cache file is a flat sequence of 4-byte little-endian unsigned integers,
one per code point, with no header.
"""

import pathlib
import random
import struct
import sys
from typing import BinaryIO, Iterable, Optional, TextIO

import requests

from emorand.config.settings import Settings
from emorand.fetchers.unicode_list import build_session, fetch_sequence_list
from emorand.parsers.sequence_parser import iter_codepoints
from emorand.utils.errors import (
    CacheCorruptedError, CacheFileError, CodepointDecodeError
)

RECORD = struct.Struct("<I")
RECORD_SIZE = RECORD.size

MAX_SCALAR_VALUE = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def write_codepoints(cache_file: BinaryIO, codepoints: Iterable[int]) -> int:
    """Write one record per code point and return the number written"""
    count = 0
    for codepoint in codepoints:
        try:
            cache_file.write(RECORD.pack(codepoint))
        except OSError as e:
            raise CacheFileError(f"failed to write while building emoji cache: {e}") from e
        count += 1
    return count


def create_cache(cache_file: BinaryIO, session: requests.Session, url: str, timeout: float) -> int:
    """Populate a new, empty cache file from the online list"""
    text = fetch_sequence_list(session, url, timeout=timeout)
    count = write_codepoints(cache_file, iter_codepoints(text))
    print(f"Wrote {count} code points to the emoji cache", file=sys.stderr)
    return count


def ensure_cache(cache_path: pathlib.Path, settings: Settings,
                 session: Optional[requests.Session] = None) -> bool:
    """Create the cache file if it doesn't exist yet. Returns True if it was built"""
    try:
        cache_file = open(cache_path, "xb")
    except FileExistsError:
        return False
    except OSError as e:
        raise CacheFileError(f"Error while opening cache file at {cache_path}: {e}") from e

    with cache_file:
        create_cache(cache_file, session or build_session(), settings.source_url, settings.request_timeout)
    return True


def cache_record_count(cache_path: pathlib.Path) -> int:
    """Number of records in the cache, after checking the file isn't corrupted"""
    try:
        cache_bytes = cache_path.stat().st_size
    except OSError as e:
        raise CacheFileError(f"failed to get metadata for cache at {cache_path}: {e}") from e

    if cache_bytes == 0 or cache_bytes % RECORD_SIZE != 0:
        raise CacheCorruptedError(
            f"the emorand cache file at {cache_path} appears to be corrupted (delete it)"
        )
    return cache_bytes // RECORD_SIZE


def read_codepoint(cache_file: BinaryIO, index: int) -> int:
    """Read record ``index`` from an open cache file"""
    cache_file.seek(index * RECORD_SIZE)
    data = cache_file.read(RECORD_SIZE)
    if len(data) != RECORD_SIZE:
        raise CacheFileError(f"short read at record {index} ({len(data)} of {RECORD_SIZE} bytes)")
    return RECORD.unpack(data)[0]


def pick_codepoint(cache_path: pathlib.Path, rng: Optional[random.Random] = None) -> int:
    """Pick one record uniformly at random and return its code point"""
    cache_bytes = cache_record_count(cache_path) * RECORD_SIZE

    # Random byte, rounded down to the start of its record
    random_byte = (rng or random).randrange(cache_bytes)
    index = (random_byte - random_byte % RECORD_SIZE) // RECORD_SIZE

    try:
        with open(cache_path, "rb") as cache_file:
            return read_codepoint(cache_file, index)
    except CacheFileError as e:
        raise CacheFileError(f"failed to extract emoji from cache file at {cache_path}: {e}") from e
    except OSError as e:
        raise CacheFileError(f"failed to read cache file at {cache_path}: {e}") from e


def decode_codepoint(value: int) -> str:
    if value > MAX_SCALAR_VALUE or value in SURROGATES:
        raise CodepointDecodeError(f"cached value U+{value:04X} is not a Unicode scalar value")
    return chr(value)


def emit(char: str, stream: Optional[TextIO] = None):
    """Write the character as UTF-8 with no trailing newline"""
    stream = stream or sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        stream.flush()
        buffer.write(char.encode("utf-8"))
        buffer.flush()
    else:
        stream.write(char)
        stream.flush()
