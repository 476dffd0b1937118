"""
Parser for the Unicode emoji-sequences.txt data file.

Each data line looks like ``231A..231B    ; Basic_Emoji  ; watch..hourglass``.
Only the first field matters here: either a single code point or an inclusive
range of code points. Lines holding real multi-code-point sequences
(``0023 FE0F 20E3 ; Emoji_Keycap_Sequence``) and comments are skipped.
"""

import re
from typing import Iterable, Iterator, Pattern

from emorand.utils.errors import SourceListError

SEQUENCE_PATTERN: Pattern = re.compile(r'^[0-9A-Fa-f]+(\.\.[0-9A-Fa-f]+)?\s+;')

FIELD_SEPARATOR = ";"
RANGE_SEPARATOR = ".."

MAX_CODEPOINT = 0xFFFFFFFF  # one 4-byte record


def iter_sequence_fields(text: str) -> Iterator[str]:
    """Yield the trimmed first field of every line matching the sequence pattern"""
    for line in text.splitlines():
        if SEQUENCE_PATTERN.match(line):
            yield line.split(FIELD_SEPARATOR, 1)[0].strip()


def parse_codepoint(hex_str: str, field: str) -> int:
    try:
        value = int(hex_str, 16)
    except ValueError:
        raise SourceListError(f"invalid code point encountered when building cache: {field}")
    if value < 0 or value > MAX_CODEPOINT:
        raise SourceListError(f"invalid code point encountered when building cache: {field}")
    return value


def expand_field(field: str) -> Iterable[int]:
    """Turn one first field into the code points it denotes"""
    parts = field.split(RANGE_SEPARATOR)

    if len(parts) == 1:
        return [parse_codepoint(parts[0], field)]

    if len(parts) == 2:
        lower = parse_codepoint(parts[0], field)
        upper = parse_codepoint(parts[1], field)
        if lower > upper:
            raise SourceListError(f"reversed code point interval encountered when building cache: {field}")
        return range(lower, upper + 1)

    return []


def iter_codepoints(text: str) -> Iterator[int]:
    """Yield every code point listed in the sequence file, in file order"""
    for field in iter_sequence_fields(text):
        yield from expand_field(field)
