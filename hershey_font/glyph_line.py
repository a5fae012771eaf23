"""Decoding of single Hershey glyph lines.

Line layout (fixed width, no separators):

    [index: 5][count: 3][left][right][x y][x y]...

``count`` includes the left/right pair, so a line carries ``count - 1``
coordinate pairs after the header. Every character encodes its offset from
'R'. The pair " R" lifts the pen and starts a new stroke.
"""

import re
from typing import List

from . import config
from .errors import InvalidGlyphData
from .models import Glyph, Point

_COUNT_RE = re.compile(r"[+-]?[0-9]+")


def char_to_int(char: str) -> int:
    return ord(char) - ord(config.ORIGIN_CHAR)


def _parse_count(field: str, line: str) -> int:
    field = field.strip()
    try:
        # int() alone would also take underscores and non-ASCII digits
        if not _COUNT_RE.fullmatch(field):
            raise ValueError(f"invalid literal for pair count: {field!r}")
        return int(field)
    except ValueError as e:
        raise InvalidGlyphData(f"bad pair count {field!r}", line) from e


def parse_glyph_line(line: str) -> Glyph:
    """Decodes one line of a Hershey font into a Glyph.

    Raises InvalidGlyphData when the line is shorter than the header, the
    pair count is not an integer, or the line length does not match the
    count exactly.
    """
    if len(line) < config.MIN_LINE_LENGTH:
        raise InvalidGlyphData(f"line too short ({len(line)} chars)", line)

    contents = line[config.INDEX_WIDTH:]

    num_pairs = _parse_count(contents[:config.COUNT_WIDTH], line) - 1

    left = char_to_int(contents[config.COUNT_WIDTH])
    right = char_to_int(contents[config.COUNT_WIDTH + 1])

    expected = config.HEADER_WIDTH + num_pairs * config.PAIR_WIDTH
    if len(contents) != expected:
        raise InvalidGlyphData(
            f"expected {expected} chars after index, got {len(contents)}", line)

    top = config.TOP_SENTINEL
    bottom = config.BOTTOM_SENTINEL

    paths = []
    path: List[Point] = []

    for i in range(num_pairs):
        start = config.HEADER_WIDTH + i * config.PAIR_WIDTH
        pair = contents[start:start + config.PAIR_WIDTH]

        if pair == config.PEN_UP and path:
            paths.append(tuple(path))
            path = []
        elif pair == config.PEN_UP:
            # pen-up with nothing drawn yet
            continue
        else:
            x = char_to_int(pair[0])
            y = char_to_int(pair[1])

            top = min(top, y)
            bottom = max(bottom, y)

            path.append(Point(x, y))

    if path:
        paths.append(tuple(path))

    return Glyph(top=top, right=right, bottom=bottom, left=left, paths=tuple(paths))
