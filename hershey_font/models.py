"""Glyph and font value records."""

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

from . import config
from .errors import GlyphNotFound


class Point(NamedTuple):
    x: int
    y: int


Path = Tuple[Point, ...]
Segment = Tuple[Point, Point]


@dataclass(frozen=True)
class Glyph:
    """One decoded glyph.

    ``top`` and ``bottom`` are the y extrema of the path points. ``left`` and
    ``right`` are the extents declared in the line header and are not derived
    from the paths, so the two may disagree. A glyph without strokes keeps
    the sentinel extrema from :mod:`hershey_font.config`.
    """

    top: int
    right: int
    bottom: int
    left: int
    paths: Tuple[Path, ...] = ()

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def has_points(self) -> bool:
        return bool(self.paths)

    def points(self) -> Iterator[Point]:
        for path in self.paths:
            yield from path

    def segments(self) -> Iterator[Segment]:
        """Yields (start, end) for each line segment of each stroke."""
        for path in self.paths:
            for i in range(len(path) - 1):
                yield (path[i], path[i + 1])


@dataclass(frozen=True)
class Font:
    """A decoded font.

    ``glyphs[i]`` holds the glyph for character code ``32 + i``. The bounding
    box covers every path point of every glyph; header extents are ignored.
    """

    top: int
    right: int
    bottom: int
    left: int
    glyphs: Tuple[Glyph, ...] = ()

    def __len__(self) -> int:
        return len(self.glyphs)

    @property
    def has_bounds(self) -> bool:
        return self.top <= self.bottom

    def get_glyph(self, character: str) -> Glyph:
        index = ord(character) - config.FIRST_CHAR_CODE
        if index < 0 or index >= len(self.glyphs):
            raise GlyphNotFound(character)
        return self.glyphs[index]

    def lines_for_text(self, text: str) -> Iterator[Segment]:
        """Yields the segments of each character's glyph in turn.

        Points are in design units and are not offset per character; placing
        glyphs along a baseline is left to the caller.
        """
        for character in text:
            yield from self.get_glyph(character).segments()
