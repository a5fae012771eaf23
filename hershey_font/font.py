"""Assembly of a whole Hershey font from its source text."""

import logging

from . import config
from .errors import InvalidGlyphData, ParseError
from .glyph_line import parse_glyph_line
from .models import Font, Glyph

logger = logging.getLogger(__name__)


def parse_font(text: str) -> Font:
    """Decodes every non-empty line of ``text`` into a Font.

    Line ``n`` (1-based, empty lines counted) of the source is reported in
    the ParseError raised for the first line that fails to decode. A source
    with no glyph lines at all fails on line 1.
    """
    glyphs = []
    for i, line in enumerate(text.split("\n")):
        if not line:
            continue
        try:
            glyphs.append(parse_glyph_line(line))
        except InvalidGlyphData as e:
            logger.debug("Glyph decode failed on line %d: %s", i + 1, e)
            raise ParseError(i + 1, e) from e

    if not glyphs:
        cause = InvalidGlyphData("no glyph lines in font source", text)
        raise ParseError(1, cause) from cause

    top = config.TOP_SENTINEL
    right = config.BOTTOM_SENTINEL
    bottom = config.BOTTOM_SENTINEL
    left = config.TOP_SENTINEL

    for glyph in glyphs:
        for point in glyph.points():
            top = min(top, point.y)
            right = max(right, point.x)
            bottom = max(bottom, point.y)
            left = min(left, point.x)

    logger.debug("Parsed %d glyphs, bounds top=%d right=%d bottom=%d left=%d",
                 len(glyphs), top, right, bottom, left)

    return Font(top=top, right=right, bottom=bottom, left=left, glyphs=tuple(glyphs))


def get_glyph(font: Font, character: str) -> Glyph:
    """Looks up the glyph for ``character``; raises GlyphNotFound."""
    return font.get_glyph(character)
