"""Decoder for Hershey vector fonts in the .jhf text format."""

from .config import BOTTOM_SENTINEL, TOP_SENTINEL
from .errors import GlyphNotFound, HersheyFontError, InvalidGlyphData, ParseError
from .font import get_glyph, parse_font
from .glyph_line import char_to_int, parse_glyph_line
from .models import Font, Glyph, Point

__version__ = "0.1.0"

__all__ = [
    "BOTTOM_SENTINEL",
    "TOP_SENTINEL",
    "Font",
    "Glyph",
    "GlyphNotFound",
    "HersheyFontError",
    "InvalidGlyphData",
    "ParseError",
    "Point",
    "char_to_int",
    "get_glyph",
    "parse_font",
    "parse_glyph_line",
]
