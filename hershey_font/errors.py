"""Exceptions raised while decoding Hershey fonts and looking up glyphs."""


class HersheyFontError(Exception):
    """Base class for every error raised by this package."""


class InvalidGlyphData(HersheyFontError, ValueError):
    """A single glyph line does not follow the fixed-width layout."""

    def __init__(self, reason: str, line: str):
        super().__init__(f"Invalid glyph data: {reason}")
        self.reason = reason
        self.line = line


class ParseError(HersheyFontError, ValueError):
    """A font source could not be decoded.

    ``line_number`` is the 1-based position of the offending line in the
    text given to :func:`hershey_font.parse_font`, counting empty lines.
    ``cause`` is the underlying decode error, also chained as ``__cause__``.
    """

    def __init__(self, line_number: int, cause: Exception):
        super().__init__(f"Error parsing line {line_number}: {cause}")
        self.line_number = line_number
        self.cause = cause


class GlyphNotFound(HersheyFontError, LookupError):
    def __init__(self, character: str):
        super().__init__(f"Glyph {character!r} not found in font")
        self.character = character
