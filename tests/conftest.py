import pytest

# A diagonal stroke from upper right to lower left.
SLASH_LINE = "  720  3G][BIb"
# No strokes; the usual encoding of the space character.
SPACE_LINE = "12345  1JZ"
# Two vertical strokes separated by a pen-up.
BARS_LINE = "    1  6MWPMPW RTMTW"
# Pen-ups before any point is drawn.
LEADING_PEN_UP_LINE = "    2  5NV R RQQSS"


@pytest.fixture
def slash_line():
    return SLASH_LINE


@pytest.fixture
def font_source():
    return "\n".join([SPACE_LINE, SLASH_LINE, BARS_LINE, LEADING_PEN_UP_LINE]) + "\n"
