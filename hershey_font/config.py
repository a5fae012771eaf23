"""Format constants for the Hershey .jhf glyph line layout."""

from typing import Final


# --- Coordinate encoding ---
ORIGIN_CHAR: Final[str] = "R"  # encodes offset 0
PEN_UP: Final[str] = " R"  # closes the current stroke

# --- Glyph table ---
FIRST_CHAR_CODE: Final[int] = 32  # slot 0 is the space character

# --- Line layout ---
# [record index: 5][pair count: 3][left][right][coordinate pairs...]
INDEX_WIDTH: Final[int] = 5
COUNT_WIDTH: Final[int] = 3
HEADER_WIDTH: Final[int] = COUNT_WIDTH + 2  # count plus the left/right pair
PAIR_WIDTH: Final[int] = 2
MIN_LINE_LENGTH: Final[int] = INDEX_WIDTH + HEADER_WIDTH

# --- Empty extents ---
# Identities of the min/max folds, matching 32-bit integer bounds.
TOP_SENTINEL: Final[int] = 2**31 - 1
BOTTOM_SENTINEL: Final[int] = -(2**31)
