"""Constants and configuration for stitchspeak."""

# Pattern symbols that mark a worked stitch. Anything else renders as background.
STITCH_SYMBOLS = ("\u2588", "1", "x")  # █, 1, x
EMPTY_SYMBOL = " "
VALID_PATTERN_SYMBOLS = STITCH_SYMBOLS + (EMPTY_SYMBOL,)

# Symbol written by the editor when a cell is toggled on
EDITOR_FILL_SYMBOL = "\u2588"

# Font height limits (rows)
MIN_HEIGHT = 1
MAX_HEIGHT = 20
DEFAULT_FONT_HEIGHT = 5

REQUIRED_PROPERTIES = ("name", "description", "height", "characters")

# Chart layout, in cells
SPACE_WIDTH = 3
LETTER_SPACING = 1
MISSING_GLYPH_WIDTH = 5
MISSING_GLYPH_LABEL = "?"
FALLBACK_GLYPH_WIDTH = 3

# Width outliers beyond this many columns from the average trigger a warning
WIDTH_VARIATION_TOLERANCE = 2

PUNCTUATION = set("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")

# Chart display defaults (pixels)
CELL_SIZE = 20
CELL_GAP = 2
MIN_CELL_SIZE = 10
MAX_CELL_SIZE = 50

CHART_COLORS: dict[str, str] = {
    "main_stitch": "#667eea",
    "empty_cell": "#f0f0f0",
    "cell_border": "#dddddd",
    "grid_background": "#ffffff",
}
