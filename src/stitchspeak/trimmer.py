"""Remove empty border rows and columns from glyph patterns.

Trimming gives glyphs tight bounding boxes without wasted space, which keeps
letter spacing in charts honest. The baseline moves up by the number of blank
rows removed from the top, so a trimmed glyph still lines up with its
neighbours.
"""

from __future__ import annotations

from stitchspeak.config import EMPTY_SYMBOL, STITCH_SYMBOLS
from stitchspeak.schema import Font, Glyph


def is_stitch(symbol: str) -> bool:
    return symbol in STITCH_SYMBOLS


def _content_bounds(pattern: list[str]) -> tuple[int, int, int, int] | None:
    """Return (min_row, max_row, min_col, max_col) of stitched cells, or None."""
    filled = [
        (r, c) for r, row in enumerate(pattern) for c, symbol in enumerate(row) if is_stitch(symbol)
    ]
    if not filled:
        return None
    rows = [r for r, _ in filled]
    cols = [c for _, c in filled]
    return min(rows), max(rows), min(cols), max(cols)


def trim_glyph(glyph: Glyph) -> Glyph:
    """Crop a glyph to the bounding box of its stitches.

    A glyph without any stitch collapses to a one-row empty placeholder
    instead of being dropped, so the character stays defined.
    """
    bounds = _content_bounds(glyph.pattern)
    if bounds is None:
        return Glyph(pattern=[""], baseline=0)

    min_row, max_row, min_col, max_col = bounds
    pattern = [row[min_col : max_col + 1] for row in glyph.pattern[min_row : max_row + 1]]
    height = len(pattern) if glyph.height is not None else None

    return Glyph(pattern=pattern, baseline=max(0, glyph.baseline - min_row), height=height)


def trim_font(font: Font) -> Font:
    """Trim every glyph and shrink the nominal height to the tallest result."""
    characters = {char: trim_glyph(glyph) for char, glyph in font.characters.items()}
    height = max((len(glyph.pattern) for glyph in characters.values()), default=1)
    return font.model_copy(update={"characters": characters, "height": max(height, 1)})


def trim_trailing_columns(pattern: list[str]) -> list[str]:
    """Cut columns right of the last stitch; short rows are blank-padded to match."""
    right = max(
        (c + 1 for row in pattern for c, symbol in enumerate(row) if is_stitch(symbol)),
        default=0,
    )
    return [row[:right].ljust(right, EMPTY_SYMBOL) for row in pattern]
