"""Copy-on-write editing operations for alphabets.

Every operation takes a :class:`Font` and returns a new one; inputs are never
modified, so a font already handed to a chart or another reader stays as it
was. Bad arguments raise ``ValueError``.
"""

from __future__ import annotations

from typing import Any

from stitchspeak.config import EDITOR_FILL_SYMBOL, EMPTY_SYMBOL, MAX_HEIGHT, MIN_HEIGHT
from stitchspeak.filters import is_printable_char
from stitchspeak.schema import Font, Glyph
from stitchspeak.trimmer import is_stitch, trim_font

DEFAULT_GRID_WIDTH = 5


def grid_size(font: Font) -> tuple[int, int]:
    """Editing grid (width, height): the widest glyph by the nominal height."""
    width = max((glyph.width for glyph in font.characters.values()), default=0)
    return (width or DEFAULT_GRID_WIDTH, font.height)


def _require_glyph(font: Font, char: str) -> Glyph:
    glyph = font.characters.get(char)
    if glyph is None:
        msg = f"Character '{char}' is not defined in alphabet '{font.name}'"
        raise ValueError(msg)
    return glyph


def _check_height(height: int) -> None:
    if not MIN_HEIGHT <= height <= MAX_HEIGHT:
        msg = f"Height must be between {MIN_HEIGHT} and {MAX_HEIGHT}, got {height}"
        raise ValueError(msg)


def _replace_glyph(font: Font, char: str, glyph: Glyph) -> Font:
    return font.model_copy(update={"characters": {**font.characters, char: glyph}})


def _fit_rows(pattern: list[str], width: int, height: int) -> list[str]:
    """Pad or cut a pattern to exactly width x height."""
    rows = pattern[:height] + [""] * (height - len(pattern))
    return [row.ljust(width, EMPTY_SYMBOL)[:width] for row in rows]


def toggle_cell(font: Font, char: str, row: int, col: int) -> Font:
    """Flip one cell between stitched and empty, growing the pattern if needed."""
    if row < 0 or col < 0:
        msg = f"Cell ({row}, {col}) is outside the pattern"
        raise ValueError(msg)

    glyph = _require_glyph(font, char)
    width = max(grid_size(font)[0], col + 1)
    pattern = list(glyph.pattern)
    while len(pattern) <= row:
        pattern.append(EMPTY_SYMBOL * width)

    current = pattern[row].ljust(width, EMPTY_SYMBOL)
    symbol = EMPTY_SYMBOL if is_stitch(current[col]) else EDITOR_FILL_SYMBOL
    pattern[row] = current[:col] + symbol + current[col + 1 :]

    height = len(pattern) if glyph.height is not None else None
    updated = glyph.model_copy(update={"pattern": pattern, "height": height})
    return _replace_glyph(font, char, updated)


def set_baseline(font: Font, char: str, baseline: int) -> Font:
    """Move a glyph's baseline to another row of its pattern."""
    glyph = _require_glyph(font, char)
    if not 0 <= baseline < max(len(glyph.pattern), 1):
        msg = f"Baseline {baseline} is outside the {len(glyph.pattern)} rows of '{char}'"
        raise ValueError(msg)
    return _replace_glyph(font, char, glyph.model_copy(update={"baseline": baseline}))


def add_character(
    font: Font,
    char: str,
    width: int | None = None,
    height: int | None = None,
) -> Font:
    """Add a blank glyph sized to the editing grid, baseline on its bottom row."""
    if not is_printable_char(char):
        msg = f"Character must be a single printable character, got {char!r}"
        raise ValueError(msg)
    if char in font.characters:
        msg = f"Character '{char}' already exists in alphabet '{font.name}'"
        raise ValueError(msg)

    grid_width, grid_height = grid_size(font)
    width = grid_width if width is None else width
    height = grid_height if height is None else height
    if width < 1:
        msg = f"Width must be >= 1, got {width}"
        raise ValueError(msg)
    _check_height(height)

    glyph = Glyph(pattern=[EMPTY_SYMBOL * width] * height, baseline=height - 1, height=height)
    return _replace_glyph(font, char, glyph)


def delete_character(font: Font, char: str) -> Font:
    """Remove a glyph. An alphabet always keeps at least one character."""
    _require_glyph(font, char)
    if len(font.characters) <= 1:
        msg = "Cannot delete the last character of an alphabet"
        raise ValueError(msg)
    characters = {c: g for c, g in font.characters.items() if c != char}
    return font.model_copy(update={"characters": characters})


def resize_grid(font: Font, width: int, height: int) -> Font:
    """Pad or cut every glyph to width x height and set the nominal height."""
    if width < 1:
        msg = f"Width must be >= 1, got {width}"
        raise ValueError(msg)
    _check_height(height)

    characters = {}
    for char, glyph in font.characters.items():
        characters[char] = Glyph(
            pattern=_fit_rows(glyph.pattern, width, height),
            baseline=min(glyph.baseline, height - 1),
            height=height if glyph.height is not None else None,
        )
    return font.model_copy(update={"characters": characters, "height": height})


def set_character_height(font: Font, char: str, height: int) -> Font:
    """Give one glyph its own row count, independent of the nominal height."""
    _check_height(height)
    glyph = _require_glyph(font, char)
    width = glyph.width or grid_size(font)[0]

    resized = Glyph(
        pattern=_fit_rows(glyph.pattern, width, height),
        baseline=min(glyph.baseline, height - 1),
        height=height,
    )
    return _replace_glyph(font, char, resized)


def export_font(font: Font) -> dict[str, Any]:
    """Trim a font and dump it as a current-format document.

    Each exported glyph records its own height, so trimmed glyphs shorter
    than the nominal height still validate.
    """
    trimmed = trim_font(font)
    characters = {
        char: glyph.model_copy(update={"height": len(glyph.pattern)})
        for char, glyph in trimmed.characters.items()
    }
    return trimmed.model_copy(update={"characters": characters}).to_document()
