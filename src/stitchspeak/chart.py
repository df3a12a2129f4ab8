"""Baseline-aligned chart composition: text + font -> grid of stitch cells.

Glyphs may differ in width, height and baseline. Every glyph's baseline row
is placed on the same chart row, so descenders hang below the line and tall
capitals rise above it:

    chart row 0 .. extend_above - 1   rows above the baseline
    chart row extend_above            the shared baseline
    chart row extend_above + 1 ..     rows below the baseline
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from stitchspeak.config import (
    FALLBACK_GLYPH_WIDTH,
    LETTER_SPACING,
    MISSING_GLYPH_LABEL,
    MISSING_GLYPH_WIDTH,
    SPACE_WIDTH,
)
from stitchspeak.filters import alternate_case
from stitchspeak.schema import Font, normalize_font, normalize_glyph
from stitchspeak.trimmer import is_stitch, trim_trailing_columns

logger = logging.getLogger(__name__)


class CellKind(str, Enum):
    FILLED = "filled"
    EMPTY = "empty"


@dataclass(frozen=True)
class Cell:
    """One chart square. ``label`` marks where a character starts, for display only."""

    kind: CellKind = CellKind.EMPTY
    label: str | None = None

    @property
    def filled(self) -> bool:
        return self.kind is CellKind.FILLED


EMPTY_CELL = Cell()


@dataclass
class Chart:
    """Row-major grid of cells; all rows have the same length."""

    rows: list[list[Cell]] = field(default_factory=list)
    extend_above: int = 0
    extend_below: int = 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def baseline_row(self) -> int:
        return self.extend_above


@dataclass(frozen=True)
class _PreparedGlyph:
    pattern: list[str]
    baseline: int

    @property
    def height(self) -> int:
        return len(self.pattern)

    @property
    def width(self) -> int:
        first = self.pattern[0] if self.pattern else ""
        return len(first) or FALLBACK_GLYPH_WIDTH


def _prepare_glyphs(font: Font) -> dict[str, _PreparedGlyph]:
    """Normalize and column-trim every glyph once per render."""
    prepared: dict[str, _PreparedGlyph] = {}
    for char, raw in font.characters.items():
        glyph = normalize_glyph(raw, font.height)
        prepared[char] = _PreparedGlyph(
            pattern=trim_trailing_columns(glyph.pattern),
            baseline=glyph.baseline,
        )
    return prepared


def _lookup(glyphs: dict[str, _PreparedGlyph], char: str) -> _PreparedGlyph | None:
    """Exact match first, then the opposite letter case."""
    glyph = glyphs.get(char)
    if glyph is None:
        glyph = glyphs.get(alternate_case(char))
    return glyph


def _glyph_cells(glyph: _PreparedGlyph, glyph_row: int, char: str, label: bool) -> list[Cell]:
    if not 0 <= glyph_row < glyph.height:
        return [EMPTY_CELL] * glyph.width

    row = glyph.pattern[glyph_row].ljust(glyph.width)
    cells = [Cell(CellKind.FILLED if is_stitch(s) else CellKind.EMPTY) for s in row]
    if label and cells:
        cells[0] = Cell(cells[0].kind, char)
    return cells


def _missing_cells(first_row: bool) -> list[Cell]:
    cells = [EMPTY_CELL] * MISSING_GLYPH_WIDTH
    if first_row:
        cells[0] = Cell(CellKind.EMPTY, MISSING_GLYPH_LABEL)
    return cells


def compose(text: str, font: Font | Mapping[str, Any]) -> Chart | None:
    """Lay out ``text`` in ``font`` as a baseline-aligned chart.

    ``font`` may also be a raw document mapping. Returns None for blank text
    or a font without characters. Characters the font lacks (in either case)
    render as a blank slot labelled "?".
    """
    if not isinstance(font, Font):
        font = normalize_font(font)
    if not text.strip() or not font.characters:
        return None

    glyphs = _prepare_glyphs(font)
    extend_above = max([0, *(g.baseline for g in glyphs.values())])
    extend_below = max([0, *(g.height - g.baseline - 1 for g in glyphs.values())])
    total_height = extend_above + extend_below + 1

    chars = list(text)
    labelled: set[int] = set()
    rows: list[list[Cell]] = []

    for r in range(total_height):
        chart_row: list[Cell] = []
        for pos, char in enumerate(chars):
            if char == " ":
                chart_row.extend([EMPTY_CELL] * SPACE_WIDTH)
                continue

            glyph = _lookup(glyphs, char)
            if glyph is None:
                chart_row.extend(_missing_cells(first_row=r == 0))
            else:
                glyph_row = glyph.baseline - (extend_above - r)
                in_range = 0 <= glyph_row < glyph.height
                label = in_range and pos not in labelled
                if label:
                    labelled.add(pos)
                chart_row.extend(_glyph_cells(glyph, glyph_row, char, label))

            chart_row.extend([EMPTY_CELL] * LETTER_SPACING)
        rows.append(chart_row)

    max_len = max(len(row) for row in rows)
    for row in rows:
        row.extend([EMPTY_CELL] * (max_len - len(row)))

    chart = Chart(rows=rows, extend_above=extend_above, extend_below=extend_below)
    if logger.isEnabledFor(logging.DEBUG):
        _log_layout(text, font, glyphs, chart)
    return chart


def _log_layout(
    text: str,
    font: Font,
    glyphs: dict[str, _PreparedGlyph],
    chart: Chart,
) -> None:
    """Trace the character breakdown and where each label landed."""
    logger.debug(
        "Chart for %r in %r: %dx%d, baseline row %d (above=%d, below=%d)",
        text,
        font.name,
        chart.width,
        chart.height,
        chart.baseline_row,
        chart.extend_above,
        chart.extend_below,
    )
    for char in text:
        if char == " ":
            logger.debug("  SPACE: width=%d", SPACE_WIDTH)
            continue
        glyph = _lookup(glyphs, char)
        if glyph is None:
            logger.debug("  %r: missing", char)
            continue
        logger.debug(
            "  %r: width=%d height=%d baseline=%d above=%d below=%d",
            char,
            glyph.width,
            glyph.height,
            glyph.baseline,
            glyph.baseline,
            glyph.height - glyph.baseline - 1,
        )
    for index, row in enumerate(chart.rows):
        positions = [f"{cell.label}@{col}" for col, cell in enumerate(row) if cell.label]
        logger.debug("  Row %d: %s", index, ", ".join(positions))
