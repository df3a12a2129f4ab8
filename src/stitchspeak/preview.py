"""ASCII art previews of glyphs and composed charts."""

from __future__ import annotations

from stitchspeak.chart import Chart
from stitchspeak.schema import Font, Glyph
from stitchspeak.trimmer import is_stitch

FILLED = "\u2588"  # █
EMPTY = "\u00b7"  # ·
BASELINE_MARK = "<"


def preview_glyph(glyph: Glyph, char: str) -> str:
    """Render a single glyph as ASCII art.

    Returns a header line followed by the pattern rows using █ for stitches
    and · for background; the baseline row is marked with a trailing '<'.
    """
    width = glyph.width
    height = len(glyph.pattern)

    lines: list[str] = []
    lines.append(f"'{char}' ({width}\u00d7{height}, baseline {glyph.baseline})")

    for index, row in enumerate(glyph.pattern):
        rendered = "".join(FILLED if is_stitch(s) else EMPTY for s in row.ljust(width))
        if index == glyph.baseline:
            rendered += f" {BASELINE_MARK}"
        lines.append(rendered)

    return "\n".join(lines)


def preview_font(font: Font, chars: str | None = None) -> str:
    """Preview multiple glyphs vertically, separated by blank lines.

    If chars is None, show all glyphs. Otherwise show only specified chars.
    """
    char_list = list(font.characters.keys()) if chars is None else list(chars)

    sections: list[str] = []
    for char in char_list:
        glyph = font.characters.get(char)
        if glyph is None:
            sections.append(f"'{char}' (not found)")
            continue
        sections.append(preview_glyph(glyph, char))

    return "\n\n".join(sections)


def chart_to_text(chart: Chart | None, filled: str = FILLED, empty: str = EMPTY) -> str:
    """Render a chart one text line per row. A missing chart renders as ''."""
    if chart is None:
        return ""
    return "\n".join(
        "".join(filled if cell.filled else empty for cell in row) for row in chart.rows
    )
