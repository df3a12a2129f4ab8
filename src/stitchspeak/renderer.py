"""Chart image rendering using PIL.

Draws one square per chart cell on a background grid. Colors and geometry
live here; the compositor only decides which cells are stitched.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw

from stitchspeak.chart import Chart
from stitchspeak.config import CELL_GAP, CELL_SIZE, CHART_COLORS, MAX_CELL_SIZE, MIN_CELL_SIZE


def render_chart_image(
    chart: Chart,
    cell_size: int = CELL_SIZE,
    cell_gap: int = CELL_GAP,
    colors: dict[str, str] | None = None,
) -> Image.Image:
    """Render a chart as an RGB image.

    Args:
        chart: Composed chart (see :func:`stitchspeak.chart.compose`).
        cell_size: Square cell edge in pixels, clamped to the supported range.
        cell_gap: Pixels of background between neighbouring cells.
        colors: Overrides for ``CHART_COLORS`` entries.

    Returns:
        Image sized ``width * (cell_size + gap) + gap`` by the same formula on
        rows, with stitched cells in the main stitch color.
    """
    palette = {**CHART_COLORS, **(colors or {})}
    size = min(max(cell_size, MIN_CELL_SIZE), MAX_CELL_SIZE)
    gap = max(cell_gap, 0)
    pitch = size + gap

    img = Image.new(
        "RGB",
        (chart.width * pitch + gap, chart.height * pitch + gap),
        palette["grid_background"],
    )
    draw = ImageDraw.Draw(img)

    for row_index, row in enumerate(chart.rows):
        top = gap + row_index * pitch
        for col_index, cell in enumerate(row):
            left = gap + col_index * pitch
            fill = palette["main_stitch"] if cell.filled else palette["empty_cell"]
            draw.rectangle(
                (left, top, left + size - 1, top + size - 1),
                fill=fill,
                outline=palette["cell_border"],
            )

    return img


def save_chart_image(chart: Chart, path: str | Path, **kwargs) -> Path:
    """Render a chart and write it to ``path`` (format from the suffix)."""
    out = Path(path)
    render_chart_image(chart, **kwargs).save(out)
    return out
