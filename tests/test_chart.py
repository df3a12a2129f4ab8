"""Tests for baseline-aligned chart composition."""

import json
import logging
from pathlib import Path

import pytest

from stitchspeak.chart import Cell, CellKind, Chart, compose
from stitchspeak.schema import Font


def filled_columns(row):
    return [i for i, cell in enumerate(row) if cell.filled]


def labels(chart):
    return {
        (r, c): cell.label
        for r, row in enumerate(chart.rows)
        for c, cell in enumerate(row)
        if cell.label
    }


class TestComposeEmpty:
    @pytest.mark.parametrize("text", ["", " ", "   \t\n"])
    def test_blank_text_returns_none(self, basic_font, text):
        assert compose(text, basic_font) is None

    def test_font_without_characters(self):
        font = Font(name="Empty", height=3, characters={})
        assert compose("A", font) is None

    def test_raw_document_without_characters(self):
        assert compose("A", {"name": "No chars", "height": 3}) is None

    def test_non_blank_text_returns_chart(self, basic_font):
        assert isinstance(compose("A", basic_font), Chart)


class TestBaselineAlignment:
    def test_descender_extents(self, descender_font):
        chart = compose("Ag", descender_font)
        assert chart.extend_above == 2
        assert chart.extend_below == 1
        assert chart.height == 4
        assert chart.baseline_row == 2

    def test_baseline_rows_share_chart_row(self, descender_font):
        chart = compose("Ag", descender_font)
        # Layout: A (cols 0-2), gap (3), g (cols 4-6), gap (7)
        assert chart.width == 8
        assert filled_columns(chart.rows[2]) == [0, 1, 2, 4, 5, 6]

    def test_descender_below_baseline(self, descender_font):
        chart = compose("Ag", descender_font)
        # Only g's tail reaches the row under the baseline
        assert filled_columns(chart.rows[3]) == [6]

    def test_top_rows(self, descender_font):
        chart = compose("Ag", descender_font)
        assert filled_columns(chart.rows[0]) == [1, 4, 5, 6]
        assert filled_columns(chart.rows[1]) == [0, 2, 4, 6]

    def test_short_glyph_sits_on_baseline(self, descender_font):
        chart = compose("T", descender_font)
        # T has two rows with its baseline on the second: chart rows 1 and 2
        assert filled_columns(chart.rows[0]) == []
        assert filled_columns(chart.rows[1]) == [0, 1, 2]
        assert filled_columns(chart.rows[2]) == [1]
        assert filled_columns(chart.rows[3]) == []

    def test_extents_use_all_font_glyphs(self, descender_font):
        # g is not in the text but still reserves its descender row
        assert compose("A", descender_font).height == 4

    def test_nominal_height_does_not_drive_extents(self):
        font = Font.model_validate(
            {
                "name": "Tall nominal",
                "height": 10,
                "characters": {"a": {"pattern": ["1", "1"], "baseline": 1}},
            }
        )
        assert compose("a", font).height == 2

    def test_negative_baseline_does_not_grow_chart(self):
        font = Font.model_validate(
            {
                "name": "N",
                "height": 3,
                "characters": {
                    "A": {"pattern": ["1", "1", "1"], "baseline": 2},
                    "b": {"pattern": ["1", "1", "1"], "baseline": -2},
                },
            }
        )
        chart = compose("Ab", font)
        # b is treated as baseline 0 and hangs two rows below the line
        assert chart.extend_above == 2
        assert chart.extend_below == 2
        assert chart.height == 5
        assert filled_columns(chart.rows[2]) == [0, 2]

    def test_legacy_glyphs_bottom_aligned(self):
        font = Font.model_validate(
            {
                "name": "L",
                "height": 3,
                "characters": {"i": ["1", " ", "1"], "-": ["  ", "11", "  "]},
            }
        )
        chart = compose("i-", font)
        assert chart.height == 3
        assert filled_columns(chart.rows[1]) == [2, 3]


class TestCells:
    def test_cell_kinds(self, descender_font):
        chart = compose("A", descender_font)
        assert chart.rows[0][0].kind is CellKind.EMPTY
        assert chart.rows[0][1].kind is CellKind.FILLED

    def test_all_stitch_symbols_fill(self):
        font = Font.model_validate(
            {"name": "S", "height": 1, "characters": {"a": {"pattern": ["█1x0 "], "baseline": 0}}}
        )
        chart = compose("a", font)
        assert filled_columns(chart.rows[0]) == [0, 1, 2]

    def test_rows_equal_length(self, basic_font):
        chart = compose("HI ZA", basic_font)
        assert len({len(row) for row in chart.rows}) == 1

    def test_labels_on_first_occupied_row(self, descender_font):
        chart = compose("TA", descender_font)
        # T starts at chart row 1, A at row 0; A begins after T (3) + gap (1)
        assert labels(chart) == {(1, 0): "T", (0, 4): "A"}

    def test_label_uses_source_character(self):
        font = Font.model_validate(
            {"name": "Caps", "height": 1, "characters": {"A": {"pattern": ["1"], "baseline": 0}}}
        )
        chart = compose("a", font)
        assert chart.rows[0][0] == Cell(CellKind.FILLED, "a")


class TestSpacing:
    def test_space_is_three_cells_without_gap(self, descender_font):
        chart = compose("A A", descender_font)
        # A(3) + gap(1) + space(3) + A(3) + gap(1)
        assert chart.width == 11
        assert filled_columns(chart.rows[2]) == [0, 1, 2, 7, 8, 9]

    def test_gap_after_each_glyph(self, descender_font):
        chart = compose("AA", descender_font)
        assert chart.width == 8
        assert not any(row[3].filled or row[7].filled for row in chart.rows)

    def test_trailing_blank_columns_trimmed(self):
        font = Font.model_validate(
            {"name": "W", "height": 1, "characters": {"a": {"pattern": ["1   "], "baseline": 0}}}
        )
        assert compose("a", font).width == 2

    def test_empty_glyph_uses_fallback_width(self):
        font = Font.model_validate(
            {"name": "E", "height": 1, "characters": {"-": {"pattern": ["   "], "baseline": 0}}}
        )
        assert compose("-", font).width == 4


class TestMissingCharacters:
    def test_case_fallback(self):
        font = Font.model_validate(
            {"name": "Caps", "height": 1, "characters": {"A": {"pattern": ["11"], "baseline": 0}}}
        )
        upper = compose("A", font)
        lower = compose("a", font)
        assert filled_columns(lower.rows[0]) == filled_columns(upper.rows[0])

    def test_lowercase_only_font_renders_uppercase(self, legacy_font_path):
        data = json.loads(Path(legacy_font_path).read_text(encoding="utf-8"))
        chart = compose("X", data)
        assert filled_columns(chart.rows[0]) == [0, 2]

    def test_missing_glyph_marked_slot(self, descender_font):
        chart = compose("Z", descender_font)
        # 5-cell slot plus the inter-character gap
        assert chart.width == 6
        assert labels(chart) == {(0, 0): "?"}
        assert not any(cell.filled for row in chart.rows for cell in row)

    def test_missing_glyph_between_known(self, descender_font):
        chart = compose("AZA", descender_font)
        assert chart.width == 3 + 1 + 5 + 1 + 3 + 1
        assert chart.rows[0][4].label == "?"
        assert filled_columns(chart.rows[2]) == [0, 1, 2, 10, 11, 12]


class TestPurity:
    def test_repeated_calls_equal(self, basic_font):
        assert compose("HAB", basic_font) == compose("HAB", basic_font)

    def test_font_not_modified(self, basic_font):
        before = basic_font.model_dump()
        compose("HAB", basic_font)
        assert basic_font.model_dump() == before

    def test_debug_trace_logged(self, basic_font, caplog):
        with caplog.at_level(logging.DEBUG, logger="stitchspeak.chart"):
            chart = compose("A?", basic_font)
        assert chart is not None
        assert "baseline row" in caplog.text
        assert "missing" in caplog.text
