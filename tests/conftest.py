"""Shared fixtures for stitchspeak tests."""

import json
from pathlib import Path

import pytest

from stitchspeak.schema import Font

# -- Paths ------------------------------------------------------------------

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BASIC_JSON = FIXTURES_DIR / "basic-blocks.json"
LEGACY_JSON = FIXTURES_DIR / "legacy-lines.json"
RAGGED_JSON = FIXTURES_DIR / "invalid" / "ragged-rows.json"


# -- Simple data fixtures ---------------------------------------------------


@pytest.fixture()
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture()
def basic_font_path():
    """Path to a valid five-row alphabet in the current format."""
    return str(BASIC_JSON)


@pytest.fixture()
def legacy_font_path():
    """Path to a valid alphabet whose glyphs are bare row lists."""
    return str(LEGACY_JSON)


@pytest.fixture()
def ragged_font_path():
    """Path to an alphabet with inconsistent row widths."""
    return str(RAGGED_JSON)


@pytest.fixture()
def basic_font_data():
    """The basic alphabet as a raw document dict."""
    return json.loads(BASIC_JSON.read_text(encoding="utf-8"))


@pytest.fixture()
def basic_font(basic_font_data):
    return Font.model_validate(basic_font_data)


@pytest.fixture()
def descender_font():
    """'A' sits on the baseline, 'g' hangs one row below it, 'T' is short."""
    return Font.model_validate(
        {
            "name": "Descenders",
            "description": "",
            "height": 3,
            "characters": {
                "A": {"pattern": [" █ ", "█ █", "███"], "baseline": 2},
                "g": {"pattern": ["███", "█ █", "███", "  █"], "baseline": 2},
                "T": {"pattern": ["███", " █ "], "baseline": 1},
            },
        }
    )


@pytest.fixture()
def padded_font():
    """Glyphs surrounded by blank rows and columns."""
    return Font.model_validate(
        {
            "name": "Padded",
            "description": "Needs trimming",
            "height": 5,
            "characters": {
                "o": {
                    "pattern": ["     ", "     ", " ███ ", " █ █ ", " ███ "],
                    "baseline": 4,
                },
                "'": {"pattern": ["  █  ", "  █  ", "     ", "     ", "     "], "baseline": 4},
                " ": {"pattern": ["     "] * 5, "baseline": 4},
            },
        }
    )
