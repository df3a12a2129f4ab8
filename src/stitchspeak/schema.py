"""Pydantic v2 models matching the StitchSpeak alphabet JSON format.

A glyph appears in documents in one of two shapes: the legacy bare list of
row strings, or the current ``{"pattern": [...], "baseline": n}`` object.
Both are resolved here, once, into :class:`Glyph`; nothing downstream
branches on the document representation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from stitchspeak.config import DEFAULT_FONT_HEIGHT, MIN_HEIGHT


class Glyph(BaseModel):
    """One character's bitmap: row strings plus the row index of its baseline."""

    model_config = ConfigDict(frozen=True)

    pattern: list[str]
    baseline: int
    height: int | None = None

    @property
    def width(self) -> int:
        return max((len(row) for row in self.pattern), default=0)


class Font(BaseModel):
    """A named bitmap typeface. Instances are immutable snapshots."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    height: int = DEFAULT_FONT_HEIGHT
    characters: dict[str, Glyph]

    @model_validator(mode="before")
    @classmethod
    def normalize_characters(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        characters = data.get("characters")
        if not isinstance(characters, Mapping):
            return data
        font_height = _nominal_height(data.get("height"))
        normalized = {char: normalize_glyph(raw, font_height) for char, raw in characters.items()}
        return {**data, "characters": normalized}

    def to_document(self) -> dict[str, Any]:
        """Dump to the current JSON document format (object glyphs only)."""
        return self.model_dump(exclude_none=True)


def _is_int(value: Any) -> bool:
    """True for integers, including integral floats such as 3.0 from JSON."""
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int) and not isinstance(value, bool)


def _nominal_height(value: Any) -> int:
    if _is_int(value) and value >= MIN_HEIGHT:
        return int(value)
    return DEFAULT_FONT_HEIGHT


def _coerce_rows(raw: Any) -> list[str]:
    if not isinstance(raw, (list, tuple)):
        return []
    return [row if isinstance(row, str) else "" for row in raw]


def _default_baseline(pattern: list[str], preferred: int) -> int:
    """Clamp a defaulted baseline onto an existing row of the pattern."""
    if not pattern:
        return 0
    return min(max(preferred, 0), len(pattern) - 1)


def raw_glyph_pattern(raw: Any) -> Any:
    """Return the pattern of a raw document glyph without judging it."""
    if isinstance(raw, Glyph):
        return raw.pattern
    if isinstance(raw, Mapping):
        return raw.get("pattern")
    return raw


def raw_glyph_height(raw: Any) -> int | None:
    """Return the explicit per-glyph height of a raw document glyph, if any."""
    if isinstance(raw, Glyph):
        return raw.height
    if isinstance(raw, Mapping):
        height = raw.get("height")
        return int(height) if _is_int(height) else None
    return None


def normalize_glyph(raw: Any, font_height: int) -> Glyph:
    """Resolve a legacy or current document glyph into a :class:`Glyph`.

    Legacy bare row lists are assumed bottom-aligned on the font's nominal
    height. Object glyphs without a baseline default to their bottom row;
    explicit baselines are kept, floored at 0.
    Normalization is permissive and never raises; unusable patterns become
    empty and are left for the validator to report.
    """
    if isinstance(raw, Glyph):
        return raw

    if isinstance(raw, Mapping):
        pattern = _coerce_rows(raw.get("pattern"))
        height = raw_glyph_height(raw)
        baseline = raw.get("baseline")
        if _is_int(baseline):
            baseline = max(int(baseline), 0)
        else:
            baseline = _default_baseline(pattern, len(pattern) - 1)
        return Glyph(pattern=pattern, baseline=baseline, height=height)

    pattern = _coerce_rows(raw)
    return Glyph(pattern=pattern, baseline=_default_baseline(pattern, font_height - 1))


def normalize_font(raw: Mapping[str, Any]) -> Font:
    """Build a :class:`Font` from a document mapping, filling gaps with defaults."""
    name = raw.get("name")
    description = raw.get("description")
    characters = raw.get("characters")

    return Font.model_validate(
        {
            "name": name if isinstance(name, str) else ("" if name is None else str(name)),
            "description": description if isinstance(description, str) else "",
            "height": _nominal_height(raw.get("height")),
            "characters": dict(characters) if isinstance(characters, Mapping) else {},
        }
    )
