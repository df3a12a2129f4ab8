"""Structural validation for alphabet JSON documents.

Validation never raises: every problem is reported as data in a
:class:`ValidationResult`. Errors make a font invalid; warnings are advisory.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from stitchspeak.config import (
    MAX_HEIGHT,
    MIN_HEIGHT,
    REQUIRED_PROPERTIES,
    VALID_PATTERN_SYMBOLS,
    WIDTH_VARIATION_TOLERANCE,
)
from stitchspeak.filters import CATEGORY_NAMES, group_by_category
from stitchspeak.schema import Font, raw_glyph_height, raw_glyph_pattern
from stitchspeak.trimmer import is_stitch

logger = logging.getLogger(__name__)

NOT_AN_OBJECT = "Alphabet must be a valid JSON object"
WIDTH_VARIATION_WARNING = (
    "Some characters have significantly different widths, which may affect layout"
)


@dataclass
class CharacterCoverage:
    """Which characters a font defines, grouped by category."""

    total: int = 0
    categories: dict[str, list[str]] = field(
        default_factory=lambda: {name: [] for name in CATEGORY_NAMES}
    )
    characters: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ValidationResult:
    """Outcome of validating one font document."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    supported_characters: CharacterCoverage = field(default_factory=CharacterCoverage)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        """Dump to a dict with camelCase keys, as written in JSON reports."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
            "supportedCharacters": self.supported_characters.to_dict(),
        }


def validate_font(font: Any) -> ValidationResult:
    """Run all validation checks on a font document (dict) or :class:`Font`."""
    data = font.to_document() if isinstance(font, Font) else font
    result = ValidationResult()

    if not isinstance(data, Mapping):
        result.errors.append(NOT_AN_OBJECT)
        return result

    _check_required_properties(data, result)
    _check_name(data, result)
    _check_description(data, result)
    _check_height(data, result)
    _check_characters(data, result)
    _check_width_consistency(data, result)

    result.supported_characters = analyze_supported_characters(data.get("characters"))
    return result


def validate_json(text: str | bytes) -> ValidationResult:
    """Parse a JSON document, then validate it."""
    try:
        data = json.loads(text)
    except (ValueError, TypeError) as e:
        logger.warning("Could not parse alphabet JSON: %s", e)
        return ValidationResult(errors=[NOT_AN_OBJECT])
    return validate_font(data)


def validate_file(path: str | Path) -> ValidationResult:
    """Load JSON from file path, then validate."""
    filepath = Path(path)

    if not filepath.exists():
        return ValidationResult(errors=[f"File not found: {path}"])

    try:
        raw = filepath.read_bytes()
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        return ValidationResult(errors=["Failed to read file"])

    return validate_json(raw)


def analyze_supported_characters(characters: Any) -> CharacterCoverage:
    """Summarize the character keys of a font, whatever state it is in."""
    if not isinstance(characters, Mapping):
        return CharacterCoverage()

    keys = [str(key) for key in characters]
    return CharacterCoverage(
        total=len(keys),
        categories=group_by_category(keys),
        characters=sorted(keys),
    )


# --- Individual checks ---


def _is_int(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int) and not isinstance(value, bool)


def _check_required_properties(data: Mapping[str, Any], result: ValidationResult) -> None:
    for prop in REQUIRED_PROPERTIES:
        if prop not in data:
            result.errors.append(f"Missing required property: {prop}")


def _check_name(data: Mapping[str, Any], result: ValidationResult) -> None:
    if "name" not in data:
        return
    name = data["name"]
    if not isinstance(name, str) or not name.strip():
        result.errors.append("Name must be a non-empty string")


def _check_description(data: Mapping[str, Any], result: ValidationResult) -> None:
    if "description" in data and not isinstance(data["description"], str):
        result.errors.append("Description must be a string")


def _check_height(data: Mapping[str, Any], result: ValidationResult) -> None:
    if "height" not in data:
        return
    height = data["height"]
    if not _is_int(height) or not MIN_HEIGHT <= height <= MAX_HEIGHT:
        result.errors.append(
            f"Height must be an integer between {MIN_HEIGHT} and {MAX_HEIGHT}"
        )


def _check_characters(data: Mapping[str, Any], result: ValidationResult) -> None:
    """Check the characters map and every glyph in it."""
    if "characters" not in data:
        return

    characters = data["characters"]
    if not isinstance(characters, Mapping):
        result.errors.append("Characters must be an object")
        return
    if not characters:
        result.errors.append("Characters object cannot be empty")
        return

    font_height = data.get("height")
    for char, raw in characters.items():
        _check_character(str(char), raw, font_height, result)


def _check_character(char: str, raw: Any, font_height: Any, result: ValidationResult) -> None:
    if len(char) != 1:
        result.errors.append(f'Character key must be a single character: "{char}"')
        return

    pattern = raw_glyph_pattern(raw)
    if not isinstance(pattern, list):
        result.errors.append(f'Character "{char}" pattern must be an array')
        return

    expected = raw_glyph_height(raw)
    if expected is None and _is_int(font_height):
        expected = int(font_height)
    if expected is not None and len(pattern) != expected:
        result.errors.append(f'Character "{char}" has {len(pattern)} rows, expected {expected}')

    widths = [len(row) if isinstance(row, str) else -1 for row in pattern]
    if len(set(widths)) > 1:
        result.errors.append(f'Character "{char}" has inconsistent row widths: {widths}')

    has_stitch = False
    for i, row in enumerate(pattern, start=1):
        if not isinstance(row, str):
            result.errors.append(f'Character "{char}" row {i} must be a string')
            continue

        invalid = [s for s in dict.fromkeys(row) if s not in VALID_PATTERN_SYMBOLS]
        if invalid:
            listed = ", ".join(f'"{s}"' for s in invalid)
            result.errors.append(
                f'Character "{char}" row {i} contains invalid characters: {listed}'
            )

        has_stitch = has_stitch or any(is_stitch(s) for s in row)

    if not has_stitch:
        result.warnings.append(f'Character "{char}" has no visible content')


def _check_width_consistency(data: Mapping[str, Any], result: ValidationResult) -> None:
    """Warn once if any glyph is much wider or narrower than the average."""
    characters = data.get("characters")
    if not isinstance(characters, Mapping) or not characters:
        return

    widths: list[int] = []
    for raw in characters.values():
        pattern = raw_glyph_pattern(raw)
        if not isinstance(pattern, list):
            continue
        widths.append(max((len(row) for row in pattern if isinstance(row, str)), default=0))

    if not widths:
        return

    average = sum(widths) / len(widths)
    if any(abs(width - average) > WIDTH_VARIATION_TOLERANCE for width in widths):
        result.warnings.append(WIDTH_VARIATION_WARNING)
