"""Batch validation of several alphabets and the markdown report built from it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from stitchspeak.schema import Font
from stitchspeak.validator import ValidationResult, validate_font

# (category key, report label); spaces are reported as a count
_COVERAGE_LINES = (
    ("uppercase", "Uppercase"),
    ("lowercase", "Lowercase"),
    ("numbers", "Numbers"),
    ("punctuation", "Punctuation"),
    ("symbols", "Symbols"),
)


@dataclass
class FontReport:
    """Validation result for one font, with the display metadata it came with."""

    key: str
    font_name: str
    font_description: str
    result: ValidationResult


@dataclass
class BatchValidation:
    results: dict[str, FontReport] = field(default_factory=dict)
    summary: dict[str, int] = field(
        default_factory=lambda: {
            "total": 0,
            "valid": 0,
            "invalid": 0,
            "totalErrors": 0,
            "totalWarnings": 0,
        }
    )

    @property
    def all_valid(self) -> bool:
        return self.summary["invalid"] == 0


def _metadata(font: Any, key: str) -> str:
    if isinstance(font, Font):
        value = getattr(font, key)
    elif isinstance(font, Mapping):
        value = font.get(key)
    else:
        value = None
    return "" if value is None else str(value)


def validate_all(fonts: Mapping[str, Any]) -> BatchValidation:
    """Validate every font of a key -> font mapping and tally the outcome."""
    batch = BatchValidation()

    for key, font in fonts.items():
        result = validate_font(font)
        batch.results[key] = FontReport(
            key=key,
            font_name=_metadata(font, "name") or key,
            font_description=_metadata(font, "description"),
            result=result,
        )

        batch.summary["total"] += 1
        batch.summary["valid" if result.is_valid else "invalid"] += 1
        batch.summary["totalErrors"] += result.error_count
        batch.summary["totalWarnings"] += result.warning_count

    return batch


def _coverage_lines(report: FontReport) -> list[str]:
    coverage = report.result.supported_characters
    lines = [f"**Supported Characters:** {coverage.total} total"]
    for category, label in _COVERAGE_LINES:
        members = coverage.categories.get(category, [])
        if members:
            lines.append(f"- {label}: {''.join(members)}")
    spaces = coverage.categories.get("spaces", [])
    if spaces:
        lines.append(f"- Spaces: {len(spaces)} supported")
    return lines


def generate_report(batch: BatchValidation) -> str:
    """Render a batch validation as a markdown report.

    Errors and warnings are listed verbatim, in the order the validator
    produced them.
    """
    summary = batch.summary
    lines = [
        "# Font Validation Report",
        "",
        "## Summary",
        f"- Total Fonts: {summary['total']}",
        f"- Valid: {summary['valid']}",
        f"- Invalid: {summary['invalid']}",
        f"- Total Errors: {summary['totalErrors']}",
        f"- Total Warnings: {summary['totalWarnings']}",
        "",
    ]

    if batch.all_valid:
        lines.append("All fonts are valid!")
    else:
        lines.append(f"Found {summary['invalid']} invalid font(s)")
    lines += ["", "## Detailed Results", ""]

    for key, report in batch.results.items():
        result = report.result
        lines.append(f"### {report.font_name} ({key})")
        lines.append(f"**Description:** {report.font_description}")
        lines.append(f"**Status:** {'Valid' if result.is_valid else 'Invalid'}")
        lines.extend(_coverage_lines(report))

        if result.errors:
            lines.append(f"**Errors ({result.error_count}):**")
            lines.extend(f"- {error}" for error in result.errors)

        if result.warnings:
            lines.append(f"**Warnings ({result.warning_count}):**")
            lines.extend(f"- {warning}" for warning in result.warnings)

        lines.append("")

    return "\n".join(lines)
