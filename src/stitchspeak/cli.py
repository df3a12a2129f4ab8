"""CLI entry point for stitchspeak - turn text into stitch charts with JSON alphabets."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stitchspeak.cli_helpers import (
    _collect_json_files,
    _configure_logging,
    _load_documents,
    _load_font,
    _write_document,
)
from stitchspeak.config import CELL_SIZE, MAX_CELL_SIZE, MIN_CELL_SIZE

# -- CLI group --------------------------------------------------------------------------


@click.group()
@click.version_option(version="0.1.0", prog_name="stitchspeak")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--debug", is_flag=True, hidden=True, help="Trace chart layout")
def cli(verbose: bool, debug: bool):
    """Create needlework charts from text using pixel-font alphabets."""
    _configure_logging(verbose, debug)


# -- validate --------------------------------------------------------------------------


@cli.command("validate")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--report", "report_path", type=click.Path(), default=None, help="Save report")
def validate_cmd(paths, report_path):
    """Validate alphabet JSON files (or directories of them) and print a report."""
    from stitchspeak.report import generate_report, validate_all

    files = _collect_json_files(paths)
    if not files:
        click.secho("No JSON files found", fg="yellow")
        return

    click.echo(f"Validating {len(files)} alphabet file(s)...\n")
    batch = validate_all(_load_documents(files))
    report = generate_report(batch)
    click.echo(report)

    if report_path:
        Path(report_path).write_text(report, encoding="utf-8")
        click.secho(f"Report saved to: {report_path}", fg="green")

    if not batch.all_valid:
        click.secho(
            f"{batch.summary['invalid']} alphabet(s) failed validation.", fg="red", err=True
        )
        sys.exit(1)

    click.secho("All alphabets are valid.", fg="green")


# -- preview ---------------------------------------------------------------------------


@cli.command("preview")
@click.argument("json_path", type=click.Path(exists=True))
@click.option("--chars", default=None, help="Characters to preview (default: all)")
def preview_cmd(json_path, chars):
    """Show ASCII preview of glyphs in an alphabet JSON file."""
    from stitchspeak.preview import preview_font

    font = _load_font(json_path)
    click.echo(f"Alphabet: {font.name or '(unnamed)'} ({len(font.characters)} characters)\n")
    click.echo(preview_font(font, chars))


# -- chart -----------------------------------------------------------------------------


@cli.command("chart")
@click.argument("json_path", type=click.Path(exists=True))
@click.argument("text")
@click.option("-o", "--output", type=click.Path(), default=None, help="Write a PNG image")
@click.option(
    "--cell-size",
    type=click.IntRange(MIN_CELL_SIZE, MAX_CELL_SIZE),
    default=CELL_SIZE,
    help="Cell size in pixels for image output",
)
def chart_cmd(json_path, text, output, cell_size):
    """Render TEXT as a stitch chart using the alphabet in JSON_PATH."""
    from stitchspeak.chart import compose
    from stitchspeak.preview import chart_to_text

    font = _load_font(json_path)
    chart = compose(text, font)
    if chart is None:
        click.secho(
            "Nothing to render: enter some text and use a non-empty alphabet.", fg="yellow"
        )
        return

    if output:
        from stitchspeak.renderer import save_chart_image

        save_chart_image(chart, output, cell_size=cell_size)
        click.secho(f"Wrote {output}", fg="green")
    else:
        click.echo(chart_to_text(chart))

    click.echo(f"\nChart size: {chart.width} columns × {chart.height} rows")


# -- trim ------------------------------------------------------------------------------


@cli.command("trim")
@click.argument("json_path", type=click.Path(exists=True))
@click.option("-o", "--output", type=click.Path(), default=None, help="Output JSON path")
def trim_cmd(json_path, output):
    """Trim empty rows/columns from every glyph and export the alphabet."""
    from stitchspeak.editor import export_font
    from stitchspeak.utils import export_filename

    font = _load_font(json_path)
    data = export_font(font)

    output = output or export_filename(font.name)
    _write_document(data, output)

    click.secho(f"Wrote {output}", fg="green")
    click.echo(f"  Alphabet: {data['name']}")
    click.echo(f"  Characters: {len(data['characters'])}")
    click.echo(f"  Height: {font.height} -> {data['height']}")


# -- list ------------------------------------------------------------------------------


@cli.command("list")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
def list_cmd(directory):
    """List the alphabets that load from DIRECTORY; '*' marks the default."""
    from stitchspeak.loader import get_default_alphabet, load_alphabets

    entries = load_alphabets(directory)
    if not entries:
        click.secho(f"No valid alphabets found in {directory}", fg="yellow")
        return

    default = get_default_alphabet(entries)
    for entry in entries:
        marker = "*" if entry.font is default else " "
        click.echo(
            f"{marker} {entry.key}: {entry.name} "
            f"({len(entry.font.characters)} characters, height {entry.font.height})"
        )
