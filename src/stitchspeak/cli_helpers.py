"""CLI helper functions for stitchspeak: file collection, loading and writing."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from stitchspeak.schema import Font, normalize_font

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


def _configure_logging(verbose: bool, debug: bool = False) -> None:
    """Enable INFO (verbose) or DEBUG logging on stderr."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
    elif verbose:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


def _collect_json_files(paths: tuple[str, ...]) -> list[Path]:
    """Expand directories into their *.json files, keeping explicit files as given."""
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(path.glob("*.json")))
        else:
            files.append(path)
    return files


def _read_document(path: Path) -> Any:
    """Parse a JSON file; None when it cannot be read or parsed."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not parse %s: %s", path, e)
        return None


def _load_documents(files: list[Path]) -> dict[str, Any]:
    """Map each file to its parsed document, keyed by file stem (or full path on clashes)."""
    documents: dict[str, Any] = {}
    for path in files:
        key = path.stem if path.stem not in documents else str(path)
        documents[key] = _read_document(path)
    return documents


def _load_font(path: str) -> Font:
    """Load a font JSON file or exit with an error message."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        click.secho(f"Error: cannot read {path}: {e}", fg="red", err=True)
        sys.exit(1)

    if not isinstance(data, dict):
        click.secho(f"Error: {path} does not contain a JSON object", fg="red", err=True)
        sys.exit(1)

    return normalize_font(data)


def _write_document(data: dict, output_path: str | Path) -> None:
    """Write a font document as pretty-printed UTF-8 JSON."""
    Path(output_path).write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
