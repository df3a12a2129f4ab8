"""Load every alphabet JSON file found in a directory."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from stitchspeak.schema import Font, normalize_font

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"
DEFAULT_NAME_HINTS = ("basic", "default")


@dataclass(frozen=True)
class AlphabetEntry:
    """A loaded alphabet: file stem, display name and the font itself."""

    key: str
    name: str
    font: Font


def load_alphabet(path: str | Path) -> AlphabetEntry | None:
    """Load one alphabet file; None if it is unreadable or not an alphabet."""
    filepath = Path(path)
    try:
        data = json.loads(filepath.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Failed to load alphabet from %s: %s", filepath, e)
        return None

    if not isinstance(data, Mapping) or not data.get("name") or not data.get("characters"):
        logger.warning("Invalid alphabet structure in %s", filepath)
        return None

    font = normalize_font(data)
    logger.debug("Loaded alphabet %r from %s", font.name, filepath)
    return AlphabetEntry(key=filepath.stem, name=font.name, font=font)


def load_alphabets(directory: str | Path) -> list[AlphabetEntry]:
    """Load all ``*.json`` alphabets in a directory, sorted by display name.

    Display names are unique: a file repeating a name already loaded (in path
    order) is skipped with a warning.
    """
    dirpath = Path(directory)
    files = sorted(dirpath.glob("*.json"))
    logger.debug("Found %d alphabet file(s) in %s", len(files), dirpath)

    entries: list[AlphabetEntry] = []
    seen: dict[str, Path] = {}
    for path in files:
        entry = load_alphabet(path)
        if entry is None:
            continue
        if entry.name in seen:
            logger.warning(
                "Skipping %s: alphabet name %r already loaded from %s",
                path,
                entry.name,
                seen[entry.name],
            )
            continue
        seen[entry.name] = path
        entries.append(entry)

    entries.sort(key=lambda entry: entry.name.casefold())

    logger.info("Loaded %d alphabet(s) from %s", len(entries), dirpath)
    return entries


def get_default_alphabet(entries: list[AlphabetEntry]) -> Font | None:
    """Pick the alphabet keyed 'default' or named like 'basic'/'default', else the first."""
    for entry in entries:
        name = entry.name.lower()
        if entry.key == DEFAULT_KEY or any(hint in name for hint in DEFAULT_NAME_HINTS):
            return entry.font
    return entries[0].font if entries else None
