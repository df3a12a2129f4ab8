"""Character classification for coverage summaries and glyph editing."""

import unicodedata

from stitchspeak.config import PUNCTUATION

CATEGORY_NAMES = ("uppercase", "lowercase", "numbers", "punctuation", "symbols", "spaces")


def categorize_char(char: str) -> str:
    """Return the coverage category name for a character key.

    ASCII letters and digits get their own categories; anything that is not
    a space or a known punctuation mark (including non-ASCII letters and
    malformed multi-character keys) counts as a symbol.
    """
    if char == " ":
        return "spaces"
    if len(char) != 1:
        return "symbols"
    if "A" <= char <= "Z":
        return "uppercase"
    if "a" <= char <= "z":
        return "lowercase"
    if "0" <= char <= "9":
        return "numbers"
    if char in PUNCTUATION:
        return "punctuation"
    return "symbols"


def group_by_category(chars) -> dict[str, list[str]]:
    """Partition characters into sorted per-category lists."""
    groups: dict[str, list[str]] = {name: [] for name in CATEGORY_NAMES}
    for char in chars:
        groups[categorize_char(char)].append(char)
    for members in groups.values():
        members.sort()
    return groups


def is_printable_char(char: str) -> bool:
    """Check if a character is printable and not a control character.

    Space is considered printable. Control characters (Cc category) are not.
    """
    if len(char) != 1:
        return False
    if char == " ":
        return True
    category = unicodedata.category(char)
    return category != "Cc" and char.isprintable()


def alternate_case(char: str) -> str:
    """Return the other letter case of a character ('a' <-> 'A').

    Characters without case come back unchanged.
    """
    return char.upper() if char == char.lower() else char.lower()
