"""Slug and file name helpers for exported alphabets."""

import re

DEFAULT_EXPORT_STEM = "alphabet"


def generate_slug(name: str) -> str:
    """Convert a display name to a URL-friendly slug.

    "Decorative Serif" -> "decorative-serif"
    "My_Font  Name!" -> "my-font-name"
    """
    slug = name.lower()
    slug = re.sub(r"[\s_]+", "-", slug)
    # Strip anything that isn't alphanumeric or hyphen
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    # Collapse multiple hyphens
    slug = re.sub(r"-{2,}", "-", slug)
    # Strip leading/trailing hyphens
    slug = slug.strip("-")
    return slug


def export_filename(name: str) -> str:
    """File name an alphabet is exported under, derived from its display name."""
    return f"{generate_slug(name) or DEFAULT_EXPORT_STEM}.json"
