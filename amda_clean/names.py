"""Helpers for turning raw folder names into countries, display names and slugs."""

from __future__ import annotations

import re
import unicodedata
from typing import Mapping

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
SEPARATOR_PATTERN = re.compile(r"[_-]+")


def normalize_country(raw: str, aliases: Mapping[str, str]) -> str:
    """Lower-case a folder name and resolve known misspellings.

    The result is not validated; callers check it against the valid-country set.
    """
    key = raw.lower()
    return aliases.get(key, key)


def capitalize_country(key: str) -> str:
    return key[:1].upper() + key[1:]


def slugify(value: str, fallback: str = "artist") -> str:
    """Generate a filesystem-friendly slug using ASCII characters only."""
    normalized = unicodedata.normalize("NFKD", value)
    normalized = normalized.encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()
    normalized = SLUG_PATTERN.sub("-", normalized).strip("-")
    return normalized or fallback


def title_case(value: str) -> str:
    # Acronyms are lowercased too: "MC" -> "Mc".
    return " ".join(p[0].upper() + p[1:].lower() for p in value.split())


def to_display_name(raw_folder_name: str) -> str:
    """Turn ``jean_pierre--NDAYISABA`` into ``Jean Pierre Ndayisaba``."""
    return title_case(SEPARATOR_PATTERN.sub(" ", raw_folder_name).strip())


def unique_name(name: str, taken: set[str]) -> str:
    """Return ``name`` or the first free ``name-N`` (N >= 2); records the result in ``taken``."""
    candidate = name
    n = 2
    while candidate in taken:
        candidate = f"{name}-{n}"
        n += 1
    taken.add(candidate)
    return candidate
