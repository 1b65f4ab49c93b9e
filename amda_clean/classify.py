"""Discover artist folders in an extracted country/[organization]/artist tree."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .config import CatalogConfig
from .names import normalize_country

logger = logging.getLogger("amda_clean.classify")

PLATFORM_JUNK = frozenset({"__MACOSX"})


class FolderRole(enum.Enum):
    ORGANIZATION = "organization"
    STRAY_ARTIST = "stray_artist"
    ARTIST = "artist"


@dataclass(frozen=True)
class ArtistBucket:
    """One discovered artist directory with its country and organization context."""

    country_key: str
    organization: Optional[str]
    source_path: Path


@dataclass
class ClassifyResult:
    buckets: list[ArtistBucket] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def subdirectories(directory: Path) -> list[Path]:
    """Immediate non-hidden subdirectories, sorted by name."""
    return sorted(
        (p for p in directory.iterdir() if p.is_dir() and not _is_hidden(p)),
        key=lambda p: p.name,
    )


def find_root(directory: Path, ignore: Iterable[str] = PLATFORM_JUNK) -> Path:
    """Descend through single-child directories (exports often nest under one folder)."""
    ignore = set(ignore)
    while True:
        entries = [p for p in directory.iterdir() if p.name not in ignore and not _is_hidden(p)]
        if len(entries) == 1 and entries[0].is_dir():
            directory = entries[0]
            continue
        return directory


def has_files(directory: Path, depth: int = 2) -> bool:
    """True iff a non-hidden regular file exists within ``depth`` levels of ``directory``."""
    if depth < 1:
        return False
    for entry in directory.iterdir():
        if _is_hidden(entry):
            continue
        if entry.is_file():
            return True
        if entry.is_dir() and has_files(entry, depth - 1):
            return True
    return False


def folder_role(name: str, recognized: frozenset) -> FolderRole:
    """Decide what a child of a country folder represents."""
    if name.lower() in recognized:
        return FolderRole.ORGANIZATION
    if recognized:
        return FolderRole.STRAY_ARTIST
    return FolderRole.ARTIST


def recognized_orgs(children: list[Path], country_key: str, config: CatalogConfig) -> frozenset:
    known = config.orgs_for(country_key)
    return frozenset(p.name.lower() for p in children if p.name.lower() in known)


def classify_country(country_dir: Path, country_key: str, config: CatalogConfig, result: ClassifyResult):
    children = subdirectories(country_dir)
    recognized = recognized_orgs(children, country_key, config)

    def consider(path: Path, organization: Optional[str]):
        if has_files(path):
            result.buckets.append(ArtistBucket(country_key, organization, path))
        else:
            logger.info("Skipping empty artist folder %s", path)
            result.skipped.append(path)

    for child in children:
        role = folder_role(child.name, recognized)
        if role is FolderRole.ORGANIZATION:
            org = child.name.lower()
            for artist_dir in subdirectories(child):
                consider(artist_dir, org)
        else:
            # ARTIST and STRAY_ARTIST both land without an organization.
            consider(child, None)


def classify_tree(root: Path, config: CatalogConfig) -> ClassifyResult:
    """Walk ``root`` and collect every artist bucket it holds, plus the folders skipped."""
    result = ClassifyResult()
    for country_dir in subdirectories(root):
        country_key = normalize_country(country_dir.name, config.country_aliases)
        if country_key not in config.valid_countries:
            logger.info("Skipping unrecognized country folder %s", country_dir.name)
            result.skipped.append(country_dir)
            continue
        logger.debug("Country %s -> %s", country_dir.name, country_key)
        classify_country(country_dir, country_key, config, result)
    return result
