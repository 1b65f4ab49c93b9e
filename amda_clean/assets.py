"""Pick a hero image, gallery, biography and CV out of an artist folder."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .config import CatalogConfig

IMAGE = "image"
BIO = "bio"
CV = "cv"

# Filename prefixes that mark an image as the artist's main picture, best first.
HERO_PREFIXES = ("hero.", "cover.", "portrait.", "profile.")


@dataclass(frozen=True)
class AssetSelection:
    hero: Optional[Path]
    gallery: tuple[Path, ...]
    bio: Optional[Path]
    cv: Optional[Path]
    hero_promoted: bool = False


def list_files(directory: Path) -> list[Path]:
    """All files below ``directory``, skipping hidden files and hidden folders."""
    files = []
    for path in directory.rglob("*"):
        rel = path.relative_to(directory)
        if any(part.startswith(".") for part in rel.parts):
            continue
        if path.is_file():
            files.append(path)
    files.sort(key=lambda p: p.relative_to(directory).as_posix())
    return files


def file_kind(path: Path, config: CatalogConfig) -> Optional[str]:
    ext = path.suffix.lower()
    if ext in config.image_exts:
        return IMAGE
    if ext in config.bio_exts:
        return BIO
    if ext in config.cv_exts:
        return CV
    return None


def hero_priority(path: Path) -> int:
    name = path.name.lower()
    for rank, prefix in enumerate(HERO_PREFIXES):
        if name.startswith(prefix):
            return len(HERO_PREFIXES) - rank
    return 0


def pick_hero(candidates: Sequence[Path]) -> Optional[Path]:
    """Highest-priority image, ties broken by case-folded filename; ``None`` for an empty pool."""
    ranked = sorted(candidates, key=lambda p: (-hero_priority(p), p.name.lower(), p.name, p.as_posix()))
    return ranked[0] if ranked else None


def pick_cv(cvs: Sequence[Path]) -> Optional[Path]:
    for path in cvs:
        if path.suffix.lower() == ".pdf":
            return path
    return cvs[0] if cvs else None


def select_assets(
    files: Sequence[Path],
    config: CatalogConfig,
    hero_pool: Optional[Sequence[Path]] = None,
) -> AssetSelection:
    """Partition ``files`` by role and choose hero, gallery, bio and CV.

    ``hero_pool`` narrows the images the hero is ranked from; by default every
    image competes. When the pool yields nothing but images exist, the first
    image is promoted to hero and also stays in the gallery, so it is written
    twice.
    """
    images, bios, cvs = [], [], []
    for path in files:
        kind = file_kind(path, config)
        if kind == IMAGE:
            images.append(path)
        elif kind == BIO:
            bios.append(path)
        elif kind == CV:
            cvs.append(path)

    hero = pick_hero(images if hero_pool is None else hero_pool)
    gallery = tuple(p for p in images if p != hero)
    promoted = False
    if hero is None and images:
        hero = images[0]
        promoted = True

    return AssetSelection(
        hero=hero,
        gallery=gallery,
        bio=bios[0] if bios else None,
        cv=pick_cv(cvs),
        hero_promoted=promoted,
    )
