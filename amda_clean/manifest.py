"""Manifest and import-report rows, and their CSV rendering."""

from __future__ import annotations

import csv
import io
import posixpath
from dataclasses import dataclass
from typing import Iterable, Sequence

from .classify import ArtistBucket
from .names import capitalize_country

MANIFEST_COLUMNS = (
    "slug",
    "name",
    "country",
    "organization",
    "dance_styles",
    "social_instagram",
    "social_facebook",
    "social_youtube",
    "hero_path",
    "bio_path",
    "cv_path",
    "gallery_glob",
)
REPORT_COLUMNS = ("slug", "name", "country", "organization", "hero", "bio", "cv", "num_photos", "notes")

NO_ORGANIZATION = "(none)"


@dataclass(frozen=True)
class ManifestRow:
    slug: str
    name: str
    country: str
    organization: str
    hero_path: str
    bio_path: str
    cv_path: str
    gallery_glob: str
    # Curated by hand after import.
    dance_styles: str = ""
    social_instagram: str = ""
    social_facebook: str = ""
    social_youtube: str = ""

    def as_row(self) -> list[str]:
        return [getattr(self, column) for column in MANIFEST_COLUMNS]

    @property
    def sort_key(self) -> str:
        return self.country + self.organization + self.name


@dataclass(frozen=True)
class ReportRow:
    slug: str
    name: str
    country: str
    organization: str
    hero: str
    bio: str
    cv: str
    num_photos: int
    notes: str

    def as_row(self) -> list[str]:
        return [str(getattr(self, column)) for column in REPORT_COLUMNS]


def artist_base(bucket: ArtistBucket, slug: str) -> str:
    """Archive folder for an artist: ``country/[organization/]slug``."""
    if bucket.organization:
        return f"{bucket.country_key}/{bucket.organization}/{slug}"
    return f"{bucket.country_key}/{slug}"


def build_manifest_row(
    bucket: ArtistBucket,
    slug: str,
    name: str,
    hero_path: str = "",
    bio_path: str = "",
    cv_path: str = "",
) -> ManifestRow:
    return ManifestRow(
        slug=slug,
        name=name,
        country=capitalize_country(bucket.country_key),
        organization=bucket.organization or "",
        hero_path=hero_path,
        bio_path=bio_path,
        cv_path=cv_path,
        gallery_glob=f"{artist_base(bucket, slug)}/photos/*",
    )


def missing_notes(hero_path: str, bio_path: str, cv_path: str) -> list[str]:
    notes = []
    if not hero_path:
        notes.append("no_hero")
    if not bio_path:
        notes.append("no_bio")
    if not cv_path:
        notes.append("no_cv")
    return notes


def build_report_row(
    bucket: ArtistBucket,
    slug: str,
    name: str,
    hero_path: str = "",
    bio_path: str = "",
    cv_path: str = "",
    num_photos: int = 0,
    extra_notes: Sequence[str] = (),
) -> ReportRow:
    """Diagnostics row; missing hero/bio/cv become ``no_*`` notes ahead of ``extra_notes``."""
    notes = missing_notes(hero_path, bio_path, cv_path) + list(extra_notes)
    return ReportRow(
        slug=slug,
        name=name,
        country=bucket.country_key,
        organization=bucket.organization or NO_ORGANIZATION,
        hero=posixpath.basename(hero_path),
        bio=posixpath.basename(bio_path),
        cv=posixpath.basename(cv_path),
        num_photos=num_photos,
        notes=";".join(notes),
    )


def sort_manifest(rows: Iterable[ManifestRow]) -> list[ManifestRow]:
    return sorted(rows, key=lambda r: r.sort_key)


def _to_csv(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buf.getvalue()


def manifest_csv(rows: Iterable[ManifestRow]) -> str:
    return _to_csv(MANIFEST_COLUMNS, (r.as_row() for r in sort_manifest(rows)))


def report_csv(rows: Iterable[ReportRow]) -> str:
    return _to_csv(REPORT_COLUMNS, (r.as_row() for r in rows))
