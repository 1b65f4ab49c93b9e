"""High-level orchestration: classify the tree, process each artist, write outputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .assets import AssetSelection, list_files, select_assets
from .classify import ArtistBucket, classify_tree, find_root
from .config import CatalogConfig
from .manifest import (
    ManifestRow,
    ReportRow,
    artist_base,
    build_manifest_row,
    build_report_row,
    manifest_csv,
    report_csv,
)
from .media import ArchiveWriter, extract_archive, read_bytes, read_text, transcode_image
from .names import slugify, to_display_name, unique_name
from .preview import render_preview

logger = logging.getLogger("amda_clean")


@dataclass(frozen=True)
class ArtistIdentity:
    """Display name and output folder for one bucket."""

    name: str
    slug: str
    base: str
    renamed: bool = False


@dataclass
class ArtistResult:
    """Staged archive entries and table rows for one processed artist."""

    identity: ArtistIdentity
    selection: AssetSelection
    entries: list[tuple[str, bytes]]
    manifest: ManifestRow
    report: ReportRow


@dataclass
class RunSummary:
    archive_path: Path
    manifest_path: Path
    report_path: Path
    artists: int = 0
    failed: int = 0
    skipped: list[Path] = field(default_factory=list)


def artist_identity(bucket: ArtistBucket, taken: dict[tuple, set]) -> ArtistIdentity:
    """Derive name and slug, making the slug unique within its country/organization."""
    name = to_display_name(bucket.source_path.name)
    wanted = slugify(name)
    scope = taken.setdefault((bucket.country_key, bucket.organization), set())
    slug = unique_name(wanted, scope)
    return ArtistIdentity(name=name, slug=slug, base=artist_base(bucket, slug), renamed=slug != wanted)


def process_artist(bucket: ArtistBucket, identity: ArtistIdentity, config: CatalogConfig) -> ArtistResult:
    """Select and transcode one artist's assets without touching the output archive."""
    files = list_files(bucket.source_path)
    selection = select_assets(files, config)
    base = identity.base
    entries: list[tuple[str, bytes]] = []

    def image(path: Path) -> bytes:
        logger.debug("    transcoding %s", path)
        return transcode_image(path, config.max_side, config.jpeg_quality)

    hero_rel = ""
    if selection.hero is not None:
        hero_rel = f"{base}/hero.jpg"
        entries.append((hero_rel, image(selection.hero)))

    stems: set[str] = set()
    for path in selection.gallery:
        stem = unique_name(path.stem, stems)
        entries.append((f"{base}/photos/{stem}.jpg", image(path)))

    bio_rel = ""
    if selection.bio is not None:
        bio_rel = f"{base}/bio.md"
        entries.append((bio_rel, read_text(selection.bio).encode("utf-8")))

    cv_rel = ""
    if selection.cv is not None:
        cv_rel = f"{base}/cv{selection.cv.suffix.lower()}"
        entries.append((cv_rel, read_bytes(selection.cv)))

    notes = []
    if identity.renamed:
        notes.append("slug_renamed")
    if selection.hero_promoted:
        notes.append("hero_promoted")

    return ArtistResult(
        identity=identity,
        selection=selection,
        entries=entries,
        manifest=build_manifest_row(bucket, identity.slug, identity.name, hero_rel, bio_rel, cv_rel),
        report=build_report_row(
            bucket,
            identity.slug,
            identity.name,
            hero_rel,
            bio_rel,
            cv_rel,
            num_photos=len(selection.gallery),
            extra_notes=notes,
        ),
    )


def failure_report(bucket: ArtistBucket, identity: ArtistIdentity, exc: Exception) -> ReportRow:
    notes = ["slug_renamed"] if identity.renamed else []
    notes.append(f"failed:{type(exc).__name__}")
    return build_report_row(bucket, identity.slug, identity.name, extra_notes=notes)


def run(
    source: Path,
    config: CatalogConfig,
    out_dir: Path,
    work_dir: Optional[Path] = None,
    preview: bool = False,
    strict: bool = False,
) -> RunSummary:
    """Clean ``source`` into ``out_dir``; one artist failing does not stop the others unless ``strict``."""
    out_dir.mkdir(parents=True, exist_ok=True)
    work_dir = work_dir or out_dir
    summary = RunSummary(
        archive_path=out_dir / config.out_zip,
        manifest_path=out_dir / config.out_csv,
        report_path=out_dir / config.out_report,
    )

    logger.info("Step 1: Extracting %s...", source)
    root = find_root(extract_archive(source, work_dir))

    logger.info("Step 2: Classifying folders under %s...", root)
    classified = classify_tree(root, config)
    summary.skipped = classified.skipped
    total = len(classified.buckets)
    logger.info("  Found %d artists (%d folders skipped)", total, len(classified.skipped))

    logger.info("Step 3: Processing artists...")
    taken: dict[tuple, set] = {}
    manifest_rows: list[ManifestRow] = []
    report_rows: list[ReportRow] = []
    published: list[tuple[ManifestRow, ReportRow]] = []

    with ArchiveWriter(summary.archive_path) as archive:
        for i, bucket in enumerate(classified.buckets):
            identity = artist_identity(bucket, taken)
            try:
                result = process_artist(bucket, identity, config)
            except Exception as exc:
                if strict:
                    raise
                logger.exception("  [%d/%d] %s failed", i + 1, total, identity.base)
                report_rows.append(failure_report(bucket, identity, exc))
                summary.failed += 1
                continue

            for rel_path, data in result.entries:
                archive.add(rel_path, data)
            manifest_rows.append(result.manifest)
            report_rows.append(result.report)
            published.append((result.manifest, result.report))
            summary.artists += 1
            logger.info(
                "  [%d/%d] %s (%d photos)", i + 1, total, identity.base, result.report.num_photos
            )

        logger.info("Step 4: Writing manifests...")
        manifest_text = manifest_csv(manifest_rows)
        report_text = report_csv(report_rows)
        archive.add_text(config.out_csv, manifest_text)
        archive.add_text(config.out_report, report_text)
        if preview:
            archive.add_text("index.html", render_preview(published))

    summary.manifest_path.write_text(manifest_text, encoding="utf-8")
    summary.report_path.write_text(report_text, encoding="utf-8")

    logger.info(
        "DONE: %s %s %s", summary.archive_path.name, summary.manifest_path.name, summary.report_path.name
    )
    return summary
