"""Command-line entry point for the archive cleaner."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_SOURCE, CatalogConfig, load_config
from .errors import AmdaCleanError
from .pipeline import run

logger = logging.getLogger("amda_clean.cli")

EXIT_FATAL = 1
EXIT_PARTIAL = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Normalize a zipped country/organization/artist media export into a clean "
            "archive plus artists_manifest.csv and import_report.csv."
        ),
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=DEFAULT_SOURCE,
        type=Path,
        help="Source zip archive, or an already-extracted folder",
    )
    parser.add_argument(
        "--output-dir",
        default=Path("."),
        type=Path,
        help="Directory where the cleaned archive and CSV files are written",
    )
    parser.add_argument(
        "--work-dir",
        default=None,
        type=Path,
        help="Directory that holds the .tmp_extract scratch folder (default: <output-dir>)",
    )
    parser.add_argument(
        "--config",
        default=None,
        type=Path,
        help="JSON file overriding countries, organizations, extensions or image limits",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Embed an index.html catalog page at the root of the cleaned archive",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort the whole run on the first artist that fails to process",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    start = time.perf_counter()
    try:
        config = load_config(args.config) if args.config else CatalogConfig()
        summary = run(
            args.source,
            config,
            args.output_dir.resolve(),
            work_dir=args.work_dir.resolve() if args.work_dir else None,
            preview=args.preview,
            strict=args.strict,
        )
    except AmdaCleanError as exc:
        logger.error("%s", exc)
        return EXIT_FATAL

    logger.info(
        "Finished in %.2fs (%d artists written, %d failed)",
        time.perf_counter() - start,
        summary.artists,
        summary.failed,
    )
    return EXIT_PARTIAL if summary.failed else 0


if __name__ == "__main__":
    sys.exit(main())
