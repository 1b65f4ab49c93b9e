# /// script
# dependencies = ["pillow", "jinja2"]
# ///
"""
Build a clean artist archive from a featured-artists export.

Usage:
    uv run --script build.py [archive.zip]

Expects the export zip (country/[organization]/artist folders) as the first
argument. Writes amda_cleaned_final.zip, artists_manifest.csv and
import_report.csv to the current directory.
"""

import sys

from amda_clean.cli import main

if __name__ == "__main__":
    sys.exit(main())
