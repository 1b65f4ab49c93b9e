"""Configuration objects and constants for the archive cleaner."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .errors import ConfigError

DEFAULT_SOURCE = "AMDA Website featured artists-20251019T211116Z-1-001.zip"
OUT_ZIP = "amda_cleaned_final.zip"
OUT_CSV = "artists_manifest.csv"
OUT_RPT = "import_report.csv"

MAX_SIDE = 2000     # px
JPEG_QUALITY = 82   # %

COUNTRY_ALIASES = {"uuganda": "uganda"}
VALID_COUNTRIES = {"rwanda", "tanzania", "uganda"}
KNOWN_ORGS = {
    "rwanda": {"amizero-dance-kompagnie"},
    "tanzania": {"muda-africa"},
    "uganda": {"batalo-east", "soul-xpressions"},
}

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}
BIO_EXTENSIONS = {".md", ".txt", ".rtf"}
CV_EXTENSIONS = {".pdf", ".doc", ".docx"}


def _freeze_orgs(table: Mapping[str, object]) -> Mapping[str, frozenset]:
    return MappingProxyType(
        {country.lower(): frozenset(n.lower() for n in names) for country, names in table.items()}
    )


def _freeze_exts(exts) -> frozenset:
    return frozenset(e.lower() if e.startswith(".") else "." + e.lower() for e in exts)


@dataclass(frozen=True)
class CatalogConfig:
    """Lookup tables and limits shared by the classifier and selector."""

    country_aliases: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(COUNTRY_ALIASES))
    )
    valid_countries: frozenset = frozenset(VALID_COUNTRIES)
    known_orgs: Mapping[str, frozenset] = field(default_factory=lambda: _freeze_orgs(KNOWN_ORGS))
    image_exts: frozenset = frozenset(IMAGE_EXTENSIONS)
    bio_exts: frozenset = frozenset(BIO_EXTENSIONS)
    cv_exts: frozenset = frozenset(CV_EXTENSIONS)
    max_side: int = MAX_SIDE
    jpeg_quality: int = JPEG_QUALITY
    out_zip: str = OUT_ZIP
    out_csv: str = OUT_CSV
    out_report: str = OUT_RPT

    def orgs_for(self, country_key: str) -> frozenset:
        return self.known_orgs.get(country_key, frozenset())


def _string_list(key: str, value) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings, got {value!r}")
    return value


def _string_map(key: str, value) -> dict[str, str]:
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise ConfigError(f"{key} must map strings to strings, got {value!r}")
    return value


def load_config(path: Path, base: CatalogConfig | None = None) -> CatalogConfig:
    """Read a JSON file overriding any subset of the default tables."""
    base = base or CatalogConfig()
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")

    allowed = {f.name for f in fields(CatalogConfig)}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    overrides = {}
    for key, value in data.items():
        if key == "country_aliases":
            aliases = _string_map(key, value)
            overrides[key] = MappingProxyType({k.lower(): v.lower() for k, v in aliases.items()})
        elif key == "valid_countries":
            overrides[key] = frozenset(c.lower() for c in _string_list(key, value))
        elif key == "known_orgs":
            if not isinstance(value, dict):
                raise ConfigError(f"{key} must map countries to lists of names, got {value!r}")
            overrides[key] = _freeze_orgs(
                {country: _string_list(f"{key}.{country}", names) for country, names in value.items()}
            )
        elif key in ("image_exts", "bio_exts", "cv_exts"):
            overrides[key] = _freeze_exts(_string_list(key, value))
        elif key in ("max_side", "jpeg_quality"):
            # bool is an int subclass; JSON true must not pass as 1.
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{key} must be a positive integer, got {value!r}")
            overrides[key] = value
        else:
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a non-empty string, got {value!r}")
            overrides[key] = value
    return replace(base, **overrides)
