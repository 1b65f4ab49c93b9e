"""Archive extraction, image transcoding and output archive writing."""

from __future__ import annotations

import io
import logging
import shutil
import zipfile
from pathlib import Path

from PIL import Image, ImageOps

from .config import JPEG_QUALITY, MAX_SIDE
from .errors import ExtractionError

logger = logging.getLogger("amda_clean.media")

EXTRACT_DIRNAME = ".tmp_extract"


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def extract_archive(src: Path, work_dir: Path) -> Path:
    """Expand ``src`` into ``work_dir/.tmp_extract``; a directory source is used in place.

    Only the ``.tmp_extract`` folder is wiped between runs, never ``work_dir`` itself.
    """
    if src.is_dir():
        logger.info("  %s is a directory, skipping extraction", src)
        return src
    if not src.exists():
        raise ExtractionError(f"Source archive not found: {src}")

    target = work_dir / EXTRACT_DIRNAME
    shutil.rmtree(target, ignore_errors=True)
    target.mkdir(parents=True, exist_ok=True)
    try:
        with zipfile.ZipFile(src) as z:
            z.extractall(target)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ExtractionError(f"Cannot extract {src}: {exc}") from exc
    logger.info("  Extracted %s to %s", src, target)
    return target


# ---------------------------------------------------------------------------
# Transcoding
# ---------------------------------------------------------------------------

def transcode_image(src: Path, max_side: int = MAX_SIDE, quality: int = JPEG_QUALITY) -> bytes:
    """Re-encode ``src`` as JPEG bytes fitting inside ``max_side`` x ``max_side``.

    EXIF orientation is applied first; smaller images are never upscaled.
    """
    with Image.open(src) as img:
        img = ImageOps.exif_transpose(img)
        img = img.convert("RGB")
        img.thumbnail((max_side, max_side), Image.LANCZOS)
        buf = io.BytesIO()
        img.save(buf, "JPEG", quality=quality)
    return buf.getvalue()


def read_text(src: Path) -> str:
    return src.read_bytes().decode("utf-8", errors="replace")


def read_bytes(src: Path) -> bytes:
    return src.read_bytes()


# ---------------------------------------------------------------------------
# Output archive
# ---------------------------------------------------------------------------

class ArchiveWriter:
    """Write (relative path, bytes) entries into a single zip file."""

    def __init__(self, path: Path):
        self.path = path
        self._zip: zipfile.ZipFile | None = None
        self._names: set[str] = set()

    def __enter__(self) -> "ArchiveWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._zip = zipfile.ZipFile(self.path, "w", zipfile.ZIP_DEFLATED)
        return self

    def __exit__(self, *exc_info):
        self.close()

    def add(self, rel_path: str, data: bytes):
        if self._zip is None:
            raise RuntimeError("ArchiveWriter is not open")
        if rel_path in self._names:
            raise ValueError(f"Duplicate archive entry: {rel_path}")
        self._names.add(rel_path)
        self._zip.writestr(rel_path, data)

    def add_text(self, rel_path: str, text: str):
        self.add(rel_path, text.encode("utf-8"))

    def close(self):
        if self._zip is not None:
            self._zip.close()
            self._zip = None
