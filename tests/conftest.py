from pathlib import Path

import pytest
from PIL import Image

from amda_clean.config import CatalogConfig


def write_image(path: Path, size=(40, 30), color=(200, 40, 40), fmt=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path, fmt)
    return path


def write_file(path: Path, data="x"):
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(data, encoding="utf-8")
    return path


@pytest.fixture
def config():
    return CatalogConfig()
