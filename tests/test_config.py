import json
from dataclasses import FrozenInstanceError

import pytest

from amda_clean.config import CatalogConfig, load_config
from amda_clean.errors import ConfigError


def test_defaults():
    config = CatalogConfig()
    assert config.valid_countries == {"rwanda", "tanzania", "uganda"}
    assert config.orgs_for("uganda") == {"batalo-east", "soul-xpressions"}
    assert config.orgs_for("kenya") == frozenset()
    assert (config.max_side, config.jpeg_quality) == (2000, 82)


def test_tables_are_immutable():
    config = CatalogConfig()
    with pytest.raises(FrozenInstanceError):
        config.max_side = 10
    with pytest.raises(TypeError):
        config.known_orgs["kenya"] = frozenset()


def test_load_config_overrides_subset(tmp_path):
    path = tmp_path / "tables.json"
    path.write_text(
        json.dumps(
            {
                "valid_countries": ["Kenya", "uganda"],
                "known_orgs": {"Kenya": ["Sarakasi"]},
                "image_exts": ["JPG", ".tif"],
                "jpeg_quality": 90,
            }
        )
    )

    config = load_config(path)

    assert config.valid_countries == {"kenya", "uganda"}
    assert config.orgs_for("kenya") == {"sarakasi"}
    assert config.image_exts == {".jpg", ".tif"}
    assert config.jpeg_quality == 90
    assert config.country_aliases["uuganda"] == "uganda"


@pytest.mark.parametrize(
    "payload",
    [
        '{"colour": "red"}',
        '["not", "an", "object"]',
        '{"max_side": -1}',
        '{"max_side": true}',
        '{"jpeg_quality": "82"}',
        '{"valid_countries": "uganda"}',
        '{"valid_countries": ["uganda", 3]}',
        '{"country_aliases": ["uuganda"]}',
        '{"country_aliases": {"uuganda": null}}',
        '{"known_orgs": ["muda-africa"]}',
        '{"known_orgs": {"uganda": "batalo-east"}}',
        '{"image_exts": ".jpg"}',
        '{"out_zip": 5}',
        "{broken",
    ],
)
def test_load_config_rejects_bad_files(tmp_path, payload):
    path = tmp_path / "tables.json"
    path.write_text(payload)
    with pytest.raises(ConfigError):
        load_config(path)
