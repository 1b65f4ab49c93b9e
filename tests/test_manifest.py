from pathlib import Path

from amda_clean.classify import ArtistBucket
from amda_clean.manifest import (
    MANIFEST_COLUMNS,
    artist_base,
    build_manifest_row,
    build_report_row,
    manifest_csv,
    report_csv,
)

ORG_BUCKET = ArtistBucket("uganda", "batalo-east", Path("/x/Amani"))
SOLO_BUCKET = ArtistBucket("rwanda", None, Path("/x/Jabari"))


def test_artist_base_with_and_without_organization():
    assert artist_base(ORG_BUCKET, "amani") == "uganda/batalo-east/amani"
    assert artist_base(SOLO_BUCKET, "jabari") == "rwanda/jabari"


def test_manifest_row_fields():
    row = build_manifest_row(ORG_BUCKET, "amani", "Amani", hero_path="uganda/batalo-east/amani/hero.jpg")

    assert row.country == "Uganda"
    assert row.organization == "batalo-east"
    assert row.gallery_glob == "uganda/batalo-east/amani/photos/*"
    assert row.dance_styles == row.social_instagram == ""
    assert len(row.as_row()) == len(MANIFEST_COLUMNS)


def test_report_row_notes_for_images_only():
    row = build_report_row(SOLO_BUCKET, "jabari", "Jabari", hero_path="rwanda/jabari/hero.jpg", num_photos=3)

    assert row.notes == "no_bio;no_cv"
    assert row.hero == "hero.jpg"
    assert row.organization == "(none)"
    assert row.as_row() == ["jabari", "Jabari", "rwanda", "(none)", "hero.jpg", "", "", "3", "no_bio;no_cv"]


def test_report_row_extra_notes_follow_missing():
    row = build_report_row(SOLO_BUCKET, "jabari", "Jabari", extra_notes=["failed:OSError"])
    assert row.notes == "no_hero;no_bio;no_cv;failed:OSError"


def test_manifest_csv_sorted_by_country_org_name():
    rows = [
        build_manifest_row(ORG_BUCKET, "zed", "Zed"),
        build_manifest_row(SOLO_BUCKET, "jabari", "Jabari"),
        build_manifest_row(ArtistBucket("uganda", None, Path("/x/A")), "amy", "Amy"),
    ]

    lines = manifest_csv(rows).splitlines()

    assert lines[0] == ",".join(MANIFEST_COLUMNS)
    assert [line.split(",")[0] for line in lines[1:]] == ["jabari", "amy", "zed"]


def test_report_csv_keeps_order_and_quotes_commas():
    rows = [
        build_report_row(SOLO_BUCKET, "b", "B, Jr"),
        build_report_row(SOLO_BUCKET, "a", "A"),
    ]

    text = report_csv(rows)

    assert text.splitlines()[0] == "slug,name,country,organization,hero,bio,cv,num_photos,notes"
    assert text.splitlines()[1].startswith('b,"B, Jr",rwanda')
    assert text.splitlines()[2].startswith("a,A,")
