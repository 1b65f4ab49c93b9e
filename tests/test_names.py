from amda_clean.names import (
    capitalize_country,
    normalize_country,
    slugify,
    to_display_name,
    unique_name,
)


def test_normalize_country_resolves_alias_and_case(config):
    assert normalize_country("Uuganda", config.country_aliases) == "uganda"
    assert normalize_country("RWANDA", config.country_aliases) == "rwanda"
    assert normalize_country("Kenya", config.country_aliases) == "kenya"


def test_display_name_collapses_separators_and_title_cases():
    assert to_display_name("jean_pierre") == "Jean Pierre"
    assert to_display_name("  mary--anne__ OKELLO ") == "Mary Anne Okello"
    # Acronyms lose their capitals.
    assert to_display_name("DJ_KASE") == "Dj Kase"


def test_slug_is_stable_lowercase_and_without_spaces():
    first = slugify(to_display_name("jean_pierre"))
    assert first == "jean-pierre"
    assert slugify(to_display_name("jean_pierre")) == first
    assert first == first.lower()
    assert " " not in first


def test_slugify_folds_accents_and_punctuation():
    assert slugify("Zoé N'Dour & Co.") == "zoe-n-dour-co"
    assert slugify("!!!") == "artist"


def test_unique_name_appends_counter():
    taken = set()
    assert unique_name("amani", taken) == "amani"
    assert unique_name("amani", taken) == "amani-2"
    assert unique_name("amani", taken) == "amani-3"
    assert taken == {"amani", "amani-2", "amani-3"}


def test_capitalize_country():
    assert capitalize_country("uganda") == "Uganda"
    assert capitalize_country("") == ""
