import pytest

from storefront_scraper.core.exceptions import body_excerpt
from storefront_scraper.utils.helpers import normalize_domain, parse_tags


@pytest.mark.parametrize("raw, expected", [
    ("https://www.example.com", "example.com"),
    ("http://example.com", "example.com"),
    ("www.example.com", "example.com"),
    ("example.com", "example.com"),
    ("shop.example.com/", "shop.example.com/"),
])
def test_normalize_domain(raw, expected):
    assert normalize_domain(raw) == expected


def test_normalize_domain_is_idempotent():
    once = normalize_domain("https://www.example.com")
    assert normalize_domain(once) == once == normalize_domain("example.com")


def test_normalize_domain_strips_each_prefix_once():
    assert normalize_domain("https://https://example.com") == "https://example.com"
    assert normalize_domain("www.www.example.com") == "www.example.com"
    # only leading prefixes are touched
    assert normalize_domain("example.com/www.") == "example.com/www."


def test_parse_tags_string_and_list():
    assert parse_tags("red blue green") == ["red", "blue", "green"]
    assert parse_tags(["red", "blue"]) == ["red", "blue"]
    assert parse_tags(None) == []
    assert parse_tags("") == []


def test_parse_tags_rejects_other_types():
    with pytest.raises(ValueError):
        parse_tags(42)
    with pytest.raises(ValueError):
        parse_tags(["red", 1])


def test_body_excerpt_truncates():
    assert body_excerpt(None) == ""
    assert body_excerpt("short") == "short"
    trimmed = body_excerpt("x" * 600)
    assert trimmed.endswith("...") and len(trimmed) == 503
