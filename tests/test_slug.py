"""Tests slugs — normalisation + idempotence."""
import pytest

from pumpkin_cms.core.slug import is_valid_slug, normalize_slug


@pytest.mark.parametrize("raw, expected", [
    ("My Page/Title",       "my-page-title"),
    ("home\\products",      "home-products"),
    ("-leading-trailing-",  "leading-trailing"),
    ("a  --  b",            "a-b"),
    ("Plombier\tParis 15",  "plombier-paris-15"),
    ("already-clean",       "already-clean"),
    ("",                    ""),
])
def test_normalize_slug(raw, expected):
    assert normalize_slug(raw) == expected


@pytest.mark.parametrize("raw", [
    "My Page/Title", "//a//b//", "  spaced  out  ", "UPPER\\lower", "--", "é à ç",
])
def test_normalize_slug_is_idempotent(raw):
    once = normalize_slug(raw)
    assert normalize_slug(once) == once
    assert is_valid_slug(once)


@pytest.mark.parametrize("slug, valid", [
    ("my-page", True),
    ("My-Page", False),
    ("a--b", False),
    ("-a", False),
    ("a/b", False),
])
def test_is_valid_slug(slug, valid):
    assert is_valid_slug(slug) is valid


def test_normalized_slug_has_no_double_hyphen():
    assert "--" not in normalize_slug("a - - - b")


@pytest.mark.parametrize("raw, expected", [
    (0,    "0"),
    (1,    "1"),
    (None, ""),
])
def test_normalize_slug_non_string_input(raw, expected):
    assert normalize_slug(raw) == expected
