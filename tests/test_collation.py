"""Collation key tests."""

import pytest

from drinkbar.collation import default_key, describe, make_sort_key
from drinkbar.config import ConfigError


def _sorted(names):
    return sorted(names, key=default_key)


def test_case_insensitive_primary_order():
    assert _sorted(["water", "Beer", "cola"]) == ["Beer", "cola", "water"]


def test_lowercase_before_uppercase_on_tie():
    assert _sorted(["Cola", "cola"]) == ["cola", "Cola"]
    assert _sorted(["Cola", "cola", "Coke"]) == ["Coke", "cola", "Cola"]


def test_accents_are_secondary():
    assert _sorted(["Café", "cafe", "Cafd", "cafz"]) == ["Cafd", "cafe", "Café", "cafz"]


def test_precomposed_and_decomposed_are_equal():
    assert default_key("Caf\u00e9") == default_key("Cafe\u0301")


def test_empty_name_sorts_first():
    assert _sorted(["a", ""]) == ["", "a"]


def test_default_when_no_locale():
    assert make_sort_key(None) is default_key
    assert make_sort_key("") is default_key


def test_unknown_locale_is_config_error():
    with pytest.raises(ConfigError):
        make_sort_key("xx_NOPE.UTF-8")


def test_describe():
    assert describe(None) == "built-in"
    assert describe("ro_RO.UTF-8") == "locale ro_RO.UTF-8"


def test_character_classes_order():
    """Punctuation, then symbols, then digits, then letters."""
    assert _sorted(["Zima", "~Mix", "_Shot", "7Up"]) == ["_Shot", "~Mix", "7Up", "Zima"]


def test_space_and_punctuation_before_letters():
    assert _sorted(["Gin", "Gin Tonic", "Gin-Fizz", "Gina"]) == ["Gin", "Gin Tonic", "Gin-Fizz", "Gina"]


def test_digits_before_letters_inside_names():
    assert _sorted(["Cola B", "Cola 2", "Cola $"]) == ["Cola $", "Cola 2", "Cola B"]
