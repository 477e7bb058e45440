import pytest

from jellofin.query import QueryParams


def test_exact_key_lookup():
    params = QueryParams({"limit": "10"})
    assert params.get("limit") == "10"


def test_capitalised_fallback():
    params = QueryParams({"StartIndex": "5"})
    assert params.get("startIndex") == "5"


def test_exact_key_wins_over_fallback():
    params = QueryParams({"limit": "1", "Limit": "2"})
    assert params.get("limit") == "1"


def test_no_lowercase_fallback_for_capitalised_key():
    params = QueryParams({"limit": "10"})
    assert params.get("Limit") is None


def test_missing_key_returns_none():
    params = QueryParams({"a": "b"})
    assert params.get("sortBy") is None


@pytest.mark.parametrize("key", ["", "1abc", "_x", "éclair"])
def test_keys_without_lowercase_ascii_start_have_no_fallback(key):
    capitalised = key[:1].upper() + key[1:]
    params = QueryParams({capitalised: "v"} if capitalised != key else {})
    assert params.get(key) is None


def test_has_is_exact_only():
    params = QueryParams({"SeasonId": "3"})
    assert params.has("SeasonId") is True
    assert params.has("seasonId") is False
    assert params.get("seasonId") == "3"


def test_empty_params():
    params = QueryParams()
    assert params.get("limit") is None
    assert params.has("limit") is False


def test_mapping_is_copied():
    source = {"limit": "10"}
    params = QueryParams(source)
    source["limit"] = "20"
    assert params.get("limit") == "10"


def test_get_int_parses_value():
    params = QueryParams({"limit": "25"})
    assert params.get_int("limit", 100) == 25


def test_get_int_uses_fallback_key():
    params = QueryParams({"Limit": "7"})
    assert params.get_int("limit", 100) == 7


def test_get_int_accepts_plus_sign():
    params = QueryParams({"limit": "+5"})
    assert params.get_int("limit", 100) == 5


@pytest.mark.parametrize("raw", ["", "abc", "-1", " 5", "5 ", "1.5", "١٢"])
def test_get_int_rejects_bad_values(raw):
    params = QueryParams({"limit": raw})
    assert params.get_int("limit", 100) == 100


def test_get_int_missing_gives_default():
    params = QueryParams({})
    assert params.get_int("startIndex", 0) == 0
    assert params.get_int("startIndex") is None


def test_get_int_large_value():
    params = QueryParams({"limit": "18446744073709551615"})
    assert params.get_int("limit", 0) == 18446744073709551615