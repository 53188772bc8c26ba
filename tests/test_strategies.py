"""Tests for the individual lookup strategies."""

import pytest

from property_value_finder import ABSENT
from property_value_finder.strategies import (
    STRATEGIES,
    parse_json_strict,
    search_json_like,
    search_key_value,
    search_url_like,
)


def test_strategy_order():
    assert [name for name, _ in STRATEGIES] == ["json", "url", "key_value"]


# ─── Strict JSON ──────────────────────────────────────────────────────────────


def test_parse_json_strict():
    assert parse_json_strict('  {"a": 1}\n') == {"a": 1}
    assert parse_json_strict("null") is None
    assert parse_json_strict("") is ABSENT
    assert parse_json_strict("   ") is ABSENT
    assert parse_json_strict("{not json}") is ABSENT
    assert parse_json_strict('{"a": NaN}') is ABSENT
    assert parse_json_strict("Infinity") is ABSENT


def test_array_root_does_not_resolve_paths():
    assert search_json_like('[{"id": 7}, {"id": 8}]', "1.id") is ABSENT


def test_too_deeply_nested_json_is_not_json():
    assert parse_json_strict("[" * 100000) is ABSENT


def test_strict_empty_string_value():
    assert search_json_like('{"k": ""}', "k") == ""


# ─── JSON member scan ─────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text,expected",
    [
        ('{"k": "v", ', "v"),
        ("prefix \"k\": 'single'", "single"),
        ('broken "k": 42 }', 42),
        ('broken "k" : -12.5,', -12.5),
        ('broken "k": 1.2.3', "1.2.3"),
        ('broken "k": -', "-"),
        ('broken "k": TRUE', True),
        ('broken "k":False', False),
    ],
)
def test_json_member_scan(text, expected):
    value = search_json_like(text, "k")
    assert value == expected
    assert type(value) is type(expected)


def test_json_member_scan_null_literal():
    assert search_json_like('prefix {"x": null', "x") is None


def test_json_member_scan_is_case_sensitive_on_key():
    assert search_json_like('junk "EID": "1"', "eid") is ABSENT


def test_json_member_scan_null_literal_is_case_sensitive():
    assert search_json_like('junk "x": NULL', "x") is ABSENT


def test_json_member_scan_skips_empty_strings():
    assert search_json_like('x "k": ""', "k") is ABSENT


def test_json_member_scan_first_match_wins():
    assert search_json_like('a "k": 1 b "k": 2', "k") == 1


def test_json_member_scan_escapes_key():
    assert search_json_like('x "a+b": "plus"', "a+b") == "plus"
    assert search_json_like('x "aab": "no"', "a.b") is ABSENT


def test_non_standard_constant_is_not_matched():
    assert search_json_like('{"k": NaN}', "k") is ABSENT


# ─── URL / query ──────────────────────────────────────────────────────────────


def test_full_url_blank_value_is_empty_string():
    assert search_url_like("https://x.io/path?eid=&a=1", "eid") == ""


def test_full_url_first_occurrence_wins():
    assert search_url_like("https://x.io/?eid=1&eid=2", "eid") == "1"


def test_full_url_value_decoded_twice():
    assert search_url_like("https://x.io/?eid=abc%2520", "eid") == "abc "


def test_full_url_plus_is_space():
    assert search_url_like("https://x.io/?q=a+b", "q") == "a b"


def test_malformed_escape_left_as_is():
    assert search_url_like("https://x.io/?eid=100%25off", "eid") == "100%off"


@pytest.mark.parametrize("text", ["?eid=xyz&b=2", "#eid=xyz", "  eid=xyz  "])
def test_query_string_forms(text):
    assert search_url_like(text, "eid") == "xyz"


def test_bare_token_counts_as_blank_parameter():
    assert search_url_like("eid&x=1", "eid") == ""


def test_pair_scan_quoted_value_case_insensitive_key():
    assert search_url_like('Ref: EID = "hello world"', "eid") == "hello world"


def test_pair_scan_value_is_decoded():
    assert search_url_like("token; eid: a%2Fb", "eid") == "a/b"


def test_url_no_match():
    assert search_url_like("https://x.io/?a=1", "eid") is ABSENT
    assert search_url_like("nothing here", "eid") is ABSENT


# ─── Generic key:value ────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a|eid=5|b", "5"),
        ('x, eid: "quoted value"', "quoted value"),
        ("x eid='single'", "single"),
        ("EID=5", "5"),
        ("x eid=a%20b", "a%20b"),
    ],
)
def test_key_value_scan(text, expected):
    assert search_key_value(text, "eid") == expected


def test_key_value_scan_requires_delimiter_before_key():
    assert search_key_value("xeid=5", "eid") is ABSENT
