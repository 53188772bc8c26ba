"""Value lookup strategies.

Each strategy is a pure function ``(text, key) -> value | ABSENT``. Parse
failures stay inside the strategy and come back as ABSENT so the caller can
move on to the next one.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Tuple
from urllib.parse import parse_qsl, urlsplit

from .accessors import lookup_field, resolve_path
from .paths import is_dotted
from .patterns import (
    decode_component,
    first_group,
    json_member_pattern,
    key_value_pattern,
    query_pair_pattern,
)
from .values import ABSENT, coerce_number, is_scalar

Strategy = Callable[[str, str], Any]


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json_strict(text: str) -> Any:
    """Parse the whole text as JSON, or return ABSENT."""
    stripped = text.strip()
    if not stripped:
        return ABSENT
    try:
        return json.loads(stripped, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return ABSENT


def search_json_like(text: str, key: str) -> Any:
    parsed = parse_json_strict(text)
    if parsed is not ABSENT:
        if is_dotted(key):
            val = resolve_path(parsed, key)
        else:
            val = lookup_field(parsed, key)
        if is_scalar(val):
            return val

    # Strict parse failed or only found a composite: scan for "key": value.
    match = json_member_pattern(key).search(text)
    if match is None:
        return ABSENT
    double_quoted, single_quoted, number, boolean = match.groups()
    if double_quoted is not None:
        return double_quoted
    if single_quoted is not None:
        return single_quoted
    if number is not None:
        return coerce_number(number)
    if boolean is not None:
        return boolean.lower() == 'true'
    return None


def query_param(query: str, key: str) -> Any:
    """First value of `key` in a query string, blank values included."""
    for name, value in parse_qsl(query, keep_blank_values=True):
        if name == key:
            return value
    return ABSENT


def url_query_param(text: str, key: str) -> Any:
    """Look `key` up in the query of a complete URL; ABSENT if text is not one."""
    try:
        parts = urlsplit(text)
    except ValueError:
        return ABSENT
    if not parts.scheme:
        return ABSENT
    return query_param(parts.query, key)


def search_url_like(text: str, key: str) -> Any:
    trimmed = text.strip()

    val = url_query_param(trimmed, key)
    if val is not ABSENT:
        return decode_component(val)

    raw = trimmed[1:] if trimmed[:1] in ('?', '#') else trimmed
    val = query_param(raw, key)
    if val is not ABSENT:
        return decode_component(val)

    match = query_pair_pattern(key).search(raw)
    if match:
        return decode_component(first_group(match, 2, 3, 4))
    return ABSENT


def search_key_value(text: str, key: str) -> Any:
    match = key_value_pattern(key).search(text)
    if match:
        return first_group(match, 2, 3, 4)
    return ABSENT


# Structured formats first; the free-text scan is the last resort.
STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ('json', search_json_like),
    ('url', search_url_like),
    ('key_value', search_key_value),
)
