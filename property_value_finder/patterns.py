from __future__ import annotations

import re
from functools import lru_cache
from typing import Pattern
from urllib.parse import unquote

# A '%' that does not start a two-digit hex escape.
_MALFORMED_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


@lru_cache(maxsize=256)
def json_member_pattern(key: str) -> Pattern:
    """Match `"key": value` inside JSON-ish text.

    Groups: 1 double-quoted, 2 single-quoted, 3 numeric, 4 boolean.
    A match with no group set is the bare `null` literal.
    """
    return re.compile(
        '"' + re.escape(key) + '"'
        r'\s*:\s*'
        r'''(?:"([^"]+)"|'([^']+)'|([-0-9.]+)|((?i:true|false))|null)'''
    )


@lru_cache(maxsize=256)
def query_pair_pattern(key: str) -> Pattern:
    """Match `key=value` / `key: value` between query-style delimiters.

    Groups: 2 double-quoted, 3 single-quoted, 4 unquoted.
    """
    return re.compile(
        r'(?:^|[?&;,\s])' + re.escape(key) +
        r'''\s*(?:=|:)\s*("([^"]+)"|'([^']+)'|([^\s&;,]+))''',
        re.IGNORECASE,
    )


@lru_cache(maxsize=256)
def key_value_pattern(key: str) -> Pattern:
    """Match `key=value` / `key: value` anywhere in free text.

    Groups: 2 double-quoted, 3 single-quoted, 4 unquoted.
    """
    return re.compile(
        r'(?:^|[\s,;|])' + re.escape(key) +
        r'''\s*(?:=|:)\s*("([^"]+)"|'([^']+)'|([^\s,;|]+))''',
        re.IGNORECASE,
    )


def first_group(match, *groups: int):
    for group in groups:
        value = match.group(group)
        if value:
            return value
    return None


def decode_component(value: str) -> str:
    """Percent-decode a URI component; return it unchanged if it is malformed."""
    if _MALFORMED_ESCAPE.search(value):
        return value
    try:
        return unquote(value, errors='strict')
    except UnicodeDecodeError:
        return value
