from __future__ import annotations

from typing import Any

from .paths import is_index_segment, split_path
from .values import ABSENT


def resolve_path(data: Any, path: str) -> Any:
    """Retrieve a value from parsed JSON using a dot-notation path.

    Mapping segments are looked up as keys, list segments must be
    non-negative integer indexes. Returns ABSENT when any step fails;
    never raises. The root has to be a mapping.
    """
    if not isinstance(data, dict):
        return ABSENT

    val = data
    for segment in split_path(path):
        if val is None:
            return ABSENT

        if isinstance(val, list):
            if not is_index_segment(segment):
                return ABSENT
            index = int(segment)
            if index >= len(val):
                return ABSENT
            val = val[index]
        elif isinstance(val, dict):
            if segment not in val:
                return ABSENT
            val = val[segment]
        else:
            return ABSENT

    return val


def lookup_field(data: Any, key: str) -> Any:
    """Top-level field lookup; only mappings have fields."""
    if isinstance(data, dict):
        return data.get(key, ABSENT)
    return ABSENT
