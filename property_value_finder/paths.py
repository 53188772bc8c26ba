from __future__ import annotations

import re
from typing import List

_INDEX_SEGMENT = re.compile(r'[0-9]+')


def split_path(path: str) -> List[str]:
    """Split a dot path into segments.

    Empty segments (leading, trailing or doubled dots) are dropped, so
    'user..id.' and 'user.id' name the same path.
    """
    return [p for p in path.split('.') if p != '']


def is_dotted(key: str) -> bool:
    return '.' in key


def is_index_segment(segment: str) -> bool:
    """True when the segment can address a list element (non-negative integer)."""
    return _INDEX_SEGMENT.fullmatch(segment) is not None
