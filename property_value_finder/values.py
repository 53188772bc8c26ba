from __future__ import annotations

import math
from typing import Any, Optional, Union


class _Absent:
    """Marker for "no value found", kept apart from JSON null (``None``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'ABSENT'

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def coerce_number(literal: str) -> Union[int, float, str]:
    """Parse a numeric literal made of digits, '.' and '-'.

    Integer literals become ``int``, everything else that parses becomes
    ``float``. Literals such as '1.2.3' or '-' are returned unchanged.
    """
    try:
        return int(literal)
    except ValueError:
        pass
    try:
        return float(literal)
    except ValueError:
        return literal


def format_value(value: Any) -> Optional[str]:
    """Render an extracted value for display. Returns None for ABSENT."""
    if value is ABSENT:
        return None
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return 'NaN'
        return 'Infinity' if value > 0 else '-Infinity'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return ''
