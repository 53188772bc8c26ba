"""Core logic for Property Value Finder.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse pasted text as JSON, URL or query strings
- resolve dot-path keys against parsed JSON
- fall back to key=value / key: value scanning
- format found values for display
"""

from .extractor import ExtractionResult, extract_value, find_value
from .values import ABSENT

__all__ = ["ABSENT", "ExtractionResult", "extract_value", "find_value"]
