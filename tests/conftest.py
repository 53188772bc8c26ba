"""Shared fixtures for property value finder tests."""

import json
import sys
from pathlib import Path

import pytest

# Add the repository root to the path so tests run without an install
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def nested_json():
    """A JSON document with nested objects, arrays and every scalar type."""
    return json.dumps(
        {
            "eid": "E-1001",
            "count": 3,
            "ratio": 0.75,
            "active": True,
            "deleted": None,
            "user": {"id": 42, "name": "Ada", "tags": ["admin", "ops"]},
            "items": [10, 20, 30],
        }
    )


@pytest.fixture
def log_line():
    """A log line mixing a URL, key=value pairs and a JSON fragment."""
    return (
        '2024-05-01T10:00:00Z INFO request_id=r-77 '
        'url=https://api.example.com/v1/items?eid=abc%20def&page=2 '
        'payload={"eid": "J-9", "retry": false'
    )
