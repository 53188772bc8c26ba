"""Exceptions raised inside the extractor.

None of these reach callers of ``find_value``/``extract_value``; the
orchestrator turns them into an ABSENT result that carries the error message.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class PropertyFinderError(Exception):
    """Base exception for property extraction faults."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(PropertyFinderError):
    """An argument that should be text is not a string."""

    def __init__(self, argument: str, value: Any) -> None:
        message = f"{argument} must be a string, got {type(value).__name__}"
        super().__init__(message, {"argument": argument, "type": type(value).__name__})
