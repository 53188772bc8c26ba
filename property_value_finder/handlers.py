from __future__ import annotations

from typing import Optional, Tuple

import gradio as gr
import structlog

from .config import Settings, get_settings
from .extractor import find_value
from .values import format_value

logger = structlog.get_logger(__name__)

NO_MATCH_MESSAGE = "No match found."
SEARCH_ERROR_MESSAGE = "An error occurred while searching."
TOO_LARGE_MESSAGE = "Input is too large to search."

# Runs in the browser; its return value is handed to paste_handler.
READ_CLIPBOARD_JS = """
async (current) => {
    try {
        return await navigator.clipboard.readText();
    } catch (e) {
        console.log("Clipboard read failed:", e.message);
        return null;
    }
}
"""


def search_handler(raw: str, key: str, settings: Optional[Settings] = None) -> Tuple[Optional[str], str]:
    """Recompute the displayed value and status message for the current inputs."""
    settings = settings or get_settings()
    if not raw or not raw.strip():
        return None, ""

    if len(raw) > settings.max_input_chars:
        logger.warning("Input exceeds size limit", input_length=len(raw), limit=settings.max_input_chars)
        return None, TOO_LARGE_MESSAGE

    result = find_value(raw, (key or "").strip())
    if result.failed:
        return None, SEARCH_ERROR_MESSAGE
    if not result.found:
        return None, NO_MATCH_MESSAGE
    return format_value(result.value), ""


def paste_handler(clipboard_text: Optional[str]):
    if clipboard_text is None:
        return gr.update(), "Unable to read from clipboard. Check permissions."
    if not clipboard_text:
        return gr.update(), "Clipboard is empty."
    return clipboard_text, "Pasted from clipboard."


def clear_handler():
    return "", None, "Cleared."
