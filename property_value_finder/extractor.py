from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import structlog

from .errors import InvalidInputError
from .strategies import STRATEGIES
from .values import ABSENT

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of one lookup.

    `value` is ABSENT when nothing matched, `strategy` names the strategy
    that produced the value and `error` is set only for internal faults.
    """
    value: Any = ABSENT
    strategy: Optional[str] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.value is not ABSENT

    @property
    def failed(self) -> bool:
        return self.error is not None


def _require_text(argument: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidInputError(argument, value)


def find_value(text: str, key: str) -> ExtractionResult:
    """Run the strategies in order and return the first match.

    Never raises: unexpected faults are logged and reported through
    ``ExtractionResult.error`` with an ABSENT value.
    """
    try:
        _require_text('text', text)
        _require_text('key', key)
        if not key.strip():
            return ExtractionResult()

        for name, strategy in STRATEGIES:
            value = strategy(text, key)
            if value is not ABSENT:
                logger.debug("Property value found", key=key, strategy=name, input_length=len(text))
                return ExtractionResult(value=value, strategy=name)
    except Exception as e:
        logger.exception("Property extraction failed", key=key, error=str(e))
        return ExtractionResult(error=str(e))

    logger.debug("No match found", key=key, input_length=len(text))
    return ExtractionResult()


def extract_value(text: str, key: str) -> Any:
    """Return the value of `key` in `text`: a scalar, None for JSON null, or ABSENT."""
    return find_value(text, key).value
