"""Typed failures of the quiz generation pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class GenerationErrorKind(str, Enum):
    EMPTY_TOPIC = "EMPTY_TOPIC"
    PROVIDER_FAILURE = "PROVIDER_FAILURE"
    NO_JSON_FOUND = "NO_JSON_FOUND"
    MALFORMED_JSON = "MALFORMED_JSON"
    WRONG_LENGTH = "WRONG_LENGTH"
    INVALID_QUESTION = "INVALID_QUESTION"
    ANSWER_NOT_IN_OPTIONS = "ANSWER_NOT_IN_OPTIONS"


class GenerationError(Exception):
    """Raised when a quiz cannot be produced.

    ``index`` is the zero-based position of the offending question for
    INVALID_QUESTION and ANSWER_NOT_IN_OPTIONS, otherwise None.
    """

    def __init__(self, kind: GenerationErrorKind, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.index = index

    def __repr__(self) -> str:
        return f"GenerationError(kind={self.kind.value}, index={self.index}, message={self.message!r})"
