from enum import Enum


class HistoryErrorKind(str, Enum):
    INVALID_RESULT = "INVALID_RESULT"
    NOT_FOUND = "NOT_FOUND"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


class HistoryError(Exception):
    """Quiz history operation failed."""

    def __init__(self, kind: HistoryErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
