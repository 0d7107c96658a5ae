from quizmo.services.history.errors import HistoryError, HistoryErrorKind
from quizmo.services.history.service import (
    Pagination,
    compute_percentage,
    delete_all,
    delete_one,
    list_history,
    record_result,
)

__all__ = [
    "HistoryError",
    "HistoryErrorKind",
    "Pagination",
    "compute_percentage",
    "delete_all",
    "delete_one",
    "list_history",
    "record_result",
]
