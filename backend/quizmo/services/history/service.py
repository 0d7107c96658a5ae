"""Quiz history persistence with a fixed per-user retention window.

Every successful ``record_result`` inserts one row and then deletes
everything beyond the newest ``HISTORY_RETENTION_LIMIT`` rows for that user,
in the same transaction.
"""

import asyncio
import logging
import math
import weakref
from typing import List, Optional, Tuple

from prisma.errors import PrismaError
from pydantic import BaseModel

from quizmo.core.config import settings
from quizmo.db.prisma_client import get_prisma
from quizmo.services.history.errors import HistoryError, HistoryErrorKind

logger = logging.getLogger(__name__)

# Serializes insert-and-trim per user within this process
_user_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

# seq breaks createdAt ties
NEWEST_FIRST = [{"createdAt": "desc"}, {"seq": "desc"}]


class Pagination(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    hasNext: bool
    hasPrev: bool


def _lock_for(user_id: str) -> asyncio.Lock:
    lock = _user_locks.get(user_id)
    if lock is None:
        lock = asyncio.Lock()
        _user_locks[user_id] = lock
    return lock


def compute_percentage(score: int, total_questions: int) -> int:
    """Percentage rounded half up (12.5 -> 13)."""
    return math.floor(score * 100 / total_questions + 0.5)


async def record_result(
    user_id: str,
    topic: str,
    difficulty: str,
    question_count: int,
    score: int,
    total_questions: int,
):
    """Persist a graded quiz attempt and trim the user's history.

    Returns:
        The created QuizHistory record.

    Raises:
        HistoryError: INVALID_RESULT for impossible totals/scores,
            PERSISTENCE_FAILURE when the store is unavailable.
    """
    if total_questions <= 0:
        raise HistoryError(HistoryErrorKind.INVALID_RESULT, "totalQuestions must be greater than 0")
    if question_count <= 0:
        raise HistoryError(HistoryErrorKind.INVALID_RESULT, "questionCount must be greater than 0")
    if not 0 <= score <= total_questions:
        raise HistoryError(HistoryErrorKind.INVALID_RESULT, "score must be between 0 and totalQuestions")

    percentage = compute_percentage(score, total_questions)
    limit = settings.HISTORY_RETENTION_LIMIT
    prisma = get_prisma()

    try:
        async with _lock_for(user_id):
            async with prisma.tx() as tx:
                record = await tx.quizhistory.create(
                    data={
                        "userId": user_id,
                        "topic": topic,
                        "difficulty": difficulty,
                        "questionCount": question_count,
                        "score": score,
                        "totalQuestions": total_questions,
                        "percentage": percentage,
                    }
                )
                overflow = await tx.quizhistory.find_many(
                    where={"userId": user_id},
                    order=NEWEST_FIRST,
                    skip=limit,
                )
                if overflow:
                    removed = await tx.quizhistory.delete_many(
                        where={"id": {"in": [h.id for h in overflow]}}
                    )
                    logger.info("Trimmed %d old history entries for user %s", removed, user_id)
    except PrismaError as e:
        logger.error("Failed to save quiz history for user %s: %s", user_id, e)
        raise HistoryError(HistoryErrorKind.PERSISTENCE_FAILURE, "Failed to save quiz result") from e

    logger.info("Saved quiz history %s for user %s (%d%%)", record.id, user_id, percentage)
    return record


async def list_history(user_id: str, page: int = 1, page_size: Optional[int] = None) -> Tuple[List, Pagination]:
    """Return one page of the user's history, newest first, with pagination metadata."""
    if page_size is None:
        page_size = settings.HISTORY_PAGE_SIZE
    if page < 1 or page_size < 1:
        raise ValueError(f"page and page_size must be positive, got {page} and {page_size}")
    skip = (page - 1) * page_size
    prisma = get_prisma()

    try:
        records = await prisma.quizhistory.find_many(
            where={"userId": user_id},
            order=NEWEST_FIRST,
            skip=skip,
            take=page_size,
        )
        total = await prisma.quizhistory.count(where={"userId": user_id})
    except PrismaError as e:
        logger.error("Failed to fetch quiz history for user %s: %s", user_id, e)
        raise HistoryError(HistoryErrorKind.PERSISTENCE_FAILURE, "Failed to fetch quiz history") from e

    pagination = Pagination(
        currentPage=page,
        totalPages=math.ceil(total / page_size),
        totalItems=total,
        hasNext=skip + len(records) < total,
        hasPrev=page > 1,
    )
    return records, pagination


async def delete_one(user_id: str, history_id: str) -> bool:
    """Delete one entry owned by *user_id*. Returns False if none matched."""
    prisma = get_prisma()
    try:
        removed = await prisma.quizhistory.delete_many(
            where={"id": str(history_id), "userId": user_id}
        )
    except PrismaError as e:
        logger.error("Failed to delete quiz history %s for user %s: %s", history_id, user_id, e)
        raise HistoryError(HistoryErrorKind.PERSISTENCE_FAILURE, "Failed to delete quiz history entry") from e

    if not removed:
        return False
    logger.info("Deleted quiz history %s for user %s", history_id, user_id)
    return True


async def delete_all(user_id: str) -> int:
    """Delete every entry owned by *user_id* and return how many were removed."""
    prisma = get_prisma()
    try:
        removed = await prisma.quizhistory.delete_many(where={"userId": user_id})
    except PrismaError as e:
        logger.error("Failed to delete all quiz history for user %s: %s", user_id, e)
        raise HistoryError(HistoryErrorKind.PERSISTENCE_FAILURE, "Failed to delete all quiz history") from e

    logger.info("Deleted %d quiz history entries for user %s", removed, user_id)
    return removed
