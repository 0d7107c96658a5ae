"""Quiz history routes: save, list, delete."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, model_validator

from quizmo.core.config import settings
from quizmo.services.auth import get_current_user
from quizmo.services import history as history_service
from quizmo.services.history import HistoryError, HistoryErrorKind
from quizmo.services.quiz import Difficulty

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/history")


class SaveHistoryRequest(BaseModel):
    topic: str = Field(..., min_length=1, max_length=200)
    difficulty: Difficulty
    questionCount: int = Field(..., gt=0)
    score: int = Field(..., ge=0)
    totalQuestions: int = Field(..., gt=0)

    @model_validator(mode="after")
    def _score_within_total(self):
        if self.score > self.totalQuestions:
            raise ValueError("score cannot exceed totalQuestions")
        return self


class HistoryRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    userId: str
    topic: str
    difficulty: str
    questionCount: int
    score: int
    totalQuestions: int
    percentage: int
    createdAt: datetime


def _serialize(record) -> dict:
    return HistoryRecordResponse.model_validate(record).model_dump(mode="json")


def _failure(error: str, e: HistoryError) -> JSONResponse:
    """Render a service failure; *error* is the code used for store failures."""
    if e.kind == HistoryErrorKind.INVALID_RESULT:
        code, error = 400, "VALIDATION_ERROR"
    else:
        code = 500
    return JSONResponse(status_code=code, content={"success": False, "error": error, "message": e.message})


@router.post("", status_code=status.HTTP_201_CREATED)
async def save_history(request: SaveHistoryRequest, current_user=Depends(get_current_user)):
    try:
        record = await history_service.record_result(
            user_id=str(current_user.id),
            topic=request.topic,
            difficulty=request.difficulty,
            question_count=request.questionCount,
            score=request.score,
            total_questions=request.totalQuestions,
        )
    except HistoryError as e:
        return _failure("SAVE_FAILED", e)

    return {
        "success": True,
        "message": "Quiz result saved successfully",
        "data": _serialize(record),
    }


@router.get("")
async def get_history(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.HISTORY_PAGE_SIZE, ge=1, le=100),
    current_user=Depends(get_current_user),
):
    try:
        records, pagination = await history_service.list_history(str(current_user.id), page, limit)
    except HistoryError as e:
        return _failure("FETCH_FAILED", e)

    return {
        "success": True,
        "data": [_serialize(r) for r in records],
        "pagination": pagination.model_dump(),
    }


@router.delete("")
async def delete_all_history(current_user=Depends(get_current_user)):
    try:
        removed = await history_service.delete_all(str(current_user.id))
    except HistoryError as e:
        return _failure("DELETE_ALL_FAILED", e)

    return {"success": True, "message": "All quiz history deleted.", "deletedCount": removed}


@router.delete("/{history_id}")
async def delete_history_entry(history_id: str, current_user=Depends(get_current_user)):
    try:
        deleted = await history_service.delete_one(str(current_user.id), history_id)
    except HistoryError as e:
        return _failure("DELETE_ONE_FAILED", e)

    if not deleted:
        return JSONResponse(
            status_code=404,
            content={
                "success": False,
                "error": HistoryErrorKind.NOT_FOUND.value,
                "message": "History entry not found or not authorized.",
            },
        )
    return {"success": True, "message": "Quiz history entry deleted."}
