"""Quiz generation route."""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from quizmo.core.config import settings
from quizmo.services.llm_service.llm import ProviderConfig
from quizmo.services.quiz import Difficulty, GenerationError, GenerationErrorKind, QuizGenerator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")

GENERATION_FAILED_MESSAGE = "Failed to generate quiz. Please try again."


class QuizRequest(BaseModel):
    topic: str = Field(..., max_length=200)
    difficulty: Difficulty = "easy"
    questionCount: int = Field(3, ge=1, le=settings.MAX_QUESTION_COUNT)


@lru_cache(maxsize=1)
def get_quiz_generator() -> QuizGenerator:
    """One generator per process; its chat model is built on first use."""
    config = ProviderConfig.from_settings(settings)
    return QuizGenerator(config=config, timeout=config.timeout)


@router.post("/generate")
async def generate_quiz(
    request: QuizRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
):
    try:
        quiz = await generator.generate(request.topic, request.difficulty, request.questionCount)
    except GenerationError as e:
        if e.kind == GenerationErrorKind.EMPTY_TOPIC:
            return JSONResponse(status_code=400, content={"error": e.message, "kind": e.kind.value})
        logger.error("Quiz generation failed (%s): %s", e.kind.value, e.message)
        return JSONResponse(
            status_code=500,
            content={"error": GENERATION_FAILED_MESSAGE, "kind": e.kind.value},
        )

    return [q.model_dump() for q in quiz]
