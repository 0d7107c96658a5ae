"""Quiz generation from a topic via a single LLM call.

Pipeline: prompt -> one provider call -> JSON array extraction -> parse ->
structural validation. Every failure is terminal for the call and raised as
a ``GenerationError``; nothing is retried or repaired.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from quizmo.prompts import get_quiz_prompt
from quizmo.services.llm_service.json_extractor import find_json_array
from quizmo.services.llm_service.llm import ProviderConfig, build_chat_model
from quizmo.services.quiz.errors import GenerationError, GenerationErrorKind
from quizmo.services.quiz.schemas import QuizQuestion

logger = logging.getLogger(__name__)


def _response_text(response: Any) -> str:
    """Pull the text out of a chat model response.

    Gemini may return ``content`` as a list of parts instead of a string.
    """
    content = getattr(response, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        if parts:
            return "".join(parts)
    raise GenerationError(
        GenerationErrorKind.PROVIDER_FAILURE,
        f"Provider returned no text content ({type(response).__name__})",
    )


def validate_quiz(data: Any, question_count: int) -> List[QuizQuestion]:
    """Check the parsed payload and return it as QuizQuestion objects.

    Raises:
        GenerationError: WRONG_LENGTH, INVALID_QUESTION or
            ANSWER_NOT_IN_OPTIONS for the first offending question.
    """
    if not isinstance(data, list) or len(data) != question_count:
        got = len(data) if isinstance(data, list) else type(data).__name__
        raise GenerationError(
            GenerationErrorKind.WRONG_LENGTH,
            f"Expected {question_count} questions, got {got}",
        )

    questions: List[QuizQuestion] = []
    for index, item in enumerate(data):
        try:
            question = QuizQuestion.model_validate(item)
        except ValidationError as exc:
            raise GenerationError(
                GenerationErrorKind.INVALID_QUESTION,
                f"Question {index + 1} has invalid structure: {exc.error_count()} error(s)",
                index=index,
            ) from exc
        if question.answer not in question.options:
            raise GenerationError(
                GenerationErrorKind.ANSWER_NOT_IN_OPTIONS,
                f"Question {index + 1} answer is not in options",
                index=index,
            )
        questions.append(question)
    return questions


def parse_quiz(text: str, question_count: int) -> List[QuizQuestion]:
    """Extract, parse and validate a quiz from raw model text."""
    snippet = find_json_array(text)
    if snippet is None:
        raise GenerationError(GenerationErrorKind.NO_JSON_FOUND, "No valid JSON found in response")

    try:
        data = json.loads(snippet)
    except json.JSONDecodeError as exc:
        raise GenerationError(
            GenerationErrorKind.MALFORMED_JSON,
            f"Could not parse quiz JSON: {exc.msg} at position {exc.pos}",
        ) from exc

    return validate_quiz(data, question_count)


class QuizGenerator:
    """Turns a topic/difficulty/count into a validated quiz.

    Args:
        llm: a LangChain chat model (anything with ``async ainvoke(prompt)``).
        timeout: seconds to wait for the provider before failing.
        config: provider settings used to build ``llm`` on first use when
            no model is passed in.
    """

    def __init__(self, llm: Any = None, timeout: float = 30, config: Optional[ProviderConfig] = None):
        if llm is None and config is None:
            raise ValueError("QuizGenerator needs either an llm or a provider config")
        self.llm = llm
        self.timeout = timeout
        self.config = config

    def _chat_model(self) -> Any:
        if self.llm is None:
            self.llm = build_chat_model(self.config)
        return self.llm

    async def generate(self, topic: str, difficulty: str, question_count: int) -> List[QuizQuestion]:
        if not topic or not topic.strip():
            raise GenerationError(GenerationErrorKind.EMPTY_TOPIC, "Topic is required")
        if question_count <= 0:
            raise GenerationError(
                GenerationErrorKind.WRONG_LENGTH,
                f"Question count must be positive, got {question_count}",
            )

        prompt = get_quiz_prompt(topic.strip(), question_count, difficulty)
        logger.info("Generating %d %s questions on %r", question_count, difficulty, topic)

        try:
            llm = self._chat_model()
            response = await asyncio.wait_for(llm.ainvoke(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Quiz provider timed out after %ss", self.timeout)
            raise GenerationError(
                GenerationErrorKind.PROVIDER_FAILURE,
                f"Provider did not respond within {self.timeout}s",
            ) from exc
        except Exception as exc:
            logger.error("Quiz provider call failed: %s: %s", type(exc).__name__, exc)
            raise GenerationError(
                GenerationErrorKind.PROVIDER_FAILURE,
                f"Provider call failed: {type(exc).__name__}",
            ) from exc

        text = _response_text(response)
        try:
            quiz = parse_quiz(text, question_count)
        except GenerationError as exc:
            logger.warning("Quiz output rejected (%s): %s | raw=%r", exc.kind.value, exc.message, text[:500])
            raise

        logger.info("Generated %d questions on %r", len(quiz), topic)
        return quiz
