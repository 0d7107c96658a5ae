"""Pydantic schemas for validating quiz questions returned by the LLM."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Difficulty = Literal["easy", "medium", "hard"]

OPTION_COUNT = 4


class QuizQuestion(BaseModel):
    model_config = ConfigDict(strict=True)

    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    answer: str = Field(min_length=1)

    @field_validator("question", "answer")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("options")
    @classmethod
    def _distinct_options(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("options must be distinct")
        return v
