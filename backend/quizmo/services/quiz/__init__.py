from quizmo.services.quiz.errors import GenerationError, GenerationErrorKind
from quizmo.services.quiz.generator import QuizGenerator, parse_quiz, validate_quiz
from quizmo.services.quiz.schemas import Difficulty, QuizQuestion

__all__ = [
    "Difficulty",
    "GenerationError",
    "GenerationErrorKind",
    "QuizGenerator",
    "QuizQuestion",
    "parse_quiz",
    "validate_quiz",
]
