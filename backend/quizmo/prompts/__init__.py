"""Prompt template loader.

Each ``get_*_prompt`` function loads a ``.txt`` template from this
package directory and substitutes placeholders.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Dict

_DIR = os.path.dirname(__file__)

DIFFICULTY_INSTRUCTIONS: Dict[str, str] = {
    "easy": (
        "Make the questions basic and suitable for beginners. "
        "Use simple vocabulary and straightforward concepts."
    ),
    "medium": (
        "Make the questions moderately challenging with some complexity. "
        "Require basic to intermediate knowledge."
    ),
    "hard": (
        "Make the questions challenging and complex. Include advanced concepts, "
        "detailed knowledge, and nuanced understanding."
    ),
}


@lru_cache(maxsize=8)
def _load(filename: str) -> str:
    """Read a template file, caching the result."""
    with open(os.path.join(_DIR, filename), encoding="utf-8") as f:
        return f.read()


def _render(filename: str, subs: Dict[str, str]) -> str:
    """Load *filename* and apply all substitutions."""
    text = _load(filename)
    for key, val in subs.items():
        text = text.replace(key, val)
    return text


# ── Public helpers ────────────────────────────────────────


def get_quiz_prompt(topic: str, question_count: int, difficulty: str = "easy") -> str:
    instructions = DIFFICULTY_INSTRUCTIONS.get(difficulty, DIFFICULTY_INSTRUCTIONS["easy"])
    return _render("quiz_prompt.txt", {
        "{{QUESTION_COUNT}}": str(question_count),
        "{{DIFFICULTY_LABEL}}": difficulty.upper(),
        "{{DIFFICULTY_INSTRUCTIONS}}": instructions,
        "{{DIFFICULTY}}": difficulty,
        "{{TOPIC}}": topic,
    })
