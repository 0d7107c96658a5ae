"""JSON extraction from free-text LLM output.

Models wrap their JSON in prose or markdown fences. ``find_json_array``
isolates the first top-level array by bracket counting that skips over
string literals, so a ``[`` or ``]`` inside an option text does not end the
span early.
"""

from __future__ import annotations

from typing import Optional


def find_json_array(text: str) -> Optional[str]:
    """Return the substring from the first ``[`` to its matching ``]``.

    Returns None if there is no ``[`` or it is never closed.
    """
    start = text.find("[")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for pos in range(start, len(text)):
        ch = text[pos]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return text[start:pos + 1]
    return None
