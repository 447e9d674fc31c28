# ─────────────────────────────────────────────────────────────────────────────
# Response Decoding — model text → JSON object
# ─────────────────────────────────────────────────────────────────────────────
# Two stages, each usable on its own:
#   1. parse_strict: the whole text is a JSON object (JSON mode, happy path)
#   2. extract_braced_object: the object is wrapped in prose or ``` fences
# ─────────────────────────────────────────────────────────────────────────────

import json
from typing import Any

from soundgarden.exceptions import ResponseDecodeError


class _NotAnObject(ValueError):
    pass


def parse_strict(text: str) -> dict[str, Any]:
    """Parse text as exactly one JSON object.

    Raises ValueError (json.JSONDecodeError included) when the text is not
    JSON, nests too deeply to decode, or decodes to something other than
    an object.
    """
    try:
        parsed = json.loads(text.strip())
    except RecursionError as e:
        raise ValueError("JSON nested too deeply to decode") from e
    if not isinstance(parsed, dict):
        raise _NotAnObject(f"expected a JSON object, got {type(parsed).__name__}")
    return parsed


def extract_braced_object(text: str) -> str | None:
    """Return the largest balanced top-level {...} region of text, if any.

    Braces inside JSON string literals are ignored. On a tie the earliest
    region wins. Unbalanced trailing regions are discarded.
    """
    best: tuple[int, int] | None = None
    depth = 0
    start = -1
    in_string = False
    escaped = False

    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"' and depth > 0:
            in_string = True
        elif ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0 and (best is None or i + 1 - start > best[1] - best[0]):
                best = (start, i + 1)

    if best is None:
        return None
    return text[best[0] : best[1]]


def decode_object(text: str, *, kind: str) -> dict[str, Any]:
    """Strict parse, then brace extraction. Raises ResponseDecodeError if both fail."""
    try:
        return parse_strict(text)
    except ValueError:
        pass

    region = extract_braced_object(text)
    if region is None:
        raise ResponseDecodeError(kind, "no JSON object found in completion response")
    try:
        return parse_strict(region)
    except ValueError as e:
        raise ResponseDecodeError(kind, f"completion response held malformed JSON: {e}") from e
