"""Recover JSON payloads from free-form generator text.

Models often wrap JSON in markdown fences or surround it with prose. The
helpers here strip fences, try a direct parse and then fall back to slicing
from the first opening bracket to the last closing bracket. The slice is
taken over the whole text, so a second bracketed region outside the payload
makes the slice unparseable rather than being guessed around.

Both extractors return ``None`` on failure instead of raising so callers can
tell a formatting problem apart from a transport problem.
"""

import json
import re

_FENCE_PATTERN = re.compile(r"```[a-zA-Z]*\n?")


def strip_code_fences(text: str | None) -> str:
    """Remove markdown code fence markers and surrounding whitespace."""
    if not text:
        return ""
    return _FENCE_PATTERN.sub("", str(text)).replace("```", "").strip()


def extract_json_array(text: str | None) -> list[object] | None:
    """Return the first JSON array embedded in ``text``, or ``None``."""
    parsed = _extract(text, "[", "]")
    if isinstance(parsed, list):
        return parsed
    return None


def extract_json_object(text: str | None) -> dict[str, object] | None:
    """Return the first JSON object embedded in ``text``, or ``None``."""
    parsed = _extract(text, "{", "}")
    if isinstance(parsed, dict):
        return parsed
    return None


def _extract(text: str | None, opening: str, closing: str) -> object | None:
    cleaned = strip_code_fences(text)
    if not cleaned:
        return None

    expected = list if opening == "[" else dict
    direct = _loads(cleaned)
    if isinstance(direct, expected):
        return direct

    start = cleaned.find(opening)
    end = cleaned.rfind(closing)
    if start == -1 or end <= start:
        return None
    return _loads(cleaned[start : end + 1])


def _loads(candidate: str) -> object | None:
    try:
        return json.loads(candidate)
    except ValueError:
        return None
