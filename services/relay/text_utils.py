"""Helpers for cleaning up model-generated text."""

import json
import math
import re
from typing import Optional

_MARKDOWN_PASSES = [
    (re.compile(r"```.*?```", re.DOTALL), ""),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    (re.compile(r"^>\s?", re.MULTILINE), ""),
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\[(.*?)\]\((.*?)\)"), r"\1"),
]


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"{literal} is out of range")
    return value


def loads_strict(data):
    """json.loads that rejects NaN, Infinity and numbers too large for a float."""
    return json.loads(data, parse_constant=_reject_constant, parse_float=_finite_float)


def extract_first_json_object(text) -> Optional[str]:
    """
    Pull a JSON object out of text that wraps it in prose or formatting.

    Candidates all start at the first "{" and end at some "}", tried from the
    longest to the shortest. The first one that parses is returned in compact
    form. If none of them parse, None is returned; later "{" are never tried.
    """
    if not isinstance(text, str):
        return None
    start = text.find("{")
    if start == -1:
        return None

    for end in range(len(text) - 1, start - 1, -1):
        if text[end] != "}":
            continue
        try:
            parsed = loads_strict(text[start:end + 1])
        except ValueError:
            continue
        return json.dumps(parsed, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return None


def strip_markdown(text) -> str:
    if not isinstance(text, str):
        return ""
    for pattern, replacement in _MARKDOWN_PASSES:
        text = pattern.sub(replacement, text)
    return text.strip()
