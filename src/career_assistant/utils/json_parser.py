"""Utility to extract JSON from LLM responses."""

from __future__ import annotations

import json
import math
import re

_FENCE_RE = re.compile(r"```(?:json|JSON)?[ \t]*\n(.*?)\n?[ \t]*```", re.DOTALL)


def extract_json(text: str) -> dict | list:
    """Extract a JSON object or array from generated text.

    Tries in order:
    1. The body of the first fenced code block (```json or bare ```)
    2. The whole text
    3. The outermost {...} or [...] span, whichever opens first

    Raises ValueError when none of these parse.
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected text, got {type(text).__name__}")
    text = text.strip()

    fenced = _FENCE_RE.search(text)
    if fenced:
        body = fenced.group(1).strip()
        try:
            return _loads_container(body)
        except ValueError:
            span = _outermost_span(body)
            if span is not None:
                return span

    try:
        return _loads_container(text)
    except ValueError:
        pass

    span = _outermost_span(text)
    if span is not None:
        return span

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def _reject_non_finite(token: str) -> float:
    raise ValueError(f"Non-finite number {token!r} is not valid JSON")


def _finite_float(token: str) -> float:
    number = float(token)
    if not math.isfinite(number):
        raise ValueError(f"Number {token!r} is out of range")
    return number


def _loads_container(text: str) -> dict | list:
    try:
        value = json.loads(
            text, parse_constant=_reject_non_finite, parse_float=_finite_float
        )
    except json.JSONDecodeError as e:
        raise ValueError(str(e)) from e
    if not isinstance(value, (dict, list)):
        raise ValueError(f"Expected a JSON object or array, got {type(value).__name__}")
    return value


def _outermost_span(text: str) -> dict | list | None:
    """Parse from the first opening brace/bracket to its last closing partner."""
    openers = [(text.find(o), o, c) for o, c in (("{", "}"), ("[", "]"))]
    openers = sorted((i, o, c) for i, o, c in openers if i != -1)
    for start, _, closer in openers:
        end = text.rfind(closer)
        if end > start:
            try:
                return _loads_container(text[start : end + 1])
            except ValueError:
                continue
    return None
