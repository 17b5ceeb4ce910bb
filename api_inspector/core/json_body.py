"""
JSON Body Helpers — Tagged view and bounded walks over parsed JSON bodies.

Parsed bodies are plain Python JSON values (None, bool, int, float, str,
list, dict). JsonKind names those tags; bool is classified before number
because bool is an int subclass.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Union

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

# Hard stop for recursive walks on adversarial input
MAX_WALK_DEPTH = 64

# Records inspected per endpoint by body checks
RECORDS_PER_ENDPOINT = 3

ENVELOPE_KEYS = ("data", "items", "results")

_CAMEL_RE = re.compile(r"^[a-z]+(?:[A-Z][a-z0-9]*)+$")
_SNAKE_RE = re.compile(r"^[a-z]+(?:_[a-z0-9]+)+$")
_SEPARATOR_RE = re.compile(r"[-_.]")
_WORD_RE = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?![a-z])|\d+")


class JsonKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def nesting_depth(value: JsonValue, limit: int = MAX_WALK_DEPTH) -> int:
    """
    Container nesting depth: scalars are 0, a flat object or array is 1.

    The walk stops descending at `limit`, so the result never exceeds it.
    """
    return _depth(value, 0, limit)


def _depth(value: JsonValue, level: int, limit: int) -> int:
    if level >= limit:
        return limit
    if isinstance(value, dict):
        children = value.values()
    elif isinstance(value, list):
        children = value
    else:
        return 0
    deepest = 0
    for child in children:
        deepest = max(deepest, _depth(child, level + 1, limit))
    return min(limit, 1 + deepest)


def truncate_sample(body: JsonValue, max_items: int) -> tuple[JsonValue, int | None]:
    """Keep the first max_items of a top-level array; returns (sample, full length)."""
    if isinstance(body, list):
        return body[:max_items], len(body)
    return body, None


def sample_records(body: JsonValue, limit: int = RECORDS_PER_ENDPOINT) -> list[dict[str, Any]]:
    """
    Objects to inspect from a body sample.

    First `limit` objects of a collection, the single object itself, or the
    objects of a list wrapped under a common envelope key.
    """
    if isinstance(body, list):
        return [item for item in body[:limit] if isinstance(item, dict)]
    if isinstance(body, dict):
        for key in ENVELOPE_KEYS:
            wrapped = body.get(key)
            if isinstance(wrapped, list) and wrapped and all(isinstance(i, dict) for i in wrapped):
                return wrapped[:limit]
        return [body]
    return []


def is_bare_collection(body: JsonValue) -> bool:
    return isinstance(body, list)


def key_convention(key: str) -> str | None:
    """'camel', 'snake', or None for single-word and other keys."""
    if _CAMEL_RE.match(key):
        return "camel"
    if _SNAKE_RE.match(key):
        return "snake"
    return None


def field_tokens(name: str) -> list[str]:
    """Lower-cased words of a field or path segment, split on -, _, . and camelCase."""
    words: list[str] = []
    for part in _SEPARATOR_RE.split(name):
        words.extend(w.lower() for w in _WORD_RE.findall(part))
    return words
