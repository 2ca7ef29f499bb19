"""JSON helpers for tool output."""

import json
from typing import Any


def compact_json(value: Any) -> str:
    """
    Serialize a value to minified JSON.

    Tool output ends up in the agent's context window, so separators carry no
    whitespace. Raises TypeError for values json cannot encode.
    """
    return json.dumps(value, separators=(",", ":"), default=_encode_default)


def _encode_default(value: Any) -> Any:
    # pydo returns plain JSON types, but some models expose as_dict()
    as_dict = getattr(value, "as_dict", None)
    if callable(as_dict):
        return as_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
