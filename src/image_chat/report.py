from __future__ import annotations

import json
from typing import Any, List

from .response.decoder import (
    Choice,
    Failure,
    PartsContent,
    UnknownContent,
    extract_text,
)

NO_CHOICES_WARNING = "No choices returned."
NO_TEXT_PARTS = "No text parts found."


def _to_json(value: Any, indent: int = 2) -> str:
    return json.dumps(value, indent=indent, default=str, ensure_ascii=False)


def format_failure(failure: Failure) -> List[str]:
    """
    Lines describing a non-success response, structured when possible:

      Request failed: 401
      Error code: Unauthorized
      Message: bad token
      Details:
       - {...}

    Without an error object the raw body is dumped instead.
    """
    lines: List[str] = [f"Request failed: {failure.status}"]

    err = failure.error
    if err is None:
        raw = failure.raw_body
        lines.append(f"Raw body: {raw if isinstance(raw, str) else _to_json(raw)}")
        return lines

    lines.append(f"Error code: {err.code}")
    lines.append(f"Message: {err.message}")
    if err.details is not None:
        lines.append("Details:")
        for d in err.details:
            lines.append(f" - {_to_json(d)}")

    return lines


def format_choice(choice: Choice) -> str:
    """Text to print for the first choice."""
    content = choice.content
    if isinstance(content, UnknownContent):
        return f"Unexpected content format: {_to_json(content.value, indent=None)}"

    text = extract_text(content) or ""
    if isinstance(content, PartsContent) and not text:
        return NO_TEXT_PARTS
    return text
