from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass(frozen=True)
class TextContent:
    text: str


@dataclass(frozen=True)
class ContentPart:
    type: str
    text: Optional[str] = None


@dataclass(frozen=True)
class PartsContent:
    parts: List[ContentPart] = field(default_factory=list)


@dataclass(frozen=True)
class UnknownContent:
    value: Any


MessageContent = Union[TextContent, PartsContent, UnknownContent]


@dataclass(frozen=True)
class Choice:
    index: int
    content: MessageContent
    finish_reason: Optional[str] = None


@dataclass(frozen=True)
class ErrorInfo:
    code: Any
    message: Any
    details: Optional[List[Any]] = None  # only set when the body carries a list


@dataclass(frozen=True)
class Success:
    status: int
    choices: List[Choice] = field(default_factory=list)


@dataclass(frozen=True)
class Failure:
    status: int
    error: Optional[ErrorInfo]
    raw_body: Any = None


ChatResponse = Union[Success, Failure]


def normalize_status(status: Union[int, str]) -> int:
    """Status codes come back as "200" from some clients and 200 from others."""
    try:
        return int(str(status).strip())
    except ValueError:
        raise ValueError(f"Invalid HTTP status: {status!r}") from None


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


def decode_body(raw: Union[str, bytes, None]) -> Any:
    """
    Parse a JSON body, falling back to the raw text when it is not JSON.
    """
    if raw is None:
        return None
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not raw.strip():
        return raw
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _part_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def decode_content(value: Any) -> MessageContent:
    """
    Message content is either a plain string or a list of typed parts.
    """
    if isinstance(value, str):
        return TextContent(text=value)
    if isinstance(value, list):
        parts = [
            ContentPart(type=str(p.get("type", "")), text=_part_text(p.get("text")))
            for p in value
            if isinstance(p, dict)
        ]
        return PartsContent(parts=parts)
    return UnknownContent(value=value)


def _decode_choice(position: int, raw: Any) -> Choice:
    if not isinstance(raw, dict):
        return Choice(index=position, content=UnknownContent(value=raw))

    message = raw.get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    index = raw.get("index", position)

    return Choice(
        index=index if isinstance(index, int) else position,
        content=decode_content(content),
        finish_reason=raw.get("finish_reason"),
    )


def _decode_error(body: Any) -> Optional[ErrorInfo]:
    if not isinstance(body, dict):
        return None
    err = body.get("error")
    if not isinstance(err, dict):
        return None

    details = err.get("details")
    return ErrorInfo(
        code=err.get("code"),
        message=err.get("message"),
        details=list(details) if isinstance(details, list) else None,
    )


def decode_response(status: Union[int, str], body: Any) -> ChatResponse:
    """
    Turn an HTTP status + parsed body into Success or Failure.

    Success bodies look like {"choices": [{"message": {"content": ...}}]};
    failure bodies may carry {"error": {"code", "message", "details"}}.
    """
    code = normalize_status(status)

    if not is_success_status(code):
        return Failure(status=code, error=_decode_error(body), raw_body=body)

    raw_choices = body.get("choices") if isinstance(body, dict) else None
    if not isinstance(raw_choices, list):
        raw_choices = []

    choices = [_decode_choice(i, c) for i, c in enumerate(raw_choices)]
    return Success(status=code, choices=choices)


def extract_text(content: MessageContent) -> Optional[str]:
    """
    Text for display, or None when the content shape is not recognised.

    Parts content joins every non-empty "text" part with a newline.
    """
    if isinstance(content, TextContent):
        return content.text
    if isinstance(content, PartsContent):
        return "\n".join(p.text for p in content.parts if p.type == "text" and p.text)
    return None
