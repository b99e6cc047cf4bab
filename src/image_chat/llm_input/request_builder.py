from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Union


@dataclass(frozen=True)
class TextPart:
    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ImageUrlPart:
    url: str
    type: Literal["image_url"] = "image_url"

    def to_dict(self) -> Dict[str, Any]:
        # The endpoint wants 'text' / 'image_url' parts, not input_text / input_image
        return {"type": self.type, "image_url": {"url": self.url}}


RequestPart = Union[TextPart, ImageUrlPart]


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: List[RequestPart] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": [p.to_dict() for p in self.content]}


@dataclass(frozen=True)
class ChatRequest:
    """
    A single chat-completion request, JSON-serializable via to_payload().
    """
    model: str
    messages: List[ChatMessage]
    temperature: float
    max_tokens: int

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


def build_chat_request(
    *,
    model: str,
    prompt: str,
    image_data_url: str,
    temperature: float,
    max_tokens: int,
) -> ChatRequest:
    """
    Build the one-message request: user role, text part first, image second.
    """
    if not prompt:
        raise ValueError("Prompt text must not be empty.")
    if not image_data_url.startswith("data:"):
        raise ValueError("Image must be passed as a data URL.")

    message = ChatMessage(
        role="user",
        content=[TextPart(text=prompt), ImageUrlPart(url=image_data_url)],
    )
    return ChatRequest(
        model=model,
        messages=[message],
        temperature=temperature,
        max_tokens=max_tokens,
    )
