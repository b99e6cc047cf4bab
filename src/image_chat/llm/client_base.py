from __future__ import annotations

from typing import Protocol

from ..llm_input.request_builder import ChatRequest
from ..response.decoder import ChatResponse


class ChatClient(Protocol):
    """
    Protocol / interface for chat-completion clients.

    A client sends one request and returns the decoded response. HTTP error
    statuses come back as Failure; only transport problems raise
    (TransportError).
    """

    model_name: str

    def complete(self, request: ChatRequest) -> ChatResponse:
        ...
