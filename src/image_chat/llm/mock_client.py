from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from ..llm_input.request_builder import ChatRequest
from ..response.decoder import ChatResponse, decode_response
from .client_base import ChatClient

_DEFAULT_HTML = (
    "<html>\n"
    "<head><style>body { font-family: sans-serif; }</style></head>\n"
    "<body><h1>Contoso</h1></body>\n"
    "</html>"
)


@dataclass
class MockChatClient(ChatClient):
    """
    Offline client. Answers every request with a canned body.

    By default the body is a single choice holding `content`; pass `body`
    (and `status`) to simulate any other reply.
    """
    model_name: str = "mock-chat"
    content: Any = _DEFAULT_HTML
    status: Union[int, str] = 200
    body: Optional[Any] = None
    requests: List[ChatRequest] = field(default_factory=list)

    def complete(self, request: ChatRequest) -> ChatResponse:
        self.requests.append(request)

        body = self.body
        if body is None:
            body = {
                "choices": [
                    {
                        "index": 0,
                        "message": {"role": "assistant", "content": self.content},
                        "finish_reason": "stop",
                    }
                ]
            }
        return decode_response(self.status, body)
