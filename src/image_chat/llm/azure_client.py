from __future__ import annotations

import logging
from dataclasses import dataclass

from openai import APIConnectionError, APIStatusError, OpenAI

from ..config import DEFAULT_ENDPOINT
from ..errors import ConfigurationError, TransportError
from ..llm_input.request_builder import ChatRequest
from ..response.decoder import ChatResponse, decode_body, decode_response
from .client_base import ChatClient

logger = logging.getLogger(__name__)


@dataclass
class AzureInferenceClient(ChatClient):
    """
    Client for the GitHub Models / Azure AI inference endpoint.

    The endpoint speaks the OpenAI chat-completions protocol, so the openai
    SDK is pointed at it with the GitHub token as bearer credential. SDK
    retries are turned off: one request, one answer.
    """
    token: str
    endpoint: str = DEFAULT_ENDPOINT
    model_name: str = "azure-inference"

    def __post_init__(self):
        if not self.token:
            raise ConfigurationError("Missing GITHUB_TOKEN env var")

        self._client = OpenAI(
            api_key=self.token,
            base_url=self.endpoint,
            max_retries=0,
        )

    def complete(self, request: ChatRequest) -> ChatResponse:
        """
        POST the request to <endpoint>/chat/completions and decode the reply.
        """
        payload = request.to_payload()
        logger.debug(
            "POST %s/chat/completions model=%s temperature=%s max_tokens=%s",
            self.endpoint.rstrip("/"),
            payload["model"],
            payload["temperature"],
            payload["max_tokens"],
        )

        try:
            raw = self._client.chat.completions.with_raw_response.create(**payload)
        except APIConnectionError as e:
            raise TransportError(f"Network / transport error: {e}") from e
        except APIStatusError as e:
            logger.debug("Endpoint answered %s", e.status_code)
            return decode_response(e.status_code, decode_body(e.response.text))

        http = raw.http_response
        logger.debug("Endpoint answered %s", http.status_code)
        return decode_response(http.status_code, decode_body(http.text))
