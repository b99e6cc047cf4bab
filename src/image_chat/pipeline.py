from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import ImageChatConfig
from .errors import ConfigurationError, RemoteError
from .image.loader import load_image
from .llm.client_base import ChatClient
from .llm.mock_client import MockChatClient
from .llm_input.request_builder import build_chat_request
from .response.decoder import Choice, Failure, Success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatOutcome:
    """
    Result of a successful round trip. choice is None when the endpoint
    returned no choices at all.
    """
    response: Success
    choice: Optional[Choice]
    image_path: str


def make_client(llm_backend: str, config: ImageChatConfig) -> ChatClient:
    if llm_backend == "mock":
        return MockChatClient()
    elif llm_backend == "azure":
        from .llm.azure_client import AzureInferenceClient
        return AzureInferenceClient(token=config.token or "", endpoint=config.endpoint)
    else:
        raise ValueError(f"Unsupported llm_backend: {llm_backend}")


def run_image_chat(
    config: ImageChatConfig,
    *,
    llm_backend: str = "azure",
    client: Optional[ChatClient] = None,
) -> ChatOutcome:
    """
    End-to-end flow:
      credential -> image checks -> data URL -> request -> POST -> decode

    Every failure raises an ImageChatError subclass; nothing is printed here.
    The credential is checked before the image is touched, and the client is
    only created once the image is valid.
    """
    # 1) Credential
    if not config.token:
        raise ConfigurationError("Missing GITHUB_TOKEN env var")

    # 2-4) Image: exists, size ceiling, encode
    image = load_image(
        config.image_path,
        mime_type=config.mime_type,
        max_bytes=config.max_image_bytes,
    )

    # 5) Request
    request = build_chat_request(
        model=config.model,
        prompt=config.prompt,
        image_data_url=image.data_url,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
    )

    # 6-7) Send; transport errors propagate as TransportError
    if client is None:
        client = make_client(llm_backend, config)
    logger.debug("Sending %s (%d bytes) via %s", image.path, image.size_bytes, client.model_name)
    response = client.complete(request)
    logger.debug("Response status %s", response.status)

    # 8) Remote failure
    if isinstance(response, Failure):
        raise RemoteError(response)

    # 9) First choice, if any
    choice = response.choices[0] if response.choices else None
    if choice is None:
        logger.debug("Endpoint returned no choices")

    return ChatOutcome(response=response, choice=choice, image_path=image.path)
