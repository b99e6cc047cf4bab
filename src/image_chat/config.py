from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Optional

from dotenv import load_dotenv

DEFAULT_ENDPOINT = "https://models.inference.ai.azure.com"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_IMAGE_PATH = "contoso_layout_sketch.jpg"
DEFAULT_MIME_TYPE = "image/jpeg"
DEFAULT_PROMPT = (
    "Write HTML and CSS code for a webpage based on the following hand-drawn sketch"
)
DEFAULT_TEMPERATURE = 0.4
DEFAULT_MAX_TOKENS = 1200
MAX_IMAGE_BYTES = 15 * 1024 * 1024  # 15MB, service-side limit is a little higher


@dataclass(frozen=True)
class ImageChatConfig:
    """
    Everything a single run needs.

    token may be None here; the pipeline checks it before touching the image
    so a missing credential is reported first.
    """
    token: Optional[str]
    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    image_path: str = DEFAULT_IMAGE_PATH
    mime_type: str = DEFAULT_MIME_TYPE
    prompt: str = DEFAULT_PROMPT
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    max_image_bytes: int = MAX_IMAGE_BYTES

    @classmethod
    def from_env(cls) -> "ImageChatConfig":
        """
        Build a config from the process environment (and .env, if present).

        GITHUB_TOKEN must be a GitHub fine-grained or classic PAT with model
        inference access.
        """
        load_dotenv()

        return cls(
            token=os.getenv("GITHUB_TOKEN") or None,
            model=os.getenv("IMAGE_CHAT_MODEL") or DEFAULT_MODEL,
            endpoint=os.getenv("IMAGE_CHAT_ENDPOINT") or DEFAULT_ENDPOINT,
            image_path=os.getenv("IMAGE_CHAT_IMAGE_PATH") or DEFAULT_IMAGE_PATH,
        )

    def with_overrides(self, **overrides: Any) -> "ImageChatConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
