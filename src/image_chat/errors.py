from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .response.decoder import Failure


class ImageChatError(Exception):
    """Base class for every fatal error raised by the image chat flow."""


class ConfigurationError(ImageChatError, RuntimeError):
    pass


class ImageValidationError(ImageChatError):
    pass


class ImageNotFoundError(ImageValidationError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"Image file not found at: {path}")
        self.path = path


class ImageTooLargeError(ImageValidationError):
    def __init__(self, path: str, size: int, limit: int):
        super().__init__(f"Image file is too large ({size} bytes). Limit ~{limit} bytes.")
        self.path = path
        self.size = size
        self.limit = limit


class TransportError(ImageChatError):
    """Raised when the request never produced an HTTP response."""


class RemoteError(ImageChatError):
    """
    The endpoint answered with a non-success status.

    The decoded Failure is kept so the CLI can surface code/message/details.
    """

    def __init__(self, failure: "Failure"):
        super().__init__(f"Request failed: {failure.status}")
        self.failure = failure
