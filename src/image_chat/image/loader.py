from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from pathlib import Path

from ..errors import ImageNotFoundError, ImageTooLargeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageInput:
    path: str
    size_bytes: int
    mime_type: str
    data_url: str


def resolve_image_path(image_path: str) -> Path:
    """Resolve against the working directory and check the file exists."""
    path = Path(image_path).resolve()
    if not path.is_file():
        raise ImageNotFoundError(str(path))
    return path


def check_image_size(path: Path, max_bytes: int) -> int:
    size = path.stat().st_size
    if size > max_bytes:
        raise ImageTooLargeError(str(path), size, max_bytes)
    return size


def to_data_url(raw: bytes, mime_type: str) -> str:
    b64 = base64.b64encode(raw).decode("utf-8")
    return f"data:{mime_type};base64,{b64}"


def load_image(image_path: str, *, mime_type: str, max_bytes: int) -> ImageInput:
    """
    Validate a local image and encode it as a data URL.

    The MIME type is taken as given; the file content is never sniffed.
    """
    path = resolve_image_path(image_path)
    size = check_image_size(path, max_bytes)
    logger.debug("Loading image %s (%d bytes, %s)", path, size, mime_type)

    with path.open("rb") as f:
        raw = f.read()

    return ImageInput(
        path=str(path),
        size_bytes=size,
        mime_type=mime_type,
        data_url=to_data_url(raw, mime_type),
    )
