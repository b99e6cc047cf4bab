"""
Image Chat - send a local image and a prompt to a hosted multimodal chat model.
"""

__version__ = "0.1.0"

from .config import ImageChatConfig
from .pipeline import run_image_chat

__all__ = ["ImageChatConfig", "run_image_chat", "__version__"]
