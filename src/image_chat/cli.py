from __future__ import annotations

import argparse
import logging
import sys

from .config import ImageChatConfig
from .errors import ImageChatError, RemoteError
from .pipeline import run_image_chat
from .report import NO_CHOICES_WARNING, format_choice, format_failure


def _fail(*lines: str) -> None:
    for line in lines:
        print(line, file=sys.stderr)
    sys.exit(1)


def main():
    p = argparse.ArgumentParser(
        prog="image-chat",
        description="Send a local image and a prompt to a hosted multimodal chat model.",
    )
    p.add_argument("--image", help="Path to the input image (default: contoso_layout_sketch.jpg)")
    p.add_argument("--mime-type", help="Declared MIME type of the image (default: image/jpeg)")
    p.add_argument("--prompt", help="Instruction sent alongside the image")
    p.add_argument("--model", help="Model identifier (default: gpt-4o-mini)")
    p.add_argument("--endpoint", help="Inference endpoint base URL")
    p.add_argument("--temperature", type=float)
    p.add_argument("--max-tokens", type=int)
    p.add_argument("--llm", default="azure", choices=["azure", "mock"], help="LLM backend")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = p.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    config = ImageChatConfig.from_env().with_overrides(
        image_path=args.image,
        mime_type=args.mime_type,
        prompt=args.prompt,
        model=args.model,
        endpoint=args.endpoint,
        temperature=args.temperature,
        max_tokens=args.max_tokens,
    )

    try:
        outcome = run_image_chat(config, llm_backend=args.llm)
    except RemoteError as e:
        _fail(*format_failure(e.failure))
    except ImageChatError as e:
        _fail(str(e))
    except Exception as e:
        _fail(f"Unhandled error: {e}")

    if outcome.choice is None:
        print(NO_CHOICES_WARNING, file=sys.stderr)
        return

    print(format_choice(outcome.choice))


if __name__ == "__main__":
    main()
