"""Command-line access to both flows.

The API key is read from --api-key, falling back to OPENAI_API_KEY.
"""
from __future__ import annotations
import argparse
import logging
import os
import sys

from openai_assistant.common.config import IMAGE_CATEGORIES, IMAGE_STYLES, LOG_LEVEL, MAX_IMAGES, MIN_IMAGES
from openai_assistant.common.logging_setup import setup_logging
from openai_assistant.core.errors import AssistantError
from openai_assistant.core.flows import extract_key_plots, generate_images
from openai_assistant.core.interpreter import LINE_BREAK
from openai_assistant.core.session import ImageResultSet
from openai_assistant.core.validation import word_count_status

LOGGER = logging.getLogger("openai_assistant.cli")

def _image_count(value: str) -> int:
    n = int(value)
    if not MIN_IMAGES <= n <= MAX_IMAGES:
        raise argparse.ArgumentTypeError(f"must be between {MIN_IMAGES} and {MAX_IMAGES}")
    return n

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="OpenAI key plots extraction and image generation")
    ap.add_argument("--api-key", default=os.getenv("OPENAI_API_KEY", ""), help="OpenAI API key")
    sub = ap.add_subparsers(dest="command", required=True)

    kp = sub.add_parser("keyplots", help="Extract key plot points from text")
    src = kp.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Input text")
    src.add_argument("--file", help="Read input text from a file ('-' for stdin)")

    im = sub.add_parser("images", help="Generate images from a description")
    im.add_argument("--description", required=True)
    im.add_argument("--category", default="", choices=IMAGE_CATEGORIES)
    im.add_argument("--style", default="", choices=IMAGE_STYLES)
    im.add_argument("-n", "--num-images", type=_image_count, default=MIN_IMAGES)
    return ap

def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file == "-":
        return sys.stdin.read()
    with open(args.file, "r", encoding="utf-8") as f:
        return f.read()

def main(argv: list[str] | None = None) -> int:
    setup_logging(LOG_LEVEL)
    args = build_parser().parse_args(argv)

    if args.command == "keyplots":
        try:
            text = _read_text(args)
        except (OSError, UnicodeDecodeError) as e:
            LOGGER.error("Cannot read %s: %s", args.file, e)
            return 1

    try:
        if args.command == "keyplots":
            wc = word_count_status(text)
            if wc.exceeded:
                LOGGER.warning("Input has %s words, above the %s-word guideline", wc.count, wc.limit)
            result = extract_key_plots(args.api_key, text)
            print(result.content.replace(LINE_BREAK, "\n"))
        else:
            result = generate_images(
                args.api_key,
                args.description,
                ImageResultSet(),
                category=args.category,
                style=args.style,
                n=args.num_images,
            )
            for url in result.urls:
                print(url)
    except AssistantError as e:
        LOGGER.error("%s: %s", e.kind, e.message)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
