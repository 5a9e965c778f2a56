"""End-to-end flows: validate -> build -> post -> interpret (-> aggregate).

Each function runs one submission to completion and either returns a result
or raises an ``AssistantError`` subclass for the presenter to show.
"""
from __future__ import annotations
import logging

from openai_assistant.common.config import CHAT_MODEL, CHAT_URL, IMAGES_URL, SYSTEM_INSTRUCTION
from openai_assistant.common.schema import ImageResult, TextResult
from openai_assistant.core.errors import ValidationError
from openai_assistant.core.interpreter import (
    IMAGE_FAILURE_MESSAGE,
    TEXT_FAILURE_MESSAGE,
    interpret_images,
    interpret_text,
)
from openai_assistant.core.payloads import build_image_payload, build_text_payload
from openai_assistant.core.session import ImageResultSet
from openai_assistant.core.transport import post_json
from openai_assistant.core.validation import validate_image_inputs, validate_text_inputs, word_count

LOGGER = logging.getLogger("openai_assistant.core.flows")

def extract_key_plots(
    credential: str,
    text: str,
    *,
    url: str = CHAT_URL,
    model: str = CHAT_MODEL,
    instruction: str = SYSTEM_INSTRUCTION,
) -> TextResult:
    """
    Ask the chat endpoint for the key plot points of ``text``.

    Returns:
        TextResult whose content has newlines rewritten to <br/>.
    """
    try:
        validate_text_inputs(credential, text)
    except ValidationError as e:
        LOGGER.info("Key plots submission rejected: %s", e.kind)
        raise

    payload = build_text_payload(text, model=model, instruction=instruction)
    LOGGER.info("Extracting key plots from %s words with %s", word_count(text), model)
    reply = post_json(url, payload, credential, failure_message=TEXT_FAILURE_MESSAGE)
    return interpret_text(reply.status_code, reply.body)

def generate_images(
    credential: str,
    description: str,
    results: ImageResultSet,
    *,
    category: str | None = "",
    style: str | None = "",
    n: int = 1,
    url: str = IMAGES_URL,
) -> ImageResult:
    """
    Request ``n`` images and, on success, replace ``results`` with their URLs.

    On any failure ``results`` is left untouched.
    """
    try:
        validate_image_inputs(credential)
    except ValidationError as e:
        LOGGER.info("Image submission rejected: %s", e.kind)
        raise

    payload = build_image_payload(description, category, style, n)
    LOGGER.info("Requesting %s image(s)", payload["n"])
    reply = post_json(url, payload, credential, failure_message=IMAGE_FAILURE_MESSAGE)
    result = interpret_images(reply.status_code, reply.body)
    results.replace(result.urls)
    LOGGER.info("Image gallery now holds %s url(s)", len(result.urls))
    return result
