"""Classify HTTP replies into results or errors.

The parsed body is first mapped onto one of a fixed set of shapes
(``parse_shape``); the flow-specific interpreters then dispatch on the shape
instead of indexing into the raw JSON, so an absent field surfaces as
``InvalidResponse`` and never as a KeyError/TypeError.
"""
from __future__ import annotations
import logging
from typing import Any

from openai_assistant.common.schema import (
    ErrorShape,
    ImageResult,
    ImageSuccessShape,
    ResponseShape,
    TextResult,
    TextSuccessShape,
    Unrecognized,
)
from openai_assistant.core.errors import REQUEST_FAILED, ApiError, InvalidResponse

LOGGER = logging.getLogger("openai_assistant.core.interpreter")

TEXT_FAILURE_MESSAGE = "Failed to extract key plots. Please try again."
IMAGE_FAILURE_MESSAGE = "API did not return valid image URLs."

LINE_BREAK = "<br/>"

def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300

def format_for_display(content: str) -> str:
    """Rewrite newlines as explicit line-break markers; nothing else changes."""
    return content.replace("\n", LINE_BREAK)

def _text_shape(choices: Any) -> ResponseShape:
    if not isinstance(choices, list) or not choices:
        return Unrecognized()
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        return Unrecognized()
    return TextSuccessShape(content=content)

def _image_shape(data: Any) -> ResponseShape:
    if not isinstance(data, list):
        return Unrecognized()
    urls = []
    for entry in data:
        url = entry.get("url") if isinstance(entry, dict) else None
        if not isinstance(url, str):
            return Unrecognized()
        urls.append(url)
    return ImageSuccessShape(urls=tuple(urls))

def _error_shape(error: Any) -> ErrorShape:
    if isinstance(error, dict):
        return ErrorShape(message=str(error.get("message") or ""))
    return ErrorShape(message=str(error or ""))

def parse_shape(body: Any) -> ResponseShape:
    """Map a parsed JSON body to its recognized shape. Never raises."""
    if not isinstance(body, dict):
        return Unrecognized()
    if "choices" in body:
        return _text_shape(body["choices"])
    if "data" in body:
        return _image_shape(body["data"])
    if "error" in body:
        return _error_shape(body["error"])
    return Unrecognized()

def _raise_request_failed(status_code: int, shape: ResponseShape, message: str) -> None:
    detail = shape.message if isinstance(shape, ErrorShape) else None
    LOGGER.error("Upstream returned status %s: %s", status_code, detail or "<no error message>")
    raise ApiError(message, reason=REQUEST_FAILED, status_code=status_code, detail=detail)

def interpret_text(status_code: int, body: Any, message: str = TEXT_FAILURE_MESSAGE) -> TextResult:
    """
    Extract the first choice's message content from a chat-completion reply.

    Raises:
        ApiError: non-2xx status, whatever the body holds.
        InvalidResponse: 2xx status without choices[0].message.content.
    """
    shape = parse_shape(body)
    if not is_success(status_code):
        _raise_request_failed(status_code, shape, message)
    if isinstance(shape, TextSuccessShape):
        return TextResult(content=format_for_display(shape.content))
    LOGGER.error("Malformed chat response: got %s", type(shape).__name__)
    raise InvalidResponse(message, status_code=status_code)

def interpret_images(status_code: int, body: Any, message: str = IMAGE_FAILURE_MESSAGE) -> ImageResult:
    """
    Extract image URLs, in order, from an image-generation reply.

    An empty ``data`` list is a valid empty result; an absent or null one is not.

    Raises:
        ApiError: non-2xx status.
        InvalidResponse: 2xx status without a list of entries carrying ``url``.
    """
    shape = parse_shape(body)
    if not is_success(status_code):
        _raise_request_failed(status_code, shape, message)
    if isinstance(shape, ImageSuccessShape):
        return ImageResult(urls=shape.urls)
    LOGGER.error("Malformed image response: got %s", type(shape).__name__)
    raise InvalidResponse(message, status_code=status_code)
