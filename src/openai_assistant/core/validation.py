"""Local input checks run before any request is built."""
from __future__ import annotations
import re

from openai_assistant.common.config import WORD_LIMIT
from openai_assistant.common.schema import WordCount
from openai_assistant.core.errors import MissingCredential, MissingInput

TEXT_KEY_MESSAGE = "Please enter your API key for key plots extraction."
TEXT_INPUT_MESSAGE = "Please enter the text to extract key plots."
IMAGE_KEY_MESSAGE = "Please enter your API key for image generation."

_NON_WORD = re.compile(r"\W+")

def word_count(text: str) -> int:
    """Count tokens left after splitting on runs of non-word characters."""
    if not text:
        return 0
    return sum(1 for token in _NON_WORD.split(text) if token)

def word_limit_exceeded(count: int, limit: int = WORD_LIMIT) -> bool:
    return count > limit

def word_count_status(text: str, limit: int = WORD_LIMIT) -> WordCount:
    """
    Live counter shown under the text area. Advisory only: an exceeded
    limit never blocks submission.
    """
    count = word_count(text)
    return WordCount(count=count, limit=limit, exceeded=word_limit_exceeded(count, limit))

def validate_text_inputs(credential: str | None, text: str | None) -> None:
    """
    Check the key plots form. The credential is checked first.

    Raises:
        MissingCredential: credential is empty.
        MissingInput: text is empty.
    """
    if not credential:
        raise MissingCredential(TEXT_KEY_MESSAGE)
    if not text:
        raise MissingInput(TEXT_INPUT_MESSAGE)

def validate_image_inputs(credential: str | None) -> None:
    """
    Check the image form. The description is deliberately not checked.

    Raises:
        MissingCredential: credential is empty.
    """
    if not credential:
        raise MissingCredential(IMAGE_KEY_MESSAGE)
