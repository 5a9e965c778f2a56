from __future__ import annotations

import pytest

from openai_assistant.core.errors import MissingCredential, MissingInput
from openai_assistant.core.validation import (
    IMAGE_KEY_MESSAGE,
    TEXT_INPUT_MESSAGE,
    TEXT_KEY_MESSAGE,
    validate_image_inputs,
    validate_text_inputs,
    word_count,
    word_count_status,
    word_limit_exceeded,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("a b c", 3),
        ("Hello, world!", 2),
        ("  leading and trailing  ", 3),
        ("one\ntwo\tthree---four", 4),
        ("...", 0),
    ],
)
def test_word_count(text: str, expected: int) -> None:
    assert word_count(text) == expected


def test_word_count_is_pure() -> None:
    text = "The quick brown fox"
    assert word_count(text) == word_count(text) == 4


def test_warning_flips_past_limit() -> None:
    below = word_count_status("w " * 999, limit=1000)
    above = word_count_status("w " * 1001, limit=1000)
    assert (below.count, below.exceeded, below.color) == (999, False, "black")
    assert (above.count, above.exceeded, above.color) == (1001, True, "red")


def test_limit_itself_is_not_exceeded() -> None:
    assert not word_limit_exceeded(1000, limit=1000)
    assert word_limit_exceeded(1001, limit=1000)


def test_text_inputs_credential_checked_first() -> None:
    with pytest.raises(MissingCredential) as exc:
        validate_text_inputs("", "")
    assert exc.value.message == TEXT_KEY_MESSAGE


def test_text_inputs_missing_text() -> None:
    with pytest.raises(MissingInput) as exc:
        validate_text_inputs("sk-test", "")
    assert exc.value.message == TEXT_INPUT_MESSAGE
    assert exc.value.kind == "MissingInput"


def test_text_inputs_ok() -> None:
    validate_text_inputs("sk-test", "Once upon a time")


def test_image_inputs_only_need_credential() -> None:
    validate_image_inputs("sk-test")
    with pytest.raises(MissingCredential) as exc:
        validate_image_inputs("")
    assert exc.value.message == IMAGE_KEY_MESSAGE
