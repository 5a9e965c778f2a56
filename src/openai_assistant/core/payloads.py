"""JSON payload and header construction for the two OpenAI endpoints."""
from __future__ import annotations
from typing import Any

from openai_assistant.common.config import CHAT_MODEL, SYSTEM_INSTRUCTION
from openai_assistant.common.schema import ImageRequest, TextRequest

PROMPT_SEPARATOR = ", "

def build_prompt(description: str, category: str | None = "", style: str | None = "") -> str:
    """
    Join the description with the optional category and style tags.

    Empty or missing tags are skipped entirely, so the result never carries
    a trailing or doubled separator.

    Args:
        description: Free-text image description (used as given).
        category: Optional category tag.
        style: Optional style tag.
    """
    parts = [description or ""]
    parts.extend(tag for tag in (category, style) if tag)
    return PROMPT_SEPARATOR.join(parts)

def text_request(text: str, model: str = CHAT_MODEL, instruction: str = SYSTEM_INSTRUCTION) -> TextRequest:
    return TextRequest(model=model, system_instruction=instruction, text=text)

def build_text_payload(text: str, model: str = CHAT_MODEL, instruction: str = SYSTEM_INSTRUCTION) -> dict[str, Any]:
    """Chat-completion body: a fixed system instruction followed by the user's text."""
    req = text_request(text, model, instruction)
    return {
        "model": req.model,
        "messages": [
            {"role": "system", "content": req.system_instruction},
            {"role": "user", "content": req.text},
        ],
    }

def image_request(description: str, category: str | None = "", style: str | None = "", n: int = 1) -> ImageRequest:
    return ImageRequest(prompt=build_prompt(description, category, style), n=int(n))

def build_image_payload(description: str, category: str | None = "", style: str | None = "", n: int = 1) -> dict[str, Any]:
    """Image-generation body: composed prompt plus image count."""
    req = image_request(description, category, style, n)
    return {"prompt": req.prompt, "n": req.n}

def auth_headers(credential: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {credential}",
        "Content-Type": "application/json",
    }
