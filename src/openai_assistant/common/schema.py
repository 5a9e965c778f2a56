"""Dataclasses for request, response and result types."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union

@dataclass(frozen=True)
class TextRequest:
    """Fixed system/user message pair sent to the chat endpoint."""
    model: str
    system_instruction: str
    text: str

@dataclass(frozen=True)
class ImageRequest:
    """Composed prompt plus requested image count."""
    prompt: str
    n: int

@dataclass(frozen=True)
class HttpReply:
    """Raw outcome of one POST: status code and parsed JSON body (None if not JSON)."""
    status_code: int
    body: Any = None

# Recognized shapes of a parsed response body.

@dataclass(frozen=True)
class TextSuccessShape:
    content: str

@dataclass(frozen=True)
class ImageSuccessShape:
    urls: tuple[str, ...]

@dataclass(frozen=True)
class ErrorShape:
    message: str

@dataclass(frozen=True)
class Unrecognized:
    pass

ResponseShape = Union[TextSuccessShape, ImageSuccessShape, ErrorShape, Unrecognized]

@dataclass(frozen=True)
class TextResult:
    """Extracted text, already formatted for display."""
    content: str

@dataclass(frozen=True)
class ImageResult:
    urls: tuple[str, ...] = field(default_factory=tuple)

@dataclass(frozen=True)
class WordCount:
    count: int
    limit: int
    exceeded: bool

    @property
    def color(self) -> str:
        return "red" if self.exceeded else "black"
