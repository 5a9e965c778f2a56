"""FastAPI front end for key plots extraction and image generation.

Endpoints:
- GET  /                 single-page UI
- GET  /health
- GET  /api/options      selector choices and word limit
- POST /api/word-count   { "text": "..." }
- POST /api/keyplots     { "api_key": "...", "text": "..." }
- POST /api/images       { "api_key": "...", "description": "...", "category": "...", "style": "...", "num_images": 1 }
- GET  /api/images       current session's gallery
"""
from __future__ import annotations
import html
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field

from openai_assistant.common.config import (
    CHAT_MODEL,
    IMAGE_CATEGORIES,
    IMAGE_STYLES,
    LOG_LEVEL,
    MAX_IMAGES,
    MIN_IMAGES,
    WORD_LIMIT,
)
from openai_assistant.common.logging_setup import setup_logging
from openai_assistant.common.templates import load_template, render_template
from openai_assistant.core import flows
from openai_assistant.core.errors import AssistantError, ValidationError
from openai_assistant.core.session import ImageResultSet, SessionStore
from openai_assistant.core.validation import word_count_status

LOGGER = logging.getLogger("openai_assistant.web.app")
setup_logging(LOG_LEVEL)

SESSION_COOKIE = "assistant_session"
ERROR_TITLE = "Error"

SESSIONS = SessionStore()

class WordCountIn(BaseModel):
    text: str = ""

class WordCountOut(BaseModel):
    count: int
    limit: int
    exceeded: bool
    color: str

class KeyPlotsIn(BaseModel):
    api_key: str = ""
    text: str = ""

class KeyPlotsOut(BaseModel):
    html: str

class ImagesIn(BaseModel):
    api_key: str = ""
    description: str = ""
    category: str = ""
    style: str = ""
    num_images: int = Field(default=1, ge=MIN_IMAGES, le=MAX_IMAGES)

class ImagesOut(BaseModel):
    urls: list[str]

class OptionsOut(BaseModel):
    categories: list[str]
    styles: list[str]
    min_images: int
    max_images: int
    word_limit: int

app = FastAPI(title="OpenAI Assistant")

@app.on_event("startup")
def _validate_template_on_startup() -> None:
    """Make sure the page template is readable and warn if placeholders are missing."""
    try:
        template = load_template()
        for name in ("word_limit", "category_options", "style_options"):
            if "{{" + name + "}}" not in template:
                LOGGER.warning("Page template missing placeholder %s", name)
    except OSError as e:
        LOGGER.warning("Failed to read page template: %s", e)

@app.exception_handler(AssistantError)
async def _assistant_error(request: Request, exc: AssistantError) -> JSONResponse:
    status = 400 if isinstance(exc, ValidationError) else 502
    return JSONResponse(
        status_code=status,
        content={"title": ERROR_TITLE, "message": exc.message, "kind": exc.kind},
    )

@app.middleware("http")
async def _issue_session_cookie(request: Request, call_next):  # noqa: ANN001
    """Attach the cookie for a session minted during this request, error responses included."""
    response = await call_next(request)
    session_id = getattr(request.state, "new_session_id", None)
    if session_id:
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response

def session_results(request: Request) -> ImageResultSet:
    """Resolve the caller's gallery, minting a new session for a missing or unknown cookie."""
    results = SESSIONS.get(request.cookies.get(SESSION_COOKIE))
    if results is None:
        session_id, results = SESSIONS.create()
        request.state.new_session_id = session_id
    return results

def existing_results(request: Request) -> ImageResultSet:
    """Read-only lookup; an unknown caller sees an empty gallery and nothing is stored."""
    results = SESSIONS.get(request.cookies.get(SESSION_COOKIE))
    return results if results is not None else ImageResultSet()

def _options_html(choices: list[str]) -> str:
    return "".join(
        f'<option value="{html.escape(c, quote=True)}">{html.escape(c) or "&nbsp;"}</option>'
        for c in choices
    )

@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return render_template(
        load_template(),
        word_limit=WORD_LIMIT,
        min_images=MIN_IMAGES,
        max_images=MAX_IMAGES,
        category_options=_options_html(IMAGE_CATEGORIES),
        style_options=_options_html(IMAGE_STYLES),
    )

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": CHAT_MODEL}

@app.get("/api/options", response_model=OptionsOut)
def options() -> OptionsOut:
    return OptionsOut(
        categories=IMAGE_CATEGORIES,
        styles=IMAGE_STYLES,
        min_images=MIN_IMAGES,
        max_images=MAX_IMAGES,
        word_limit=WORD_LIMIT,
    )

@app.post("/api/word-count", response_model=WordCountOut)
def word_count(body: WordCountIn) -> WordCountOut:
    status = word_count_status(body.text)
    return WordCountOut(count=status.count, limit=status.limit, exceeded=status.exceeded, color=status.color)

@app.post("/api/keyplots", response_model=KeyPlotsOut)
def keyplots(body: KeyPlotsIn) -> KeyPlotsOut:
    result = flows.extract_key_plots(body.api_key, body.text)
    return KeyPlotsOut(html=result.content)

@app.post("/api/images", response_model=ImagesOut)
def images(body: ImagesIn, results: ImageResultSet = Depends(session_results)) -> ImagesOut:
    flows.generate_images(
        body.api_key,
        body.description,
        results,
        category=body.category,
        style=body.style,
        n=body.num_images,
    )
    return ImagesOut(urls=list(results.urls))

@app.get("/api/images", response_model=ImagesOut)
def current_images(results: ImageResultSet = Depends(existing_results)) -> ImagesOut:
    return ImagesOut(urls=list(results.urls))
