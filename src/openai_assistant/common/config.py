"""Runtime configuration.

Values resolve in order: environment variable, then the optional YAML file
named by ``ASSISTANT_CONFIG`` (default ``configs/app.yaml``), then the
defaults below. Everything is read once at import time.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Callable

import yaml

CONFIG_PATH = os.getenv("ASSISTANT_CONFIG", "configs/app.yaml")

def load_cfg(path: str) -> dict[str, Any]:
    """
    Load a YAML config file.

    Args:
        path: YAML config path. A missing or empty file yields an empty dict.
    """
    if not Path(path).exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data

_CFG = load_cfg(CONFIG_PATH)

def _setting(name: str, default: Any, cast: Callable[[Any], Any] = str) -> Any:
    env_value = os.getenv(name)
    if env_value is not None and env_value != "":
        return cast(env_value)
    if name.lower() in _CFG:
        return cast(_CFG[name.lower()])
    return default

OPENAI_BASE_URL = _setting("OPENAI_BASE_URL", "https://api.openai.com").rstrip("/")
CHAT_URL = f"{OPENAI_BASE_URL}/v1/chat/completions"
IMAGES_URL = f"{OPENAI_BASE_URL}/v1/images/generations"

CHAT_MODEL = _setting("CHAT_MODEL", "gpt-4")
SYSTEM_INSTRUCTION = _setting(
    "SYSTEM_INSTRUCTION",
    "You are a helpful assistant. Extract key plot points from the text.",
)

WORD_LIMIT = _setting("WORD_LIMIT", 1000, int)
MAX_SESSIONS = _setting("MAX_SESSIONS", 1000, int)
REQUEST_TIMEOUT = _setting("REQUEST_TIMEOUT", 120.0, float)

MIN_IMAGES = 1
MAX_IMAGES = 4
IMAGE_CATEGORIES = ["", "Line Drawing", "Black and White", "Color"]
IMAGE_STYLES = ["", "Realistic", "Cartoon", "Abstract"]

LOG_LEVEL = _setting("LOG_LEVEL", "INFO")
HOST = _setting("HOST", "127.0.0.1")
PORT = _setting("PORT", 8000, int)
