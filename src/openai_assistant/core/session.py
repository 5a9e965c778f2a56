"""Session-scoped image result state."""
from __future__ import annotations
import threading
import uuid
from collections import OrderedDict
from typing import Iterable

from openai_assistant.common.config import MAX_SESSIONS

class ImageResultSet:
    """
    Currently displayed image URLs for one session.

    ``replace`` is the only writer and swaps the whole list; results are
    never merged. A failed generation never reaches ``replace``, so the
    previous gallery stays visible.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._urls: tuple[str, ...] = ()

    def replace(self, urls: Iterable[str]) -> None:
        new_urls = tuple(urls)
        with self._lock:
            self._urls = new_urls

    @property
    def urls(self) -> tuple[str, ...]:
        with self._lock:
            return self._urls

    def __len__(self) -> int:
        return len(self.urls)

class SessionStore:
    """
    In-memory map of session id -> ImageResultSet. Not persisted.

    Ids are only ever minted here. The store is a capped LRU: once
    ``max_sessions`` is reached the least recently used session is dropped.
    """

    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        self._lock = threading.Lock()
        self._max_sessions = max(1, max_sessions)
        self._sessions: OrderedDict[str, ImageResultSet] = OrderedDict()

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex

    def get(self, session_id: str | None) -> ImageResultSet | None:
        """Return the session's results, or None for an unknown id."""
        if not session_id:
            return None
        with self._lock:
            results = self._sessions.get(session_id)
            if results is not None:
                self._sessions.move_to_end(session_id)
            return results

    def create(self) -> tuple[str, ImageResultSet]:
        session_id = self.new_id()
        results = ImageResultSet()
        with self._lock:
            self._sessions[session_id] = results
            while len(self._sessions) > self._max_sessions:
                self._sessions.popitem(last=False)
        return session_id, results

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
