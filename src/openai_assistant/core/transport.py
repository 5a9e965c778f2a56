"""Single-attempt JSON POST over httpx.

Non-2xx statuses are returned, not raised; classifying them is the
interpreter's job. Only failures that produce no HTTP status at all
(connection errors, timeouts) become ``TransportError``.
"""
from __future__ import annotations
import logging
import time
from typing import Any

import httpx

from openai_assistant.common.config import REQUEST_TIMEOUT
from openai_assistant.common.schema import HttpReply
from openai_assistant.core.errors import TransportError
from openai_assistant.core.payloads import auth_headers

LOGGER = logging.getLogger("openai_assistant.core.transport")

def post_json(url: str, payload: dict[str, Any], credential: str, *, failure_message: str) -> HttpReply:
    """
    POST the payload once and parse the JSON reply.

    Args:
        url: Endpoint URL.
        payload: JSON-serializable body.
        credential: Bearer token; never logged.
        failure_message: User-facing text if the call cannot complete.

    Returns:
        HttpReply with status and parsed body (None when the body is not JSON).

    Raises:
        TransportError: network failure, timeout, or a credential that cannot
            be encoded into the Authorization header.
    """
    start = time.time()
    try:
        with httpx.Client(timeout=REQUEST_TIMEOUT) as client:
            r = client.post(url, headers=auth_headers(credential), json=payload)
    except httpx.HTTPError as e:
        LOGGER.error("Request to %s failed: %s", url, type(e).__name__)
        raise TransportError(failure_message) from e
    except UnicodeEncodeError as e:
        # Header values must be ASCII; a pasted key can carry curly quotes or NBSPs.
        LOGGER.error("Request to %s not sent: credential is not ASCII", url)
        raise TransportError(failure_message) from e

    latency = int((time.time() - start) * 1000)
    LOGGER.info("POST %s -> %s in %sms", url, r.status_code, latency)
    try:
        body = r.json()
    except ValueError:
        LOGGER.warning("Non-JSON body from %s (status %s)", url, r.status_code)
        body = None
    return HttpReply(status_code=r.status_code, body=body)
