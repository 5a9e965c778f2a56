"""Error taxonomy for both request flows.

Every error is terminal for the submission that raised it. ``message`` is the
short user-facing text shown in the error dialog; the class (``kind``) keeps
the failure kinds distinguishable even where the dialog text is the same.
"""
from __future__ import annotations

REQUEST_FAILED = "request_failed"
MALFORMED_RESPONSE = "malformed_response"

class AssistantError(Exception):
    """Base class for failures surfaced to the presenter."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

class ValidationError(AssistantError):
    """Input rejected locally, before any network call."""

class MissingCredential(ValidationError):
    pass

class MissingInput(ValidationError):
    pass

class TransportError(AssistantError):
    """Network failure or timeout; no HTTP status was received."""

class ApiError(AssistantError):
    """Upstream call did not produce a usable result."""

    def __init__(
        self,
        message: str,
        reason: str = REQUEST_FAILED,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code
        # Upstream error text, for logs only.
        self.detail = detail

class InvalidResponse(ApiError):
    """Success status, but the expected field is missing or mistyped."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, reason=MALFORMED_RESPONSE, status_code=status_code)
