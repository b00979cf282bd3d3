from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for console errors."""


class ValidationError(DomainError):
    """Raised when input data is invalid before it reaches the backend."""


class AuthenticationError(DomainError):
    """Raised when login credentials are rejected."""


class ApiError(DomainError):
    """Raised when a backend call fails.

    `detail` carries the backend's message (the `detail` field of its JSON body)
    when one was sent.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    def user_message(self, fallback: str) -> str:
        return self.detail or fallback


class SessionExpiredError(ApiError):
    """Raised after a 401 response, once the session has been reset."""


class TransportError(ApiError):
    """Raised when the backend could not be reached at all."""
