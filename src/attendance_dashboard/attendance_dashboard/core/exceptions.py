from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PayloadError(DomainError):
    """Raised when the upstream payload does not have the expected table shape."""

    def __init__(self, message: str, *, code: str = "INVALID_PAYLOAD"):
        super().__init__(message)
        self.code = code


class UpstreamError(DomainError):
    """Raised when the spreadsheet endpoint cannot be reached or answers with an error."""

    def __init__(self, message: str, *, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body

    @property
    def code(self) -> str:
        return "GAS_FETCH_ERROR" if self.status is not None else "CONNECTION_ERROR"
