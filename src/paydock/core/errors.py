"""
Exceptions raised by the Paydock SDK and the structured upstream error payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

__all__ = [
    "DeserializationError",
    "ErrorKind",
    "ErrorPayloadError",
    "ErrorResponse",
    "PaydockError",
    "ResponseException",
    "TimeoutException",
]


class ErrorKind(str, Enum):
    TIMEOUT = "timeout"
    RESPONSE = "response"


@dataclass(frozen=True)
class ErrorResponse:
    """
    Parsed body of a non-2xx Paydock response.

    Paydock wraps failures as ``{"status": 400, "error": {"message": ...,
    "code": ..., "details": [...]}}``; older endpoints send ``error`` as a bare
    string. ``raw`` keeps the whole document for fields not modelled here.
    """

    status: Optional[int]
    message: Optional[str]
    code: Optional[str] = None
    details: List[Any] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "ErrorResponse":
        error = payload.get("error")
        message: Optional[str] = None
        code: Optional[str] = None
        details: List[Any] = []
        if isinstance(error, dict):
            message = error.get("message")
            code = error.get("code")
            raw_details = error.get("details")
            if isinstance(raw_details, list):
                details = raw_details
            elif raw_details is not None:
                details = [raw_details]
        elif error is not None:
            message = str(error)

        if message is None:
            message = payload.get("message")

        status = payload.get("status")
        if isinstance(status, str) and status.isdigit():
            status = int(status)
        elif isinstance(status, bool) or not isinstance(status, int):
            status = None

        return cls(
            status=status,
            message=message,
            code=code,
            details=details,
            raw=payload,
        )


class PaydockError(Exception):
    """Base class for everything the SDK raises."""


class ResponseException(PaydockError):
    """
    A request that did not produce a successful response.

    ``kind`` tells callers whether the server replied at all. When it did,
    ``error_response`` holds the parsed error payload.
    """

    kind = ErrorKind.RESPONSE

    def __init__(
        self,
        message: str,
        *,
        error_response: Optional[ErrorResponse] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.error_response = error_response
        self.status_code = status_code
        self.body = body


class TimeoutException(ResponseException):
    """No response was received from Paydock."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message)


class ErrorPayloadError(PaydockError):
    """Paydock returned an error status with a body that is not a JSON error object."""

    def __init__(self, message: str, *, status_code: int, body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DeserializationError(PaydockError):
    """A successful response could not be parsed into the requested model."""

    def __init__(self, message: str, *, body: str) -> None:
        super().__init__(message)
        self.body = body
