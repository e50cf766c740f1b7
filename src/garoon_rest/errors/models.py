"""Normalized shapes of failed Garoon REST API calls."""

from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass(frozen=True)
class ErrorEnvelope:
    """Normalized view of a failed call's response.

    ``data`` is the decoded response body (JSON when possible, else text),
    or None when no response was received at all.
    """

    data: Any
    status: int
    status_text: str
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorEnvelope":
        """Build an envelope from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorEnvelope carrying the decoded body, status and headers
        """
        data: Any
        try:
            data = response.json()
        except (ValueError, UnicodeDecodeError):
            data = response.text or None

        return cls(
            data=data,
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers.items()),
        )

    @classmethod
    def from_transport_fault(cls, exc: Exception) -> "ErrorEnvelope":
        """Build an envelope for a call that never got a response."""
        return cls(data=None, status=0, status_text=type(exc).__name__)


@dataclass
class GaroonErrorDetail:
    """Error object returned by Garoon in the ``error`` member of a failed response.

    Example body::

        {"error": {"errorCode": "GRN_SCHD_13208", "message": "...", "cause": "...", "counterMeasure": "..."}}
    """

    error_code: str | None = None
    message: str | None = None
    cause: str | None = None
    counter_measure: str | None = None

    # Members Garoon may add beyond the documented ones
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_envelope(cls, envelope: ErrorEnvelope) -> "GaroonErrorDetail | None":
        """Parse the Garoon error object out of an envelope.

        Returns:
            GaroonErrorDetail, or None if the body is not a Garoon error object
        """
        if not isinstance(envelope.data, dict):
            return None
        error = envelope.data.get("error")
        if not isinstance(error, dict):
            return None

        known_fields = {"errorCode", "message", "cause", "counterMeasure"}
        extensions = {k: v for k, v in error.items() if k not in known_fields}

        return cls(
            error_code=error.get("errorCode"),
            message=error.get("message"),
            cause=error.get("cause"),
            counter_measure=error.get("counterMeasure"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error object to an exception message."""
        lines = []

        if self.error_code and self.message:
            lines.append(f"[{self.error_code}] {self.message}")
        elif self.message:
            lines.append(self.message)
        elif self.error_code:
            lines.append(self.error_code)

        if self.cause:
            lines.append(f"Cause: {self.cause}")

        if self.counter_measure:
            lines.append(f"Counter measure: {self.counter_measure}")

        return "\n".join(lines) if lines else "Unknown Garoon error"
