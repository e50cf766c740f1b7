"""Structured exceptions for Garoon REST API calls."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from garoon_rest.errors.models import ErrorEnvelope, GaroonErrorDetail


class GaroonError(Exception):
    """Base exception for every error raised by this library."""

    pass


class ConfigurationError(GaroonError):
    """Invalid or missing base URL, credentials or proxy settings.

    Raised at construction time, before any network activity.
    """

    pass


class EncodingError(GaroonError):
    """A parameter does not have the shape the wire encoding expects."""

    def __init__(self, message: str, param: str | None = None):
        super().__init__(message)
        self.param = param


class TransportError(GaroonError):
    """Network or connection failure; no HTTP response was received."""

    def __init__(self, message: str, envelope: "ErrorEnvelope"):
        super().__init__(message)
        self.envelope = envelope

    @property
    def status_code(self) -> int:
        return self.envelope.status


class HttpError(GaroonError):
    """Non-2xx response from the Garoon server."""

    def __init__(
        self,
        message: str,
        envelope: "ErrorEnvelope",
        response: "httpx.Response | None" = None,
        error_detail: "GaroonErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.envelope = envelope
        self.response = response
        self.error_detail = error_detail

    @property
    def status_code(self) -> int:
        return self.envelope.status

    @property
    def error_code(self) -> str | None:
        """Garoon error code (e.g. ``GRN_SCHD_13208``) when the body carries one."""
        return self.error_detail.error_code if self.error_detail else None


class ClientError(HttpError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, envelope: "ErrorEnvelope", retry_after: int | None = None, **kwargs):
        super().__init__(message, envelope, **kwargs)
        self.retry_after = retry_after


class ServerError(HttpError):
    """5xx server errors."""

    pass
