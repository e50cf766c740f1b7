"""Mapping of HTTP failures onto the library's exception classes."""

import logging
from collections.abc import Callable

import httpx

from garoon_rest.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    GaroonError,
    HttpError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from garoon_rest.errors.models import ErrorEnvelope, GaroonErrorDetail

logger = logging.getLogger(__name__)

ErrorResponseHandler = Callable[[GaroonError], None]


def notify_error_handler(handler: ErrorResponseHandler | None, error: GaroonError) -> None:
    """Call ``handler`` with ``error``. A failing handler is logged and never replaces ``error``."""
    if handler is None:
        return
    try:
        handler(error)
    except Exception:
        logger.exception(f"Error response handler raised while handling {type(error).__name__}")


_EXCEPTION_MAP: dict[int, type[HttpError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def error_class_for_status(status_code: int) -> type[HttpError]:
    """Return the exception class used for a given HTTP status code."""
    if status_code in _EXCEPTION_MAP:
        return _EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return HttpError


def build_http_error(envelope: ErrorEnvelope, response: httpx.Response | None = None) -> HttpError:
    """Create the exception describing a failed response.

    Args:
        envelope: Normalized view of the failed response
        response: The raw response, when one is available

    Returns:
        HttpError subclass based on status code
    """
    error_detail = GaroonErrorDetail.from_envelope(envelope)
    status_code = envelope.status
    exc_class = error_class_for_status(status_code)

    if error_detail:
        message = f"HTTP {status_code}: {error_detail.to_exception_message()}"
    elif isinstance(envelope.data, str) and envelope.data:
        message = f"HTTP {status_code}: {envelope.data[:200]}"
    else:
        message = f"HTTP {status_code} {envelope.status_text}".rstrip()

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in envelope.headers:
            try:
                retry_after = int(envelope.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        return RateLimitError(
            message,
            envelope,
            retry_after=retry_after,
            response=response,
            error_detail=error_detail,
        )

    return exc_class(message, envelope, response=response, error_detail=error_detail)


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object

    Raises:
        HttpError subclass based on status code
    """
    if response.is_success:
        return
    raise build_http_error(ErrorEnvelope.from_response(response), response)


def build_transport_error(exc: Exception, method: str, url: str) -> TransportError:
    """Wrap a network-level failure that produced no response."""
    return TransportError(
        f"{method} {url} failed: {exc}",
        ErrorEnvelope.from_transport_fault(exc),
    )
