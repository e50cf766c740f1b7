"""Error taxonomy and failure normalization for Garoon REST API calls."""

from garoon_rest.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    EncodingError,
    ForbiddenError,
    GaroonError,
    HttpError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from garoon_rest.errors.handler import (
    ErrorResponseHandler,
    build_http_error,
    build_transport_error,
    error_class_for_status,
    notify_error_handler,
    raise_for_status,
)
from garoon_rest.errors.models import ErrorEnvelope, GaroonErrorDetail

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "EncodingError",
    "ErrorEnvelope",
    "ErrorResponseHandler",
    "ForbiddenError",
    "GaroonError",
    "GaroonErrorDetail",
    "HttpError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "build_http_error",
    "build_transport_error",
    "error_class_for_status",
    "notify_error_handler",
    "raise_for_status",
]
