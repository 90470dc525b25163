import logging
from typing import Optional, Tuple

from models import ErrorResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base class for failures that end a request with a JSON error body."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GatewayError):
    status_code = 400
    error = "Missing or empty `city` query parameter"

    def __init__(self, message: str = "Please provide a valid city name"):
        super().__init__(message)


class ConfigError(GatewayError):
    error = "Missing OPENWEATHER_API_KEY"

    def __init__(self, message: str = "Server configuration error", error: str = None):
        super().__init__(message)
        if error:
            self.error = error


class NetworkError(GatewayError):
    error = "Network error"

    def __init__(self, message: str = "Failed to reach weather API"):
        super().__init__(message)


class UpstreamError(GatewayError):
    """The provider answered with a non-success status.

    The provider's own status is trusted verbatim and always reported to the
    caller as 404, with the upstream code embedded in the message.
    """

    status_code = 404
    error = "City not found"

    def __init__(self, status: int, city: Optional[str] = None):
        super().__init__(f"Weather API returned status: {status}")
        self.status = status
        self.city = city


class ParseError(GatewayError):
    error = "Data parsing error"

    def __init__(self, message: str = "Failed to parse weather API response"):
        super().__init__(message)


def classify_error(exc: GatewayError) -> Tuple[int, ErrorResponse]:
    """Map a gateway failure to an HTTP status and error body."""
    body = ErrorResponse(error=exc.error, message=exc.message)
    if isinstance(exc, UpstreamError):
        body.city_searched = exc.city

    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.message}")
    else:
        logger.warning(f"{exc.error}: {exc.message}")

    return exc.status_code, body
