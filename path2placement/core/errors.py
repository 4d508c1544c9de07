"""
Gateway Errors - failures of calls to the backend or the placement table.

Taxonomy:
- TransportError: network failure, timeout, unreadable response body
- AuthenticationError: 401 from the backend
- NotFoundError: 404 from the backend
- ServerError: 5xx, with the backend's own message when it sends one

Empty results are NOT errors. Routes return them as a normal payload
with an informational message.

Routes catch GatewayError, log it, and answer with
HTTPException(status_code=err.status_code, detail=err.message).
"""

from typing import Optional


class GatewayError(Exception):
    """Base class. `message` is safe to show to the user."""

    default_message = "Request failed. Please try again."
    default_status = 400

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status
        super().__init__(self.message)


class TransportError(GatewayError):
    default_message = "Could not reach the server. Check your connection and try again."
    default_status = 503


class AuthenticationError(GatewayError):
    default_message = "Your session has expired. Please log in again."
    default_status = 401


class NotFoundError(GatewayError):
    default_message = "The requested data was not found."
    default_status = 404


class ServerError(GatewayError):
    default_message = "The server ran into a problem. Please try again later."
    default_status = 502


def error_for_status(status_code: int, message: Optional[str] = None) -> GatewayError:
    """Map a non-2xx backend status to the matching error type."""
    if status_code == 401:
        return AuthenticationError(message)
    if status_code == 404:
        return NotFoundError(message)
    if status_code >= 500:
        # Always answered as 502
        return ServerError(message)
    return GatewayError(message, status_code=status_code)
