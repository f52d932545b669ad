"""Keycloak client exceptions and error classification."""
from __future__ import annotations
import enum
from http import HTTPStatus
from typing import Optional


class APIErrType(str, enum.Enum):
    """Kind of an API failure, derived from the error text."""

    UNKNOWN = "unknown"
    INVALID_GRANT = "oauth: invalid grant"
    INVALID_CLIENT = "oauth: invalid client"
    UNAUTHORIZED_CLIENT = "oauth: unauthorized client"
    INVALID_SCOPE = "oauth: invalid scope"
    INVALID_TOKEN = "oauth: invalid token"
    ACCESS_DENIED = "oauth: access denied"

    def __str__(self) -> str:
        return self.value


# Checked in order, first match wins. The server wording is not a stable
# contract: any change upstream silently turns a match into UNKNOWN.
_ERROR_MARKERS = (
    ("invalid_grant", APIErrType.INVALID_GRANT),
    ("invalid_client", APIErrType.INVALID_CLIENT),
    ("unauthorized_client", APIErrType.UNAUTHORIZED_CLIENT),
    ("invalid_scope", APIErrType.INVALID_SCOPE),
    ("invalid_token", APIErrType.INVALID_TOKEN),
    ("access_denied", APIErrType.ACCESS_DENIED),
)


def parse_api_err_type(err: Optional[object]) -> APIErrType:
    """Classify an error by looking for known OAuth2 error codes in its text.

    This is a best-effort heuristic over unstructured text. Callers that need
    exact matching should inspect ``APIError.message`` themselves.

    Args:
        err: Exception (or any object with a meaningful ``str()``), or None

    Returns:
        The first matching error kind, ``APIErrType.UNKNOWN`` otherwise
    """
    if err is None:
        return APIErrType.UNKNOWN
    text = str(err)
    for marker, kind in _ERROR_MARKERS:
        if marker in text:
            return kind
    return APIErrType.UNKNOWN


class KCloakError(Exception):
    """Base exception for all kcloak operations."""
    pass


class DecodeError(KCloakError, ValueError):
    """JSON payload does not fit a flexible field type."""
    pass


class EncodeError(KCloakError, ValueError):
    """Query parameters could not be built from the given object."""
    pass


class TransportError(KCloakError):
    """Network-level failure; the original exception is chained as __cause__.

    Attributes:
        url: Request URL that failed
    """

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class APIError(KCloakError):
    """Non-2xx response from Keycloak.

    Attributes:
        code: HTTP status code
        message: Status line followed by the error fields of the body
        type: Classified error kind (see parse_api_err_type)
    """

    def __init__(self, code: int, message: str, type: Optional[APIErrType] = None):
        self.code = code
        self.message = message
        self.type = type if type is not None else parse_api_err_type(message)
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, type={self.type.value!r}, message={self.message!r})"


class NotFoundError(APIError):
    """Requested object does not exist (404)."""
    pass


class ConflictError(APIError):
    """Object already exists or the update conflicts (409)."""
    pass


class InsufficientPermissionsError(APIError):
    """Token is missing, expired, or lacks the required roles (401/403)."""
    pass


def api_error_for_status(code: int, message: str) -> APIError:
    """Build the most specific APIError subclass for a status code."""
    if code == HTTPStatus.NOT_FOUND:
        return NotFoundError(code, message)
    if code == HTTPStatus.CONFLICT:
        return ConflictError(code, message)
    if code in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
        return InsufficientPermissionsError(code, message)
    return APIError(code, message)
