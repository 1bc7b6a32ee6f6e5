"""
Custom Exceptions.

Every failure surfaced by the client derives from OwoError. All of them are
fatal to the current command: nothing is retried or partially applied.
"""


class OwoError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, code: str = "OWO_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(OwoError):
    """Raised when required configuration (e.g. the API token) is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class TransportError(OwoError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class APIStatusError(OwoError):
    """Raised when the API answers with anything other than 200."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            message or f"API request failed with status {status_code}",
            code="API_STATUS_ERROR",
        )


class AuthenticationError(APIStatusError):
    """Raised when the API rejects the token (HTTP 401)."""

    def __init__(self, message: str = "Invalid API token") -> None:
        super().__init__(401, message)
        self.code = "AUTH_UNAUTHORIZED"


class ResponseDecodeError(OwoError):
    """Raised when a 200 response body does not match the expected shape."""

    def __init__(self, message: str = "Could not decode API response") -> None:
        super().__init__(message, code="API_DECODE_ERROR")
