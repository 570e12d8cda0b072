"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error the CLI reports to the user derives from ApplicationError.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidUrlError(ApplicationError):
    """Raised when a URL argument is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL") -> None:
        self.url = url
        super().__init__(f"Invalid URL '{url}': {reason}", code="VAL_INVALID_URL")


class MalformedPairError(ApplicationError):
    """Raised when a body token is not of the form key=value."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Failed to parse '{token}': expected key=value",
            code="VAL_MALFORMED_PAIR",
        )


class TransportError(ApplicationError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Request to {url} failed: {detail}", code="SYS_TRANSPORT_ERROR")


class DecodeError(ApplicationError):
    """Raised when a response body cannot be decoded as text."""

    def __init__(self, encoding: str, message: str = "") -> None:
        self.encoding = encoding
        super().__init__(
            message or f"Response body is not valid {encoding} text",
            code="SYS_DECODE_ERROR",
        )
