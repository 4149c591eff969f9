"""Errors raised by the HTTP template."""

from enum import Enum
from typing import Optional


class HttpErrorKind(str, Enum):
    """Failure categories surfaced by HttpUtilsError."""
    ENCODING = "encoding"        # Query value could not be percent-encoded
    TRANSPORT = "transport"      # Send/receive failure
    STATUS = "status"            # Non-2xx response
    NO_CONTENT = "no_content"    # Download response without a body
    FILESYSTEM = "filesystem"    # Local download file failure
    CLOSE = "close"              # Transport client failed to close


class HttpUtilsError(Exception):
    """Base exception for every HTTP template failure.

    Attributes:
        kind: Failure category callers can branch on
        message: Human readable description
        cause: Underlying exception, if any
        status_code: Response status for STATUS errors, otherwise None
    """

    kind: HttpErrorKind = HttpErrorKind.TRANSPORT

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        self.status_code: Optional[int] = None
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} ({self.cause})"
        return self.message


class UrlEncodeError(HttpUtilsError):
    """Exception raised when a query value cannot be encoded."""
    kind = HttpErrorKind.ENCODING


class TransportError(HttpUtilsError):
    """Exception raised when the request cannot be sent or the response read."""
    kind = HttpErrorKind.TRANSPORT


class UnexpectedStatusError(HttpUtilsError):
    """Exception raised when the server answers with a non-2xx status."""
    kind = HttpErrorKind.STATUS

    def __init__(self, status_code: int):
        super().__init__(f"Unexpected response status: {status_code}")
        self.status_code = status_code


class NoContentError(HttpUtilsError):
    """Exception raised when a download response carries no body."""
    kind = HttpErrorKind.NO_CONTENT

    def __init__(self, message: str = "There's no content in http response."):
        super().__init__(message)


class DownloadFileError(HttpUtilsError):
    """Exception raised when the download file cannot be created, written or closed."""
    kind = HttpErrorKind.FILESYSTEM


class ClientCloseError(HttpUtilsError):
    """Exception raised when the transport client fails to close."""
    kind = HttpErrorKind.CLOSE
