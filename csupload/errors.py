"""Exception types raised by csupload."""
from typing import Optional


class CSUploadError(RuntimeError):
    """Base class for csupload failures."""


class ConfigError(CSUploadError):
    """Raised when the run configuration is incomplete or invalid."""


class AuthenticationError(CSUploadError):
    """Raised when a ticket could not be obtained from the auth endpoint."""


class MissingTicketError(AuthenticationError):
    """Raised when the auth response decodes but carries no ticket."""

    def __init__(self, message: str = "missing ticket in auth response"):
        super().__init__(message)


class DocumentCreateError(CSUploadError):
    """Raised when the node endpoint answers with a non-200 status."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ""
        status = f"{status_code} {self.reason}".strip()
        super().__init__(status)
