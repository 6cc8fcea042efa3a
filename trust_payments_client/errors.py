"""Contains shared errors types that can be raised from API functions"""

from collections.abc import Mapping
from typing import Any, Optional


class TrustPaymentsError(Exception):
    """Base class for every error raised by this package"""


class ConfigurationError(TrustPaymentsError, ValueError):
    """Raised when the client is constructed or reconfigured with invalid settings"""


class SerializationError(TrustPaymentsError, ValueError):
    """Raised when a value cannot be converted to or from its declared type"""


class ApiConnectionError(TrustPaymentsError):
    """Raised when the HTTP exchange itself could not complete (DNS, TLS, timeout, refused connection)"""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class ApiError(TrustPaymentsError):
    """Raised when the API answers with a non-2xx status other than 409"""

    def __init__(
        self,
        message: str,
        status_code: int,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.body = body

        super().__init__(message)


class VersioningError(TrustPaymentsError):
    """Raised on HTTP 409: the entity was changed by another process since it was last read

    Re-read the entity to obtain its current version and retry the update if appropriate.
    """

    def __init__(self, resource_path: str):
        self.resource_path = resource_path

        super().__init__(
            f"The object could not be modified because it was changed concurrently "
            f"(resource path: {resource_path}). Read the entity again and retry with the new version."
        )


__all__ = [
    "ApiConnectionError",
    "ApiError",
    "ConfigurationError",
    "SerializationError",
    "TrustPaymentsError",
    "VersioningError",
]
