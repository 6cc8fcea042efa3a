"""A client library for accessing the Trust Payments API"""

from .client import VERSION, ApiClient
from .errors import (
    ApiConnectionError,
    ApiError,
    ConfigurationError,
    SerializationError,
    TrustPaymentsError,
    VersioningError,
)
from .serializer import ObjectSerializer
from .types import ApiResponse, File

__version__ = VERSION

__all__ = (
    "ApiClient",
    "ApiConnectionError",
    "ApiError",
    "ApiResponse",
    "ConfigurationError",
    "File",
    "ObjectSerializer",
    "SerializationError",
    "TrustPaymentsError",
    "VersioningError",
)
