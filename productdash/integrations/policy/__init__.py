"""
Integration policy: error kinds shared by the store clients and the API.
"""

from .errors import (
    CatalogError,
    ConfigurationError,
    MalformedRequest,
    MethodNotAllowed,
    NotFound,
    ProductValidationError,
    RemoteAuthError,
    RemoteConflict,
    RemoteError,
    RemoteNotFound,
    RemoteRateLimit,
    RemoteStoreError,
)

__all__ = [
    "CatalogError", "ConfigurationError", "MalformedRequest", "MethodNotAllowed",
    "NotFound", "ProductValidationError",
    "RemoteAuthError", "RemoteConflict", "RemoteError", "RemoteNotFound",
    "RemoteRateLimit", "RemoteStoreError",
]
