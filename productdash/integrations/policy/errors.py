"""
Error kinds raised by the catalog service and the store clients.

Every kind carries the HTTP status the API surfaces for it, so the
FastAPI exception handler never has to guess.
"""

from __future__ import annotations

from typing import Any, Optional


class CatalogError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, details: Any = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Request errors (raised before any remote write)
# ---------------------------------------------------------------------------

class ProductValidationError(CatalogError):
    status_code = 400
    default_message = "Data produk tidak valid"

    def __init__(self, errors: list[str], message: Optional[str] = None) -> None:
        super().__init__(message, details=list(errors))
        self.errors = list(errors)


class MalformedRequest(CatalogError):
    status_code = 400
    default_message = "Invalid JSON format in request body"


class NotFound(CatalogError):
    status_code = 404
    default_message = "Produk tidak ditemukan"


class MethodNotAllowed(CatalogError):
    status_code = 405
    default_message = "Method not allowed. Supported methods: GET, POST, PUT, DELETE"


class ConfigurationError(CatalogError):
    status_code = 500
    default_message = "Missing GitHub token. Set GITHUB_TOKEN environment variable."


# ---------------------------------------------------------------------------
# Remote store errors
# ---------------------------------------------------------------------------

class RemoteStoreError(CatalogError):
    """Base for failures reported by the remote content store."""

    status_code = 500
    default_message = "GitHub API error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        details: Any = None,
        upstream_status: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.upstream_status = upstream_status


class RemoteError(RemoteStoreError):
    pass


class RemoteAuthError(RemoteStoreError):
    default_message = "Authentication failed with GitHub - check GITHUB_TOKEN"


class RemoteRateLimit(RemoteStoreError):
    status_code = 429
    default_message = "GitHub API rate limit exceeded"


class RemoteNotFound(RemoteStoreError):
    status_code = 404
    default_message = "Repository or file not found - check GITHUB_REPO and GITHUB_FILEPATH"


class RemoteConflict(RemoteStoreError):
    status_code = 409
    default_message = "Catalog changed on GitHub since it was read"
