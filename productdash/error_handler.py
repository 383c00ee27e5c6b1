"""Error handling helpers for the catalog API."""
from typing import Any, Dict, Tuple
import logging

from productdash.integrations.policy.errors import CatalogError, RemoteStoreError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Tuple[int, Dict[str, Any]]:
        """Return (status_code, JSON body) for any exception raised while serving a request."""
        if isinstance(exc, CatalogError):
            if isinstance(exc, RemoteStoreError) or exc.status_code >= 500:
                logger.error(
                    "Catalog store failure: %s (upstream_status=%s) context=%s",
                    exc.message, getattr(exc, "upstream_status", None), context or {},
                )
            else:
                logger.warning("Rejected request: %s context=%s", exc.message, context or {})
            payload: Dict[str, Any] = {"error": exc.message}
            if exc.details is not None:
                payload["details"] = exc.details
            return exc.status_code, payload

        logger.error("Unhandled exception in catalog API: %s", exc, exc_info=True)
        return 500, {"error": "Internal server error", "details": str(exc)}
