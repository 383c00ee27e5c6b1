"""
Integrations layer.
This package contains all code used to talk to the catalog's backing store:
- GitHub repository contents API (production)
- In-memory store (development and tests)

Key rule:
- The catalog service MUST NOT call GitHub directly.
- It goes through a `CatalogStore` client under productdash/integrations/clients.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (productdash/api/main.py).
"""

from .contracts.interfaces import CatalogSnapshot, CatalogStore, StockStatus
from .contracts.products import ErrorResponse, ProductMutationResponse

__all__ = [
    "CatalogSnapshot", "CatalogStore", "StockStatus",
    "ErrorResponse", "ProductMutationResponse",
]
