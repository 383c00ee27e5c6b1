"""
Mock integration clients.

These clients keep the catalog in memory without calling any external API.
They are used when:
- No GitHub repository / token is available (INTEGRATIONS_MODE=mock)
- We want to test the request handler end-to-end without the network

Important:
- Mock clients must follow the SAME `CatalogStore` interface as real HTTP clients.
"""

from .memory_catalog_store import MemoryCatalogStore

__all__ = ["MemoryCatalogStore"]
