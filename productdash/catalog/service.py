"""
Catalog service: one stateless fetch → mutate → validate → write round trip per call.

The service owns no state between calls. The only coordination with other
writers is the SHA read at the start of each mutation, which the store sends
back on write; a stale SHA surfaces as RemoteConflict and is not retried.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from productdash.catalog.ids import build_product_url, generate_product_id
from productdash.catalog.normalizer import apply_defaults
from productdash.catalog.validation import validate_product
from productdash.integrations.contracts.interfaces import CatalogStore
from productdash.integrations.policy.errors import NotFound, ProductValidationError

logger = logging.getLogger(__name__)


def _find_index(products: List[Dict[str, Any]], product_id: str) -> int:
    for index, product in enumerate(products):
        if isinstance(product, dict) and product.get("id") == product_id:
            return index
    raise NotFound()


class CatalogService:
    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    async def list_products(self, host: Optional[str]) -> List[Dict[str, Any]]:
        snapshot = await self.store.fetch_catalog()
        products = snapshot.products
        for product in products:
            # response-only, never written back
            if isinstance(product, dict) and not product.get("url"):
                product["url"] = build_product_url(host, product.get("id", ""))
        return products

    async def create_product(self, payload: Dict[str, Any], host: Optional[str]) -> Dict[str, Any]:
        errors = validate_product(payload, is_update=False)
        if errors:
            raise ProductValidationError(errors)

        product = apply_defaults(payload, is_new=True)

        snapshot = await self.store.fetch_catalog()
        existing_ids = [p.get("id") for p in snapshot.products if isinstance(p, dict)]
        product["id"] = generate_product_id(existing_ids)
        product["url"] = build_product_url(host, product["id"])

        products = [*snapshot.products, product]
        await self.store.write_catalog(products, f"Tambah produk: {product['nama']}", snapshot.sha)
        logger.info("Created product %s", product["id"])
        return product

    async def update_product(self, product_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        snapshot = await self.store.fetch_catalog()
        products = snapshot.products
        index = _find_index(products, product_id)

        errors = validate_product(payload, is_update=True)
        if errors:
            raise ProductValidationError(errors)

        existing = products[index]
        merged = {**existing, **payload, "id": existing["id"]}
        if "url" in existing:
            merged["url"] = existing["url"]
        else:
            merged.pop("url", None)

        updated = apply_defaults(merged)

        errors = validate_product(updated, is_update=False)
        if errors:
            raise ProductValidationError(errors, message="Data produk tidak valid setelah update")

        products[index] = updated
        await self.store.write_catalog(products, f"Update produk: {updated.get('nama')}", snapshot.sha)
        logger.info("Updated product %s", product_id)
        return updated

    async def delete_product(self, product_id: str) -> Dict[str, Any]:
        snapshot = await self.store.fetch_catalog()
        products = snapshot.products
        index = _find_index(products, product_id)

        removed = products.pop(index)
        await self.store.write_catalog(products, f"Hapus produk: {removed.get('nama')}", snapshot.sha)
        logger.info("Deleted product %s", product_id)
        return removed