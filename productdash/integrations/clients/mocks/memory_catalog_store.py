"""
In-memory catalog store (MOCK client).

Development and test implementation of the CatalogStore interface.
Behaves like the GitHub contents API where it matters to callers:
the first write needs no SHA, later writes must present the current
one, and a stale SHA is rejected with RemoteConflict.
"""

import copy
import hashlib
import json
import logging
from typing import Any, Dict, List, Optional

from productdash.integrations.contracts.interfaces import CatalogSnapshot, CatalogStore
from productdash.integrations.policy.errors import RemoteConflict

logger = logging.getLogger(__name__)


class MemoryCatalogStore(CatalogStore):
    def __init__(self, products: Optional[List[Dict[str, Any]]] = None) -> None:
        self._products: List[Dict[str, Any]] = []
        self._sha: Optional[str] = None
        # commit messages, oldest first
        self.commits: List[str] = []
        if products is not None:
            self._products = copy.deepcopy(products)
            self._sha = self._digest(self._products, "seed")

    @staticmethod
    def _digest(products: List[Dict[str, Any]], message: str) -> str:
        raw = json.dumps(products, sort_keys=True) + message
        return hashlib.sha1(raw.encode("utf-8")).hexdigest()

    @property
    def products(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._products)

    @property
    def sha(self) -> Optional[str]:
        return self._sha

    async def fetch_catalog(self) -> CatalogSnapshot:
        return CatalogSnapshot(products=copy.deepcopy(self._products), sha=self._sha)

    async def write_catalog(
        self,
        products: List[Dict[str, Any]],
        message: str,
        sha: Optional[str] = None,
    ) -> Optional[str]:
        if sha != self._sha:
            raise RemoteConflict(details=f"expected sha {self._sha}, got {sha}", upstream_status=409)

        self._products = copy.deepcopy(products)
        self._sha = self._digest(self._products, f"{len(self.commits)}:{message}")
        self.commits.append(message)
        logger.info("Mock commit #%d: %s", len(self.commits), message)
        return self._sha
