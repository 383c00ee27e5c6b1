from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class StockStatus(str, Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class CatalogSnapshot:
    products: List[Dict[str, Any]] = field(default_factory=list)
    sha: Optional[str] = None            # None until the file exists on the branch


# ---------------------------------------------------------------------------
# Abstract store interface
# ---------------------------------------------------------------------------

class CatalogStore(ABC):
    """Every catalog store client must implement this interface."""

    @abstractmethod
    async def fetch_catalog(self) -> CatalogSnapshot:
        """Return the current catalog and its version token."""

    @abstractmethod
    async def write_catalog(
        self,
        products: List[Dict[str, Any]],
        message: str,
        sha: Optional[str] = None,
    ) -> Optional[str]:
        """Replace the catalog file content and return the new version token."""
