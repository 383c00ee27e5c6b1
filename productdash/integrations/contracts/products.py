"""
Product catalogue contracts.

Product records travel as plain dicts (the catalog file is free-form JSON and
unknown fields must survive a round trip). These models only describe the
shapes the API hands back to callers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from .interfaces import StockStatus

REQUIRED_TEXT_FIELDS = ("nama", "deskripsi_singkat", "deskripsi_lengkap")
STOCK_VALUES = tuple(s.value for s in StockStatus)

DEFAULT_RATING = 5
MIN_RATING = 1
MAX_RATING = 5


class ProductMutationResponse(BaseModel):
    success: bool = True
    message: str
    product: Dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None
