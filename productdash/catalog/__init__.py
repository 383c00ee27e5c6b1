"""
Catalog domain: validation, default-filling, id derivation and the
fetch → mutate → validate → write service.
"""

from .normalizer import apply_defaults
from .service import CatalogService
from .validation import validate_product

__all__ = ["CatalogService", "apply_defaults", "validate_product"]
