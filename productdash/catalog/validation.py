"""Validation for product records submitted to the catalog.

Validators report problems as a list of human-readable messages and never
raise or touch their input; defaults are filled in by `normalizer.apply_defaults`.
The service turns a non-empty list into `ProductValidationError` (HTTP 400).
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from productdash.integrations.contracts.products import (
    MAX_RATING,
    MIN_RATING,
    REQUIRED_TEXT_FIELDS,
    STOCK_VALUES,
)

_REQUIRED_MESSAGES = {
    "nama": "Nama produk harus diisi",
    "deskripsi_singkat": "Deskripsi singkat harus diisi",
    "deskripsi_lengkap": "Deskripsi lengkap harus diisi",
}


def _is_blank(v: Any) -> bool:
    return not isinstance(v, str) or v.strip() == ""


def parse_number(v: Any) -> Optional[float]:
    """Return `v` as a finite float, or None when it is not numeric.

    Numeric strings are accepted ("12", " 4.5 "); booleans are not.
    """
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        number = float(v)
    elif isinstance(v, str):
        s = v.strip()
        if not s:
            return None
        try:
            number = float(s)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _validate_variant(variant: Any, index: int, errors: List[str]) -> None:
    prefix = f"Varian {index + 1}:"
    if not isinstance(variant, dict):
        errors.append(f"{prefix} Varian harus berupa objek")
        return

    if _is_blank(variant.get("name")):
        errors.append(f"{prefix} Nama varian harus diisi")

    harga_asli = variant.get("harga_asli")
    if harga_asli is None:
        errors.append(f"{prefix} Harga asli harus diisi")
    else:
        number = parse_number(harga_asli)
        if number is None or number < 0:
            errors.append(f"{prefix} Harga asli harus berupa angka positif")

    harga_diskon = variant.get("harga_diskon")
    if harga_diskon is not None:
        number = parse_number(harga_diskon)
        if number is None or number < 0:
            errors.append(f"{prefix} Harga diskon harus berupa angka positif")


def validate_product(product: Dict[str, Any], is_update: bool = False) -> List[str]:
    errors: List[str] = []

    if not is_update:
        for field in REQUIRED_TEXT_FIELDS:
            if _is_blank(product.get(field)):
                errors.append(_REQUIRED_MESSAGES[field])

    stok = product.get("stok")
    if stok and stok not in STOCK_VALUES:
        errors.append("Status stok harus in-stock, low-stock, atau out-of-stock")

    terjual = product.get("terjual")
    if terjual is not None:
        number = parse_number(terjual)
        if number is None or number < 0:
            errors.append("Jumlah terjual harus berupa angka positif")

    rating = product.get("rating")
    if rating is not None:
        number = parse_number(rating)
        if number is None or number < MIN_RATING or number > MAX_RATING:
            errors.append(f"Rating harus berupa angka antara {MIN_RATING} hingga {MAX_RATING}")

    if "varian" in product and product["varian"] is not None:
        varian = product["varian"]
        if not isinstance(varian, list):
            errors.append("Varian harus berupa array")
        elif not varian and not is_update:
            errors.append("Produk harus memiliki minimal satu varian")
        else:
            for index, variant in enumerate(varian):
                _validate_variant(variant, index, errors)

    return errors
