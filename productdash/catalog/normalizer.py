"""
Apply-defaults step: coerces field types and fills defaults on a validated record.
"""

from __future__ import annotations

import copy
import math
from typing import Any, Dict, Union

from productdash.catalog.validation import parse_number
from productdash.integrations.contracts.interfaces import StockStatus
from productdash.integrations.contracts.products import (
    DEFAULT_RATING,
    MAX_RATING,
    MIN_RATING,
)

Number = Union[int, float]


def _to_int(v: Any) -> int:
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    number = parse_number(v)
    return int(number) if number is not None else 0


def _to_price(v: Any, default: Number) -> Number:
    number = parse_number(v)
    if number is None:
        return default
    return int(number) if number.is_integer() else number


def normalize_rating(v: Any) -> float:
    """Clamp to [1, 5] first, then round half-up to one decimal."""
    number = parse_number(v)
    if number is None:
        number = float(DEFAULT_RATING)
    number = min(max(number, MIN_RATING), MAX_RATING)
    return math.floor(number * 10 + 0.5) / 10


def _normalize_variant(variant: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(variant)
    harga_asli = _to_price(out.get("harga_asli"), 0)
    out["harga_asli"] = harga_asli
    if out.get("harga_diskon") is None:
        out["harga_diskon"] = harga_asli
    else:
        out["harga_diskon"] = _to_price(out["harga_diskon"], harga_asli)
    return out


def apply_defaults(product: Dict[str, Any], is_new: bool = False) -> Dict[str, Any]:
    """
    Return a normalized copy of `product`.

    With `is_new`, missing `terjual`/`rating` and empty `gambar`/`stok` get their
    creation defaults. Applying this twice gives the same result as once.
    """
    result = copy.deepcopy(product)

    if is_new:
        if "terjual" not in result:
            result["terjual"] = 0
        if "rating" not in result:
            result["rating"] = DEFAULT_RATING
        if not result.get("gambar"):
            result["gambar"] = ""
        if not result.get("stok"):
            result["stok"] = StockStatus.IN_STOCK.value

    if "terjual" in result:
        result["terjual"] = _to_int(result["terjual"])

    if "rating" in result:
        result["rating"] = normalize_rating(result["rating"])

    varian = result.get("varian")
    if isinstance(varian, list):
        result["varian"] = [
            _normalize_variant(v) if isinstance(v, dict) else v
            for v in varian
        ]

    return result
