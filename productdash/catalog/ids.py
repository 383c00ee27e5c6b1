import random
import re
import time
from typing import Iterable, Optional

PRODUCT_ID_RE = re.compile(r"^i\.\d{6}\.\d{9}$")


def generate_product_id(existing_ids: Iterable[str] = ()) -> str:
    """Shopee-style id: i.<6-digit shop id>.<last 9 digits of time in centiseconds>."""
    taken = set(existing_ids)
    while True:
        shop_id = random.randint(100000, 999999)
        item_id = str(time.time_ns() // 10_000_000)[-9:]
        product_id = f"i.{shop_id}.{item_id}"
        if product_id not in taken:
            return product_id


def build_product_url(host: Optional[str], product_id: str) -> str:
    return f"https://{host or 'localhost'}/product/{product_id}"
