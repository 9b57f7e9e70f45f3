from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from shopfront.client.models import Product
from shopfront.constants import ALL_CATEGORIES

logger = logging.getLogger(__name__)


class CatalogClient:
    """Fetches the product list from the storefront server."""

    def __init__(self, base_url: str, timeout: float = 10.0, http: Optional[httpx.Client] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.http = http or httpx.Client(timeout=timeout)

    def load_products(self) -> List[Product]:
        # любая ошибка сети/разбора -> пустой список, как и "товаров нет"
        try:
            response = self.http.get(f"{self.base_url}/api/products")
            response.raise_for_status()
            data = response.json()
            return [Product.from_dict(p) for p in data["products"]]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error("Error loading products: %s", e)
            return []

    def find_product(self, product_id: int) -> Optional[Product]:
        for p in self.load_products():
            if p.id == product_id:
                return p
        return None

    def close(self) -> None:
        self.http.close()


def filter_by_category(products: List[Product], category: str) -> List[Product]:
    if category == ALL_CATEGORIES:
        return list(products)
    return [p for p in products if p.category == category]
