from __future__ import annotations

import json
import logging
from typing import Callable, List, Optional

from shopfront.client.models import CartLine, Number, Product
from shopfront.client.storage import LocalStorage
from shopfront.constants import CART_STORAGE_KEY

logger = logging.getLogger(__name__)

CountListener = Callable[[int], None]


class Cart:
    """
    Shopping cart persisted in local storage under a single key.

    Every mutation saves the lines and notifies the count listeners before it
    returns, so the stored copy and the badge never lag behind `items`.
    Operations on lines that do not exist are silent no-ops.
    """

    def __init__(self, storage: LocalStorage, key: str = CART_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._listeners: List[CountListener] = []
        self.items: List[CartLine] = self.load()

    def load(self) -> List[CartLine]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("stored cart is not a list")
            return [CartLine.from_dict(d) for d in data]
        except ValueError as e:
            logger.warning("Discarding unreadable cart %r: %s", self.key, e)
            return []

    def save(self) -> None:
        self.storage.set_item(self.key, json.dumps([it.to_dict() for it in self.items]))

    def on_change(self, listener: CountListener) -> None:
        self._listeners.append(listener)

    def update_cart_count(self) -> None:
        count = self.get_count()
        for listener in self._listeners:
            listener(count)

    def _commit(self) -> None:
        self.save()
        self.update_cart_count()

    def _find(self, product_id: int, size: str) -> Optional[CartLine]:
        for it in self.items:
            if it.id == product_id and it.size == size:
                return it
        return None

    def add_item(self, product: Product, size: str, quantity: int = 1) -> None:
        if quantity < 1:
            logger.warning("Ignoring add of %s (%s) with quantity %s", product.id, size, quantity)
        else:
            existing = self._find(product.id, size)
            if existing:
                existing.quantity += quantity
            else:
                self.items.append(
                    CartLine(
                        id=product.id,
                        name=product.name,
                        price=product.price,
                        size=size,
                        quantity=quantity,
                        image=product.image,
                    )
                )
        self._commit()

    def remove_item(self, product_id: int, size: str) -> None:
        self.items = [it for it in self.items if not (it.id == product_id and it.size == size)]
        self._commit()

    def update_quantity(self, product_id: int, size: str, quantity: int) -> None:
        item = self._find(product_id, size)
        if item is None:
            return
        if quantity <= 0:
            self.remove_item(product_id, size)
            return
        item.quantity = quantity
        self._commit()

    def get_total(self) -> Number:
        return sum(it.price * it.quantity for it in self.items)

    def get_count(self) -> int:
        return sum(it.quantity for it in self.items)

    def clear(self) -> None:
        self.items = []
        self._commit()
