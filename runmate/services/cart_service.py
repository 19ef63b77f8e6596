"""Shopping cart service."""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from runmate.domain import Product
from runmate.services.cart_store import JsonCartStore

logger = logging.getLogger("RunMate.CartService")


@dataclass
class CartItem:
    product_id: str
    name: str
    price: float
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class CartService:
    def __init__(self, store: Optional[JsonCartStore] = None):
        self.store = store
        self._items: Dict[str, CartItem] = {}
        if store is not None:
            for line in store.load():
                try:
                    item = CartItem(**line)
                except TypeError:
                    logger.warning(f"Skipping malformed cart line: {line}")
                    continue
                self._items[item.product_id] = item

    def get_cart_item(self, product_id: str) -> Optional[CartItem]:
        return self._items.get(product_id)

    def add_to_cart(self, product: Product, quantity: int = 1) -> bool:
        """Add a product; returns False if it is already in the cart."""
        if product.id in self._items:
            logger.info(f"Product {product.id} already in cart")
            return False
        self._items[product.id] = CartItem(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=max(quantity, 1),
        )
        self._save()
        return True

    def update_quantity(self, product_id: str, quantity: int) -> None:
        item = self._items.get(product_id)
        if item is None:
            return
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return
        item.quantity = quantity
        self._save()

    def remove_from_cart(self, product_id: str) -> None:
        if self._items.pop(product_id, None) is not None:
            self._save()

    def clear(self) -> None:
        self._items.clear()
        self._save()

    def items(self) -> List[CartItem]:
        return list(self._items.values())

    def total(self) -> float:
        return sum(item.subtotal for item in self._items.values())

    def _save(self) -> None:
        if self.store is not None:
            self.store.save([asdict(item) for item in self._items.values()])
