"""Protocol definitions for dependency injection."""

from typing import Any, Callable, Dict, Optional, Protocol

from runmate.domain import FilterSet, PageResult, Product


class ProductSourcePort(Protocol):
    async def fetch_products(
        self, filters: FilterSet, page: int, limit: int
    ) -> PageResult: ...


class AdminSourcePort(Protocol):
    async def fetch_admin_page(
        self,
        resource: str,
        page: int,
        limit: int,
        filters: Optional[Dict[str, str]] = None,
        token: Optional[str] = None,
    ) -> PageResult: ...


class CartPort(Protocol):
    def get_cart_item(self, product_id: str) -> Optional[Any]: ...

    def add_to_cart(self, product: Product, quantity: int = 1) -> bool: ...


class SentinelPort(Protocol):
    """Visibility source for the element at the end of a scrolled list.

    `observe` must report the current visibility to the callback right away
    when the sentinel is already visible, then report every change until
    `disconnect` is called.
    """

    def observe(
        self, callback: Callable[[bool], None], root_margin: int
    ) -> None: ...

    def disconnect(self) -> None: ...
