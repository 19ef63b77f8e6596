"""Product listing manager - filters, infinite scroll and result accumulation."""

import asyncio
import logging
from typing import Callable, List, Optional, Set

from runmate.core.protocols import CartPort, ProductSourcePort, SentinelPort
from runmate.domain import FilterSet, PageResult, Product
from runmate.managers.filter_manager import FilterManager
from runmate.managers.pagination_manager import PaginationManager
from runmate.managers.scroll_trigger import ScrollTrigger
from runmate.services.api_client import ApiError

logger = logging.getLogger("RunMate.ProductListManager")

LOAD_ERROR_MESSAGE = "Error loading products"


class ProductListManager:
    """Owns the storefront listing state.

    Every filter change bumps `generation`, resets the page counter to 1 and
    clears `items` before the new page-1 request is issued. A response is
    applied only if it belongs to the current generation, so a slow reply
    for an old filter set can never leak into the new result set. Loads for
    the same generation are not deduplicated: two loads of one page apply
    both responses in arrival order.

    Loads run as tasks on the running event loop; the loading state is set
    before the task is created.
    """

    def __init__(
        self,
        source: ProductSourcePort,
        page_size: int = 12,
        cart: Optional[CartPort] = None,
        on_change: Optional[Callable[[], None]] = None,
        root_margin: int = 200,
    ):
        """Initialize ProductListManager.

        Args:
            source: Backend the pages are fetched from
            page_size: Number of products per page
            cart: Cart used for the "in cart" lookup
            on_change: Callback invoked after every state change
            root_margin: Pre-trigger margin for the scroll sentinel
        """
        self.source = source
        self.cart = cart
        self.on_change = on_change

        self.pagination = PaginationManager(page_size=page_size)
        self.filter_manager = FilterManager(on_filter_change=self._on_filters_changed)
        self.scroll_trigger = ScrollTrigger(
            self.pagination, on_fire=self._on_scroll_fire, root_margin=root_margin
        )

        self.items: List[Product] = []
        self.error: str = ""
        self.generation = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def filters(self) -> FilterSet:
        return self.filter_manager.get_filters()

    @property
    def current_page(self) -> int:
        return self.pagination.current_page

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more

    @property
    def loading(self) -> bool:
        return self.pagination.loading

    def start(self, filters: Optional[FilterSet] = None) -> asyncio.Task:
        """Load the first page, optionally opening the listing with preset filters."""
        if filters is not None:
            self.filter_manager.filters = filters
        return self._begin_load(1, is_first_page=True)

    def mount_sentinel(self, sentinel: SentinelPort) -> None:
        self.scroll_trigger.mount(sentinel)

    def unmount_sentinel(self) -> None:
        self.scroll_trigger.unmount()

    async def load_page(self, page: int, is_first_page: bool) -> None:
        """Load `page` directly and make it the current page.

        Scrolling goes through request_next_page, which also checks has_more.
        """
        await self._begin_load(page, is_first_page)

    def request_next_page(self) -> bool:
        """Advance one page and start loading it.

        Returns:
            bool: False if no more pages exist or a load is already pending
        """
        if not self.pagination.can_load_more():
            return False
        page = self.pagination.advance()
        self._begin_load(page, is_first_page=False)
        return True

    async def wait_idle(self) -> None:
        """Wait until every load started so far (and any it triggers) finishes."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def is_in_cart(self, product_id: str) -> bool:
        if self.cart is None:
            return False
        return self.cart.get_cart_item(product_id) is not None

    def status_text(self) -> str:
        if self.pagination.is_loading_first_page and not self.items:
            return "Loading products..."
        if not self.items:
            return "No products found"
        return f"Showing {len(self.items)} products"

    def _on_filters_changed(self, filters: FilterSet) -> None:
        self.generation += 1
        self.pagination.reset()
        self.items = []
        self.error = ""
        logger.info(f"Filter generation {self.generation}, reloading page 1")
        self._begin_load(1, is_first_page=True)

    def _on_scroll_fire(self) -> None:
        self.request_next_page()

    def _begin_load(self, page: int, is_first_page: bool) -> asyncio.Task:
        self.pagination.start_loading(first_page=is_first_page)
        self.pagination.current_page = page
        if is_first_page:
            self.items = []

        task = asyncio.get_running_loop().create_task(
            self._fetch_page(page, is_first_page, self.generation, self.filters)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        self.scroll_trigger.sync()
        self._notify()
        return task

    async def _fetch_page(
        self, page: int, is_first_page: bool, generation: int, filters: FilterSet
    ) -> None:
        logger.info(f"Fetching page {page} (first: {is_first_page})")
        result: Optional[PageResult] = None
        error = LOAD_ERROR_MESSAGE
        try:
            result = await self.source.fetch_products(
                filters, page, self.pagination.page_size
            )
        except ApiError as e:
            error = e.message
        except Exception:
            logger.exception(f"Unexpected failure loading page {page}")
        finally:
            self._settle(page, is_first_page, generation, result, error)

    def _settle(
        self,
        page: int,
        is_first_page: bool,
        generation: int,
        result: Optional[PageResult],
        error: str,
    ) -> None:
        if generation != self.generation:
            logger.info(
                f"Discarding stale page {page} "
                f"(generation {generation}, current {self.generation})"
            )
            return

        if result is None:
            logger.error(f"Error loading page {page}: {error}")
            self.error = error
            self.pagination.fail_loading()
        else:
            if is_first_page:
                self.items = list(result.items)
            else:
                self.items.extend(result.items)
            self.pagination.finish_loading(page, result.pages)
            logger.info(
                f"Page {page} loaded: {len(result.items)} items, "
                f"{len(self.items)} shown, has_more={self.pagination.has_more}"
            )

        self.scroll_trigger.sync()
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
