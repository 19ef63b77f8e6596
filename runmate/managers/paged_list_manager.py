"""Paged admin tables - one page at a time with forward/back navigation."""

import logging
from typing import Dict, List, Optional

from runmate.core.protocols import AdminSourcePort
from runmate.managers.pagination_manager import PageNavigator
from runmate.services.api_client import ApiError

logger = logging.getLogger("RunMate.PagedListManager")

# Resource -> filter keys the admin endpoint understands
ADMIN_FILTERS: Dict[str, tuple] = {
    "products": ("search", "category"),
    "orders": ("status",),
    "users": ("search",),
}


class PagedListManager:
    """Admin list for one resource. Each page replaces the previous one."""

    def __init__(
        self,
        source: AdminSourcePort,
        resource: str,
        page_size: int = 10,
        token: Optional[str] = None,
    ):
        if resource not in ADMIN_FILTERS:
            raise ValueError(f"Unknown admin resource: {resource}")
        self.source = source
        self.resource = resource
        self.page_size = page_size
        self.token = token

        self.navigator = PageNavigator()
        self.filters: Dict[str, str] = {}
        self.items: List[dict] = []
        self.error: str = ""
        self.loading = False
        self.generation = 0

    @property
    def current_page(self) -> int:
        return self.navigator.current_page

    @property
    def total_pages(self) -> int:
        return self.navigator.total_pages

    async def refresh(self) -> None:
        self.generation += 1
        generation = self.generation
        page = self.navigator.current_page
        self.loading = True

        try:
            result = await self.source.fetch_admin_page(
                self.resource,
                page,
                self.page_size,
                filters=dict(self.filters),
                token=self.token,
            )
        except ApiError as e:
            if generation == self.generation:
                logger.error(f"Error loading {self.resource} page {page}: {e.message}")
                self.error = e.message
        except Exception:
            logger.exception(f"Unexpected failure loading {self.resource} page {page}")
            if generation == self.generation:
                self.error = f"Error loading {self.resource}"
        else:
            if generation != self.generation:
                logger.info(f"Discarding stale {self.resource} page {page}")
                return
            self.items = list(result.items)
            self.navigator.update_total(result.pages)
            self.error = ""
            logger.info(
                f"Loaded {self.resource} page {page}/{self.navigator.total_pages}: "
                f"{len(self.items)} rows"
            )
        finally:
            if generation == self.generation:
                self.loading = False

    async def set_filter(self, key: str, value: Optional[str]) -> bool:
        if key not in ADMIN_FILTERS[self.resource]:
            raise ValueError(f"{self.resource} cannot be filtered by {key}")
        value = value or ""
        if self.filters.get(key, "") == value:
            return False
        if value:
            self.filters[key] = value
        else:
            self.filters.pop(key, None)
        self.navigator.reset()
        await self.refresh()
        return True

    async def go_to_page(self, page: int) -> bool:
        previous = self.navigator.current_page
        if self.navigator.set_page(page) == previous:
            return False
        await self.refresh()
        return True

    async def next_page(self) -> bool:
        return await self.go_to_page(self.navigator.current_page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self.navigator.current_page - 1)
