"""Manager classes for listing state."""

from .filter_manager import FilterManager
from .paged_list_manager import PagedListManager
from .pagination_manager import LoadState, PageNavigator, PaginationManager
from .product_list_manager import ProductListManager
from .scroll_trigger import ManualSentinel, ScrollTrigger, TriggerState

__all__ = [
    "FilterManager",
    "PaginationManager",
    "PageNavigator",
    "LoadState",
    "ScrollTrigger",
    "TriggerState",
    "ManualSentinel",
    "ProductListManager",
    "PagedListManager",
]
