"""Filter management for the product listing."""

import logging
from typing import Callable

from runmate.domain import FilterSet
from runmate.domain.filters import FilterValue

logger = logging.getLogger("RunMate.FilterManager")


class FilterManager:
    """Holds the active FilterSet and reports every effective change."""

    def __init__(self, on_filter_change: Callable[[FilterSet], None]):
        self.on_filter_change = on_filter_change
        self.filters = FilterSet()

    def set_search(self, value: FilterValue) -> bool:
        return self.update(search=value)

    def set_category(self, value: FilterValue) -> bool:
        return self.update(category=value)

    def set_min_price(self, value: FilterValue) -> bool:
        return self.update(min_price=value)

    def set_max_price(self, value: FilterValue) -> bool:
        return self.update(max_price=value)

    def set_min_rating(self, value: FilterValue) -> bool:
        return self.update(min_rating=value)

    def update(self, **changes: FilterValue) -> bool:
        """Apply one or more field changes with a single notification.

        Returns:
            bool: True if the filter set changed
        """
        new_filters = self.filters.with_changes(**changes)
        if new_filters == self.filters:
            return False

        self.filters = new_filters
        logger.info(f"Filters changed: {new_filters.to_query_params() or 'none'}")
        self.on_filter_change(new_filters)
        return True

    def clear(self) -> bool:
        if self.filters.is_empty():
            return False
        self.filters = FilterSet()
        logger.info("Filters cleared")
        self.on_filter_change(self.filters)
        return True

    def get_filters(self) -> FilterSet:
        return self.filters
