"""Pagination state management for infinite scroll and paged tables."""

from enum import Enum


class LoadState(Enum):
    IDLE = "idle"
    LOADING_FIRST = "loading_first"
    LOADING_NEXT = "loading_next"


class PaginationManager:
    def __init__(self, page_size: int = 12):
        self.page_size = page_size
        self.current_page = 1
        self.total_pages = 0
        self.has_more = True
        self.state = LoadState.IDLE

    @property
    def loading(self) -> bool:
        return self.state is not LoadState.IDLE

    @property
    def is_loading_first_page(self) -> bool:
        return self.state is LoadState.LOADING_FIRST

    @property
    def is_loading_next_page(self) -> bool:
        return self.state is LoadState.LOADING_NEXT

    def can_load_more(self) -> bool:
        return self.has_more and not self.loading

    def start_loading(self, first_page: bool) -> None:
        if first_page:
            self.state = LoadState.LOADING_FIRST
            self.has_more = True
        else:
            self.state = LoadState.LOADING_NEXT

    def finish_loading(self, page: int, total_pages: int) -> None:
        self.state = LoadState.IDLE
        self.total_pages = total_pages
        self.has_more = page < total_pages

    def fail_loading(self) -> None:
        self.state = LoadState.IDLE
        self.has_more = False

    def advance(self) -> int:
        self.current_page += 1
        return self.current_page

    def reset(self) -> None:
        self.current_page = 1
        self.total_pages = 0
        self.has_more = True
        self.state = LoadState.IDLE


class PageNavigator:
    """Forward/back page selection clamped to [1, total_pages]."""

    def __init__(self):
        self.current_page = 1
        self.total_pages = 1

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def set_page(self, page: int) -> int:
        self.current_page = max(1, min(self.total_pages, page))
        return self.current_page

    def next_page(self) -> int:
        return self.set_page(self.current_page + 1)

    def previous_page(self) -> int:
        return self.set_page(self.current_page - 1)

    def update_total(self, total_pages: int) -> None:
        self.total_pages = max(1, total_pages)

    def reset(self) -> None:
        self.current_page = 1
