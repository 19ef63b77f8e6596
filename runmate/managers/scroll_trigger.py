"""Scroll-intersection trigger for infinite scroll."""

import logging
from enum import Enum
from typing import Callable, Optional

from runmate.core.protocols import SentinelPort
from runmate.managers.pagination_manager import PaginationManager

logger = logging.getLogger("RunMate.ScrollTrigger")


class TriggerState(Enum):
    IDLE = "idle"
    ARMED = "armed"
    FIRING = "firing"


class ScrollTrigger:
    """Requests the next page when the sentinel becomes visible.

    The trigger owns the subscription to the sentinel. The listing calls
    `sync()` after every pagination change; while a load is pending the
    trigger ignores intersection events, and once it completes the
    observation is re-created so a sentinel that is still on screen fires
    again.
    """

    def __init__(
        self,
        pagination: PaginationManager,
        on_fire: Callable[[], None],
        root_margin: int = 200,
    ):
        """Initialize ScrollTrigger.

        Args:
            pagination: Pagination state shared with the listing
            on_fire: Callback that advances the page and starts the load
            root_margin: Pre-trigger margin handed to the sentinel
        """
        self.pagination = pagination
        self.on_fire = on_fire
        self.root_margin = root_margin
        self.state = TriggerState.IDLE
        self.sentinel: Optional[SentinelPort] = None

    def mount(self, sentinel: SentinelPort) -> None:
        if self.sentinel is not None:
            self.unmount()
        self.sentinel = sentinel
        self.sync()

    def unmount(self) -> None:
        self._disarm()
        self.sentinel = None

    def sync(self) -> None:
        if self.sentinel is None or not self.pagination.has_more:
            self._disarm()
            return

        if self.pagination.loading:
            if self.state is TriggerState.IDLE:
                self._arm()
            return

        self._disarm()
        self._arm()

    def _arm(self) -> None:
        # State must be ARMED before observe(): it may call back synchronously
        self.state = TriggerState.ARMED
        self.sentinel.observe(self._on_intersection, self.root_margin)

    def _disarm(self) -> None:
        if self.state is TriggerState.IDLE:
            return
        self.state = TriggerState.IDLE
        if self.sentinel is not None:
            self.sentinel.disconnect()

    def _on_intersection(self, is_intersecting: bool) -> None:
        if not is_intersecting or self.state is not TriggerState.ARMED:
            return
        if not self.pagination.can_load_more():
            return

        self.state = TriggerState.FIRING
        logger.debug(f"Sentinel visible, requesting page {self.pagination.current_page + 1}")
        self.on_fire()


class ManualSentinel:
    """Sentinel whose visibility is driven by the caller (CLI, tests, headless renderers)."""

    def __init__(self, visible: bool = False):
        self.visible = visible
        self.root_margin: Optional[int] = None
        self._callback: Optional[Callable[[bool], None]] = None

    @property
    def observed(self) -> bool:
        return self._callback is not None

    def observe(self, callback: Callable[[bool], None], root_margin: int) -> None:
        self._callback = callback
        self.root_margin = root_margin
        if self.visible:
            callback(True)

    def disconnect(self) -> None:
        self._callback = None

    def set_visible(self, visible: bool) -> None:
        changed = visible != self.visible
        self.visible = visible
        if changed and self._callback is not None:
            self._callback(visible)

    def scroll_into_view(self) -> None:
        """Report the sentinel as visible, even if it already was."""
        self.visible = True
        if self._callback is not None:
            self._callback(True)
