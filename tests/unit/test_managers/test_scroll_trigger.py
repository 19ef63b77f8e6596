"""Tests for ScrollTrigger and ManualSentinel."""


def _trigger(sentinel_visible: bool = False):
    from runmate.managers.pagination_manager import PaginationManager
    from runmate.managers.scroll_trigger import ManualSentinel, ScrollTrigger

    pagination = PaginationManager()
    fired = []

    def on_fire():
        fired.append(pagination.current_page)
        pagination.advance()
        pagination.start_loading(first_page=False)

    trigger = ScrollTrigger(pagination, on_fire=on_fire)
    sentinel = ManualSentinel(visible=sentinel_visible)
    return trigger, pagination, sentinel, fired


def test_trigger_idle_without_sentinel():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, _, _, _ = _trigger()

    trigger.sync()

    assert trigger.state is TriggerState.IDLE


def test_trigger_arms_on_mount_with_margin():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, _, sentinel, _ = _trigger()

    trigger.mount(sentinel)

    assert trigger.state is TriggerState.ARMED
    assert sentinel.observed is True
    assert sentinel.root_margin == 200


def test_trigger_does_not_arm_without_more_pages():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, pagination, sentinel, _ = _trigger()
    pagination.has_more = False

    trigger.mount(sentinel)

    assert trigger.state is TriggerState.IDLE
    assert sentinel.observed is False


def test_trigger_fires_once_when_visible():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, pagination, sentinel, fired = _trigger()
    trigger.mount(sentinel)

    sentinel.set_visible(True)
    sentinel.scroll_into_view()
    sentinel.scroll_into_view()

    assert fired == [1]
    assert pagination.current_page == 2
    assert trigger.state is TriggerState.FIRING


def test_trigger_ignores_events_while_loading():
    trigger, pagination, sentinel, fired = _trigger()
    pagination.start_loading(first_page=True)
    trigger.mount(sentinel)

    sentinel.scroll_into_view()

    assert fired == []
    assert pagination.current_page == 1


def test_trigger_rearms_after_load_and_refires_if_still_visible():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, pagination, sentinel, fired = _trigger()
    trigger.mount(sentinel)
    sentinel.set_visible(True)

    pagination.finish_loading(page=2, total_pages=5)
    trigger.sync()

    assert fired == [1, 2]
    assert pagination.current_page == 3
    assert trigger.state is TriggerState.FIRING


def test_trigger_rearms_without_firing_when_hidden():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, pagination, sentinel, fired = _trigger()
    trigger.mount(sentinel)
    sentinel.set_visible(True)
    sentinel.set_visible(False)

    pagination.finish_loading(page=2, total_pages=5)
    trigger.sync()

    assert fired == [1]
    assert trigger.state is TriggerState.ARMED


def test_trigger_goes_idle_when_no_more_pages():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, pagination, sentinel, fired = _trigger()
    trigger.mount(sentinel)
    sentinel.set_visible(True)

    pagination.finish_loading(page=2, total_pages=2)
    trigger.sync()

    assert trigger.state is TriggerState.IDLE
    assert sentinel.observed is False
    assert fired == [1]


def test_trigger_unmount_disconnects():
    from runmate.managers.scroll_trigger import TriggerState

    trigger, _, sentinel, fired = _trigger()
    trigger.mount(sentinel)

    trigger.unmount()
    sentinel.scroll_into_view()

    assert trigger.state is TriggerState.IDLE
    assert trigger.sentinel is None
    assert fired == []


def test_manual_sentinel_reports_current_visibility_on_observe():
    from runmate.managers.scroll_trigger import ManualSentinel

    sentinel = ManualSentinel(visible=True)
    events = []

    sentinel.observe(events.append, root_margin=200)
    sentinel.set_visible(True)
    sentinel.set_visible(False)

    assert events == [True, False]
