"""Tests for TimetablePoller behavior."""

import asyncio
from datetime import datetime

import pytest

from resseltrafiken.adapters.pollers import TimetablePoller
from resseltrafiken.adapters.pollers.timetable_poller import UPDATE_ERROR_MESSAGE
from resseltrafiken.application.services import TimetableService
from resseltrafiken.domain.models import DisplaySettings, TimetableDocument, TimetableView
from resseltrafiken.domain.ports import DisplayAdapter
from tests.helpers import at


class RecordingDisplayAdapter(DisplayAdapter):
    """Display adapter that records what it was asked to show."""

    def __init__(self) -> None:
        """Initialize with empty recordings."""
        self.updates: list[list[TimetableView]] = []
        self.errors: list[str] = []
        self.updated = asyncio.Event()

    async def display_timetables(self, views: list[TimetableView]) -> None:
        """Record the views."""
        self.updates.append(views)
        self.updated.set()

    async def display_error(self, message: str) -> None:
        """Record the error message."""
        self.errors.append(message)


class FailingTimetableService(TimetableService):
    """Timetable service that always fails."""

    def build_views(self, timetable: TimetableDocument, now: datetime) -> list[TimetableView]:
        """Raise an error."""
        raise RuntimeError("boom")


@pytest.fixture
def display() -> RecordingDisplayAdapter:
    """Create a recording display adapter."""
    return RecordingDisplayAdapter()


@pytest.mark.asyncio
async def test_update_display_renders_views_for_clock_time(
    timetable: TimetableDocument, display: RecordingDisplayAdapter
) -> None:
    """Given a fixed clock, when updating, then views computed for that moment are displayed."""
    now = at(2025, 3, 11, 8, 1)
    poller = TimetablePoller(
        TimetableService(DisplaySettings()), timetable, display, clock=lambda: now
    )

    await poller.update_display()

    assert len(display.updates) == 1
    assert len(display.updates[0]) == 3
    assert all(view.now == now for view in display.updates[0])
    assert display.errors == []


@pytest.mark.asyncio
async def test_failing_update_shows_error_and_does_not_raise(
    timetable: TimetableDocument,
    display: RecordingDisplayAdapter,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given a failing service, when updating, then an error is displayed and logged."""
    poller = TimetablePoller(
        FailingTimetableService(DisplaySettings()),
        timetable,
        display,
        clock=lambda: at(2025, 3, 11, 8, 1),
    )

    await poller.update_display()

    assert display.updates == []
    assert display.errors == [UPDATE_ERROR_MESSAGE]
    assert "Timetable update failed" in caplog.text


@pytest.mark.asyncio
async def test_start_updates_immediately_and_stop_cancels(
    timetable: TimetableDocument, display: RecordingDisplayAdapter
) -> None:
    """Given a started poller, when it runs, then it updates at once and stops cleanly."""
    poller = TimetablePoller(
        TimetableService(DisplaySettings()),
        timetable,
        display,
        clock=lambda: at(2025, 3, 11, 8, 1),
        interval_seconds=3600,
    )

    await poller.start()
    await asyncio.wait_for(display.updated.wait(), timeout=1)

    assert poller.is_running
    assert len(display.updates) == 1

    await poller.stop()

    assert not poller.is_running


@pytest.mark.asyncio
async def test_start_twice_keeps_single_task(
    timetable: TimetableDocument,
    display: RecordingDisplayAdapter,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given a running poller, when starting again, then a warning is logged and no second task starts."""
    poller = TimetablePoller(
        TimetableService(DisplaySettings()),
        timetable,
        display,
        clock=lambda: at(2025, 3, 11, 8, 1),
        interval_seconds=3600,
    )

    await poller.start()
    await poller.start()
    await asyncio.wait_for(display.updated.wait(), timeout=1)
    await poller.stop()

    assert "already running" in caplog.text
    assert len(display.updates) == 1


@pytest.mark.asyncio
async def test_poller_recomputes_on_each_tick(
    timetable: TimetableDocument, display: RecordingDisplayAdapter
) -> None:
    """Given a short interval and an advancing clock, when running, then each tick uses the new time."""
    moments = iter([at(2025, 3, 11, 8, minute) for minute in range(60)])
    poller = TimetablePoller(
        TimetableService(DisplaySettings()),
        timetable,
        display,
        clock=lambda: next(moments),
        interval_seconds=0.01,
    )

    await poller.start()
    for _ in range(100):
        if len(display.updates) >= 3:
            break
        await asyncio.sleep(0.01)
    await poller.stop()

    assert len(display.updates) >= 3
    first_minutes = [updates[0].now.minute for updates in display.updates[:3]]
    assert first_minutes == [0, 1, 2]


@pytest.mark.asyncio
async def test_failing_clock_is_reported_and_loop_continues(
    timetable: TimetableDocument,
    display: RecordingDisplayAdapter,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given a clock that fails once, when running, then the error is shown and the next tick updates."""
    calls = 0

    def flaky_clock() -> datetime:
        nonlocal calls
        calls += 1
        if calls == 1:
            raise RuntimeError("clock unavailable")
        return at(2025, 3, 11, 8, 1)

    poller = TimetablePoller(
        TimetableService(DisplaySettings()),
        timetable,
        display,
        clock=flaky_clock,
        interval_seconds=0.01,
    )

    await poller.start()
    await asyncio.wait_for(display.updated.wait(), timeout=1)

    assert poller.is_running
    await poller.stop()

    assert display.errors == [UPDATE_ERROR_MESSAGE]
    assert len(display.updates) >= 1
    assert "Timetable update failed" in caplog.text
