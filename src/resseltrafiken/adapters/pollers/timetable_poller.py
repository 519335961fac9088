"""Poller recomputing the timetables on a fixed interval."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from resseltrafiken.domain.contracts.timetable_poller import TimetablePollerProtocol

if TYPE_CHECKING:
    from resseltrafiken.domain.contracts.clock import ClockProtocol
    from resseltrafiken.domain.models.timetable import TimetableDocument
    from resseltrafiken.domain.ports.display_adapter import DisplayAdapter
    from resseltrafiken.domain.ports.timetable_view_builder import TimetableViewBuilder

logger = logging.getLogger(__name__)

UPDATE_ERROR_MESSAGE = "Kunde inte uppdatera tidtabellen"


class TimetablePoller(TimetablePollerProtocol):
    """Recomputes the displayed timetables once per interval."""

    def __init__(
        self,
        timetable_service: TimetableViewBuilder,
        timetable: TimetableDocument,
        display_adapter: DisplayAdapter,
        clock: ClockProtocol,
        interval_seconds: float = 60,
    ) -> None:
        """Initialize the poller.

        Args:
            timetable_service: Service computing the views for a moment.
            timetable: The loaded timetable document (read-only).
            display_adapter: Adapter that renders the computed views.
            clock: Source of the current local time.
            interval_seconds: Seconds between recomputations.
        """
        self.timetable_service = timetable_service
        self.timetable = timetable
        self.display_adapter = display_adapter
        self.clock = clock
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the poller."""
        if self.is_running:
            logger.warning("Timetable poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started timetable poller (interval: {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Timetable poller cancelled")
            logger.info("Stopped timetable poller")

    async def wait(self) -> None:
        """Wait until the poller task finishes."""
        if self._task is not None:
            await self._task

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        # Do initial update immediately
        await self.update_display()

        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.update_display()

    async def update_display(self) -> None:
        """Recompute all timetables for the current time and display them.

        A failing tick is reported to the display and logged; the next tick
        runs as usual.
        """
        try:
            now = self.clock()
            views = self.timetable_service.build_views(self.timetable, now)
            await self.display_adapter.display_timetables(views)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Timetable update failed")
            await self.display_adapter.display_error(UPDATE_ERROR_MESSAGE)
            return

        logger.debug(f"Timetable display updated at {now:%H:%M}, views: {len(views)}")
