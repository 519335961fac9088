"""Main entry point for the Resseltrafiken timetable display."""

import asyncio
import logging
import sys
from datetime import datetime
from functools import partial
from zoneinfo import ZoneInfo

from resseltrafiken.adapters.config import AppConfig
from resseltrafiken.adapters.console import ConsoleDisplayAdapter
from resseltrafiken.adapters.pollers import TimetablePoller
from resseltrafiken.adapters.timetable_file import JsonTimetableRepository
from resseltrafiken.application.services import TimetableService
from resseltrafiken.domain.contracts.clock import ClockProtocol
from resseltrafiken.domain.models import TimetableError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_clock(config: AppConfig) -> ClockProtocol:
    """Return a clock giving the current time in the configured timezone."""
    return partial(datetime.now, ZoneInfo(config.timezone))


def load_config() -> AppConfig:
    """Load the configuration, applying the optional TOML file."""
    config = AppConfig()
    config.load_toml_display_settings()
    return config


async def main(config: AppConfig | None = None) -> None:
    """Main application entry point."""
    if config is None:
        try:
            config = load_config()
        except (ValueError, FileNotFoundError) as e:
            configure_logging()
            logger.error(f"Invalid configuration: {e}")
            sys.exit(1)

    configure_logging(config.log_level)
    clock = build_clock(config)

    try:
        timetable = JsonTimetableRepository(config.data_path, clock=clock).load()
    except TimetableError as e:
        logger.error(f"Could not load timetable: {e}")
        sys.exit(1)

    poller = TimetablePoller(
        TimetableService(config.to_display_settings()),
        timetable,
        ConsoleDisplayAdapter(),
        clock=clock,
        interval_seconds=config.update_interval_seconds,
    )

    await poller.start()
    try:
        await poller.wait()
    except asyncio.CancelledError:
        logger.info("Shutting down...")
        await poller.stop()


def run() -> None:
    """Synchronous entry point for the display loop."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    run()
