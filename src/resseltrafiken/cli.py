"""Command line interface for Resseltrafiken timetables."""

import argparse
import asyncio
import json
import sys
from datetime import date, datetime
from zoneinfo import ZoneInfo

from resseltrafiken.adapters.config import AppConfig
from resseltrafiken.adapters.console import ConsoleDisplayAdapter
from resseltrafiken.adapters.timetable_file import JsonTimetableRepository
from resseltrafiken.application.services import (
    TimetableService,
    get_holidays,
    get_schedule_type,
)
from resseltrafiken.domain.models import TimetableDocument, TimetableError
from resseltrafiken.main import build_clock, configure_logging, load_config
from resseltrafiken.main import main as run_display


def resolve_now(at: str | None, config: AppConfig) -> datetime:
    """Return the moment to compute for: --at if given, else the current time.

    Naive timestamps are interpreted in the configured timezone; timestamps
    with an offset are converted to it.
    """
    if at is None:
        return build_clock(config)()
    moment = datetime.fromisoformat(at)
    timezone = ZoneInfo(config.timezone)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone)
    return moment.astimezone(timezone)


def list_holidays(year: int) -> list[tuple[date, str]]:
    """Return the holidays of a year as (date, name), in calendar order."""
    holidays = [
        (date(year, int(key[:2]), int(key[3:])), name) for key, name in get_holidays(year).items()
    ]
    return sorted(holidays)


def _load_timetable(config: AppConfig) -> TimetableDocument:
    return JsonTimetableRepository(config.data_path, clock=build_clock(config)).load()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resseltrafiken boat timetables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the timetables once
  resseltrafiken show

  # Show the timetables as they look at a given moment
  resseltrafiken show --at 2025-06-20T22:30

  # Print the schedule type in effect
  resseltrafiken schedule --at 2025-12-24T09:00

  # List the holidays of a year
  resseltrafiken holidays 2025

  # Keep the display updated every minute
  resseltrafiken run
        """,
    )
    parser.add_argument("--data", help="Path to timetable JSON file (overrides DATA_PATH)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    show_parser = subparsers.add_parser("show", help="Show the timetables once")
    show_parser.add_argument("--at", help="ISO timestamp to compute for (default: now)")

    schedule_parser = subparsers.add_parser("schedule", help="Print the schedule type in effect")
    schedule_parser.add_argument("--at", help="ISO timestamp to compute for (default: now)")

    holidays_parser = subparsers.add_parser("holidays", help="List the holidays of a year")
    holidays_parser.add_argument("year", type=int, help="Year between 1583 and 4099")
    holidays_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("run", help="Keep the timetables updated on an interval")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config()
        if args.data:
            config.data_path = args.data
        configure_logging(config.log_level)

        if args.command == "holidays":
            holidays = list_holidays(args.year)
            if args.json:
                print(
                    json.dumps(
                        [{"date": day.isoformat(), "name": name} for day, name in holidays],
                        indent=2,
                        ensure_ascii=False,
                    )
                )
            else:
                for day, name in holidays:
                    print(f"{day.isoformat()}  {name}")

        elif args.command == "schedule":
            now = resolve_now(args.at, config)
            schedule_type = get_schedule_type(now, _load_timetable(config))
            print(f"{schedule_type.value} ({schedule_type.display_name})")

        elif args.command == "show":
            now = resolve_now(args.at, config)
            views = TimetableService(config.to_display_settings()).build_views(
                _load_timetable(config), now
            )
            asyncio.run(ConsoleDisplayAdapter().display_timetables(views))

        elif args.command == "run":
            asyncio.run(run_display(config))

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except (TimetableError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
